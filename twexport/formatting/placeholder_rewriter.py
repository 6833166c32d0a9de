"""Rewriter from printf-style format strings to positional placeholders."""

import re
from typing import List

from ..models.export_bundle import RewriteResult


class PlaceholderRewriter:
    """
    Rewrites printf-style format strings into the translation platform's
    positional placeholder syntax.

    Conversions:
    - %% - Literal percent, becomes %
    - %s, %d - Substitutions, become $1, $2, ... in order of occurrence

    Any other escape token, or a "$" anywhere in the input, makes the whole
    string unsupported. Nothing is rewritten for such strings.
    """

    # One scan finds both escape tokens and the platform marker
    TOKEN_PATTERN = re.compile(
        r"(?P<escape>%.)"  # % followed by any single character
        r"|(?P<marker>\$)",  # OR the positional placeholder marker
        re.DOTALL,
    )

    MARKER = "$"

    # Placeholders in already rewritten values
    POSITIONAL_PATTERN = re.compile(r"\$\d+")

    def rewrite(self, string: str) -> RewriteResult:
        """
        Rewrite a single string.

        Args:
            string: Raw extracted string

        Returns:
            RewriteResult with the rewritten value, or the reason and token
            that made the string unsupported
        """
        parts: List[str] = []
        position = 0
        n = 1

        for match in self.TOKEN_PATTERN.finditer(string):
            if match.group("marker"):
                return RewriteResult(
                    source=string,
                    reason="contains_marker",
                    token=self.MARKER,
                )

            token = match.group("escape")
            if token == "%%":
                replacement = "%"
            elif token in ("%s", "%d"):
                replacement = f"{self.MARKER}{n}"
                n += 1
            else:
                return RewriteResult(
                    source=string,
                    reason="unrecognized_pattern",
                    token=token,
                )

            parts.append(string[position:match.start()])
            parts.append(replacement)
            position = match.end()

        parts.append(string[position:])
        return RewriteResult(source=string, value="".join(parts))

    def count_positional(self, value: str) -> int:
        """Get the number of distinct $N placeholders in a rewritten value."""
        return len(set(self.POSITIONAL_PATTERN.findall(value)))
