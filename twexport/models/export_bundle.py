"""Data models for rewrite results and exported bundles."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of rewriting one string into positional placeholders."""

    source: str
    value: Optional[str] = None
    reason: Optional[str] = None  # unrecognized_pattern, contains_marker
    token: Optional[str] = None

    @property
    def supported(self) -> bool:
        """Check if the string could be rewritten."""
        return self.reason is None

    @property
    def message(self) -> str:
        """Human-readable diagnostic for an unsupported string."""
        if self.reason == "unrecognized_pattern":
            return (
                f'Unable to extract string with unrecognized "%" pattern, '
                f'"{self.token}": {self.source}.'
            )
        if self.reason == "contains_marker":
            return f'Unable to extract string containing "$" symbol: {self.source}'
        return ""


@dataclass
class ExportBundle:
    """
    The three aligned mappings produced by one export run.

    All three mappings are keyed by string key and always share the same
    key set.
    """

    strings: Dict[str, str] = field(default_factory=dict)
    context: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, str] = field(default_factory=dict)

    def add(self, key: str, string: str, context: str, raw: str) -> None:
        """Insert one entry into all three mappings."""
        self.strings[key] = string
        self.context[key] = context
        self.raw[key] = raw

    def is_aligned(self) -> bool:
        """Check that the three mappings share the same key set."""
        return set(self.strings) == set(self.context) == set(self.raw)

    def sorted(self) -> "ExportBundle":
        """Return a copy with every mapping ordered by ascending key."""
        return ExportBundle(
            strings=dict(sorted(self.strings.items())),
            context=dict(sorted(self.context.items())),
            raw=dict(sorted(self.raw.items())),
        )

    def mappings(self) -> Iterator[Tuple[str, Dict[str, str]]]:
        """Yield (name, mapping) pairs in persistence order."""
        yield "strings", self.strings
        yield "context", self.context
        yield "raw", self.raw

    def __len__(self) -> int:
        return len(self.raw)


@dataclass
class ExportStats:
    """Statistics for an export run."""

    read: int = 0
    exported: int = 0
    skipped: int = 0
    skipped_strings: List[RewriteResult] = field(default_factory=list)
