"""Runs the external string extractor over a library."""

import subprocess
from pathlib import Path
from typing import Optional

from ..config import config
from ..errors import ExtractionError


class LibraryExtractor:
    """Invokes "<i18n_bin> extract <library>" to refresh a library's string cache."""

    def __init__(self, i18n_bin: Optional[str] = None):
        self.i18n_bin = i18n_bin or config.i18n_bin

    def extract(self, library_path: str) -> None:
        """
        Extract strings from a library. Extractor output goes to the terminal.

        Raises:
            ExtractionError: If the extractor can not be run or exits non-zero
        """
        command = [self.i18n_bin, "extract", library_path]
        try:
            result = subprocess.run(command)
        except OSError as e:
            raise ExtractionError(f"Unable to run extractor {self.i18n_bin!r}: {e}") from e

        if result.returncode != 0:
            raise ExtractionError(
                f"Extractor exited with status {result.returncode}: {' '.join(command)}"
            )

    def cache_path(self, library_path: str) -> Path:
        """Path of the string cache the extractor writes for a library."""
        return Path(library_path) / config.strings_cache
