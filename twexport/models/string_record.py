"""Data models for extracted strings and where they are used."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class UsageSite:
    """A single place an extracted string occurs."""

    file: str  # Relative to the library root
    line: int  # 1-based

    @property
    def label(self) -> str:
        """Short "name:line" form of this site."""
        return f"{Path(self.file).name}:{self.line}"


@dataclass
class StringRecord:
    """An extracted string together with its usage sites."""

    string: str
    uses: List[UsageSite] = field(default_factory=list)

    @property
    def use_count(self) -> int:
        return len(self.uses)
