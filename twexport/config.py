"""Configuration management for the export pipeline."""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # External extractor, invoked as "<i18n_bin> extract <library>"
    i18n_bin: str = field(default_factory=lambda: os.getenv("TWEXPORT_I18N_BIN", "i18n"))

    # Exported projects are written to "<projects_root>/<name>/"
    projects_root: str = field(
        default_factory=lambda: os.getenv("TWEXPORT_PROJECTS_ROOT", "projects")
    )

    # Base URI for browsing files in the exported library
    browse_uri: Optional[str] = field(
        default_factory=lambda: os.getenv("TWEXPORT_BROWSE_URI") or None
    )

    # Location of the extractor's output, relative to the library root
    strings_cache: str = ".cache/i18n_strings.json"

    # Output files and their descriptions, in write order
    OUTPUT_FILES: dict = field(default_factory=lambda: {
        "strings": ("en.json", "English strings"),
        "context": ("qqq.json", "Context strings"),
        "raw": ("raw.json", "Raw strings"),
    })

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.i18n_bin:
            errors.append("TWEXPORT_I18N_BIN is empty")
        if not self.projects_root:
            errors.append("TWEXPORT_PROJECTS_ROOT is empty")
        return errors


# Global config instance
config = Config()
