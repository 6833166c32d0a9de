"""Data models for the export pipeline."""

from .string_record import UsageSite, StringRecord
from .export_bundle import RewriteResult, ExportBundle, ExportStats

__all__ = [
    "UsageSite",
    "StringRecord",
    "RewriteResult",
    "ExportBundle",
    "ExportStats",
]
