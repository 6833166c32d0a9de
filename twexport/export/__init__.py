"""Export orchestration and persistence."""

from .orchestrator import ExportOrchestrator
from .bundle_writer import BundleWriter

__all__ = ["ExportOrchestrator", "BundleWriter"]
