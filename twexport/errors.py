"""Exceptions raised by the export pipeline."""


class ExportError(Exception):
    """Base class for errors that abort an export run."""


class ConfigurationError(ExportError):
    """Required configuration is missing or malformed."""


class MissingInputError(ExportError):
    """The extracted string data is absent or unreadable."""


class ExtractionError(ExportError):
    """The external string extractor failed."""
