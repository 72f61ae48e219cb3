# src/html_inspector/exceptions.py


class HTMLInspectorError(Exception):
    """Base class for all errors raised by html_inspector."""


class DocumentLoadError(HTMLInspectorError):
    """Raised when a document cannot be read, fetched or parsed."""


class SettingsError(HTMLInspectorError):
    """Raised when an explicitly requested settings file is missing or malformed."""
