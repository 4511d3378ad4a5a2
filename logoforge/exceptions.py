"""Exception classes for the editor's I/O edge.

The layer store, history log and compiler never raise; these cover
loading and exporting through the injected collaborators only.
"""


class LogoforgeError(Exception):
    """Base exception for logoforge errors."""

    pass


class ProjectLoadError(LogoforgeError):
    """Raised when a saved project is missing or cannot be parsed."""

    pass


class ExportError(LogoforgeError):
    """Raised when an export sink refuses the payload."""

    pass
