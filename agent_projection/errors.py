"""Errors raised by the projection engine."""


class ProjectionError(Exception):
    """Base class for projection errors."""


class ResolutionError(ProjectionError):
    """Raised when a base directory cannot be determined."""


class HomeDirectoryUnavailableError(ResolutionError):
    """Raised when the home or runtime configuration directory is undiscoverable."""


class RecordNotFoundError(ProjectionError):
    """Raised when a record store has no record with the requested name."""

    def __init__(self, kind: str, name: str) -> None:
        """Initialize the error."""
        super().__init__(f"{kind} '{name}' not found")
        self.kind = kind
        self.name = name


class RecordStoreError(ProjectionError):
    """Raised when the record store document cannot be loaded."""
