"""Exception hierarchy for docsync operations."""


class DocSyncError(RuntimeError):
    """Base class for errors surfaced to the command boundary."""


class ConfigError(DocSyncError):
    """Raised when project configuration or the application name cannot be loaded."""


class ComponentNotFoundError(DocSyncError):
    """Raised when an explicitly requested component does not exist."""


class DocumentationWriteError(DocSyncError):
    """Raised when a documentation page cannot be written."""


class NavigationManifestError(DocSyncError):
    """Raised when the navigation manifest cannot be read, parsed or written."""


class MetadataManifestError(DocSyncError):
    """Raised when the metadata manifest cannot be read, parsed or written."""


__all__ = [
    "ComponentNotFoundError",
    "ConfigError",
    "DocSyncError",
    "DocumentationWriteError",
    "MetadataManifestError",
    "NavigationManifestError",
]
