"""API layer for mirror-deploy"""

from .exceptions import (
    MirrorDeployError,
    ConfigError,
    CommandError,
    UnreachableRemoteError,
    MirrorSyncError,
    UnresolvableReferenceError,
    ExportError,
)
from .strategy import GitMirrorStrategy

__all__ = [
    # Main classes
    "GitMirrorStrategy",

    # Exceptions
    "MirrorDeployError",
    "ConfigError",
    "CommandError",
    "UnreachableRemoteError",
    "MirrorSyncError",
    "UnresolvableReferenceError",
    "ExportError",
]
