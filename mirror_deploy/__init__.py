"""Mirror Deploy - git mirror based release strategy for deployment tooling.

Keeps a local mirror of a remote repository, resolves a branch, tag or
commit to an exact revision and exports it into a release directory with
symbolic links dereferenced and submodules initialized.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
    MirrorDeployError,
    ConfigError,
    CommandError,
    UnreachableRemoteError,
    MirrorSyncError,
    UnresolvableReferenceError,
    ExportError,
)

# Core API
from .api.strategy import GitMirrorStrategy
from .backends import CommandBackend, LocalBackend
from .exporters import ExportStrategy, ExporterFactory

# Data models
from .models import ScmConfig, RefKind, ResolvedReference, ReleaseResult

# Configuration
from .services import ConfigService

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "GitMirrorStrategy",
    "CommandBackend",
    "LocalBackend",
    "ExportStrategy",
    "ExporterFactory",
    "ConfigService",

    # Data models
    "ScmConfig",
    "RefKind",
    "ResolvedReference",
    "ReleaseResult",

    # Exceptions
    "MirrorDeployError",
    "ConfigError",
    "CommandError",
    "UnreachableRemoteError",
    "MirrorSyncError",
    "UnresolvableReferenceError",
    "ExportError",
]
