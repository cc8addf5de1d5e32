# mirror_deploy/models/__init__.py
"""Data models for mirror-deploy"""

from .config import ScmConfig, RepositoryLocation, ReleaseTarget
from .reference import RefKind, ResolvedReference
from .result import OperationStatus, MirrorAction, Result, ReleaseResult

__all__ = [
    # Config models
    "ScmConfig",
    "RepositoryLocation",
    "ReleaseTarget",

    # Reference models
    "RefKind",
    "ResolvedReference",

    # Result models
    "OperationStatus",
    "MirrorAction",
    "Result",
    "ReleaseResult",
]
