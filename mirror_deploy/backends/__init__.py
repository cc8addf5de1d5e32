# mirror_deploy/backends/__init__.py
"""Command execution backends for mirror-deploy"""

from .base import CommandBackend
from .local import LocalBackend

__all__ = [
    'CommandBackend',
    'LocalBackend',
]
