# mirror_deploy/utils/__init__.py
"""Utility functions for mirror-deploy"""

from .url_utils import (
    embed_credentials,
    mask_credentials,
    mask_argv,
)

from .formatting import (
    format_duration,
    format_path,
)

__all__ = [
    # URL utilities
    'embed_credentials',
    'mask_credentials',
    'mask_argv',

    # Formatting utilities
    'format_duration',
    'format_path',
]
