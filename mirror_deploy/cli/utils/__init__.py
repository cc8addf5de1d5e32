"""CLI utility functions"""

from .output import (
    console,
    format_release_result,
    format_config,
    print_error,
)

__all__ = [
    'console',
    'format_release_result',
    'format_config',
    'print_error',
]
