# mirror_deploy/cli/decorators/__init__.py
"""CLI decorators"""

from .scm import scm_options, with_strategy, load_config

__all__ = [
    'scm_options',
    'with_strategy',
    'load_config',
]
