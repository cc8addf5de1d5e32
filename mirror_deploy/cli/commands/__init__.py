"""CLI commands"""

from . import check
from . import mirror
from . import revision
from . import release
from . import deploy
from . import config

__all__ = [
    "check",
    "mirror",
    "revision",
    "release",
    "deploy",
    "config",
]
