# mirror_deploy/core/__init__.py
"""Core mirror, resolution and command modules

Only the command builder is re-exported here; backends depend on it, and
the mirror and resolver modules depend on the backends.
"""

from .command import Command, Arg, Flag, Option, git, rsync

__all__ = [
    "Command",
    "Arg",
    "Flag",
    "Option",
    "git",
    "rsync",
]
