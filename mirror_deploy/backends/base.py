# mirror_deploy/backends/base.py
"""Command backend abstract base class"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Union

from ..core.command import Command
from ..utils.url_utils import mask_argv

CommandLine = Union[Command, Sequence[str]]


class CommandBackend(ABC):
    """Abstract base class for command execution backends

    A backend runs one argument vector at a time, blocking until the
    process exits. Nothing is retried and no timeout is applied.
    """

    def __init__(self, env: Optional[Dict[str, str]] = None):
        """
        Initialize command backend

        Args:
            env: Environment variables added to every command
        """
        self.env = dict(env or {})
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def run(self,
            argv: CommandLine,
            cwd: Optional[str] = None,
            env: Optional[Dict[str, str]] = None) -> None:
        """
        Run a command

        Args:
            argv: Argument vector
            cwd: Working directory
            env: Extra environment variables for this command

        Raises:
            CommandError: If the command exits non-zero
        """
        pass

    @abstractmethod
    def capture(self,
                argv: CommandLine,
                cwd: Optional[str] = None,
                env: Optional[Dict[str, str]] = None) -> str:
        """
        Run a command and return its standard output

        Args:
            argv: Argument vector
            cwd: Working directory
            env: Extra environment variables for this command

        Returns:
            Standard output with surrounding whitespace stripped

        Raises:
            CommandError: If the command exits non-zero
        """
        pass

    @abstractmethod
    def test(self,
             argv: CommandLine,
             cwd: Optional[str] = None,
             env: Optional[Dict[str, str]] = None) -> bool:
        """
        Run a command as a predicate

        Returns:
            True if the command exited with status 0
        """
        pass

    def merged_env(self, env: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Backend-wide environment overlaid with per-command values"""
        merged = dict(self.env)
        if env:
            merged.update(env)
        return merged

    @staticmethod
    def to_argv(argv: CommandLine) -> List[str]:
        """Normalize a Command or sequence into a list of strings"""
        if isinstance(argv, Command):
            return argv.argv
        return [str(arg) for arg in argv]

    def describe(self, argv: CommandLine, cwd: Optional[str] = None) -> str:
        """Printable command line with credentials masked"""
        line = " ".join(mask_argv(self.to_argv(argv)))
        if cwd:
            return f"(cd {cwd}) {line}"
        return line
