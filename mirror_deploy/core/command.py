"""Typed argument-vector builder for git and rsync invocations"""

import shlex
from dataclasses import dataclass
from typing import List, Union

from ..constants import GIT_PROGRAM, RSYNC_PROGRAM


@dataclass(frozen=True)
class Arg:
    """Positional argument"""
    value: str

    def render(self) -> List[str]:
        return [str(self.value)]


@dataclass(frozen=True)
class Flag:
    """Bare flag such as ``--detach``"""
    name: str

    def render(self) -> List[str]:
        return [self.name]


@dataclass(frozen=True)
class Option:
    """Flag carrying a value

    Rendered as ``--name=value`` when joined, ``--name value`` otherwise.
    """
    name: str
    value: str
    joined: bool = True

    def render(self) -> List[str]:
        if self.joined:
            return [f"{self.name}={self.value}"]
        return [self.name, str(self.value)]


Part = Union[Arg, Flag, Option]


class Command:
    """Ordered argument vector for a single program

    Parts are rendered in the order they were added; git and rsync are
    order-sensitive so nothing is sorted or deduplicated.

    Example:
        git("checkout").flag("--detach").arg("origin/main").argv
        # ['git', 'checkout', '--detach', 'origin/main']
    """

    def __init__(self, program: str):
        self.program = program
        self.parts: List[Part] = []

    def arg(self, value: str) -> 'Command':
        self.parts.append(Arg(value))
        return self

    def flag(self, name: str) -> 'Command':
        self.parts.append(Flag(name))
        return self

    def option(self, name: str, value: str, joined: bool = True) -> 'Command':
        self.parts.append(Option(name, value, joined))
        return self

    def extend(self, *values: str) -> 'Command':
        """Append several positional arguments"""
        for value in values:
            self.arg(value)
        return self

    @property
    def argv(self) -> List[str]:
        argv = [self.program]
        for part in self.parts:
            argv.extend(part.render())
        return argv

    def __iter__(self):
        return iter(self.argv)

    def __eq__(self, other) -> bool:
        if isinstance(other, Command):
            return self.argv == other.argv
        if isinstance(other, (list, tuple)):
            return self.argv == list(other)
        return NotImplemented

    def __str__(self) -> str:
        return shlex.join(self.argv)

    def __repr__(self) -> str:
        return f"Command({self.argv!r})"


def git(*args: str) -> Command:
    """Start a git command with the given leading arguments"""
    return Command(GIT_PROGRAM).extend(*args)


def rsync(*args: str) -> Command:
    """Start an rsync command with the given leading arguments"""
    return Command(RSYNC_PROGRAM).extend(*args)
