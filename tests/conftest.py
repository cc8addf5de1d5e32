"""Shared fixtures for mirror-deploy tests"""

from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from mirror_deploy.api.exceptions import CommandError
from mirror_deploy.backends.base import CommandBackend
from mirror_deploy.models.config import ScmConfig

SHA = "81cec13b777ff46348693d327fc8e7832f79bf44"


class FakeBackend(CommandBackend):
    """Records every command and answers from canned state

    Args:
        refs: Names ``git rev-parse`` succeeds for
        dirs: Paths ``test -d`` succeeds for
        captures: Output returned by ``capture`` keyed on the joined argv
        failing: Argv prefixes that make ``run``/``capture`` fail
    """

    def __init__(self,
                 refs: Iterable[str] = (),
                 dirs: Iterable[str] = (),
                 captures: Optional[Dict[str, str]] = None,
                 failing: Iterable[Tuple[str, ...]] = ()):
        super().__init__()
        self.refs = set(refs)
        self.dirs = set(dirs)
        self.captures = captures or {}
        self.failing = [tuple(prefix) for prefix in failing]
        self.calls: List[Tuple[str, List[str], Optional[str], Optional[Dict[str, str]]]] = []

    def _record(self, method, argv, cwd, env) -> List[str]:
        args = self.to_argv(argv)
        self.calls.append((method, args, cwd, env))
        for prefix in self.failing:
            if tuple(args[:len(prefix)]) == prefix:
                raise CommandError(args, 1, stderr="fatal: simulated failure")
        return args

    def run(self, argv, cwd=None, env=None) -> None:
        self._record("run", argv, cwd, env)

    def capture(self, argv, cwd=None, env=None) -> str:
        args = self._record("capture", argv, cwd, env)
        return self.captures.get(" ".join(args), "")

    def test(self, argv, cwd=None, env=None) -> bool:
        args = self.to_argv(argv)
        self.calls.append(("test", args, cwd, env))
        if args[:2] == ["git", "rev-parse"]:
            return args[2] in self.refs
        if args[:2] == ["test", "-d"]:
            return args[2] in self.dirs
        return True

    def argvs(self, method: Optional[str] = None) -> List[List[str]]:
        return [argv for m, argv, _, _ in self.calls if method is None or m == method]

    def all_arguments(self) -> List[str]:
        return [arg for argv in self.argvs() for arg in argv]


@pytest.fixture
def make_backend():
    """Factory for FakeBackend instances"""
    def factory(**kwargs) -> FakeBackend:
        return FakeBackend(**kwargs)
    return factory


@pytest.fixture
def sha():
    return SHA


@pytest.fixture
def scm_config():
    return ScmConfig(
        repo_url="https://example.com/repo.git",
        repo_path="/var/app/repo",
        branch="main",
        release_path="/var/app/releases/1",
        application="my_app",
        stage="staging",
        local_user="deployer",
    )
