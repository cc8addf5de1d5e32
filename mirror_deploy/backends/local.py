# mirror_deploy/backends/local.py
"""Local subprocess command backend"""

import os
import subprocess
from typing import Dict, Optional

from .base import CommandBackend, CommandLine
from ..api.exceptions import CommandError


class LocalBackend(CommandBackend):
    """Runs commands on the current host with subprocess

    Commands are executed as argument vectors, never through a shell.
    """

    def _execute(self,
                 argv: CommandLine,
                 cwd: Optional[str] = None,
                 env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess:
        args = self.to_argv(argv)
        self.logger.debug(f"Executing: {self.describe(args, cwd)}")

        process_env = None
        extra_env = self.merged_env(env)
        if extra_env:
            process_env = dict(os.environ)
            process_env.update(extra_env)

        try:
            return subprocess.run(
                args,
                cwd=cwd,
                env=process_env,
                capture_output=True,
                text=True
            )
        except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
            raise CommandError(
                args,
                message=f"Unable to start command {args[0]}: {e}"
            ) from e

    def run(self,
            argv: CommandLine,
            cwd: Optional[str] = None,
            env: Optional[Dict[str, str]] = None) -> None:
        result = self._execute(argv, cwd, env)
        if result.returncode != 0:
            raise CommandError(
                self.to_argv(argv),
                result.returncode,
                stdout=result.stdout,
                stderr=result.stderr
            )

    def capture(self,
                argv: CommandLine,
                cwd: Optional[str] = None,
                env: Optional[Dict[str, str]] = None) -> str:
        result = self._execute(argv, cwd, env)
        if result.returncode != 0:
            raise CommandError(
                self.to_argv(argv),
                result.returncode,
                stdout=result.stdout,
                stderr=result.stderr
            )
        return result.stdout.strip()

    def test(self,
             argv: CommandLine,
             cwd: Optional[str] = None,
             env: Optional[Dict[str, str]] = None) -> bool:
        try:
            result = self._execute(argv, cwd, env)
        except CommandError as e:
            self.logger.debug(str(e))
            return False
        return result.returncode == 0
