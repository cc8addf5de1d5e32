"""Local repository mirror maintenance"""

import logging
import posixpath
from typing import Dict, Optional

from .command import Command, git
from .resolver import classify
from ..api.exceptions import (
    CommandError,
    MirrorSyncError,
    UnreachableRemoteError,
    UnresolvableReferenceError,
)
from ..backends.base import CommandBackend
from ..constants import GIT_METADATA_DIR, REMOTE_NAME
from ..models.config import RepositoryLocation
from ..models.reference import ResolvedReference
from ..utils.url_utils import mask_credentials


class MirrorManager:
    """Keeps a local copy of the remote repository up to date

    All network-touching commands use ``location.url``, which already
    carries any configured credentials.
    """

    def __init__(self,
                 backend: CommandBackend,
                 location: RepositoryLocation,
                 env: Optional[Dict[str, str]] = None):
        """Initialize mirror manager

        Args:
            backend: Command backend
            location: Remote URL and mirror path
            env: Environment for git commands
        """
        self.backend = backend
        self.location = location
        self.env = env
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def mirror_path(self) -> str:
        return self.location.mirror_path

    @property
    def display_url(self) -> str:
        return mask_credentials(self.location.url)

    def exists(self) -> bool:
        """Check for git metadata inside the mirror path

        Returns False for a missing path; never touches the network.
        """
        metadata_dir = posixpath.join(self.mirror_path, GIT_METADATA_DIR)
        try:
            return self.backend.test(Command("test").flag("-d").arg(metadata_dir))
        except CommandError:
            return False

    def ensure_reachable(self) -> None:
        """List the remote HEAD without cloning

        Raises:
            UnreachableRemoteError: If the remote cannot be listed
        """
        self.logger.info(f"Checking repository {self.display_url}")
        try:
            self.backend.run(
                git("ls-remote", self.location.url, "HEAD"),
                env=self.env
            )
        except CommandError as e:
            raise UnreachableRemoteError(self.display_url, e.stderr.strip() or str(e)) from e

    def clone(self) -> None:
        """Clone the remote into the mirror path

        A partially cloned mirror is left in place on failure.

        Raises:
            MirrorSyncError: If the clone fails
        """
        self.logger.info(f"Cloning {self.display_url} into {self.mirror_path}")
        try:
            self.backend.run(
                git("clone", self.location.url, self.mirror_path),
                env=self.env
            )
        except CommandError as e:
            raise MirrorSyncError(f"Mirror clone failed: {e}") from e

    def update(self, reference: str) -> ResolvedReference:
        """Bring an existing mirror up to date and check out the reference

        Steps run in order and each must succeed before the next:
        repoint origin, fetch with prune, detached checkout of the
        classified tracking name, recursive submodule update.

        Args:
            reference: Configured branch, tag or commit

        Returns:
            The classification used for the checkout

        Raises:
            MirrorSyncError: If a step fails
            UnresolvableReferenceError: If a tag/commit cannot be checked out
        """
        self.logger.info(f"Updating mirror {self.mirror_path} from {self.display_url}")

        self._step("set-url", git("remote", "set-url", REMOTE_NAME, self.location.url))
        self._step("fetch", git("remote", "update").flag("--prune"))

        resolved = classify(self.backend, self.mirror_path, reference, self.env)
        try:
            self.backend.run(
                git("checkout").flag("--detach").arg(resolved.tracking_name),
                cwd=self.mirror_path,
                env=self.env
            )
        except CommandError as e:
            if resolved.is_branch:
                raise MirrorSyncError(f"Mirror checkout of {resolved.tracking_name} failed: {e}") from e
            raise UnresolvableReferenceError(resolved.reference, str(e)) from e

        self._step("submodule update", git("submodule", "update").flag("--init").flag("--recursive"))

        self.logger.info(f"Mirror checked out at {resolved.tracking_name}")
        return resolved

    def _step(self, name: str, command: Command) -> None:
        """Run one update step inside the mirror"""
        try:
            self.backend.run(command, cwd=self.mirror_path, env=self.env)
        except CommandError as e:
            raise MirrorSyncError(f"Mirror {name} failed: {e}") from e
