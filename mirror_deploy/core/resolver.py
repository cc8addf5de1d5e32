"""Reference classification and revision resolution"""

import logging
from typing import Dict, Optional

from .command import git
from ..api.exceptions import CommandError, UnresolvableReferenceError
from ..backends.base import CommandBackend
from ..constants import REMOTE_NAME
from ..models.reference import RefKind, ResolvedReference

logger = logging.getLogger(__name__)


def remote_tracking_name(reference: str) -> str:
    return f"{REMOTE_NAME}/{reference}"


def classify(backend: CommandBackend,
             mirror_path: str,
             reference: str,
             env: Optional[Dict[str, str]] = None) -> ResolvedReference:
    """
    Classify a reference as a tracked branch or a fixed point

    The branch check runs first, so a name that is both a branch and a tag
    is treated as a branch. Fixed points (tags, commit ids) are used
    verbatim without the remote prefix.

    Args:
        backend: Command backend
        mirror_path: Mirror working directory
        reference: Configured branch, tag or commit
        env: Environment for git

    Returns:
        ResolvedReference without a revision

    Raises:
        UnresolvableReferenceError: If the reference is empty or blank
    """
    if not reference or not reference.strip():
        raise UnresolvableReferenceError(reference or "", "reference is empty")

    tracking = remote_tracking_name(reference)
    if backend.test(git("rev-parse", tracking), cwd=mirror_path, env=env):
        logger.debug(f"{reference} is a branch, tracking {tracking}")
        return ResolvedReference(RefKind.BRANCH, reference, tracking)

    logger.debug(f"{reference} is a tag or commit")
    return ResolvedReference(RefKind.FIXED_POINT, reference, reference)


class RevisionResolver:
    """Resolves the configured reference to an exact commit id"""

    def __init__(self,
                 backend: CommandBackend,
                 mirror_path: str,
                 reference: str,
                 env: Optional[Dict[str, str]] = None):
        self.backend = backend
        self.mirror_path = mirror_path
        self.reference = reference
        self.env = env
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(self) -> ResolvedReference:
        return classify(self.backend, self.mirror_path, self.reference, self.env)

    def resolve(self, classification: Optional[ResolvedReference] = None) -> ResolvedReference:
        """
        Read the most recent commit reachable from the tracking name

        Args:
            classification: Classification made earlier against the same
                mirror state; the mirror is classified again when omitted

        Returns:
            ResolvedReference with its revision set

        Raises:
            UnresolvableReferenceError: If no commit can be read
        """
        resolved = classification or self.classify()

        try:
            revision = self.backend.capture(
                git("rev-list").option("--max-count", "1").arg(resolved.tracking_name),
                cwd=self.mirror_path,
                env=self.env
            )
        except CommandError as e:
            raise UnresolvableReferenceError(resolved.reference, str(e)) from e

        revision = revision.strip()
        if not revision:
            raise UnresolvableReferenceError(resolved.reference, "no commits found")

        # rev-list may print several lines on odd input; the first is the tip
        revision = revision.splitlines()[0].strip()

        self.logger.info(f"Resolved {resolved.reference} ({resolved.kind.value}) to {revision}")
        return resolved.with_revision(revision)
