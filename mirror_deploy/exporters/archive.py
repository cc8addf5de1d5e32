# mirror_deploy/exporters/archive.py
"""git archive based export strategy"""

import posixpath
from typing import Dict, Optional

from .base import ExportStrategy
from ..api.exceptions import CommandError, ExportError
from ..backends.base import CommandBackend
from ..core.command import Command, git
from ..constants import DEFAULT_TMP_DIR
from ..models.config import ReleaseTarget


class GitArchiveExporter(ExportStrategy):
    """Exports committed content of the resolved revision

    Symbolic links stay links and submodule content is not included.
    """

    name = "archive"
    requires_revision = True

    def archive_path(self, revision: str) -> str:
        tmp_dir = self.config.get("tmp_dir") or DEFAULT_TMP_DIR
        return posixpath.join(tmp_dir, f"mirror-deploy-{revision}.tar")

    def export(self,
               backend: CommandBackend,
               mirror_path: str,
               target: ReleaseTarget,
               revision: Optional[str] = None,
               env: Optional[Dict[str, str]] = None) -> None:
        if not revision:
            raise ExportError("Archive export requires a resolved revision")

        tree_ish = revision
        if target.subtree:
            tree_ish = f"{revision}:{target.subtree.strip('/')}"

        archive = self.archive_path(revision)
        self.logger.info(f"Archiving {tree_ish} to {target.release_path}")

        try:
            backend.run(
                git("archive").option("--format", "tar").option("--output", archive).arg(tree_ish),
                cwd=mirror_path,
                env=env
            )
            backend.run(Command("mkdir").flag("-p").arg(target.release_path))
            backend.run(Command("tar").flag("-xf").arg(archive).flag("-C").arg(target.release_path))
        except CommandError as e:
            raise ExportError(f"Archive export of {tree_ish} failed: {e}") from e
        finally:
            backend.test(Command("rm").flag("-f").arg(archive))
