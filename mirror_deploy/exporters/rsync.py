# mirror_deploy/exporters/rsync.py
"""rsync based export strategies"""

from typing import Dict, Optional

from .base import ExportStrategy
from ..api.exceptions import CommandError, ExportError
from ..backends.base import CommandBackend
from ..core.command import Command, rsync
from ..constants import GIT_EXCLUDE_PATTERN
from ..models.config import ReleaseTarget


class RsyncExporter(ExportStrategy):
    """Copies the mirror checkout with symbolic links dereferenced

    Links pointing into submodules or shared resources end up as real
    files in the release. The copy is additive: files already in the
    release directory are overwritten or kept, never deleted.
    """

    name = "rsync"
    link_flag = "--copy-links"

    def build_command(self, source: str, release_path: str) -> Command:
        return (
            rsync()
            .flag("-ar")
            .flag(self.link_flag)
            .option("--exclude", GIT_EXCLUDE_PATTERN)
            .arg(source)
            .arg(release_path)
        )

    def export(self,
               backend: CommandBackend,
               mirror_path: str,
               target: ReleaseTarget,
               revision: Optional[str] = None,
               env: Optional[Dict[str, str]] = None) -> None:
        source = target.source_path(mirror_path)

        if not backend.test(Command("test").flag("-d").arg(source)):
            raise ExportError(f"Release source does not exist: {source}")

        self.logger.info(f"Copying {source} to {target.release_path}")
        try:
            backend.run(self.build_command(source, target.release_path))
        except CommandError as e:
            raise ExportError(f"Copy to {target.release_path} failed: {e}") from e


class RsyncLinksExporter(RsyncExporter):
    """Copies the mirror checkout keeping symbolic links as links"""

    name = "rsync-links"
    link_flag = "--links"
