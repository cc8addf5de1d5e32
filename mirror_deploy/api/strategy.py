"""Git mirror SCM strategy exposed to deploy schedulers"""

import logging
from typing import Optional

from ..backends import CommandBackend, LocalBackend
from ..core.mirror import MirrorManager
from ..core.resolver import RevisionResolver
from ..exporters import ExporterFactory, ExportStrategy
from ..models.config import ScmConfig
from ..models.reference import ResolvedReference
from ..models.result import MirrorAction, OperationStatus, ReleaseResult
from ..utils.url_utils import mask_credentials


class GitMirrorStrategy:
    """Mirror, resolve and export one reference of one repository

    Operations are meant to be called in pipeline order by a scheduler:
    ``check_reachable``, ``ensure_mirror``, ``resolve_revision``, ``release``.
    ``deploy`` runs the whole pipeline.

    The classification made while updating the mirror is kept on the
    instance and reused by ``resolve_revision`` and ``release``, so the
    checkout and the revision read always agree on the tracking name.
    """

    def __init__(self,
                 config: ScmConfig,
                 backend: Optional[CommandBackend] = None,
                 exporter: Optional[ExportStrategy] = None):
        """
        Initialize strategy

        Args:
            config: Source control configuration
            backend: Command backend (local subprocess backend by default)
            exporter: Export strategy (built from ``config.export_strategy`` by default)
        """
        config.validate()

        self.config = config
        self.backend = backend or LocalBackend()
        self.exporter = exporter or ExporterFactory.create(
            config.export_strategy,
            {"tmp_dir": config.tmp_dir}
        )
        self.env = config.git_env()

        self.mirror = MirrorManager(self.backend, config.repository_location, self.env)
        self.resolver = RevisionResolver(self.backend, config.repo_path, config.branch, self.env)

        self._classification: Optional[ResolvedReference] = None
        self._resolved: Optional[ResolvedReference] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def classification(self) -> Optional[ResolvedReference]:
        """Classification cached from the last mirror update"""
        return self._classification

    @property
    def resolved(self) -> Optional[ResolvedReference]:
        """Reference resolved by the last ``resolve_revision`` call"""
        return self._resolved

    def mirror_exists(self) -> bool:
        return self.mirror.exists()

    def check_reachable(self) -> None:
        self.mirror.ensure_reachable()

    def clone(self) -> None:
        self.mirror.clone()

    def update(self) -> ResolvedReference:
        self._classification = self.mirror.update(self.config.branch)
        self._resolved = None
        return self._classification

    def ensure_mirror(self) -> MirrorAction:
        """Clone the mirror when absent, otherwise update it

        Returns:
            Which of the two was performed
        """
        if not self.mirror_exists():
            self.clone()
            return MirrorAction.CLONED

        self.update()
        return MirrorAction.UPDATED

    def resolve_revision(self) -> str:
        """Resolve the configured reference to a full commit id"""
        self._resolved = self.resolver.resolve(self._classification)
        return self._resolved.revision

    def release(self) -> None:
        """Export the mirror into the release directory"""
        self.config.validate(require_release=True)

        revision = self._resolved.revision if self._resolved else None
        if revision is None and self.exporter.requires_revision:
            revision = self.resolve_revision()

        self.exporter.export(
            self.backend,
            self.config.repo_path,
            self.config.release_target,
            revision=revision,
            env=self.env
        )
        self.logger.info(f"Release written to {self.config.release_path}")

    def deploy(self) -> ReleaseResult:
        """Run the full pipeline

        A freshly cloned mirror is updated straight away so the checkout,
        submodules and classification match the configured reference.

        Returns:
            ReleaseResult describing the run

        Raises:
            MirrorDeployError: The first failing step, unchanged; later
                steps are not attempted
        """
        self.config.validate(require_release=True)

        result = ReleaseResult(
            status=OperationStatus.IN_PROGRESS,
            repo_url=mask_credentials(self.config.url_with_credentials),
            mirror_path=self.config.repo_path,
            release_path=self.config.release_path,
            export_strategy=self.exporter.name,
        )

        self.check_reachable()

        if self.mirror_exists():
            result.mirror_action = MirrorAction.UPDATED
        else:
            self.clone()
            result.mirror_action = MirrorAction.CLONED
        self.update()

        self.resolve_revision()
        result.resolved = self._resolved

        self.release()

        result.message = f"Released {self._resolved.reference} at {self._resolved.short_revision}"
        result.complete(OperationStatus.SUCCESS)
        return result
