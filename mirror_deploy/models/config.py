"""Configuration data models"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_BRANCH,
    DEFAULT_EXPORT_STRATEGY,
    DEFAULT_TMP_DIR,
    GIT_ASKPASS,
    SECRET_MASK,
    WRAPPER_NAME_PATTERN,
)
from ..utils.url_utils import embed_credentials


@dataclass(frozen=True)
class RepositoryLocation:
    """Remote URL and local mirror path of one repository"""

    url: str
    mirror_path: str

    def __str__(self) -> str:
        return f"{self.url} -> {self.mirror_path}"


@dataclass(frozen=True)
class ReleaseTarget:
    """Release directory and optional subtree inside the repository"""

    release_path: str
    subtree: Optional[str] = None

    def source_path(self, mirror_path: str) -> str:
        """Source directory for the copy, always with a trailing slash"""
        base = mirror_path.rstrip("/")
        if self.subtree:
            base = f"{base}/{self.subtree.strip('/')}"
        return f"{base}/"


@dataclass
class ScmConfig:
    """Source control settings for one deploy"""

    repo_url: str = ""
    repo_path: str = ""
    branch: str = DEFAULT_BRANCH
    release_path: Optional[str] = None
    repo_tree: Optional[str] = None

    # HTTP credentials embedded into the URL
    git_http_username: Optional[str] = None
    git_http_password: Optional[str] = None

    export_strategy: str = DEFAULT_EXPORT_STRATEGY

    # SSH wrapper naming
    tmp_dir: str = DEFAULT_TMP_DIR
    application: Optional[str] = None
    stage: Optional[str] = None
    local_user: Optional[str] = None
    ssh_wrapper_path: Optional[str] = None

    # Extra environment for git commands
    git_environment: Dict[str, str] = field(default_factory=dict)

    @property
    def url_with_credentials(self) -> str:
        """Repository URL used for every network-touching command"""
        return embed_credentials(
            self.repo_url,
            self.git_http_username,
            self.git_http_password
        )

    @property
    def repository_location(self) -> RepositoryLocation:
        return RepositoryLocation(
            url=self.url_with_credentials,
            mirror_path=self.repo_path
        )

    @property
    def release_target(self) -> ReleaseTarget:
        if not self.release_path:
            raise ConfigError("Missing required configuration: release_path")
        return ReleaseTarget(release_path=self.release_path, subtree=self.repo_tree or None)

    @property
    def wrapper_path(self) -> str:
        """Path of the host-specific git SSH wrapper script"""
        if self.ssh_wrapper_path:
            return self.ssh_wrapper_path

        name = WRAPPER_NAME_PATTERN.format(
            application=self.application or "",
            stage=self.stage or "",
            local_user=self.local_user or "",
        )
        return os.path.join(self.tmp_dir, name)

    def git_env(self) -> Dict[str, str]:
        """Environment variables passed to git commands

        ``GIT_SSH`` is set for an explicit wrapper, or for the derived one
        when it exists on this host; otherwise git uses plain ssh.
        """
        env = {"GIT_ASKPASS": GIT_ASKPASS}
        if self.ssh_wrapper_path or os.path.exists(self.wrapper_path):
            env["GIT_SSH"] = self.wrapper_path
        env.update(self.git_environment)
        return env

    def missing_fields(self, require_release: bool = False) -> List[str]:
        required = ["repo_url", "repo_path", "branch"]
        if require_release:
            required.append("release_path")
        return [name for name in required if not str(getattr(self, name) or "").strip()]

    def validate(self, require_release: bool = False) -> None:
        """Check required values

        Raises:
            ConfigError: If any required value is missing
        """
        missing = self.missing_fields(require_release)
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

        if self.git_http_password and not self.git_http_username:
            raise ConfigError("git_http_password requires git_http_username")

    def to_dict(self, mask_secrets: bool = False) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, dict):
                value = dict(value)
            data[f.name] = value

        if mask_secrets and data.get("git_http_password"):
            data["git_http_password"] = SECRET_MASK

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScmConfig':
        """Create from dictionary

        Raises:
            ConfigError: If unknown keys are present
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = {key: value for key, value in data.items() if value is not None}
        for key in ("repo_url", "repo_path", "branch", "release_path", "repo_tree"):
            if key in values:
                values[key] = str(values[key])

        env = values.get("git_environment", {})
        if not isinstance(env, dict):
            raise ConfigError("git_environment must be a mapping")
        values["git_environment"] = {str(k): str(v) for k, v in env.items()}

        return cls(**values)
