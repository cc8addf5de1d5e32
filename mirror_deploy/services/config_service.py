"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import jsonschema
import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    CONFIG_SECTION,
    DEFAULT_CONFIG_FILE,
    ENV_CONFIG_PATH,
    ENV_OVERRIDE_KEYS,
    ENV_PREFIX,
)
from ..models.config import ScmConfig

logger = logging.getLogger(__name__)

# String keys only; unquoted YAML numbers such as 1.10 are rejected
STRING = {"type": ["string", "null"]}

# Shape of the file after the optional ``scm`` section is unwrapped
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        **{key: STRING for key in ENV_OVERRIDE_KEYS},
        "git_environment": {
            "type": ["object", "null"],
            "additionalProperties": {"type": ["string", "number", "boolean"]},
        },
    },
    "additionalProperties": False,
}


class ConfigService:
    """Builds an ScmConfig from a YAML file, the environment and overrides

    Precedence, lowest first: file, ``MIRROR_DEPLOY_<KEY>`` environment
    variables, explicit overrides.
    """

    def __init__(self,
                 config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_path: YAML file; falls back to $MIRROR_DEPLOY_CONFIG,
                then ./mirror-deploy.yaml when that exists
            environ: Environment mapping (defaults to os.environ)
        """
        self.environ = os.environ if environ is None else environ
        self.config_path = self._locate(config_path)

    def _locate(self, config_path: Optional[Union[str, Path]]) -> Optional[Path]:
        if config_path:
            return Path(config_path)

        env_path = self.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path)

        default = Path.cwd() / DEFAULT_CONFIG_FILE
        if default.exists():
            return default
        return None

    def read_file(self) -> Dict[str, Any]:
        """Read the YAML file

        Returns:
            Flat dictionary of configuration values (empty without a file)

        Raises:
            ConfigError: If the file is missing or malformed
        """
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {self.config_path}")

        if CONFIG_SECTION in data:
            section = data[CONFIG_SECTION] or {}
            if not isinstance(section, dict):
                raise ConfigError(f"'{CONFIG_SECTION}' section must be a mapping")
            data = dict(section)

        try:
            jsonschema.validate(data, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            message = f"Invalid configuration in {self.config_path}: {e.message}"
            if e.path:
                message += f" (key '{'.'.join(str(part) for part in e.path)}')"
            if e.validator == "type":
                message += "; quote numeric-looking values such as tags or commit ids"
            raise ConfigError(message) from e

        return data

    def read_environment(self) -> Dict[str, str]:
        values = {}
        for key in ENV_OVERRIDE_KEYS:
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if env_key in self.environ:
                values[key] = self.environ[env_key]
        return values

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> ScmConfig:
        """Load the effective configuration

        Args:
            overrides: Explicit values; ``None`` entries are ignored

        Returns:
            ScmConfig instance (not yet validated)
        """
        data = self.read_file()
        data.update(self.read_environment())
        if overrides:
            data.update({k: v for k, v in overrides.items() if v is not None})

        if self.config_path:
            logger.debug(f"Loaded configuration from {self.config_path}")

        return ScmConfig.from_dict(data)
