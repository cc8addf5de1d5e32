# mirror_deploy/exporters/base.py
"""Export strategy abstract base class"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..backends.base import CommandBackend
from ..models.config import ReleaseTarget


class ExportStrategy(ABC):
    """Abstract base class for release tree export strategies

    A strategy copies the state of the mirror into the release directory.
    Resolution is finished before export starts; strategies never classify
    references themselves.
    """

    name: str = ""
    requires_revision: bool = False

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize export strategy

        Args:
            config: Strategy-specific configuration
        """
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def export(self,
               backend: CommandBackend,
               mirror_path: str,
               target: ReleaseTarget,
               revision: Optional[str] = None,
               env: Optional[Dict[str, str]] = None) -> None:
        """
        Populate the release directory

        Args:
            backend: Command backend
            mirror_path: Mirror directory
            target: Release directory and optional subtree
            revision: Resolved commit id
            env: Environment for git commands

        Raises:
            ExportError: If the release tree cannot be produced
        """
        pass
