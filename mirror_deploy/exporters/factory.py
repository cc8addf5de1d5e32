"""Export strategy factory"""

from typing import Any, Dict, List, Type

from .archive import GitArchiveExporter
from .base import ExportStrategy
from .rsync import RsyncExporter, RsyncLinksExporter
from ..api.exceptions import ConfigError
from ..constants import ExportStrategyType


class ExporterFactory:
    """Factory for creating export strategy instances"""

    # Registry of export strategies
    _strategies: Dict[str, Type[ExportStrategy]] = {
        ExportStrategyType.RSYNC.value: RsyncExporter,
        ExportStrategyType.RSYNC_LINKS.value: RsyncLinksExporter,
        ExportStrategyType.ARCHIVE.value: GitArchiveExporter,
    }

    @classmethod
    def create(cls, name: str, config: Dict[str, Any] = None) -> ExportStrategy:
        """Create export strategy by name

        Args:
            name: Strategy name
            config: Strategy configuration

        Returns:
            Export strategy instance

        Raises:
            ConfigError: If the strategy is not registered
        """
        if name not in cls._strategies:
            raise ConfigError(
                f"Unsupported export strategy: {name} "
                f"(supported: {', '.join(cls.supported())})"
            )
        return cls._strategies[name](config)

    @classmethod
    def register(cls, name: str, strategy_class: Type[ExportStrategy]) -> None:
        """Register a new export strategy

        Args:
            name: Strategy name
            strategy_class: Strategy class
        """
        cls._strategies[name] = strategy_class

    @classmethod
    def supported(cls) -> List[str]:
        """Get list of registered strategy names"""
        return sorted(cls._strategies)

    @classmethod
    def is_supported(cls, name: str) -> bool:
        return name in cls._strategies
