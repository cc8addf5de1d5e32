# mirror_deploy/services/__init__.py
"""Services for mirror-deploy"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
