# mirror_deploy/exporters/__init__.py
"""Release export strategies for mirror-deploy"""

from .base import ExportStrategy
from .rsync import RsyncExporter, RsyncLinksExporter
from .archive import GitArchiveExporter
from .factory import ExporterFactory

__all__ = [
    'ExportStrategy',
    'RsyncExporter',
    'RsyncLinksExporter',
    'GitArchiveExporter',
    'ExporterFactory',
]
