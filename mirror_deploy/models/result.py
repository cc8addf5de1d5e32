"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .reference import ResolvedReference


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


class MirrorAction(Enum):
    """What happened to the mirror during a deploy"""
    CLONED = "cloned"
    UPDATED = "updated"


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    start_time: datetime = field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.utcnow()
        if status:
            self.status = status


@dataclass
class ReleaseResult(Result):
    """Result of a full mirror, resolve and export run"""

    repo_url: Optional[str] = None
    mirror_path: Optional[str] = None
    release_path: Optional[str] = None
    mirror_action: Optional[MirrorAction] = None
    resolved: Optional[ResolvedReference] = None
    export_strategy: Optional[str] = None

    @property
    def revision(self) -> Optional[str]:
        return self.resolved.revision if self.resolved else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "repo_url": self.repo_url,
            "mirror_path": self.mirror_path,
            "release_path": self.release_path,
            "mirror_action": self.mirror_action.value if self.mirror_action else None,
            "resolved": self.resolved.to_dict() if self.resolved else None,
            "export_strategy": self.export_strategy,
            "duration": self.duration
        }
