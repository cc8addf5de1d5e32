"""Reference classification models"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..constants import SHORT_REVISION_LENGTH


class RefKind(Enum):
    """How a configured reference is tracked"""
    BRANCH = "branch"
    FIXED_POINT = "fixed_point"


@dataclass(frozen=True)
class ResolvedReference:
    """A reference classified against the mirror

    ``tracking_name`` is the name used both for the detached checkout and
    for reading the revision; the two must never diverge.
    """

    kind: RefKind
    reference: str
    tracking_name: str
    revision: Optional[str] = None

    @property
    def is_branch(self) -> bool:
        return self.kind == RefKind.BRANCH

    @property
    def short_revision(self) -> Optional[str]:
        if self.revision:
            return self.revision[:SHORT_REVISION_LENGTH]
        return None

    def with_revision(self, revision: str) -> 'ResolvedReference':
        return replace(self, revision=revision)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "kind": self.kind.value,
            "reference": self.reference,
            "tracking_name": self.tracking_name,
            "revision": self.revision,
        }
