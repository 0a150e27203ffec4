from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import ActivityType


@dataclass(frozen=True)
class Activity:
    """Domain entity: one line of the recent-activity feed."""

    activity_id: int
    message: str
    type: ActivityType
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.activity_id,
            "message": self.message,
            "type": self.type.value,
            "timestamp": self.timestamp.isoformat(),
        }
