from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ActivityType
from .model import Activity


class ActivityRepository(Protocol):
    def create(self, *, message: str, type: ActivityType, timestamp: datetime) -> Activity:
        raise NotImplementedError

    def list_recent(self, limit: Optional[int] = None) -> Sequence[Activity]:
        """Newest first."""

        raise NotImplementedError
