from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import ActivityType
from ..database.memory import MemoryDatabase
from .model import Activity
from .repository import ActivityRepository

TABLE = "activities"


class MemoryActivityRepository(ActivityRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def create(self, *, message: str, type: ActivityType, timestamp: datetime) -> Activity:
        with self._db.transaction() as db:
            activity = Activity(
                activity_id=db.next_id(TABLE),
                message=message,
                type=type,
                timestamp=timestamp,
            )
            db.table(TABLE)[activity.activity_id] = activity
            return activity

    def list_recent(self, limit: Optional[int] = None) -> Sequence[Activity]:
        with self._db.transaction() as db:
            items = list(db.table(TABLE).values())
        # ids break ties between entries logged within the same clock tick
        items.sort(key=lambda a: (a.timestamp, a.activity_id), reverse=True)
        if limit:
            items = items[:limit]
        return items
