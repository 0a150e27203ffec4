from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ActivityType
from .model import Activity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    """Use case: record and read the activity feed shown on dashboards."""

    def __init__(self, activities: ActivityRepository):
        self._activities = activities

    def log(self, type: ActivityType, message: str) -> Activity:
        activity = self._activities.create(message=message, type=type, timestamp=now_local())
        logger.info("activity[%s] %s", type.value, message)
        return activity

    def recent(self, limit: Optional[Any] = None) -> Sequence[Activity]:
        return self._activities.list_recent(self._normalize_limit(limit))

    @staticmethod
    def _normalize_limit(limit: Optional[Any]) -> Optional[int]:
        # A missing, malformed or non-positive limit means "everything".
        if limit is None:
            return None
        try:
            value = int(limit)
        except (TypeError, ValueError):
            return None
        return value if value > 0 else None
