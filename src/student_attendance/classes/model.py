from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (section) students are enrolled in by name."""

    id: int
    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}
