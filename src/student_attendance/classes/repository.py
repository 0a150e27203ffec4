from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SchoolClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[SchoolClass]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str] = None) -> SchoolClass:
        raise NotImplementedError

    def update(self, class_id: int, *, name: str, description: Optional[str]) -> Optional[SchoolClass]:
        raise NotImplementedError

    def delete_by_id(self, class_id: int) -> bool:
        raise NotImplementedError
