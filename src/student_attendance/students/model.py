from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# JSON field name -> Student attribute. The dashboard client speaks camelCase.
PAYLOAD_FIELDS = {
    "studentId": "student_code",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "className": "class_name",
    "phoneNumber": "phone_number",
    "parentName": "parent_name",
    "parentPhone": "parent_phone",
    "address": "address",
    "active": "active",
}


@dataclass(frozen=True)
class Student:
    """Domain entity: an enrolled student.

    ``id`` is the storage key; ``student_code`` is the human-facing student ID.
    """

    id: int
    student_code: str
    first_name: str
    last_name: str
    class_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    address: Optional[str] = None
    active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        out = {"id": self.id}
        for key, attr in PAYLOAD_FIELDS.items():
            out[key] = getattr(self, attr)
        return out


def fields_from_payload(payload: dict) -> dict:
    """Translate a JSON payload into Student attribute names, dropping unknown keys."""
    return {attr: payload[key] for key, attr in PAYLOAD_FIELDS.items() if key in payload}
