"""
models/medworker.py
-------------------
Domain model for medical staff.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MedicalWorker:
    """
    A member of the medical staff who can be assigned to patient cards.

    Attributes:
        id: Database primary key (None for new records).
        first_name: Given name.
        last_name: Family name.
        father_name: Patronymic.
        position: Job title, e.g. 'surgeon'.
        email: Work email.
        is_active: Whether the worker is currently on staff.
    """
    first_name: str = ""
    last_name: str = ""
    father_name: str = ""
    position: str = ""
    email: str = ""
    is_active: bool = True
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.last_name} {self.first_name} ({self.position or 'staff'})"
