"""
models/patient.py
-----------------
Domain model for patients.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Patient:
    """
    Identity and contact details of a patient.

    Attributes:
        id: Database primary key (None or 0 for new records).
        first_name: Given name.
        last_name: Family name.
        father_name: Patronymic.
        medical_policy: Medical insurance policy number.
        email: Contact email.
        is_active: Whether the patient record is active.
    """
    first_name: str = ""
    last_name: str = ""
    father_name: str = ""
    medical_policy: str = ""
    email: str = ""
    is_active: bool = True
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.last_name, self.first_name, self.father_name) if p)

    def __str__(self) -> str:
        return f"{self.full_name} (policy {self.medical_policy or '-'})"
