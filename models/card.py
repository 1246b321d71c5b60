"""
models/card.py
--------------
Domain models for patient cards and the aggregates built around them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from models.patient import Patient


@dataclass
class PatientCard:
    """
    A patient's clinical record.

    Attributes:
        id: Database primary key (None for new records).
        appointment_time: When the appointment took place.
        has_nodules: Whether nodules were found.
        diagnosis: Free-text diagnosis.
        patient_id: The patient this card belongs to.
        med_worker_id: The medical worker who filled in the card.
    """
    patient_id: int
    med_worker_id: int
    diagnosis: str = ""
    has_nodules: bool = False
    appointment_time: Optional[datetime] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        nodules = "nodules" if self.has_nodules else "no nodules"
        return f"Card #{self.id} | patient {self.patient_id} | {nodules} | {self.diagnosis}"


@dataclass
class PatientInformation:
    """A patient together with one of their cards. Never stored as a row."""
    patient: Patient
    card: PatientCard


@dataclass
class CardList:
    """One page of cards plus the total number of cards in the store."""
    cards: list[PatientInformation] = field(default_factory=list)
    count: int = 0
