"""
repositories/mapper.py
----------------------
Converts between domain entities (`models/`) and ORM storage models
(`db/tables.py`). Every mapped field is copied as-is.
"""

from db.tables import MedWorkerInfo, PatientCardInfo, PatientInfo
from models.card import PatientCard
from models.medworker import MedicalWorker
from models.patient import Patient

MED_WORKER_FIELDS = ("first_name", "last_name", "father_name", "position", "email", "is_active")
PATIENT_FIELDS = ("first_name", "last_name", "father_name", "medical_policy", "email", "is_active")
CARD_FIELDS = ("appointment_time", "has_nodules", "diagnosis", "patient_id", "med_worker_id")


def _new_id(ident):
    """Zero means "not assigned yet" on the wire; the store wants NULL."""
    return ident or None


# ── Medical workers ───────────────────────────────────────

def to_med_worker_model(worker: MedicalWorker) -> MedWorkerInfo:
    return MedWorkerInfo(
        id=_new_id(worker.id),
        **{name: getattr(worker, name) for name in MED_WORKER_FIELDS},
    )


def to_med_worker_entity(row: MedWorkerInfo) -> MedicalWorker:
    return MedicalWorker(
        id=row.id,
        **{name: getattr(row, name) for name in MED_WORKER_FIELDS},
    )


# ── Patients ──────────────────────────────────────────────

def to_patient_model(patient: Patient) -> PatientInfo:
    return PatientInfo(
        id=_new_id(patient.id),
        **{name: getattr(patient, name) for name in PATIENT_FIELDS},
    )


def to_patient_entity(row: PatientInfo) -> Patient:
    return Patient(
        id=row.id,
        **{name: getattr(row, name) for name in PATIENT_FIELDS},
    )


# ── Patient cards ─────────────────────────────────────────

def to_patient_card_model(card: PatientCard) -> PatientCardInfo:
    return PatientCardInfo(
        id=_new_id(card.id),
        **{name: getattr(card, name) for name in CARD_FIELDS},
    )


def to_patient_card_entity(row: PatientCardInfo) -> PatientCard:
    return PatientCard(
        id=row.id,
        **{name: getattr(row, name) for name in CARD_FIELDS},
    )
