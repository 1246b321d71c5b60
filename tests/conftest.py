"""Shared fixtures: an in-memory SQLite database standing in for PostgreSQL."""

from datetime import datetime

import pytest

from db.connection import close_engine, init_engine
from db.init_db import create_tables
from models.card import PatientCard, PatientInformation
from models.medworker import MedicalWorker
from models.patient import Patient
from repositories.card_repo import CardRepository
from repositories.medworker_repo import MedicalWorkerRepository
from tests.helpers import FakeContext


@pytest.fixture
def database():
    """Fresh schema for every test."""
    engine = init_engine("sqlite://")
    create_tables()
    yield engine
    close_engine()


@pytest.fixture
def context():
    return FakeContext()


@pytest.fixture
def worker_repo(database):
    return MedicalWorkerRepository()


@pytest.fixture
def card_repo(database):
    return CardRepository()


@pytest.fixture
def make_worker():
    def _make(**overrides) -> MedicalWorker:
        fields = dict(
            first_name="Anna",
            last_name="Petrova",
            father_name="Sergeevna",
            position="endocrinologist",
            email="a.petrova@clinic.example",
            is_active=True,
        )
        fields.update(overrides)
        return MedicalWorker(**fields)

    return _make


@pytest.fixture
def make_information():
    def _make(med_worker_id: int, **card_overrides) -> PatientInformation:
        card_fields = dict(
            patient_id=0,
            med_worker_id=med_worker_id,
            diagnosis="Nodular goiter",
            has_nodules=True,
            appointment_time=datetime(2024, 3, 14, 9, 30),
        )
        card_fields.update(card_overrides)
        return PatientInformation(
            patient=Patient(
                first_name="Ivan",
                last_name="Sidorov",
                father_name="Petrovich",
                medical_policy="7700112233445566",
                email="ivan@example.com",
            ),
            card=PatientCard(**card_fields),
        )

    return _make
