"""
db/tables.py
------------
SQLAlchemy ORM models, one class per table.
These are storage models only; repositories map them to domain entities.
"""

from sqlalchemy import BigInteger, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# BIGINT on PostgreSQL, plain INTEGER on SQLite so autoincrement still works
_ID = BigInteger().with_variant(Integer(), "sqlite")


class PatientInfo(Base):
    __tablename__ = "patients"

    id = Column(_ID, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    father_name = Column(String(100), nullable=False, default="")
    medical_policy = Column(String(64), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)


class MedWorkerInfo(Base):
    __tablename__ = "med_workers"

    id = Column(_ID, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    father_name = Column(String(100), nullable=False, default="")
    position = Column(String(100), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)


class PatientCardInfo(Base):
    __tablename__ = "patient_cards"

    id = Column(_ID, primary_key=True, autoincrement=True)
    appointment_time = Column(DateTime(timezone=True))
    has_nodules = Column(Boolean, nullable=False, default=False)
    diagnosis = Column(Text, nullable=False, default="")
    patient_id = Column(_ID, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    med_worker_id = Column(_ID, ForeignKey("med_workers.id"), nullable=False, index=True)
