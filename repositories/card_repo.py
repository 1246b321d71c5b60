"""
repositories/card_repo.py
-------------------------
Data access layer for patient cards.
All queries related to the `patient_cards` table (and the patients
they point at) live here.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.connection import session_scope
from db.tables import PatientCardInfo, PatientInfo
from models.card import PatientCard, PatientInformation
from models.errors import NotFoundError
from models.patient import Patient
from repositories.mapper import (
    to_patient_card_entity,
    to_patient_card_model,
    to_patient_entity,
    to_patient_model,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class CardRepository:
    """Repository for CRUD operations on the patient_cards table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, info: PatientInformation) -> int:
        """
        Persist a card together with its patient in one transaction.

        A patient id is a reference to an existing row, which is left as
        it is. A patient without an id is inserted and gets a generated one.

        Args:
            info: The patient and the new card.

        Returns:
            The generated card id. `info.card.id`, `info.card.patient_id`
            and `info.patient.id` are populated as well.

        Raises:
            NotFoundError: If the patient id does not exist.
        """
        card = info.card
        if card.appointment_time is None:
            card.appointment_time = datetime.now(timezone.utc)
        try:
            with session_scope() as session:
                patient_row = self._resolve_patient(session, info.patient)
                card.patient_id = patient_row.id

                card_row = to_patient_card_model(card)
                session.add(card_row)
                session.flush()
                card.id = card_row.id
                info.patient.id = patient_row.id
        except SQLAlchemyError as e:
            logger.error(f"Failed to add card for patient {info.patient.id}: {e}")
            raise
        logger.info(f"Added card #{card.id} for patient {card.patient_id}")
        return card.id

    @staticmethod
    def _resolve_patient(session: Session, patient: Patient) -> PatientInfo:
        if patient.id:
            row = session.get(PatientInfo, patient.id)
            if row is None:
                raise NotFoundError("patient", patient.id)
            return row
        # Ids are always generated by the store
        row = to_patient_model(patient)
        row.id = None
        session.add(row)
        session.flush()
        return row

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, card_id: int) -> PatientInformation:
        """
        Fetch a card and its patient.

        Raises:
            NotFoundError: If no card has this id.
        """
        with session_scope() as session:
            row = session.execute(
                select(PatientCardInfo, PatientInfo)
                .join(PatientInfo, PatientCardInfo.patient_id == PatientInfo.id)
                .where(PatientCardInfo.id == card_id)
            ).first()
            if row is None:
                raise NotFoundError("card", card_id)
            return self._to_information(*row)

    def get_page(self, limit: int, offset: int) -> tuple[list[PatientInformation], int]:
        """
        Fetch one page of cards, each with its patient, ordered by card id.

        Returns:
            (cards, total) where total counts every card in the table.
        """
        with session_scope() as session:
            total = session.scalar(select(func.count()).select_from(PatientCardInfo))
            rows = session.execute(
                select(PatientCardInfo, PatientInfo)
                .join(PatientInfo, PatientCardInfo.patient_id == PatientInfo.id)
                .order_by(PatientCardInfo.id)
                .limit(limit)
                .offset(offset)
            ).all()
            return [self._to_information(card, patient) for card, patient in rows], int(total)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, card: PatientCard) -> None:
        """
        Replace the editable fields of an existing card.
        The appointment time is left as it was.

        Raises:
            NotFoundError: If no card has `card.id`.
        """
        try:
            with session_scope() as session:
                result = session.execute(
                    update(PatientCardInfo)
                    .where(PatientCardInfo.id == card.id)
                    .values(
                        diagnosis=card.diagnosis,
                        has_nodules=card.has_nodules,
                        patient_id=card.patient_id,
                        med_worker_id=card.med_worker_id,
                    )
                )
                if result.rowcount == 0:
                    raise NotFoundError("card", card.id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update card #{card.id}: {e}")
            raise

    # ── DELETE ────────────────────────────────────────────

    def delete(self, card_id: int) -> None:
        """
        Delete a card by id. The patient row is kept.

        Raises:
            NotFoundError: If no card has this id.
        """
        try:
            with session_scope() as session:
                result = session.execute(delete(PatientCardInfo).where(PatientCardInfo.id == card_id))
                if result.rowcount == 0:
                    raise NotFoundError("card", card_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete card #{card_id}: {e}")
            raise
        logger.info(f"Deleted card #{card_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _to_information(card: PatientCardInfo, patient: PatientInfo) -> PatientInformation:
        return PatientInformation(
            patient=to_patient_entity(patient),
            card=to_patient_card_entity(card),
        )
