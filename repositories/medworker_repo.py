"""
repositories/medworker_repo.py
------------------------------
Data access layer for medical workers.
All queries related to the `med_workers` table live here.
"""

from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError

from db.connection import session_scope
from db.tables import MedWorkerInfo, PatientCardInfo
from models.card import PatientCard
from models.errors import NotFoundError
from models.medworker import MedicalWorker
from repositories.mapper import (
    MED_WORKER_FIELDS,
    to_med_worker_entity,
    to_med_worker_model,
    to_patient_card_entity,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class MedicalWorkerRepository:
    """Repository for CRUD operations on the med_workers table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, worker: MedicalWorker) -> int:
        """
        Insert a new medical worker.

        Args:
            worker: The MedicalWorker to persist.

        Returns:
            The generated id. `worker.id` is populated as well.
        """
        row = to_med_worker_model(worker)
        try:
            with session_scope() as session:
                session.add(row)
                session.flush()
                worker.id = row.id
        except SQLAlchemyError as e:
            logger.error(f"Failed to add medical worker: {e}")
            raise
        logger.info(f"Added medical worker #{worker.id}")
        return worker.id

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, worker_id: int) -> MedicalWorker:
        """
        Fetch a single medical worker.

        Raises:
            NotFoundError: If no worker has this id.
        """
        with session_scope() as session:
            row = session.get(MedWorkerInfo, worker_id)
            if row is None:
                raise NotFoundError("medical worker", worker_id)
            return to_med_worker_entity(row)

    def get_page(self, limit: int, offset: int) -> tuple[list[MedicalWorker], int]:
        """
        Fetch one page of medical workers ordered by id.

        Returns:
            (workers, total) where total counts every row in the table.
        """
        with session_scope() as session:
            total = session.scalar(select(func.count()).select_from(MedWorkerInfo))
            rows = session.scalars(
                select(MedWorkerInfo).order_by(MedWorkerInfo.id).limit(limit).offset(offset)
            ).all()
            return [to_med_worker_entity(r) for r in rows], int(total)

    def get_patients_by_med_worker(self, worker_id: int) -> list[PatientCard]:
        """Fetch every card assigned to a medical worker."""
        with session_scope() as session:
            rows = session.scalars(
                select(PatientCardInfo)
                .where(PatientCardInfo.med_worker_id == worker_id)
                .order_by(PatientCardInfo.id)
            ).all()
            return [to_patient_card_entity(r) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, worker: MedicalWorker) -> None:
        """
        Replace every column of an existing worker.

        Raises:
            NotFoundError: If no worker has `worker.id`.
        """
        values = {name: getattr(worker, name) for name in MED_WORKER_FIELDS}
        self._update_values(worker.id, values)

    def patch(self, worker_id: int, changes: dict[str, Any]) -> None:
        """
        Update only the given columns of an existing worker.

        Args:
            worker_id: Primary key.
            changes: Column name to new value. Unknown names and None
                values are ignored.

        Raises:
            NotFoundError: If no worker has this id.
        """
        values = {
            name: value for name, value in changes.items()
            if name in MED_WORKER_FIELDS and value is not None
        }
        if not values:
            # Nothing to write, but a patch on a missing id must still fail
            self.get_by_id(worker_id)
            return
        self._update_values(worker_id, values)

    def _update_values(self, worker_id: int, values: dict[str, Any]) -> None:
        try:
            with session_scope() as session:
                result = session.execute(
                    update(MedWorkerInfo).where(MedWorkerInfo.id == worker_id).values(**values)
                )
                if result.rowcount == 0:
                    raise NotFoundError("medical worker", worker_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update medical worker #{worker_id}: {e}")
            raise

    # ── DELETE ────────────────────────────────────────────

    def delete(self, worker_id: int) -> None:
        """
        Delete a medical worker by id.

        Raises:
            NotFoundError: If no worker has this id.
        """
        try:
            with session_scope() as session:
                result = session.execute(delete(MedWorkerInfo).where(MedWorkerInfo.id == worker_id))
                if result.rowcount == 0:
                    raise NotFoundError("medical worker", worker_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete medical worker #{worker_id}: {e}")
            raise
        logger.info(f"Deleted medical worker #{worker_id}")
