"""
services/medworker_service.py
-----------------------------
Use cases for medical staff records.
"""

from typing import Any, Optional

from config import DEFAULT_PAGE_SIZE
from models.card import PatientCard
from models.medworker import MedicalWorker
from repositories.medworker_repo import MedicalWorkerRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class MedicalWorkerService:
    """Manages medical workers and the cards assigned to them."""

    def __init__(self, repo: Optional[MedicalWorkerRepository] = None):
        self.repo = repo or MedicalWorkerRepository()

    def get_med_worker(self, worker_id: int) -> MedicalWorker:
        return self.repo.get_by_id(worker_id)

    def list_med_workers(self, limit: int, offset: int) -> tuple[list[MedicalWorker], int]:
        """Fetch one page of workers; a limit of 0 means DEFAULT_PAGE_SIZE."""
        return self.repo.get_page(limit or DEFAULT_PAGE_SIZE, offset)

    def add_med_worker(self, worker: MedicalWorker) -> int:
        return self.repo.add(worker)

    def update_med_worker(self, worker: MedicalWorker) -> None:
        self.repo.update(worker)

    def patch_med_worker(self, worker_id: int, changes: dict[str, Any]) -> None:
        if changes:
            logger.info(f"Patching medical worker #{worker_id}: {', '.join(sorted(changes))}")
        self.repo.patch(worker_id, changes)

    def delete_med_worker(self, worker_id: int) -> None:
        self.repo.delete(worker_id)

    def get_med_worker_cards(self, worker_id: int) -> list[PatientCard]:
        """
        Fetch the cards assigned to a worker.

        Raises:
            NotFoundError: If the worker does not exist.
        """
        self.repo.get_by_id(worker_id)
        return self.repo.get_patients_by_med_worker(worker_id)
