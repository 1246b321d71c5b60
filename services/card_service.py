"""
services/card_service.py
------------------------
Use cases for patient cards.
"""

from typing import Optional

from config import DEFAULT_PAGE_SIZE
from models.card import CardList, PatientCard, PatientInformation
from models.errors import NotFoundError
from repositories.card_repo import CardRepository
from repositories.medworker_repo import MedicalWorkerRepository


class CardService:
    """
    Handles all business logic for patient cards.

    Responsibilities:
        - Page through cards together with their patients.
        - Create a card (and its patient) for an existing medical worker.
        - Replace and delete cards.
    """

    def __init__(
        self,
        card_repo: Optional[CardRepository] = None,
        worker_repo: Optional[MedicalWorkerRepository] = None,
    ):
        self.card_repo = card_repo or CardRepository()
        self.worker_repo = worker_repo or MedicalWorkerRepository()

    def get_cards(self, limit: int, offset: int) -> CardList:
        """
        Fetch one page of cards.

        Args:
            limit: Page size; 0 means DEFAULT_PAGE_SIZE.
            offset: Number of cards to skip.

        Raises:
            NotFoundError: If there are no cards at all.
        """
        cards, count = self.card_repo.get_page(limit or DEFAULT_PAGE_SIZE, offset)
        if count == 0:
            raise NotFoundError("cards")
        return CardList(cards=cards, count=count)

    def post_card(self, info: PatientInformation) -> int:
        """
        Create a card for the given patient.

        Raises:
            NotFoundError: If the referenced medical worker does not exist.
        """
        self.worker_repo.get_by_id(info.card.med_worker_id)
        return self.card_repo.add(info)

    def get_card_by_id(self, card_id: int) -> PatientInformation:
        return self.card_repo.get_by_id(card_id)

    def put_card(self, card: PatientCard) -> None:
        self.card_repo.update(card)

    def delete_card(self, card_id: int) -> None:
        self.card_repo.delete(card_id)
