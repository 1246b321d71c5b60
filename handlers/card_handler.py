"""
handlers/card_handler.py
------------------------
gRPC servicer for the MedCard service (patient card management).
"""

from typing import Optional

import grpc

from handlers.errors import translate_errors
from models.card import PatientCard, PatientInformation
from models.patient import Patient
from protos import medcard_pb2, medcard_pb2_grpc
from services.card_service import CardService


def patient_to_message(patient: Patient) -> medcard_pb2.Patient:
    return medcard_pb2.Patient(
        id=patient.id or 0,
        first_name=patient.first_name,
        last_name=patient.last_name,
        father_name=patient.father_name,
        medical_policy=patient.medical_policy,
        email=patient.email,
        is_active=patient.is_active,
    )


def card_to_message(card: PatientCard, patient: Optional[Patient] = None) -> medcard_pb2.Card:
    message = medcard_pb2.Card(
        id=card.id or 0,
        appointment_time=card.appointment_time.isoformat() if card.appointment_time else "",
        has_nodules=card.has_nodules,
        diagnosis=card.diagnosis,
        med_worker_id=card.med_worker_id,
        patient_id=card.patient_id,
    )
    if patient is not None:
        message.patient.CopyFrom(patient_to_message(patient))
    return message


class CardServicer(medcard_pb2_grpc.MedCardServicer):
    """Maps each MedCard RPC onto one CardService call."""

    def __init__(self, card_service: Optional[CardService] = None):
        self.card_service = card_service or CardService()

    @translate_errors("Failed to fetch cards")
    def GetCards(self, request, context):
        card_list = self.card_service.get_cards(int(request.limit), int(request.offset))
        return medcard_pb2.GetCardsResponse(
            count=card_list.count,
            results=[card_to_message(info.card, info.patient) for info in card_list.cards],
        )

    @translate_errors("Failed to create card", not_found_code=grpc.StatusCode.INTERNAL)
    def PostCard(self, request, context):
        patient = request.patient
        info = PatientInformation(
            patient=Patient(
                id=patient.id or None,
                first_name=patient.first_name,
                last_name=patient.last_name,
                father_name=patient.father_name,
                medical_policy=patient.medical_policy,
                email=patient.email,
                is_active=patient.is_active,
            ),
            card=PatientCard(
                has_nodules=request.has_nodules,
                diagnosis=request.diagnosis,
                patient_id=patient.id,
                med_worker_id=request.medworker_id,
            ),
        )
        self.card_service.post_card(info)
        return medcard_pb2.PostCardResponse()

    @translate_errors("Failed to fetch card")
    def GetCardByID(self, request, context):
        info = self.card_service.get_card_by_id(request.id)
        return medcard_pb2.GetCardByIDResponse(card=card_to_message(info.card, info.patient))

    @translate_errors("Failed to update card")
    def PutCard(self, request, context):
        card = PatientCard(
            id=request.id,
            has_nodules=request.has_nodules,
            diagnosis=request.diagnosis,
            patient_id=request.patient_id,
            med_worker_id=request.medworker_id,
        )
        self.card_service.put_card(card)
        return medcard_pb2.PutCardResponse()

    @translate_errors("Failed to delete card")
    def DeleteCard(self, request, context):
        self.card_service.delete_card(request.id)
        return medcard_pb2.DeleteCardResponse()
