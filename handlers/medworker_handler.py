"""
handlers/medworker_handler.py
-----------------------------
gRPC servicer for the MedWorkers service (medical staff records).
"""

from typing import Optional

from handlers.card_handler import card_to_message
from handlers.errors import translate_errors
from models.medworker import MedicalWorker
from protos import medcard_pb2, medcard_pb2_grpc
from repositories.mapper import MED_WORKER_FIELDS
from services.medworker_service import MedicalWorkerService


def med_worker_to_message(worker: MedicalWorker) -> medcard_pb2.MedWorker:
    return medcard_pb2.MedWorker(
        id=worker.id or 0,
        **{name: getattr(worker, name) for name in MED_WORKER_FIELDS},
    )


def med_worker_from_message(message) -> MedicalWorker:
    return MedicalWorker(
        id=message.id or None,
        **{name: getattr(message, name) for name in MED_WORKER_FIELDS},
    )


class MedWorkerServicer(medcard_pb2_grpc.MedWorkersServicer):
    """Maps each MedWorkers RPC onto one MedicalWorkerService call."""

    def __init__(self, worker_service: Optional[MedicalWorkerService] = None):
        self.worker_service = worker_service or MedicalWorkerService()

    @translate_errors("Failed to fetch medical workers")
    def GetMedWorkers(self, request, context):
        workers, count = self.worker_service.list_med_workers(int(request.limit), int(request.offset))
        return medcard_pb2.GetMedWorkersResponse(
            count=count,
            results=[med_worker_to_message(w) for w in workers],
        )

    @translate_errors("Failed to fetch medical worker")
    def GetMedWorkerByID(self, request, context):
        worker = self.worker_service.get_med_worker(request.id)
        return medcard_pb2.GetMedWorkerByIDResponse(med_worker=med_worker_to_message(worker))

    @translate_errors("Failed to create medical worker")
    def PostMedWorker(self, request, context):
        # Ids are always generated by the store
        worker = med_worker_from_message(request.med_worker)
        worker.id = None
        worker_id = self.worker_service.add_med_worker(worker)
        return medcard_pb2.PostMedWorkerResponse(id=worker_id)

    @translate_errors("Failed to update medical worker")
    def PutMedWorker(self, request, context):
        worker = med_worker_from_message(request.med_worker)
        self.worker_service.update_med_worker(worker)
        return medcard_pb2.PutMedWorkerResponse()

    @translate_errors("Failed to update medical worker")
    def PatchMedWorker(self, request, context):
        changes = {name: getattr(request, name) for name in MED_WORKER_FIELDS if request.HasField(name)}
        self.worker_service.patch_med_worker(request.id, changes)
        return medcard_pb2.PatchMedWorkerResponse()

    @translate_errors("Failed to delete medical worker")
    def DeleteMedWorker(self, request, context):
        self.worker_service.delete_med_worker(request.id)
        return medcard_pb2.DeleteMedWorkerResponse()

    @translate_errors("Failed to fetch medical worker cards")
    def GetMedWorkerCards(self, request, context):
        cards = self.worker_service.get_med_worker_cards(request.id)
        return medcard_pb2.GetMedWorkerCardsResponse(results=[card_to_message(c) for c in cards])
