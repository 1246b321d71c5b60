"""Tests for the MedWorkers gRPC servicer."""

import grpc
import pytest

from handlers.medworker_handler import MedWorkerServicer
from protos import medcard_pb2
from services.medworker_service import MedicalWorkerService
from tests.helpers import AbortError


@pytest.fixture
def servicer(database):
    return MedWorkerServicer(MedicalWorkerService())


def worker_message(**overrides) -> medcard_pb2.MedWorker:
    fields = dict(
        first_name="Anna",
        last_name="Petrova",
        father_name="Sergeevna",
        position="endocrinologist",
        email="a.petrova@clinic.example",
        is_active=True,
    )
    fields.update(overrides)
    return medcard_pb2.MedWorker(**fields)


class TestCreateAndRead:
    """Tests for creating and reading workers."""

    def test_post_then_get(self, servicer, context):
        """Test the returned id fetches the same values."""
        created = servicer.PostMedWorker(medcard_pb2.PostMedWorkerRequest(med_worker=worker_message()), context)
        assert created.id > 0

        fetched = servicer.GetMedWorkerByID(medcard_pb2.GetMedWorkerByIDRequest(id=created.id), context)
        assert fetched.med_worker == worker_message(id=created.id)

    def test_post_ignores_client_id(self, servicer, context):
        """Test the store always assigns the id."""
        created = servicer.PostMedWorker(
            medcard_pb2.PostMedWorkerRequest(med_worker=worker_message(id=900)), context
        )
        assert created.id != 900

    def test_get_missing_is_not_found(self, servicer, context):
        """Test an absent id returns NOT_FOUND."""
        with pytest.raises(AbortError):
            servicer.GetMedWorkerByID(medcard_pb2.GetMedWorkerByIDRequest(id=5), context)
        assert context.code == grpc.StatusCode.NOT_FOUND
        assert context.details == "medical worker 5 not found"

    def test_list(self, servicer, context):
        """Test paging and total count."""
        for name in ("A", "B", "C"):
            servicer.PostMedWorker(medcard_pb2.PostMedWorkerRequest(med_worker=worker_message(first_name=name)), context)

        response = servicer.GetMedWorkers(medcard_pb2.GetMedWorkersRequest(limit=1, offset=1), context)
        assert response.count == 3
        assert [w.first_name for w in response.results] == ["B"]


class TestUpdate:
    """Tests for put and patch."""

    def test_put_replaces_everything(self, servicer, context):
        """Test PutMedWorker overwrites every field."""
        worker_id = servicer.PostMedWorker(
            medcard_pb2.PostMedWorkerRequest(med_worker=worker_message()), context
        ).id
        replacement = medcard_pb2.MedWorker(id=worker_id, first_name="Oleg", position="radiologist")
        servicer.PutMedWorker(medcard_pb2.PutMedWorkerRequest(med_worker=replacement), context)

        fetched = servicer.GetMedWorkerByID(medcard_pb2.GetMedWorkerByIDRequest(id=worker_id), context).med_worker
        assert fetched == replacement

    def test_patch_only_touches_set_fields(self, servicer, context):
        """Test PatchMedWorker writes only fields present on the request."""
        worker_id = servicer.PostMedWorker(
            medcard_pb2.PostMedWorkerRequest(med_worker=worker_message()), context
        ).id
        servicer.PatchMedWorker(medcard_pb2.PatchMedWorkerRequest(id=worker_id, is_active=False), context)

        fetched = servicer.GetMedWorkerByID(medcard_pb2.GetMedWorkerByIDRequest(id=worker_id), context).med_worker
        assert fetched == worker_message(id=worker_id, is_active=False)

    def test_patch_missing_is_not_found(self, servicer, context):
        """Test PatchMedWorker on an absent id returns NOT_FOUND."""
        with pytest.raises(AbortError):
            servicer.PatchMedWorker(medcard_pb2.PatchMedWorkerRequest(id=3, email="x@example.com"), context)
        assert context.code == grpc.StatusCode.NOT_FOUND

    def test_put_missing_is_not_found(self, servicer, context):
        """Test PutMedWorker on an absent id returns NOT_FOUND."""
        with pytest.raises(AbortError):
            servicer.PutMedWorker(medcard_pb2.PutMedWorkerRequest(med_worker=worker_message(id=3)), context)
        assert context.code == grpc.StatusCode.NOT_FOUND


class TestDeleteAndCards:
    """Tests for deleting workers and listing their cards."""

    def test_delete_twice(self, servicer, context):
        """Test the second delete returns NOT_FOUND."""
        worker_id = servicer.PostMedWorker(
            medcard_pb2.PostMedWorkerRequest(med_worker=worker_message()), context
        ).id
        assert isinstance(
            servicer.DeleteMedWorker(medcard_pb2.DeleteMedWorkerRequest(id=worker_id), context),
            medcard_pb2.DeleteMedWorkerResponse,
        )
        with pytest.raises(AbortError):
            servicer.DeleteMedWorker(medcard_pb2.DeleteMedWorkerRequest(id=worker_id), context)
        assert context.code == grpc.StatusCode.NOT_FOUND

    def test_cards_of_worker(self, servicer, context, card_repo, make_information):
        """Test GetMedWorkerCards returns the worker's cards."""
        worker_id = servicer.PostMedWorker(
            medcard_pb2.PostMedWorkerRequest(med_worker=worker_message()), context
        ).id
        card_id = card_repo.add(make_information(worker_id))

        response = servicer.GetMedWorkerCards(medcard_pb2.GetMedWorkerCardsRequest(id=worker_id), context)
        assert [c.id for c in response.results] == [card_id]
        assert response.results[0].med_worker_id == worker_id
        assert response.results[0].appointment_time == "2024-03-14T09:30:00"

    def test_cards_of_missing_worker(self, servicer, context):
        """Test GetMedWorkerCards on an absent worker returns NOT_FOUND."""
        with pytest.raises(AbortError):
            servicer.GetMedWorkerCards(medcard_pb2.GetMedWorkerCardsRequest(id=77), context)
        assert context.code == grpc.StatusCode.NOT_FOUND
