"""Integration tests for submitting and polling vendor creations"""

from unittest.mock import MagicMock, patch

import pytest

from domain.processing import ProcessingStatus
from domain.vendors import ProcessingNotFoundError
from vendors import get_processing, submit_vendor_creation


class TestSubmitVendorCreation:

    def test_records_pending_and_dispatches(self, db_session, make_request):
        dispatched = []

        record = submit_vendor_creation(
            db_session,
            make_request(birth_date="1988-02-29"),
            dispatch=lambda processing_id, payload: dispatched.append((processing_id, payload)),
        )

        assert record.status == ProcessingStatus.PENDING
        assert dispatched == [(record.id, record.request_json)]

        payload = dispatched[0][1]
        assert payload["contract_type"] == "CLT"
        assert payload["birth_date"] == "1988-02-29"
        assert payload["email"] == "joao.silva@acme.com.br"

    def test_record_committed_before_dispatch(self, db_session, make_request):
        seen = {}

        def dispatch(processing_id, payload):
            db_session.expire_all()
            seen["status"] = get_processing(db_session, processing_id).status

        submit_vendor_creation(db_session, make_request(), dispatch=dispatch)

        assert seen["status"] == ProcessingStatus.PENDING

    def test_default_dispatch_sends_celery_task(self, db_session, make_request):
        fake_app = MagicMock()

        with patch("workers.celery_app.celery_app", fake_app):
            record = submit_vendor_creation(db_session, make_request())

        fake_app.send_task.assert_called_once_with(
            "vendors.create_vendor",
            kwargs={"processing_id": record.id, "request": record.request_json},
        )


class TestGetProcessing:

    def test_polling_view(self, db_session, pipeline, make_request):
        record = submit_vendor_creation(db_session, make_request(), dispatch=lambda *args: None)

        pipeline.execute(record.id, make_request())

        db_session.expire_all()
        polled = get_processing(db_session, record.id)
        assert polled.is_complete is True

        view = polled.to_dict()
        assert view["status"] == "CONCLUDED"
        assert view["vendor_id"] is not None
        assert view["error_message"] is None
        assert view["finished_at"] is not None
        assert view["duration_ms"] >= 0

    def test_unknown_id(self, db_session):
        with pytest.raises(ProcessingNotFoundError) as exc:
            get_processing(db_session, "missing")

        assert str(exc.value) == "Processing missing not found"
