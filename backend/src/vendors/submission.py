"""Submission and polling of asynchronous vendor creations.

submit_vendor_creation records a PENDING processing row and hands the work
to the Celery worker; callers then poll get_processing() until the record
reaches CONCLUDED or ERROR.
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from sqlalchemy.orm import Session

from domain.processing import ProcessingStatus
from domain.vendors.errors import ProcessingNotFoundError
from domain.vendors.schemas import CreateVendorRequest
from models.vendor_processing import VendorProcessing

logger = logging.getLogger(__name__)

Dispatcher = Callable[[str, Dict[str, Any]], Any]


def _enqueue_creation_task(processing_id: str, payload: Dict[str, Any]) -> Any:
    from workers.celery_app import celery_app

    return celery_app.send_task(
        "vendors.create_vendor",
        kwargs={"processing_id": processing_id, "request": payload},
    )


def submit_vendor_creation(
    db: Session,
    request: CreateVendorRequest,
    dispatch: Optional[Dispatcher] = None,
) -> VendorProcessing:
    """Record a PENDING processing entry and dispatch the creation task.

    The record is committed before dispatch so the worker always finds it.

    Args:
        db: Database session
        request: Validated creation request
        dispatch: Callable(processing_id, payload); defaults to enqueueing
            the Celery task vendors.create_vendor

    Returns:
        The PENDING VendorProcessing record (poll it by id)
    """
    payload = request.model_dump(mode="json")
    record = VendorProcessing(
        id=str(uuid.uuid4()),
        status=ProcessingStatus.PENDING,
        request_json=payload,
    )
    db.add(record)
    db.commit()

    logger.info(f"Vendor creation submitted: processing={record.id}")

    (dispatch or _enqueue_creation_task)(record.id, payload)
    return record


def get_processing(db: Session, processing_id: str) -> VendorProcessing:
    """Load a processing record for polling.

    Raises:
        ProcessingNotFoundError: If no record has this id
    """
    record = db.get(VendorProcessing, processing_id)
    if record is None:
        raise ProcessingNotFoundError(processing_id)
    return record
