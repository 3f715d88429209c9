"""Vendor creation worker - Celery task running the creation pipeline.

Each submission is processed by an independent task with its own database
session. The task never retries: the processing record carries the final
outcome (CONCLUDED or ERROR).
"""

import logging
from typing import Any, Dict

from celery import shared_task
from pydantic import ValidationError

from database import SessionLocal
from domain.vendors.schemas import CreateVendorRequest
from models.vendor_processing import VendorProcessing
from observability.correlation import set_processing_id
from vendors.pipeline import build_creation_pipeline

logger = logging.getLogger(__name__)


@shared_task(name="vendors.create_vendor", bind=True)
def create_vendor_task(
    self,
    processing_id: str,
    request: Dict[str, Any],
) -> Dict[str, Any]:
    """Create a vendor for a PENDING processing record (background task).

    Args:
        processing_id: Id of the processing record created at submission
        request: CreateVendorRequest payload (JSON-serializable dict)

    Returns:
        Dict with the outcome:
        - processing_id: Processing record id
        - status: CONCLUDED or ERROR
        - vendor_id: Created vendor id (if CONCLUDED)
        - error: Error message (if ERROR)

    Raises:
        ProcessingNotFoundError: If the processing record does not exist
        ValidationError: If the payload is not a valid CreateVendorRequest
            (logged with the processing id; the record stays PENDING)

    Example:
        create_vendor_task.delay(
            processing_id=record.id,
            request=request.model_dump(mode="json"),
        )
    """
    set_processing_id(processing_id)
    session = SessionLocal()

    try:
        try:
            vendor_request = CreateVendorRequest.model_validate(request)
        except ValidationError as e:
            # Record stays PENDING; nothing ran that could move it
            logger.error(
                f"Invalid creation payload for processing {processing_id}: {e}",
                exc_info=True
            )
            raise

        pipeline = build_creation_pipeline(session)
        pipeline.execute(processing_id, vendor_request)

        record = session.get(VendorProcessing, processing_id)
        return {
            "processing_id": processing_id,
            "status": record.status.value,
            "vendor_id": record.vendor_id,
            "error": record.error_message,
        }

    finally:
        session.close()
        set_processing_id(None)
