"""Vendor creation pipeline.

Runs one submitted vendor creation to a terminal state:

1. Load the processing record (missing record -> ProcessingNotFoundError)
2. PENDING → RUNNING, committed
3. Business rules: branch active, document and email not yet registered
4. Document check digits for the contract type's document kind
5. Build the vendor and allocate its registration code
6. Stage the vendor
7. RUNNING → CONCLUDED, committed together with the vendor

A failure anywhere in steps 3-7 rolls back the staged work and commits
RUNNING → ERROR with a readable message instead. The outcome is only
observable through the processing record; execute() returns None. If the
RUNNING write itself fails the record stays PENDING and the failure is only
logged.
"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from domain.processing import ProcessingStateMachine, StateTransitionError
from domain.vendors.contract_type import ContractType
from domain.vendors.document_validator import document_error, only_digits
from domain.vendors.errors import (
    CreationFailure,
    ErrorKind,
    ProcessingNotFoundError,
    VendorCreationError,
    VendorValidationError,
)
from domain.vendors.ports import (
    BranchDirectoryPort,
    ProcessingStorePort,
    SequenceAllocatorPort,
    VendorStorePort,
)
from domain.vendors.registration import format_registration_code
from domain.vendors.schemas import CreateVendorRequest
from infrastructure.branches import get_branch_directory
from infrastructure.repositories import ProcessingRepository, VendorRepository
from infrastructure.sequence import build_sequence_allocator
from models.vendor import Vendor
from models.vendor_processing import VendorProcessing
from observability.metrics import (
    registration_numbers_allocated_total,
    vendor_creation_duration_seconds,
    vendor_creations_total,
)

logger = logging.getLogger(__name__)


class VendorCreationPipeline:
    """Orchestrates validation, allocation, persistence and state transitions.

    Example:
        pipeline = VendorCreationPipeline(
            processing_store=ProcessingRepository(session),
            vendor_store=VendorRepository(session, allocator),
            branch_directory=get_branch_directory(),
        )
        pipeline.execute(processing_id, request)
    """

    def __init__(
        self,
        processing_store: ProcessingStorePort,
        vendor_store: VendorStorePort,
        branch_directory: BranchDirectoryPort,
    ):
        self.processing_store = processing_store
        self.vendor_store = vendor_store
        self.branch_directory = branch_directory

    def execute(self, processing_id: str, request: CreateVendorRequest) -> None:
        """Process one vendor creation.

        Args:
            processing_id: Id of a PENDING processing record
            request: Validated creation request

        Raises:
            ProcessingNotFoundError: No record with this id exists (the only
                failure that escapes; there is nothing to record it against)
        """
        record = self.processing_store.find_by_id(processing_id)
        if record is None:
            raise ProcessingNotFoundError(processing_id)

        machine = ProcessingStateMachine(record)
        if machine.is_terminal:
            logger.info(f"Processing {processing_id} already {machine.status.value}, skipping")
            return

        try:
            machine.mark_running()
        except StateTransitionError as e:
            logger.warning(f"Processing {processing_id} cannot start: {e}")
            return

        try:
            self.processing_store.save(record)
        except VendorCreationError as e:
            # Record stays PENDING; PENDING -> ERROR is not a legal transition
            logger.error(
                f"Could not start processing {processing_id}: {e.message}",
                exc_info=True,
                extra={"error_kind": e.kind.value}
            )
            return

        logger.info(
            f"Creating vendor for processing {processing_id} "
            f"(contract_type={request.contract_type.value}, branch={request.branch_id})"
        )
        started = time.perf_counter()

        try:
            failure = self._check_business_rules(request) or self._check_document(request)
            if failure is None:
                vendor = self._build_vendor(request)
                vendor = self.vendor_store.save(vendor)
                machine.mark_concluded(vendor.id)
                self.processing_store.save(record)

                self._observe(started, record, None)
                logger.info(
                    f"Vendor created: {vendor.id} ({vendor.registration_code})",
                    extra={"vendor_id": vendor.id}
                )
                return
        except VendorCreationError as e:
            failure = e.to_failure()
        except Exception as e:
            logger.error(
                f"Vendor creation failed unexpectedly: processing={processing_id}, error={e}",
                exc_info=True
            )
            failure = CreationFailure(kind=ErrorKind.PERSISTENCE, message=f"Unexpected error: {e}")

        self._record_failure(record, failure)
        self._observe(started, record, failure)

    def _check_business_rules(self, request: CreateVendorRequest) -> Optional[CreationFailure]:
        if not self.branch_directory.is_active(request.branch_id):
            return CreationFailure.validation(f"Branch {request.branch_id} not found or inactive")

        if self.vendor_store.exists_by_document(only_digits(request.document)):
            return CreationFailure.validation("Document already registered")

        if self.vendor_store.exists_by_email(request.email):
            return CreationFailure.validation("Email already registered")

        return None

    def _check_document(self, request: CreateVendorRequest) -> Optional[CreationFailure]:
        reason = document_error(request.document, request.contract_type.document_kind)
        if reason is not None:
            return CreationFailure.validation(f"Invalid document: {reason}")
        return None

    def _build_vendor(self, request: CreateVendorRequest) -> Vendor:
        """Assemble the vendor row, allocating its registration number.

        Raises:
            VendorValidationError: If the branch vanished or the document
                fails the final check-digit guard
        """
        contract_type: ContractType = request.contract_type
        kind = contract_type.document_kind

        branch = self.branch_directory.find_by_id(request.branch_id)
        if branch is None:
            raise VendorValidationError(f"Branch {request.branch_id} not found")

        sequence = self.vendor_store.next_sequence()
        registration_numbers_allocated_total.labels(contract_type=contract_type.value).inc()

        # Final guard: never persist a vendor with bad check digits
        reason = document_error(request.document, kind)
        if reason is not None:
            raise VendorValidationError(f"Invalid document: {reason}")

        now = datetime.now(timezone.utc)
        return Vendor(
            id=str(uuid.uuid4()),
            registration_code=format_registration_code(sequence, contract_type),
            sequence_number=sequence,
            name=request.name,
            birth_date=request.birth_date,
            document=only_digits(request.document),
            document_kind=kind,
            email=request.email,
            contract_type=contract_type,
            branch_id=branch.id,
            created_at=now,
            updated_at=now,
        )

    def _record_failure(self, record: VendorProcessing, failure: CreationFailure) -> None:
        """Roll back staged work and commit RUNNING → ERROR."""
        logger.warning(
            f"Vendor creation rejected: processing={record.id}, "
            f"kind={failure.kind.value}, reason={failure.message}",
            extra={"error_kind": failure.kind.value}
        )
        try:
            self.processing_store.discard_pending()
            ProcessingStateMachine(record).mark_error(failure.message, failure.kind.value)
            self.processing_store.save(record)
        except Exception as e:
            logger.error(
                f"Failed to record ERROR for processing {record.id}: {e}",
                exc_info=True
            )

    @staticmethod
    def _observe(started: float, record: VendorProcessing, failure: Optional[CreationFailure]) -> None:
        status = record.status.value if failure is None else "ERROR"
        error_kind = failure.kind.value if failure else "none"
        vendor_creations_total.labels(status=status, error_kind=error_kind).inc()
        vendor_creation_duration_seconds.labels(status=status).observe(time.perf_counter() - started)


def build_creation_pipeline(
    db: Session,
    branch_directory: Optional[BranchDirectoryPort] = None,
    allocator: Optional[SequenceAllocatorPort] = None,
) -> VendorCreationPipeline:
    """Wire the pipeline to SQLAlchemy repositories sharing one session.

    Args:
        db: Session owning the unit of work
        branch_directory: Defaults to the process-wide cached directory
        allocator: Defaults to the allocator selected by SEQUENCE_BACKEND
    """
    return VendorCreationPipeline(
        processing_store=ProcessingRepository(db),
        vendor_store=VendorRepository(db, allocator or build_sequence_allocator(db)),
        branch_directory=branch_directory or get_branch_directory(),
    )
