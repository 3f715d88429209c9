"""Lifecycle operations on a single processing record.

ProcessingStateMachine mutates the record in memory only; the caller
persists after every transition (one write on entering RUNNING, one on
reaching a terminal state).
"""

from datetime import datetime, timezone
from typing import Optional

from .processing_status import (
    ProcessingStatus,
    is_terminal,
    validate_transition,
)


class ProcessingStateMachine:
    """Drives a VendorProcessing record through PENDING → RUNNING → CONCLUDED | ERROR.

    Usage:
        machine = ProcessingStateMachine(record)
        machine.mark_running()
        store.save(record)
        ...
        machine.mark_concluded(vendor.id)
        store.save(record)
    """

    def __init__(self, record):
        self.record = record

    @property
    def status(self) -> ProcessingStatus:
        return ProcessingStatus(self.record.status)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    def mark_running(self) -> None:
        """PENDING → RUNNING.

        Raises:
            StateTransitionError: If the record is not PENDING
        """
        self._transition(ProcessingStatus.RUNNING)
        self.record.started_at = datetime.now(timezone.utc)

    def mark_concluded(self, vendor_id: str) -> None:
        """RUNNING → CONCLUDED, referencing the created vendor.

        Raises:
            StateTransitionError: If the record is not RUNNING
        """
        self._transition(ProcessingStatus.CONCLUDED)
        self.record.vendor_id = vendor_id
        self.record.error_message = None
        self.record.error_kind = None
        self.record.finished_at = datetime.now(timezone.utc)

    def mark_error(self, message: str, kind: Optional[str] = None) -> None:
        """RUNNING → ERROR, capturing a human-readable cause.

        Raises:
            StateTransitionError: If the record is not RUNNING
        """
        self._transition(ProcessingStatus.ERROR)
        self.record.vendor_id = None
        self.record.error_message = message
        self.record.error_kind = kind
        self.record.finished_at = datetime.now(timezone.utc)

    def _transition(self, new_status: ProcessingStatus) -> None:
        validate_transition(self.status, new_status)
        self.record.status = new_status
