"""Error taxonomy for vendor creation.

Validation steps report problems as CreationFailure values. Stores raise
the VendorCreationError subclasses below. Both end up at the pipeline's
outer boundary, which turns them into a terminal ERROR on the processing
record. Only ProcessingNotFoundError ever reaches the caller.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a vendor creation failure"""
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    PERSISTENCE = "PERSISTENCE"


@dataclass(frozen=True)
class CreationFailure:
    """A recoverable failure captured into the processing record.

    Attributes:
        kind: Failure category
        message: Human-readable cause stored as the record's error message
    """
    kind: ErrorKind
    message: str

    @classmethod
    def validation(cls, message: str) -> "CreationFailure":
        return cls(kind=ErrorKind.VALIDATION, message=message)


class VendorCreationError(Exception):
    """Base exception for vendor creation."""
    kind = ErrorKind.PERSISTENCE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_failure(self) -> CreationFailure:
        return CreationFailure(kind=self.kind, message=self.message)


class ProcessingNotFoundError(VendorCreationError):
    """Raised when a processing record does not exist.

    There is no record to capture the failure against, so it propagates.
    """
    kind = ErrorKind.NOT_FOUND

    def __init__(self, processing_id: str):
        super().__init__(f"Processing {processing_id} not found")
        self.processing_id = processing_id


class VendorValidationError(VendorCreationError):
    """Raised when a business rule rejects the vendor."""
    kind = ErrorKind.VALIDATION


class DuplicateVendorError(VendorValidationError):
    """Raised when a unique constraint fires while inserting a vendor."""
    pass


class VendorPersistenceError(VendorCreationError):
    """Raised for storage failures other than uniqueness violations."""
    kind = ErrorKind.PERSISTENCE
