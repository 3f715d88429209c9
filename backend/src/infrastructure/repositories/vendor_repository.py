"""Vendor repository for database operations"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.vendors.errors import DuplicateVendorError, VendorPersistenceError
from domain.vendors.ports import SequenceAllocatorPort, VendorStorePort
from models.vendor import Vendor

logger = logging.getLogger(__name__)

# Unique constraint fragment -> message. Matches both PostgreSQL constraint
# names (uq_vendor_document) and SQLite column paths (vendor.document).
_DUPLICATE_MESSAGES = (
    ("registration_code", "Registration code already issued"),
    ("sequence_number", "Registration code already issued"),
    ("document", "Document already registered"),
    ("email", "Email already registered"),
)


def _duplicate_message(error: IntegrityError) -> str:
    detail = str(error.orig).lower()
    for fragment, message in _DUPLICATE_MESSAGES:
        if fragment in detail:
            return message
    return "Vendor already registered"


class VendorRepository(VendorStorePort):
    """Repository for vendor database operations.

    save() only flushes: the vendor row becomes durable when the processing
    record is committed as CONCLUDED, in the same transaction.
    """

    def __init__(self, db: Session, allocator: SequenceAllocatorPort):
        """Initialize repository.

        Args:
            db: SQLAlchemy database session
            allocator: Source of registration sequence numbers
        """
        self.db = db
        self.allocator = allocator

    def exists_by_document(self, document: str) -> bool:
        return self.db.execute(
            select(exists().where(Vendor.document == document))
        ).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.db.execute(
            select(exists().where(Vendor.email == email))
        ).scalar()

    def next_sequence(self) -> int:
        return self.allocator.next()

    def save(self, vendor: Vendor) -> Vendor:
        """Stage vendor and flush so constraint violations surface here.

        Raises:
            DuplicateVendorError: A unique constraint rejected the row
            VendorPersistenceError: Any other database failure
        """
        try:
            self.db.add(vendor)
            self.db.flush()
        except IntegrityError as e:
            message = _duplicate_message(e)
            logger.warning(f"Vendor insert rejected by unique constraint: {message}")
            raise DuplicateVendorError(message) from e
        except SQLAlchemyError as e:
            raise VendorPersistenceError(f"Could not save vendor: {e}") from e
        return vendor
