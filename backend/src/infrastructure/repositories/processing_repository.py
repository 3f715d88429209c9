"""Processing record repository for database operations"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.vendors.errors import VendorPersistenceError
from domain.vendors.ports import ProcessingStorePort
from models.vendor_processing import VendorProcessing


class ProcessingRepository(ProcessingStorePort):
    """Repository for vendor_processing database operations.

    save() commits the session, so every status transition is durable as
    soon as it is saved, together with anything staged before it.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, processing_id: str) -> Optional[VendorProcessing]:
        return self.db.get(VendorProcessing, processing_id)

    def save(self, record: VendorProcessing) -> VendorProcessing:
        """Commit the record and any staged changes.

        Raises:
            VendorPersistenceError: If the commit fails (the session is rolled back)
        """
        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise VendorPersistenceError(f"Could not save processing {record.id}: {e}") from e
        return record

    def discard_pending(self) -> None:
        """Roll back staged changes; loaded records revert to their committed state."""
        self.db.rollback()
