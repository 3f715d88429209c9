"""Registration sequence allocators.

Two implementations of SequenceAllocatorPort, both performing a single
atomic read-modify-write per allocation:

- InMemorySequenceAllocator: lock-serialized counter for a single process
  (one worker process, or tests). Seeded from the highest sequence already
  persisted so restarts never reissue a number.
- DatabaseSequenceAllocator: one ``UPDATE vendor_sequence SET value =
  value + 1 ... RETURNING value`` in the caller's transaction. The row lock
  serializes concurrent workers across processes; if the creation rolls
  back, the increment rolls back with it.
"""

import logging
import threading
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import get_settings
from domain.vendors.errors import VendorPersistenceError
from domain.vendors.ports import SequenceAllocatorPort
from models.vendor import Vendor
from models.vendor_sequence import VendorSequence, REGISTRATION_SEQUENCE

logger = logging.getLogger(__name__)


class InMemorySequenceAllocator(SequenceAllocatorPort):
    """Process-wide counter guarded by a lock.

    Example:
        allocator = InMemorySequenceAllocator()
        allocator.next()  # 1
        allocator.next()  # 2
    """

    def __init__(self, start: int = 0):
        """Initialize counter.

        Args:
            start: Last value already issued; the first next() returns start + 1
        """
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


class DatabaseSequenceAllocator(SequenceAllocatorPort):
    """Counter row advanced atomically inside the caller's session."""

    def __init__(self, db: Session, name: str = REGISTRATION_SEQUENCE):
        self.db = db
        self.name = name

    def next(self) -> int:
        """Increment and return the counter in one statement.

        Raises:
            VendorPersistenceError: If the counter row is missing or the
                database rejects the update
        """
        stmt = (
            update(VendorSequence)
            .where(VendorSequence.name == self.name)
            .values(value=VendorSequence.value + 1)
            .returning(VendorSequence.value)
            .execution_options(synchronize_session=False)
        )
        try:
            value = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise VendorPersistenceError(f"Could not allocate registration number: {e}") from e

        if value is None:
            raise VendorPersistenceError(
                f"Registration sequence '{self.name}' is not initialized"
            )
        return int(value)


def ensure_registration_sequence(db: Session, name: str = REGISTRATION_SEQUENCE) -> VendorSequence:
    """Create the counter row if missing, starting after the highest persisted vendor.

    Call once at startup (or from a migration); it is not safe to race.
    """
    row = db.get(VendorSequence, name)
    if row is None:
        highest = db.execute(select(func.max(Vendor.sequence_number))).scalar() or 0
        row = VendorSequence(name=name, value=highest)
        db.add(row)
        db.commit()
        logger.info(f"Initialized registration sequence '{name}' at {highest}")
    return row


_process_allocator: Optional[InMemorySequenceAllocator] = None
_process_allocator_lock = threading.Lock()


def get_process_allocator(db: Session) -> InMemorySequenceAllocator:
    """Return the process-wide in-memory allocator, seeding it on first use."""
    global _process_allocator
    with _process_allocator_lock:
        if _process_allocator is None:
            highest = db.execute(select(func.max(Vendor.sequence_number))).scalar() or 0
            _process_allocator = InMemorySequenceAllocator(start=highest)
            logger.warning(
                f"Seeded in-memory registration sequence at {highest}. Numbers are unique "
                f"only within this process: run the worker with --pool=solo or "
                f"--concurrency=1, or use SEQUENCE_BACKEND=database"
            )
        return _process_allocator


def reset_process_allocator() -> None:
    """Forget the process-wide allocator (tests, or after restoring a database)."""
    global _process_allocator
    with _process_allocator_lock:
        _process_allocator = None


def build_sequence_allocator(db: Session, backend: Optional[str] = None) -> SequenceAllocatorPort:
    """Pick the allocator configured by SEQUENCE_BACKEND.

    Args:
        db: Session of the unit of work that will persist the vendor
        backend: "database" or "memory"; defaults to settings

    Raises:
        ValueError: On an unknown backend name
    """
    backend = backend or get_settings().SEQUENCE_BACKEND
    if backend == "database":
        return DatabaseSequenceAllocator(db)
    if backend == "memory":
        return get_process_allocator(db)
    raise ValueError(f"Unknown SEQUENCE_BACKEND '{backend}' (expected 'database' or 'memory')")
