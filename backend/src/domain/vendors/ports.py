"""Port interfaces consumed by the vendor creation pipeline (hexagonal architecture).

The pipeline depends only on these ports. SQLAlchemy repositories, the
in-memory branch directory and the sequence allocators are the adapters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from models.vendor import Vendor
    from models.vendor_processing import VendorProcessing


@dataclass(frozen=True)
class Branch:
    """An organizational location vendors are attached to.

    Owned by an external registry; read-only here.
    """
    id: str
    name: str
    cnpj: str
    city: str
    state: str
    kind: str
    active: bool
    registered_at: datetime
    updated_at: Optional[datetime] = None


class BranchDirectoryPort(ABC):
    """Read-only lookup of branches."""

    @abstractmethod
    def find_by_id(self, branch_id: str) -> Optional[Branch]:
        """Return the branch, or None if unknown."""
        pass

    @abstractmethod
    def list_active(self) -> list[Branch]:
        """Return every active branch."""
        pass

    def is_active(self, branch_id: str) -> bool:
        """True only for a known branch with its active flag set."""
        branch = self.find_by_id(branch_id)
        return branch is not None and branch.active


class SequenceAllocatorPort(ABC):
    """Issues registration sequence numbers.

    Implementations MUST perform a single atomic read-modify-write: under N
    concurrent calls, all N returned values are pairwise distinct and each
    is greater than every value returned before it.
    """

    @abstractmethod
    def next(self) -> int:
        """Allocate the next sequence number (positive, strictly increasing)."""
        pass


class VendorStorePort(ABC):
    """Persistence of vendors."""

    @abstractmethod
    def exists_by_document(self, document: str) -> bool:
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    def next_sequence(self) -> int:
        """Allocate the next registration sequence number."""
        pass

    @abstractmethod
    def save(self, vendor: "Vendor") -> "Vendor":
        """Stage the vendor in the current unit of work.

        Raises:
            DuplicateVendorError: If document, email or registration code is taken
            VendorPersistenceError: On any other storage failure
        """
        pass


class ProcessingStorePort(ABC):
    """Persistence of processing records."""

    @abstractmethod
    def find_by_id(self, processing_id: str) -> Optional["VendorProcessing"]:
        pass

    @abstractmethod
    def save(self, record: "VendorProcessing") -> "VendorProcessing":
        """Durably write the record together with any staged changes."""
        pass

    @abstractmethod
    def discard_pending(self) -> None:
        """Drop staged, uncommitted changes (the vendor insert of a failed run)."""
        pass
