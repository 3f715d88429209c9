"""SQLAlchemy repositories implementing the vendor ports"""

from .processing_repository import ProcessingRepository
from .vendor_repository import VendorRepository

__all__ = ["ProcessingRepository", "VendorRepository"]
