"""SQLAlchemy Models for the vendor roster"""

from .base import Base
from .vendor import Vendor
from .vendor_processing import VendorProcessing
from .vendor_sequence import VendorSequence, REGISTRATION_SEQUENCE

__all__ = [
    "Base",
    "Vendor",
    "VendorProcessing",
    "VendorSequence",
    "REGISTRATION_SEQUENCE",
]
