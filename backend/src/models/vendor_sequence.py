"""VendorSequence model - the shared registration counter row.

A single row (name='vendor_registration') holds the last issued sequence
number. It is only ever advanced with one UPDATE ... RETURNING statement.
"""

from sqlalchemy import BigInteger, Column, Text

from .base import Base

REGISTRATION_SEQUENCE = "vendor_registration"


class VendorSequence(Base):
    """Named monotonic counter."""
    __tablename__ = "vendor_sequence"

    name = Column(Text, primary_key=True)
    value = Column(BigInteger, nullable=False, default=0)

    def __repr__(self):
        return f"<VendorSequence(name='{self.name}', value={self.value})>"
