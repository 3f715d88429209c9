"""VendorProcessing model - tracks one asynchronous vendor creation.

Created PENDING by the submission step, then driven by the creation
pipeline through RUNNING to CONCLUDED or ERROR. Callers poll this row.
"""

import enum

from sqlalchemy import Column, Enum as SQLEnum, ForeignKey, Index, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship

from domain.processing.processing_status import ProcessingStatus, TERMINAL_STATUSES
from .base import Base, PortableJSONB, TimestampMixin


class VendorProcessing(TimestampMixin, Base):
    """Processing record for a vendor creation request.

    vendor_id is set only when status is CONCLUDED; error_message and
    error_kind only when status is ERROR.
    """
    __tablename__ = "vendor_processing"
    __table_args__ = (
        Index("ix_vendor_processing_status", "status"),
    )

    id = Column(String(36), primary_key=True)
    status = Column(
        SQLEnum(ProcessingStatus, name="processingstatus"),
        nullable=False,
        default=ProcessingStatus.PENDING
    )
    vendor_id = Column(
        String(36),
        ForeignKey("vendor.id", name="fk_vendor_processing_vendor_id", ondelete="RESTRICT"),
        nullable=True
    )
    request_json = Column(
        PortableJSONB,
        nullable=True,
        comment="Submitted CreateVendorRequest payload"
    )
    error_message = Column(Text, nullable=True)
    error_kind = Column(Text, nullable=True)  # ErrorKind value
    started_at = Column(TIMESTAMP(timezone=True), nullable=True)
    finished_at = Column(TIMESTAMP(timezone=True), nullable=True)

    vendor = relationship("Vendor")

    def __repr__(self):
        return f"<VendorProcessing(id={self.id}, status={self.status}, vendor_id={self.vendor_id})>"

    @property
    def is_complete(self) -> bool:
        """True if status is CONCLUDED or ERROR."""
        return self.status in TERMINAL_STATUSES

    @property
    def duration_ms(self) -> int:
        """Processing duration in milliseconds, or 0 if not finished."""
        if self.started_at and self.finished_at:
            delta = self.finished_at - self.started_at
            return int(delta.total_seconds() * 1000)
        return 0

    def to_dict(self):
        """Polling view of the processing record"""
        return {
            "id": self.id,
            "status": self.status.value if isinstance(self.status, enum.Enum) else self.status,
            "vendor_id": self.vendor_id,
            "error_message": self.error_message,
            "error_kind": self.error_kind,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "duration_ms": self.duration_ms,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
