"""Vendor SQLAlchemy model

A vendor is a sales representative in the roster. Rows are written once by
the creation pipeline and never modified afterwards except updated_at.
"""

import enum

from sqlalchemy import BigInteger, Column, Date, Enum as SQLEnum, Index, String, Text, UniqueConstraint

from domain.vendors.contract_type import ContractType, DocumentKind
from .base import Base, TimestampMixin


class Vendor(TimestampMixin, Base):
    """Vendor model.

    Document and email are unique across the whole roster; the database
    constraints are the source of truth, the pipeline's pre-checks only
    give nicer error messages. registration_code and sequence_number are
    unique as well so a duplicated allocation can never be persisted.
    """
    __tablename__ = "vendor"
    __table_args__ = (
        UniqueConstraint("document", name="uq_vendor_document"),
        UniqueConstraint("email", name="uq_vendor_email"),
        UniqueConstraint("registration_code", name="uq_vendor_registration_code"),
        UniqueConstraint("sequence_number", name="uq_vendor_sequence_number"),
        Index("ix_vendor_branch_id", "branch_id"),
    )

    id = Column(String(36), primary_key=True)
    registration_code = Column(Text, nullable=False)  # matricula, e.g. 00000001-CLT
    sequence_number = Column(BigInteger, nullable=False)
    name = Column(Text, nullable=False)
    birth_date = Column(Date, nullable=True)
    document = Column(Text, nullable=False)  # digits only
    document_kind = Column(SQLEnum(DocumentKind, name="documentkind"), nullable=False)
    email = Column(Text, nullable=False)  # lowercased
    contract_type = Column(SQLEnum(ContractType, name="contracttype"), nullable=False)
    branch_id = Column(Text, nullable=False)

    @property
    def is_corporate(self) -> bool:
        return self.document_kind == DocumentKind.CNPJ

    def __repr__(self):
        return (
            f"<Vendor(id={self.id}, registration_code='{self.registration_code}', "
            f"branch_id='{self.branch_id}')>"
        )

    def to_dict(self):
        """Convert vendor to dictionary representation"""
        return {
            "id": self.id,
            "registration_code": self.registration_code,
            "name": self.name,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "document": self.document,
            "document_kind": self.document_kind.value if isinstance(self.document_kind, enum.Enum) else self.document_kind,
            "email": self.email,
            "contract_type": self.contract_type.value if isinstance(self.contract_type, enum.Enum) else self.contract_type,
            "branch_id": self.branch_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
