"""Contract types and the document kind each one requires."""

from enum import Enum


class DocumentKind(str, Enum):
    """National tax-id kinds accepted for vendors"""
    CPF = "CPF"    # Individual, 11 digits
    CNPJ = "CNPJ"  # Corporate, 14 digits

    @property
    def length(self) -> int:
        return 11 if self is DocumentKind.CPF else 14


class ContractType(str, Enum):
    """How a vendor is hired.

    Each contract type fixes the document kind the vendor must present and
    the suffix appended to the registration code. The suffix is cosmetic:
    all contract types share a single numeric sequence.
    """
    CLT = "CLT"
    PESSOA_JURIDICA = "PESSOA_JURIDICA"
    OUTSOURCING = "OUTSOURCING"

    @property
    def document_kind(self) -> DocumentKind:
        return _DOCUMENT_KINDS[self]

    @property
    def registration_suffix(self) -> str:
        return _SUFFIXES[self]

    @property
    def is_corporate(self) -> bool:
        return self.document_kind is DocumentKind.CNPJ


_DOCUMENT_KINDS = {
    ContractType.CLT: DocumentKind.CPF,
    ContractType.PESSOA_JURIDICA: DocumentKind.CNPJ,
    ContractType.OUTSOURCING: DocumentKind.CPF,
}

_SUFFIXES = {
    ContractType.CLT: "CLT",
    ContractType.PESSOA_JURIDICA: "PJ",
    ContractType.OUTSOURCING: "OUT",
}
