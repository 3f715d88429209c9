"""Vendors domain module - contract types, document validation, registration codes, ports"""

from .contract_type import ContractType, DocumentKind
from .document_validator import (
    document_error,
    is_valid_document,
    is_valid_cpf,
    is_valid_cnpj,
    only_digits,
)
from .errors import (
    CreationFailure,
    DuplicateVendorError,
    ErrorKind,
    ProcessingNotFoundError,
    VendorCreationError,
    VendorPersistenceError,
    VendorValidationError,
)
from .ports import (
    Branch,
    BranchDirectoryPort,
    ProcessingStorePort,
    SequenceAllocatorPort,
    VendorStorePort,
)
from .registration import format_registration_code
from .schemas import CreateVendorRequest

__all__ = [
    "ContractType",
    "DocumentKind",
    "document_error",
    "is_valid_document",
    "is_valid_cpf",
    "is_valid_cnpj",
    "only_digits",
    "CreationFailure",
    "DuplicateVendorError",
    "ErrorKind",
    "ProcessingNotFoundError",
    "VendorCreationError",
    "VendorPersistenceError",
    "VendorValidationError",
    "Branch",
    "BranchDirectoryPort",
    "ProcessingStorePort",
    "SequenceAllocatorPort",
    "VendorStorePort",
    "format_registration_code",
    "CreateVendorRequest",
]
