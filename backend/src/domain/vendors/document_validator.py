"""CPF / CNPJ checksum validation.

Both document kinds carry two trailing check digits computed with a
weighted modulo-11 sum over the preceding digits:

    remainder = sum(digit * weight) % 11
    check     = 0 if remainder < 2 else 11 - remainder

CPF weights run 10..2 for the first check digit and 11..2 for the second.
CNPJ weights cycle 5,4,3,2,9..2 for the first and 6,5,4,3,2,9..2 for the
second. Input may contain punctuation ("111.444.777-35"); every non-digit
character is dropped before validation.

All functions are pure.
"""

import re
from typing import Optional, Sequence

from .contract_type import DocumentKind

_NON_DIGITS = re.compile(r"\D")

CPF_FIRST_WEIGHTS = tuple(range(10, 1, -1))
CPF_SECOND_WEIGHTS = tuple(range(11, 1, -1))
CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6,) + CNPJ_FIRST_WEIGHTS


def only_digits(raw_document: str) -> str:
    """Strip every non-digit character.

    Example:
        >>> only_digits("111.444.777-35")
        '11144477735'
    """
    return _NON_DIGITS.sub("", raw_document or "")


def _check_digit(digits: str, weights: Sequence[int]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _expected_check_digits(body: str, first_weights, second_weights) -> str:
    first = _check_digit(body, first_weights)
    second = _check_digit(body + str(first), second_weights)
    return f"{first}{second}"


def document_error(raw_document: str, kind: DocumentKind) -> Optional[str]:
    """Explain why a document is invalid for the given kind.

    Args:
        raw_document: Document as typed by the user (punctuation allowed)
        kind: Expected document kind

    Returns:
        Human-readable reason, or None when the document is valid

    Example:
        >>> document_error("11111111111", DocumentKind.CPF)
        'CPF must not consist of a single repeated digit'
        >>> document_error("111.444.777-35", DocumentKind.CPF) is None
        True
    """
    digits = only_digits(raw_document)

    if len(digits) != kind.length:
        return f"{kind.value} must have {kind.length} digits (got {len(digits)})"

    if len(set(digits)) == 1:
        return f"{kind.value} must not consist of a single repeated digit"

    if kind is DocumentKind.CPF:
        expected = _expected_check_digits(digits[:9], CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)
    else:
        expected = _expected_check_digits(digits[:12], CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)

    if digits[-2:] != expected:
        return f"{kind.value} check digits are invalid"

    return None


def is_valid_document(raw_document: str, kind: DocumentKind) -> bool:
    """Check a CPF or CNPJ against its length and check digits."""
    return document_error(raw_document, kind) is None


def is_valid_cpf(raw_document: str) -> bool:
    return is_valid_document(raw_document, DocumentKind.CPF)


def is_valid_cnpj(raw_document: str) -> bool:
    return is_valid_document(raw_document, DocumentKind.CNPJ)
