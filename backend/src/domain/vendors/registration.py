"""Registration code ("matricula") formatting.

Format: ``{sequence:08d}-{suffix}``, e.g. ``00000001-CLT``. Sequences past
99,999,999 keep all their digits; the field widens instead of truncating.
"""

from .contract_type import ContractType

SEQUENCE_WIDTH = 8


def format_registration_code(sequence: int, contract_type: ContractType) -> str:
    """Build the registration code for an allocated sequence number.

    Raises:
        ValueError: If sequence is not a positive integer

    Example:
        >>> format_registration_code(1, ContractType.CLT)
        '00000001-CLT'
        >>> format_registration_code(42, ContractType.PESSOA_JURIDICA)
        '00000042-PJ'
    """
    if sequence < 1:
        raise ValueError(f"Registration sequence must be positive, got {sequence}")
    return f"{sequence:0{SEQUENCE_WIDTH}d}-{contract_type.registration_suffix}"
