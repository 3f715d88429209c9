"""ProcessingStatus state machine for asynchronous vendor creation.

State Flow:
    PENDING → RUNNING → CONCLUDED | ERROR

Terminal States: CONCLUDED, ERROR (no retry)
"""

from enum import Enum
from typing import Dict, List


class ProcessingStatus(str, Enum):
    """Vendor creation processing status"""
    PENDING = "PENDING"      # Submitted, waiting for a worker
    RUNNING = "RUNNING"      # Pipeline executing
    CONCLUDED = "CONCLUDED"  # Vendor created (terminal success)
    ERROR = "ERROR"          # Creation failed (terminal, message captured)


ALLOWED_TRANSITIONS: Dict[ProcessingStatus, List[ProcessingStatus]] = {
    ProcessingStatus.PENDING: [ProcessingStatus.RUNNING],
    ProcessingStatus.RUNNING: [ProcessingStatus.CONCLUDED, ProcessingStatus.ERROR],
    ProcessingStatus.CONCLUDED: [],  # Terminal state
    ProcessingStatus.ERROR: [],  # Terminal state
}

TERMINAL_STATUSES = frozenset({ProcessingStatus.CONCLUDED, ProcessingStatus.ERROR})


class StateTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


def validate_transition(
    current_status: ProcessingStatus,
    new_status: ProcessingStatus
) -> None:
    """Validate that a state transition is allowed.

    Args:
        current_status: Current processing status
        new_status: Target status to transition to

    Raises:
        StateTransitionError: If transition is not allowed
    """
    allowed = ALLOWED_TRANSITIONS.get(current_status, [])
    if new_status not in allowed:
        raise StateTransitionError(
            f"Invalid transition: {current_status.value} -> {new_status.value}. "
            f"Allowed transitions from {current_status.value}: "
            f"{[s.value for s in allowed]}"
        )


def can_transition(
    current_status: ProcessingStatus,
    new_status: ProcessingStatus
) -> bool:
    """Check if a state transition is allowed without raising exception.

    Example:
        >>> can_transition(ProcessingStatus.PENDING, ProcessingStatus.RUNNING)
        True
        >>> can_transition(ProcessingStatus.ERROR, ProcessingStatus.RUNNING)
        False
    """
    return new_status in ALLOWED_TRANSITIONS.get(current_status, [])


def get_allowed_transitions(status: ProcessingStatus) -> List[ProcessingStatus]:
    """Get list of allowed transitions from a given status."""
    return ALLOWED_TRANSITIONS.get(status, [])


def is_terminal(status: ProcessingStatus) -> bool:
    return status in TERMINAL_STATUSES
