"""Processing domain module - lifecycle of asynchronous vendor creation"""

from .processing_status import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    ProcessingStatus,
    StateTransitionError,
    can_transition,
    get_allowed_transitions,
    is_terminal,
    validate_transition,
)
from .state_machine import ProcessingStateMachine

__all__ = [
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "ProcessingStatus",
    "StateTransitionError",
    "can_transition",
    "get_allowed_transitions",
    "is_terminal",
    "validate_transition",
    "ProcessingStateMachine",
]
