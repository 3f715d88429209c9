"""Processing ID correlation for log records.

The worker sets the processing id of the task it is running; every log
line emitted while handling that task carries it.
"""

from contextvars import ContextVar
from typing import Optional

# Context variable for processing_id (async-safe)
processing_id_var: ContextVar[Optional[str]] = ContextVar("processing_id", default=None)


def get_processing_id() -> str:
    """Get current processing ID from context.

    Returns:
        str: Current processing ID or "no-processing-id" if not set
    """
    return processing_id_var.get() or "no-processing-id"


def set_processing_id(processing_id: Optional[str]) -> None:
    """Set processing ID in current context (None clears it)."""
    processing_id_var.set(processing_id)
