"""Observability module for the vendor roster.

Provides structured logging with processing id correlation and metrics.
"""

from .logging_config import configure_logging
from .metrics import (
    registration_numbers_allocated_total,
    vendor_creation_duration_seconds,
    vendor_creations_total,
)
from .correlation import processing_id_var, get_processing_id, set_processing_id

__all__ = [
    # Logging
    "configure_logging",
    # Metrics
    "registration_numbers_allocated_total",
    "vendor_creation_duration_seconds",
    "vendor_creations_total",
    # Processing ID
    "processing_id_var",
    "get_processing_id",
    "set_processing_id",
]
