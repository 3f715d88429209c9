"""Registration sequence allocation"""

from .allocator import (
    DatabaseSequenceAllocator,
    InMemorySequenceAllocator,
    build_sequence_allocator,
    ensure_registration_sequence,
    get_process_allocator,
    reset_process_allocator,
)

__all__ = [
    "DatabaseSequenceAllocator",
    "InMemorySequenceAllocator",
    "build_sequence_allocator",
    "ensure_registration_sequence",
    "get_process_allocator",
    "reset_process_allocator",
]
