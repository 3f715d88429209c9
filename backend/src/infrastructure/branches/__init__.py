"""Branch directory adapters"""

from functools import lru_cache

from config import get_settings
from .cached_directory import CachedBranchDirectory
from .in_memory_directory import DEFAULT_BRANCHES, InMemoryBranchDirectory


@lru_cache()
def get_branch_directory() -> CachedBranchDirectory:
    """Process-wide cached branch directory.

    Call get_branch_directory.cache_clear() to rebuild it.
    """
    settings = get_settings()
    return CachedBranchDirectory(
        InMemoryBranchDirectory(),
        ttl_seconds=settings.BRANCH_CACHE_TTL_SECONDS,
        max_entries=settings.BRANCH_CACHE_MAX_ENTRIES,
    )


__all__ = [
    "CachedBranchDirectory",
    "DEFAULT_BRANCHES",
    "InMemoryBranchDirectory",
    "get_branch_directory",
]
