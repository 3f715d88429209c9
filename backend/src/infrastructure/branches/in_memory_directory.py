"""In-memory branch directory.

Stands in for the external branch registry until a real integration exists.
Seeded with the reference branches; branch "4" is inactive.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from domain.vendors.ports import Branch, BranchDirectoryPort

logger = logging.getLogger(__name__)

DEFAULT_BRANCHES = (
    Branch(
        id="1",
        name="Filial São Paulo",
        cnpj="11222333000101",
        city="São Paulo",
        state="SP",
        kind="Matriz",
        active=True,
        registered_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
    ),
    Branch(
        id="2",
        name="Filial Rio de Janeiro",
        cnpj="11222333000202",
        city="Rio de Janeiro",
        state="RJ",
        kind="Filial",
        active=True,
        registered_at=datetime(2020, 6, 15, tzinfo=timezone.utc),
    ),
    Branch(
        id="3",
        name="Filial Belo Horizonte",
        cnpj="11222333000303",
        city="Belo Horizonte",
        state="MG",
        kind="Filial",
        active=True,
        registered_at=datetime(2021, 3, 10, tzinfo=timezone.utc),
    ),
    Branch(
        id="4",
        name="Filial Inativa",
        cnpj="11222333000404",
        city="Salvador",
        state="BA",
        kind="Filial",
        active=False,
        registered_at=datetime(2019, 12, 1, tzinfo=timezone.utc),
    ),
)


class InMemoryBranchDirectory(BranchDirectoryPort):
    """Branch lookup over a fixed list.

    Example:
        directory = InMemoryBranchDirectory()
        directory.is_active("1")  # True
        directory.is_active("4")  # False (inactive)
        directory.is_active("99")  # False (unknown)
    """

    def __init__(self, branches: Optional[Iterable[Branch]] = None):
        source = DEFAULT_BRANCHES if branches is None else branches
        self._branches = {branch.id: branch for branch in source}

    def find_by_id(self, branch_id: str) -> Optional[Branch]:
        logger.debug(f"Looking up branch {branch_id}")
        return self._branches.get(branch_id)

    def list_active(self) -> list[Branch]:
        logger.debug("Listing active branches")
        return [branch for branch in self._branches.values() if branch.active]
