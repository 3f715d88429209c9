"""Pytest fixtures for vendor roster testing.

Provides reusable test fixtures for:
- SQLite database session with per-test schema create/drop
- Seeded registration counter row
- In-memory branch directory
- Creation requests and PENDING processing records

Usage:
    def test_creates_vendor(db_session, pipeline, pending_processing, make_request):
        record = pending_processing()
        pipeline.execute(record.id, make_request())
"""

import os
import sys
import tempfile
import uuid
from pathlib import Path
from typing import Generator

# Set environment variables BEFORE any imports to ensure they take effect.
# A file-based SQLite database lets worker sessions and test threads share data.
_test_db_dir = tempfile.mkdtemp(prefix="roster-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_test_db_dir) / 'roster.db'}"
os.environ.setdefault("SEQUENCE_BACKEND", "database")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from sqlalchemy.orm import Session

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from config import get_settings
from database import SessionLocal, engine
from domain.processing import ProcessingStatus
from domain.vendors import ContractType, CreateVendorRequest
from infrastructure.branches import InMemoryBranchDirectory, get_branch_directory
from infrastructure.sequence import ensure_registration_sequence, reset_process_allocator
from models import Base, VendorProcessing
from observability.correlation import set_processing_id
from vendors.pipeline import build_creation_pipeline

VALID_CPF = "11144477735"


@pytest.fixture(scope="function", autouse=True)
def reset_process_state():
    """Reset process-wide singletons before and after each test."""
    get_settings.cache_clear()
    get_branch_directory.cache_clear()
    reset_process_allocator()
    set_processing_id(None)
    yield
    get_branch_directory.cache_clear()
    reset_process_allocator()
    set_processing_id(None)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables and the registration counter row before the test
    and drops everything after. Each test gets a clean database state.
    """
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    ensure_registration_sequence(session)

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def branch_directory() -> InMemoryBranchDirectory:
    """Reference branches: 1-3 active, 4 inactive."""
    return InMemoryBranchDirectory()


@pytest.fixture
def make_request():
    """Factory for CreateVendorRequest with valid CLT defaults."""
    def _make(**overrides) -> CreateVendorRequest:
        data = {
            "name": "Joao Silva",
            "document": VALID_CPF,
            "email": "joao.silva@acme.com.br",
            "contract_type": ContractType.CLT,
            "branch_id": "1",
        }
        data.update(overrides)
        return CreateVendorRequest(**data)

    return _make


@pytest.fixture
def pending_processing(db_session: Session):
    """Factory committing a PENDING processing record."""
    def _create() -> VendorProcessing:
        record = VendorProcessing(
            id=str(uuid.uuid4()),
            status=ProcessingStatus.PENDING,
        )
        db_session.add(record)
        db_session.commit()
        return record

    return _create


@pytest.fixture
def pipeline(db_session: Session, branch_directory: InMemoryBranchDirectory):
    """Creation pipeline over SQLAlchemy repositories and the database counter."""
    return build_creation_pipeline(db_session, branch_directory=branch_directory)
