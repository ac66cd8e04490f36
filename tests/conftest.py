"""Shared test fixtures for all test modules."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tests.models import Base, Child, Parent

# In-memory SQLite engine with StaticPool so every connection sees the same
# database.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)

# Mixed-case values: binary ordering puts "Banana" first, case-insensitive
# ordering puts "apple" first.
PARENT_VALUES = ["cherry", "Banana", "apple", "Date"]


@pytest.fixture
def db_session():
    """Create tables, seed parents with one child each, drop all tables afterwards."""
    Base.metadata.create_all(bind=_test_engine)
    session = _TestSessionLocal()
    try:
        for value in PARENT_VALUES:
            session.add(Parent(field_1=value, children=[Child(name=f"{value}-child")]))
        session.commit()
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=_test_engine)
