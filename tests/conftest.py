"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- A fixed set of companies and jobs
"""

import os

# Point the application engine at SQLite before jobly is imported
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, execute, init_db


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves REFERENCES and ON DELETE CASCADE unenforced unless asked"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

COMPANIES = [
    ("acme", "Acme Inc", "Anvils and rockets", 25, "http://acme.example/logo.png"),
    ("globex", "Globex Incorporated", "Everything, everywhere", 60, None),
    ("hooli", "Hooli", "Search and compression", 30, None),
    ("inctech", "IncTech Labs", "Applied research", 10, None),
    ("umbrella", "Umbrella Inc", "Pharmaceuticals", 5, None),
]

JOBS = [
    ("Data Engineer", 100000, "0.05", "acme"),
    ("Backend Developer", 120000, "0", "hooli"),
    ("Staff Engineer", 150000, None, "inctech"),
]


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    init_db(engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db_session):
    """Session on a database holding COMPANIES and JOBS"""
    for company in COMPANIES:
        execute(
            db_session,
            """INSERT INTO companies (handle, name, description, num_employees, logo_url)
               VALUES ($1, $2, $3, $4, $5)""",
            company
        )
    for job in JOBS:
        execute(
            db_session,
            "INSERT INTO jobs (title, salary, equity, company_handle) VALUES ($1, $2, $3, $4)",
            job
        )
    db_session.commit()
    return db_session
