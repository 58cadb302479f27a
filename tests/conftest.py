"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Any, Dict, List

from jobboard.database import Database, init_database
from jobboard.repositories import CompanyRepository, JobRepository


class RecordingStore:
    """Store double that records every statement and replays canned rows."""

    def __init__(self, responses: List[List[Dict[str, Any]]] = None):
        self.responses = list(responses or [])
        self.calls = []

    def query(self, sql, params=()):
        self.calls.append((" ".join(sql.split()), list(params)))
        if self.responses:
            return self.responses.pop(0)
        return []

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> list:
        return self.calls[-1][1]


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def db_url(tmp_path) -> str:
    """URL of a freshly initialized SQLite database."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    init_database(url)
    return url


@pytest.fixture
def db(db_url):
    """Store collaborator over the temporary database, seeded with companies."""
    database = Database(db_url)
    for handle, name, num_employees in [("c1", "C1", 1), ("c2", "C2", 2), ("c3", "C3", 3)]:
        database.query(
            """INSERT INTO companies (handle, name, num_employees, description, logo_url)
               VALUES ($1, $2, $3, $4, $5)""",
            [handle, name, num_employees, f"Desc{handle[-1]}", f"http://{handle}.img"],
        )
    yield database
    database.close()


@pytest.fixture
def jobs(db) -> JobRepository:
    return JobRepository(db)


@pytest.fixture
def companies(db) -> CompanyRepository:
    return CompanyRepository(db)


@pytest.fixture
def seeded_jobs(jobs) -> Dict[str, Dict[str, Any]]:
    """Four jobs across three companies, keyed by title."""
    created = [
        jobs.create(title="Junior Engineer", salary=40000, equity=0, company_handle="c1"),
        jobs.create(title="Senior Engineer", salary=120000, equity=0.05, company_handle="c1"),
        jobs.create(title="Accountant", salary=60000, equity=None, company_handle="c2"),
        jobs.create(title="Designer", salary=None, equity=0.1, company_handle="c3"),
    ]
    return {job["title"]: job for job in created}


@pytest.fixture
def make_store():
    """Build a RecordingStore that answers with the given row lists in turn."""
    return RecordingStore
