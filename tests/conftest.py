# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy import text
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from catalog.models import (
    Work, BookDetails, OnlineBookDetails, MagazineDetails, NewspaperDetails
)
from catalog.sa.database import Database
from catalog.sa.repositories.work import WorkRepository

@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file for one test"""
    return f"sqlite:///{tmp_path / 'catalog.db'}"

@pytest.fixture
def database(database_url):
    """Create a test database with the catalog schema"""
    db = Database(database_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.acquire()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

@pytest.fixture
def repo(database):
    return WorkRepository(database)

@pytest.fixture
def count_rows(database):
    """Count committed rows in a table, optionally for one work id"""
    def _count(table: str, work_id: int | None = None, **where) -> int:
        clauses = []
        params = {}
        if work_id is not None:
            column = 'id' if table == 'works' else 'work_id'
            clauses.append(f"{column} = :work_id")
            params['work_id'] = work_id
        for column, value in where.items():
            if value is None:
                clauses.append(f"{column} IS NULL")
            else:
                clauses.append(f"{column} = :{column}")
                params[column] = value
        sql = f"SELECT COUNT(*) FROM {table}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        with database.engine.connect() as conn:
            return conn.execute(text(sql), params).scalar()
    return _count

@pytest.fixture
def sample_book():
    return Work(
        title="A",
        author_name="X",
        publisher_name="Y",
        publication_year=2000,
        call_number="Z",
        details=BookDetails(isbn="123"),
    )

@pytest.fixture
def sample_online_book():
    return Work(
        title="Open Web",
        author_name="Ana Lima",
        publisher_name="Net Press",
        publication_year=2015,
        call_number="004.678 L732o",
        edition="2nd",
        details=OnlineBookDetails(),
    )

@pytest.fixture
def sample_magazine():
    return Work(
        title="Science Monthly",
        author_name="Editorial Board",
        publisher_name="Periodicals Inc",
        publication_year=2021,
        call_number="505 S416",
        edition="42",
        details=MagazineDetails(issn="1234-5678", volume="7", issue_number="42"),
    )

@pytest.fixture
def sample_newspaper():
    return Work(
        title="Daily Courier",
        author_name="Newsroom",
        publisher_name="Courier Group",
        publication_year=1999,
        call_number="070 D133",
        edition="1024",
        details=NewspaperDetails(issn="8765-4321", issue_number="1024"),
    )
