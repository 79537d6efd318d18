# tests/test_sa/test_schema.py
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from catalog.sa.models import AuthorRow, PublisherRow

EXPECTED_COLUMNS = {
    'works': {'id', 'title', 'call_number', 'call_number_local', 'edition', 'publication_year', 'publisher_id'},
    'authors': {'id', 'name'},
    'publishers': {'id', 'name'},
    'work_authors': {'work_id', 'author_id'},
    'books': {'work_id', 'isbn'},
    'online_books': {'work_id'},
    'magazines': {'work_id', 'issn', 'volume', 'issue_number'},
    'newspapers': {'work_id', 'issn', 'issue_number'},
}

@pytest.fixture
def inspector(database):
    return inspect(database.engine)

def test_all_tables_created(inspector):
    assert set(inspector.get_table_names()) == set(EXPECTED_COLUMNS)

@pytest.mark.parametrize("table", sorted(EXPECTED_COLUMNS))
def test_table_columns(inspector, table):
    columns = {column['name'] for column in inspector.get_columns(table)}
    assert columns == EXPECTED_COLUMNS[table]

@pytest.mark.parametrize("table", ['books', 'online_books', 'magazines', 'newspapers'])
def test_kind_tables_keyed_by_work(inspector, table):
    assert inspector.get_pk_constraint(table)['constrained_columns'] == ['work_id']
    foreign_keys = inspector.get_foreign_keys(table)
    assert [fk['referred_table'] for fk in foreign_keys] == ['works']

def test_work_author_primary_key(inspector):
    assert set(inspector.get_pk_constraint('work_authors')['constrained_columns']) == {'work_id', 'author_id'}

@pytest.mark.parametrize("model", [AuthorRow, PublisherRow])
def test_reference_names_are_unique(db_session, model):
    db_session.add(model(name="Duplicate"))
    db_session.flush()
    db_session.add(model(name="Duplicate"))

    with pytest.raises(IntegrityError):
        db_session.flush()
