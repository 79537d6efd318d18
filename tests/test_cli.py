# tests/test_cli.py
import pytest
from click.testing import CliRunner
from cli.main import cli

BOOK_ARGS = [
    '--title', 'Dom Casmurro',
    '--author', 'Machado de Assis',
    '--kind', 'Book',
    '--year', '1899',
    '--publisher', 'Garnier',
    '--call-number', '869.3 M149d',
    '--isbn', '9788535910663',
]

@pytest.fixture
def runner():
    return CliRunner()

@pytest.fixture
def invoke(runner, database_url):
    """Run the CLI against the test database"""
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ['--database-url', database_url, *args], **kwargs)
    return _invoke

@pytest.fixture
def initialized(invoke):
    result = invoke('db', 'init')
    assert result.exit_code == 0, result.output
    return invoke

def test_db_init(invoke, database_url):
    result = invoke('db', 'init')
    assert result.exit_code == 0
    assert database_url in result.output

def test_add_and_list(initialized):
    result = initialized('work', 'add', *BOOK_ARGS)
    assert result.exit_code == 0, result.output
    assert "Saved work 1: Dom Casmurro" in result.output

    result = initialized('work', 'list')
    assert result.exit_code == 0
    assert "1 | Book | Dom Casmurro | Machado de Assis | 1899 | Garnier | 869.3 M149d" in result.output
    assert "9788535910663" in result.output

def test_add_magazine(initialized):
    result = initialized(
        'work', 'add',
        '--title', 'Science Monthly', '--author', 'Editors', '--kind', 'Magazine',
        '--year', '2021', '--publisher', 'Periodicals', '--call-number', '505 S416',
        '--edition', '42', '--volume', '7', '--issn', '1234-5678',
    )
    assert result.exit_code == 0, result.output

    result = initialized('work', 'list')
    assert "Magazine | Science Monthly" in result.output
    assert "| 42 | 7 | 1234-5678" in result.output

def test_add_rejects_invalid_year(initialized):
    args = list(BOOK_ARGS)
    args[args.index('1899')] = '1200'
    result = initialized('work', 'add', *args)

    assert result.exit_code == 2
    assert "Validation: publication_year: must be between 1500 and 2100" in result.output
    assert "No works found" in initialized('work', 'list').output

def test_add_requires_title(initialized):
    result = initialized('work', 'add', *BOOK_ARGS[2:])
    assert result.exit_code == 2
    assert "title: is required" in result.output

def test_update(initialized):
    initialized('work', 'add', *BOOK_ARGS)

    args = list(BOOK_ARGS)
    args[args.index('Dom Casmurro')] = 'Dom Casmurro (2nd ed.)'
    result = initialized('work', 'update', '1', *args)
    assert result.exit_code == 0, result.output

    assert "Dom Casmurro (2nd ed.)" in initialized('work', 'list').output

def test_update_rejects_non_numeric_id(initialized):
    result = initialized('work', 'update', 'abc', *BOOK_ARGS)
    assert result.exit_code == 2
    assert "Validation: id:" in result.output

def test_delete_with_yes(initialized):
    initialized('work', 'add', *BOOK_ARGS)

    result = initialized('work', 'delete', '1', '--yes')
    assert result.exit_code == 0
    assert "Deleted work 1" in result.output
    assert "No works found" in initialized('work', 'list').output

def test_delete_aborted(initialized):
    initialized('work', 'add', *BOOK_ARGS)

    result = initialized('work', 'delete', '1', input='n\n')
    assert result.exit_code == 1
    assert "Dom Casmurro" in initialized('work', 'list').output

def test_delete_missing_work(initialized):
    result = initialized('work', 'delete', '42', '--yes')
    assert result.exit_code == 0

def test_storage_error_is_reported(invoke):
    # Schema was never created
    result = invoke('work', 'list')
    assert result.exit_code == 1
    assert "Database error: Failed to list works" in result.output

def test_update_missing_work(initialized):
    result = initialized('work', 'update', '7', *BOOK_ARGS)
    assert result.exit_code == 1
    assert "Database error: Work 7 does not exist" in result.output
    assert "No works found" in initialized('work', 'list').output
