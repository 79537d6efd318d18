# catalog/sa/__init__.py
from .database import Database, ConnectionProvider
from .models import (
    Base, AuthorRow, PublisherRow, WorkRow, WorkAuthorRow,
    BookRow, OnlineBookRow, MagazineRow, NewspaperRow
)

__all__ = [
    'Database',
    'ConnectionProvider',
    'Base',
    'AuthorRow',
    'PublisherRow',
    'WorkRow',
    'WorkAuthorRow',
    'BookRow',
    'OnlineBookRow',
    'MagazineRow',
    'NewspaperRow'
]
