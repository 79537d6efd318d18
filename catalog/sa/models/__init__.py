# catalog/sa/models/__init__.py
from .base import Base
from .reference import AuthorRow, PublisherRow
from .work import WorkRow, WorkAuthorRow
from .kinds import BookRow, OnlineBookRow, MagazineRow, NewspaperRow

__all__ = [
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
