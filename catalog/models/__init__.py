# catalog/models/__init__.py
from .work import (
    WorkKind, WRITABLE_KINDS, Work, KindPayload,
    BookDetails, OnlineBookDetails, MagazineDetails, NewspaperDetails
)

__all__ = [
    'WorkKind',
    'WRITABLE_KINDS',
    'Work',
    'KindPayload',
    'BookDetails',
    'OnlineBookDetails',
    'MagazineDetails',
    'NewspaperDetails'
]
