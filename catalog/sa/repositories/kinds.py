# catalog/sa/repositories/kinds.py
from typing import Any, Callable, Dict, Optional, Type, Union
import logging
from sqlalchemy import exists
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session
from catalog.exceptions import ValidationError
from catalog.models import (
    WorkKind, WRITABLE_KINDS, KindPayload,
    BookDetails, OnlineBookDetails, MagazineDetails, NewspaperDetails
)
from ..models import BookRow, OnlineBookRow, MagazineRow, NewspaperRow

logger = logging.getLogger(__name__)

KindModel = Type[Union[BookRow, OnlineBookRow, MagazineRow, NewspaperRow]]

KIND_TABLES: Dict[WorkKind, KindModel] = {
    WorkKind.BOOK: BookRow,
    WorkKind.ONLINE_BOOK: OnlineBookRow,
    WorkKind.MAGAZINE: MagazineRow,
    WorkKind.NEWSPAPER: NewspaperRow,
}

def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value

def _book_columns(details: BookDetails) -> Dict[str, Any]:
    return {'isbn': details.isbn}

def _online_book_columns(details: OnlineBookDetails) -> Dict[str, Any]:
    return {}

def _magazine_columns(details: MagazineDetails) -> Dict[str, Any]:
    return {
        # Magazines have always stored a missing ISSN as an empty string
        'issn': details.issn if details.issn is not None else "",
        'volume': blank_to_none(details.volume),
        'issue_number': blank_to_none(details.issue_number),
    }

def _newspaper_columns(details: NewspaperDetails) -> Dict[str, Any]:
    return {
        'issn': details.issn,
        'issue_number': blank_to_none(details.issue_number),
    }

KIND_COLUMNS: Dict[WorkKind, Callable[[Any], Dict[str, Any]]] = {
    WorkKind.BOOK: _book_columns,
    WorkKind.ONLINE_BOOK: _online_book_columns,
    WorkKind.MAGAZINE: _magazine_columns,
    WorkKind.NEWSPAPER: _newspaper_columns,
}

for _mapping in (KIND_TABLES, KIND_COLUMNS):
    if set(_mapping) != set(WRITABLE_KINDS):
        raise RuntimeError(f"Kind mapping is not exhaustive: {sorted(k.value for k in _mapping)}")

def table_for(kind: WorkKind) -> KindModel:
    """Return the ORM model holding kind-specific rows for ``kind``"""
    try:
        return KIND_TABLES[kind]
    except KeyError:
        raise ValidationError(f"Works of kind {kind.value!r} cannot be stored", field="kind") from None

class KindStore:
    """Reads and writes the per-kind tables (books, online_books, magazines, newspapers)."""

    def __init__(self, session: Session):
        self.session = session

    def insert(self, work_id: int, details: KindPayload) -> None:
        """Insert the kind-specific row for a work.

        Magazine and newspaper volume/issue numbers that are blank are stored
        as NULL. A book's ISBN is stored as given.
        """
        model = table_for(details.kind)
        columns = KIND_COLUMNS[details.kind](details)
        self.session.add(model(work_id=work_id, **columns))
        self.session.flush()

    def exists_for(self, model: KindModel, work_id: int) -> bool:
        """Check whether ``model``'s table already has a row for the work"""
        return bool(
            self.session.query(exists().where(model.work_id == work_id)).scalar()
        )

    def upsert(self, work_id: int, details: KindPayload) -> None:
        """Update the kind-specific row if present, otherwise insert it.

        Newspapers are the exception: without an existing row nothing is
        written. This matches how newspaper records have always been saved.
        """
        model = table_for(details.kind)
        columns = KIND_COLUMNS[details.kind](details)

        if self.exists_for(model, work_id):
            if columns:
                (
                    self.session.query(model)
                    .filter(model.work_id == work_id)
                    .update(columns, synchronize_session=False)
                )
            return

        if details.kind == WorkKind.NEWSPAPER:
            logger.warning("Work %s has no newspaper row; newspaper fields were not saved", work_id)
            return

        self.insert(work_id, details)

    def delete_all_kinds(self, work_id: int) -> int:
        """Delete the work's row from every kind table. Returns rows removed."""
        deleted = 0
        for model in KIND_TABLES.values():
            deleted += (
                self.session.query(model)
                .filter(model.work_id == work_id)
                .delete(synchronize_session=False)
            )
        return deleted

    def kinds_present(self, work_id: int) -> list[WorkKind]:
        """Kinds that currently have a row for the work, in table order"""
        return [
            kind for kind, model in KIND_TABLES.items()
            if self.exists_for(model, work_id)
        ]

    @staticmethod
    def read_kind_fields(row: Row, kind: WorkKind) -> Optional[KindPayload]:
        """Build the payload for ``kind`` from a row produced by the listing query"""
        if kind == WorkKind.BOOK:
            return BookDetails(isbn=row.isbn)
        if kind == WorkKind.ONLINE_BOOK:
            return OnlineBookDetails()
        if kind == WorkKind.MAGAZINE:
            return MagazineDetails(
                issn=row.magazine_issn,
                volume=row.volume,
                issue_number=row.magazine_issue_number,
            )
        if kind == WorkKind.NEWSPAPER:
            return NewspaperDetails(
                issn=row.newspaper_issn,
                issue_number=row.newspaper_issue_number,
            )
        return None
