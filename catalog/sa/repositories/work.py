# catalog/sa/repositories/work.py
from contextlib import contextmanager
from typing import Iterator, List
import logging
from sqlalchemy import case, desc
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from catalog.exceptions import CatalogError, PersistenceError, ValidationError
from catalog.models import Work, WorkKind, WRITABLE_KINDS
from ..database import ConnectionProvider
from ..models import (
    WorkRow, WorkAuthorRow, AuthorRow, PublisherRow,
    BookRow, OnlineBookRow, MagazineRow, NewspaperRow
)
from .kinds import KindStore, blank_to_none
from .reference import ReferenceResolver

logger = logging.getLogger(__name__)

class WorkRepository:
    """Creates, updates, deletes and lists catalog works.

    Every write runs in its own transaction on a session acquired from the
    injected connection provider, and either all of its rows are committed
    or none are. Sessions are always closed before a method returns.
    """

    def __init__(self, provider: ConnectionProvider):
        """Initialize the repository.

        Args:
            provider: Hands out a new Session on each ``acquire()`` call
        """
        self.provider = provider

    def create(self, work: Work) -> int:
        """Persist a new work and return its generated id.

        Writes the works row, the author link row and the kind-specific row.
        ``work.id`` is only set once the transaction has committed.

        Raises:
            ValidationError: If the work has no kind-specific details
            PersistenceError: If any storage step fails; nothing is written
        """
        self._require_writable_kind(work)

        with self._transaction("create work") as session:
            resolver = ReferenceResolver(session)
            author_id = resolver.resolve_author(work.author_name)
            publisher_id = resolver.resolve_publisher(work.publisher_name)

            row = WorkRow(
                title=work.title,
                call_number=work.call_number,
                call_number_local=work.call_number,
                edition=blank_to_none(work.edition),
                publication_year=work.publication_year,
                publisher_id=publisher_id,
            )
            session.add(row)
            session.flush()
            if row.id is None:
                raise PersistenceError("Failed to obtain generated id for new work")
            work_id = row.id

            session.add(WorkAuthorRow(work_id=work_id, author_id=author_id))
            session.flush()

            KindStore(session).insert(work_id, work.details)

        work.id = work_id
        logger.info("Created %s work %s: %r", work.kind.value, work_id, work.title)
        return work_id

    def update(self, work: Work) -> None:
        """Save changes to an existing work.

        The author link is replaced, so the work ends up with exactly one
        author. Changing the kind does not remove the row for the old kind.

        Raises:
            ValidationError: If ``work.id`` is missing or the work has no details
            PersistenceError: If no work has that id, or any storage step
                fails; nothing is written
        """
        if work.id is None:
            raise ValidationError("Work has not been saved yet", field="id")
        self._require_writable_kind(work)

        with self._transaction("update work") as session:
            resolver = ReferenceResolver(session)
            author_id = resolver.resolve_author(work.author_name)
            publisher_id = resolver.resolve_publisher(work.publisher_name)

            updated = (
                session.query(WorkRow)
                .filter(WorkRow.id == work.id)
                .update({
                    'title': work.title,
                    'call_number': work.call_number,
                    'call_number_local': work.call_number,
                    'edition': blank_to_none(work.edition),
                    'publication_year': work.publication_year,
                    'publisher_id': publisher_id,
                }, synchronize_session=False)
            )
            if not updated:
                raise PersistenceError(f"Work {work.id} does not exist")

            session.query(WorkAuthorRow).filter(
                WorkAuthorRow.work_id == work.id
            ).delete(synchronize_session=False)
            session.add(WorkAuthorRow(work_id=work.id, author_id=author_id))
            session.flush()

            kind_store = KindStore(session)
            stale = [kind for kind in kind_store.kinds_present(work.id) if kind != work.kind]
            if stale:
                logger.warning(
                    "Work %s changed kind to %s; rows for %s are left in place",
                    work.id, work.kind.value, ", ".join(kind.value for kind in stale)
                )
            kind_store.upsert(work.id, work.details)

        logger.info("Updated %s work %s: %r", work.kind.value, work.id, work.title)

    def delete(self, work_id: int) -> None:
        """Delete a work with its author link and kind rows.

        Deleting an id that does not exist is not an error.
        """
        with self._transaction("delete work") as session:
            kind_rows = KindStore(session).delete_all_kinds(work_id)
            session.query(WorkAuthorRow).filter(
                WorkAuthorRow.work_id == work_id
            ).delete(synchronize_session=False)
            work_rows = session.query(WorkRow).filter(
                WorkRow.id == work_id
            ).delete(synchronize_session=False)

        if work_rows:
            logger.info("Deleted work %s (%d kind rows)", work_id, kind_rows)
        else:
            logger.debug("Delete of work %s matched no rows", work_id)

    def list_all(self) -> List[Work]:
        """Return every work, most recently created first.

        The kind is taken from the first kind table holding a row for the work
        (books, online books, magazines, newspapers); works with none are
        reported as ``WorkKind.UNKNOWN``.
        """
        session = self.provider.acquire()
        try:
            rows = self._listing_query(session).all()
            return [self._row_to_work(row) for row in rows]
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to list works", cause=e) from e
        finally:
            session.close()

    def _listing_query(self, session: Session):
        kind = case(
            (BookRow.work_id.isnot(None), WorkKind.BOOK.value),
            (OnlineBookRow.work_id.isnot(None), WorkKind.ONLINE_BOOK.value),
            (MagazineRow.work_id.isnot(None), WorkKind.MAGAZINE.value),
            (NewspaperRow.work_id.isnot(None), WorkKind.NEWSPAPER.value),
            else_=WorkKind.UNKNOWN.value,
        ).label('kind')

        return (
            session.query(
                WorkRow.id,
                WorkRow.title,
                WorkRow.call_number,
                WorkRow.edition,
                WorkRow.publication_year,
                AuthorRow.name.label('author_name'),
                PublisherRow.name.label('publisher_name'),
                BookRow.isbn,
                MagazineRow.issn.label('magazine_issn'),
                MagazineRow.volume,
                MagazineRow.issue_number.label('magazine_issue_number'),
                NewspaperRow.issn.label('newspaper_issn'),
                NewspaperRow.issue_number.label('newspaper_issue_number'),
                kind,
            )
            .select_from(WorkRow)
            .outerjoin(WorkAuthorRow, WorkAuthorRow.work_id == WorkRow.id)
            .outerjoin(AuthorRow, AuthorRow.id == WorkAuthorRow.author_id)
            .outerjoin(PublisherRow, PublisherRow.id == WorkRow.publisher_id)
            .outerjoin(BookRow, BookRow.work_id == WorkRow.id)
            .outerjoin(OnlineBookRow, OnlineBookRow.work_id == WorkRow.id)
            .outerjoin(MagazineRow, MagazineRow.work_id == WorkRow.id)
            .outerjoin(NewspaperRow, NewspaperRow.work_id == WorkRow.id)
            .order_by(desc(WorkRow.id))
        )

    @staticmethod
    def _row_to_work(row: Row) -> Work:
        kind = WorkKind(row.kind)
        details = KindStore.read_kind_fields(row, kind)
        # Magazines and newspapers show their issue number as the edition
        if kind in (WorkKind.MAGAZINE, WorkKind.NEWSPAPER):
            edition = details.issue_number
        else:
            edition = row.edition
        return Work(
            id=row.id,
            title=row.title,
            author_name=row.author_name,
            publisher_name=row.publisher_name,
            publication_year=row.publication_year,
            call_number=row.call_number,
            edition=edition,
            details=details,
        )

    @staticmethod
    def _require_writable_kind(work: Work) -> None:
        if work.kind not in WRITABLE_KINDS:
            raise ValidationError(
                f"Kind must be one of {', '.join(k.value for k in WRITABLE_KINDS)}",
                field="kind"
            )

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Session]:
        """Run a block in one transaction: commit on success, roll back on error.

        Errors that are not already catalog errors are wrapped in
        PersistenceError. A failing rollback is logged and does not replace the
        original error. The session is closed on every path.
        """
        session = self.provider.acquire()
        try:
            yield session
            session.commit()
        except Exception as e:
            self._rollback(session, operation)
            if isinstance(e, CatalogError):
                raise
            raise PersistenceError(f"Failed to {operation}", cause=e) from e
        finally:
            session.close()

    @staticmethod
    def _rollback(session: Session, operation: str) -> None:
        try:
            session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed during %s", operation)
