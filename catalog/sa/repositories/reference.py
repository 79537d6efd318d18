# catalog/sa/repositories/reference.py
from typing import Optional, Type, Union
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from catalog.exceptions import PersistenceError
from ..models import AuthorRow, PublisherRow

logger = logging.getLogger(__name__)

ReferenceModel = Type[Union[AuthorRow, PublisherRow]]

class ReferenceResolver:
    """Resolves author and publisher names to ids, creating rows on first use.

    Resolution MAY WRITE: an unknown name is inserted into the reference table
    within the caller's transaction. Names are matched exactly (case-sensitive).
    Rows are never removed here, even once no work refers to them.
    """

    def __init__(self, session: Session):
        self.session = session

    def resolve_author(self, name: str) -> int:
        return self.resolve_or_create(AuthorRow, name)

    def resolve_publisher(self, name: str) -> int:
        return self.resolve_or_create(PublisherRow, name)

    def resolve_or_create(self, model: ReferenceModel, name: str) -> int:
        """Return the id of the row named ``name``, inserting it if absent.

        The insert runs inside a SAVEPOINT and relies on the UNIQUE constraint
        on ``name``. If another writer inserted the same name first, the
        savepoint is rolled back and that writer's row is returned instead.

        Raises:
            PersistenceError: If the insert did not produce a generated id
        """
        existing_id = self._find_id(model, name)
        if existing_id is not None:
            logger.debug("Resolved %s %r to existing id %s", model.__tablename__, name, existing_id)
            return existing_id

        try:
            new_id = self._insert(model, name)
        except IntegrityError:
            existing_id = self._find_id(model, name)
            if existing_id is None:
                raise
            logger.debug("Lost insert race for %s %r, using id %s", model.__tablename__, name, existing_id)
            return existing_id

        if new_id is None:
            raise PersistenceError(f"Failed to obtain generated id for {model.__tablename__} row {name!r}")

        logger.debug("Created %s row %r with id %s", model.__tablename__, name, new_id)
        return new_id

    def _insert(self, model: ReferenceModel, name: str) -> Optional[int]:
        row = model(name=name)
        with self.session.begin_nested():
            self.session.add(row)
            self.session.flush()
        return row.id

    def _find_id(self, model: ReferenceModel, name: str) -> Optional[int]:
        return (
            self.session.query(model.id)
            .filter(model.name == name)
            .order_by(model.id)
            .limit(1)
            .scalar()
        )
