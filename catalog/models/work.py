# catalog/models/work.py

from typing import Annotated, Literal, Optional, Union
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class WorkKind(str, Enum):
    BOOK = "Book"
    ONLINE_BOOK = "OnlineBook"
    MAGAZINE = "Magazine"
    NEWSPAPER = "Newspaper"

    # Only produced when listing a work that has no kind-specific row
    UNKNOWN = "Unknown"

WRITABLE_KINDS = (
    WorkKind.BOOK,
    WorkKind.ONLINE_BOOK,
    WorkKind.MAGAZINE,
    WorkKind.NEWSPAPER,
)

class BookDetails(BaseModel):
    """Fields stored in the books table"""
    kind: Literal[WorkKind.BOOK] = WorkKind.BOOK
    isbn: Optional[str] = None

class OnlineBookDetails(BaseModel):
    """Online books have no kind-specific columns"""
    kind: Literal[WorkKind.ONLINE_BOOK] = WorkKind.ONLINE_BOOK

class MagazineDetails(BaseModel):
    """Fields stored in the magazines table"""
    kind: Literal[WorkKind.MAGAZINE] = WorkKind.MAGAZINE
    issn: Optional[str] = None
    volume: Optional[str] = None
    issue_number: Optional[str] = None

class NewspaperDetails(BaseModel):
    """Fields stored in the newspapers table"""
    kind: Literal[WorkKind.NEWSPAPER] = WorkKind.NEWSPAPER
    issn: Optional[str] = None
    issue_number: Optional[str] = None

KindPayload = Annotated[
    Union[BookDetails, OnlineBookDetails, MagazineDetails, NewspaperDetails],
    Field(discriminator="kind"),
]

class Work(BaseModel):
    """A catalog work: common fields plus the payload for its kind.

    ``id`` is None until the work has been persisted. The kind is derived from
    ``details`` so the tag and the kind-specific fields always agree.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    title: str
    author_name: Optional[str] = None
    publisher_name: Optional[str] = None
    publication_year: int
    call_number: str
    edition: Optional[str] = None
    details: Optional[KindPayload] = None

    @property
    def kind(self) -> WorkKind:
        if self.details is None:
            return WorkKind.UNKNOWN
        return self.details.kind

    @property
    def identifier_code(self) -> Optional[str]:
        """ISBN for books, ISSN for magazines and newspapers"""
        if isinstance(self.details, BookDetails):
            return self.details.isbn
        if isinstance(self.details, (MagazineDetails, NewspaperDetails)):
            return self.details.issn
        return None

    @property
    def volume(self) -> Optional[str]:
        if isinstance(self.details, MagazineDetails):
            return self.details.volume
        return None

    @property
    def issue_number(self) -> Optional[str]:
        if isinstance(self.details, (MagazineDetails, NewspaperDetails)):
            return self.details.issue_number
        return None
