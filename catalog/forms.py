# catalog/forms.py
from typing import Any, Optional
import pydantic
from pydantic import BaseModel, ConfigDict, field_validator
from catalog.exceptions import ValidationError
from catalog.models import (
    Work, WorkKind, WRITABLE_KINDS,
    BookDetails, OnlineBookDetails, MagazineDetails, NewspaperDetails
)

MIN_PUBLICATION_YEAR = 1500
MAX_PUBLICATION_YEAR = 2100

# Accepted spellings for each kind, compared case-insensitively
KIND_LABELS = {
    "book": WorkKind.BOOK,
    "onlinebook": WorkKind.ONLINE_BOOK,
    "online book": WorkKind.ONLINE_BOOK,
    "online-book": WorkKind.ONLINE_BOOK,
    "magazine": WorkKind.MAGAZINE,
    "newspaper": WorkKind.NEWSPAPER,
}

class WorkForm(BaseModel):
    """Raw work input as typed by a user, validated before it reaches the repository.

    Text is trimmed, blank optional fields become None. ``edition`` doubles as
    the issue number for magazines and newspapers, and ``identifier`` is the
    ISBN for books or the ISSN for magazines and newspapers.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[int] = None
    title: str
    author: str
    kind: WorkKind
    publication_year: int
    publisher: str
    call_number: str
    edition: Optional[str] = None
    identifier: Optional[str] = None
    volume: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def blank_id_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('title', 'author', 'publisher', 'call_number', mode='before')
    @classmethod
    def missing_text_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('title', 'author', 'publisher', 'call_number')
    @classmethod
    def text_is_required(cls, v: str) -> str:
        if not v:
            raise ValueError("is required")
        return v

    @field_validator('kind', mode='before')
    @classmethod
    def parse_kind(cls, v: Any) -> WorkKind:
        if isinstance(v, WorkKind):
            kind = v
        elif v is None or not str(v).strip():
            raise ValueError("is required")
        else:
            kind = KIND_LABELS.get(str(v).strip().lower())
        if kind not in WRITABLE_KINDS:
            allowed = ", ".join(k.value for k in WRITABLE_KINDS)
            raise ValueError(f"must be one of: {allowed}")
        return kind

    @field_validator('publication_year', mode='before')
    @classmethod
    def parse_year(cls, v: Any) -> int:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("is required")
        if isinstance(v, bool):
            raise ValueError("must be a whole number")
        try:
            return int(str(v).strip())
        except ValueError:
            raise ValueError("must be a whole number") from None

    @field_validator('publication_year')
    @classmethod
    def year_in_range(cls, v: int) -> int:
        if not MIN_PUBLICATION_YEAR <= v <= MAX_PUBLICATION_YEAR:
            raise ValueError(f"must be between {MIN_PUBLICATION_YEAR} and {MAX_PUBLICATION_YEAR}")
        return v

    @field_validator('edition', 'identifier', 'volume')
    @classmethod
    def blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def to_work(self) -> Work:
        if self.kind == WorkKind.BOOK:
            details = BookDetails(isbn=self.identifier)
        elif self.kind == WorkKind.ONLINE_BOOK:
            details = OnlineBookDetails()
        elif self.kind == WorkKind.MAGAZINE:
            details = MagazineDetails(issn=self.identifier, volume=self.volume, issue_number=self.edition)
        else:
            details = NewspaperDetails(issn=self.identifier, issue_number=self.edition)

        return Work(
            id=self.id,
            title=self.title,
            author_name=self.author,
            publisher_name=self.publisher,
            publication_year=self.publication_year,
            call_number=self.call_number,
            edition=self.edition,
            details=details,
        )

def parse_work_form(**fields: Any) -> Work:
    """Validate raw form input and build a Work.

    Raises:
        ValidationError: Naming the first field that failed, in form order
    """
    try:
        form = WorkForm(**fields)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = str(error['loc'][0]) if error['loc'] else None
        cause = error.get('ctx', {}).get('error')
        message = str(cause) if cause is not None else error['msg']
        raise ValidationError(message, field=field) from e
    return form.to_work()
