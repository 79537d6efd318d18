# catalog/sa/models/kinds.py
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base

class BookRow(Base):
    __tablename__ = 'books'

    work_id: Mapped[int] = mapped_column(ForeignKey('works.id'), primary_key=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)

class OnlineBookRow(Base):
    __tablename__ = 'online_books'

    work_id: Mapped[int] = mapped_column(ForeignKey('works.id'), primary_key=True)

class MagazineRow(Base):
    __tablename__ = 'magazines'

    work_id: Mapped[int] = mapped_column(ForeignKey('works.id'), primary_key=True)
    issn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    volume: Mapped[str | None] = mapped_column(String(50), nullable=True)
    issue_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

class NewspaperRow(Base):
    __tablename__ = 'newspapers'

    work_id: Mapped[int] = mapped_column(ForeignKey('works.id'), primary_key=True)
    issn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    issue_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
