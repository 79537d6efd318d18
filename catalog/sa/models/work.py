# catalog/sa/models/work.py
from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class WorkAuthorRow(Base):
    __tablename__ = 'work_authors'

    work_id: Mapped[int] = mapped_column(ForeignKey('works.id'), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id'), primary_key=True)

    # Relationships
    work = relationship('WorkRow', back_populates='work_authors')
    author = relationship('AuthorRow', back_populates='work_authors')

class WorkRow(Base):
    __tablename__ = 'works'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    # Both call number columns always hold the same value
    call_number: Mapped[str] = mapped_column(String(255), nullable=False)
    call_number_local: Mapped[str] = mapped_column(String(255), nullable=False)
    edition: Mapped[str | None] = mapped_column(String(255), nullable=True)
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher_id: Mapped[int | None] = mapped_column(ForeignKey('publishers.id'), nullable=True)

    # Relationships
    publisher = relationship('PublisherRow', back_populates='works')
    work_authors = relationship('WorkAuthorRow', back_populates='work')

    # Convenience relationship
    authors = relationship('AuthorRow', secondary='work_authors', viewonly=True)

    __table_args__ = (
        # Search indexes
        Index('idx_works_title', 'title'),
        Index('idx_works_call_number', 'call_number'),
    )
