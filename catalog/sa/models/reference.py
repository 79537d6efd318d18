# catalog/sa/models/reference.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class AuthorRow(Base):
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique so resolve-or-create can rely on the database to reject duplicates
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    work_authors = relationship('WorkAuthorRow', back_populates='author')

class PublisherRow(Base):
    __tablename__ = 'publishers'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    works = relationship('WorkRow', back_populates='publisher')
