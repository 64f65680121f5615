"""SQLAlchemy model for books."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Book(Base, TimestampMixin):
    """A catalogued book.

    Books are maintained outside the author and genre workflows. Each one
    references exactly one author and one genre, and those references are
    what block author and genre deletion.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255))
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"), index=True)
    genre_id: Mapped[int] = mapped_column(ForeignKey("genres.id"), index=True)
    summary: Mapped[str] = mapped_column(Text, default="")
    isbn: Mapped[Optional[str]] = mapped_column(String(32), default=None)
