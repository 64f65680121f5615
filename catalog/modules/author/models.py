"""SQLAlchemy model for authors."""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Author(Base, TimestampMixin):
    """A book author.

    The (first_name, family_name) pair is the author's natural key and is
    unique across the catalog.
    """

    __tablename__ = "authors"
    __table_args__ = (UniqueConstraint("first_name", "family_name", name="uq_authors_full_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    first_name: Mapped[str] = mapped_column(String(100))
    family_name: Mapped[str] = mapped_column(String(100), index=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, default=None)
    date_of_death: Mapped[Optional[date]] = mapped_column(Date, default=None)
