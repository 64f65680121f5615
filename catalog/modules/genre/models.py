"""SQLAlchemy model for genres."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Genre(Base, TimestampMixin):
    """A book genre, identified in the real world by its name."""

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
