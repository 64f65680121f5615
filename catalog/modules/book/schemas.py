"""Pydantic schemas for book entities."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..common.constants import CATALOG_PREFIX


class BookCreate(BaseModel):
    """Schema for creating a book."""

    title: str = Field(min_length=1, max_length=255)
    author_id: int
    genre_id: int
    summary: str = ""
    isbn: Optional[str] = Field(default=None, max_length=32)


class BookSummary(BaseModel):
    """Projection of a book listed as a dependent of an author or genre."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    summary: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return f"{CATALOG_PREFIX}/book/{self.id}"
