"""Pydantic schemas for genre entities."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from pydantic_core import PydanticCustomError

from ..common.constants import CATALOG_PREFIX
from ..common.validation import FormSchema

GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 100


def genre_url(genre_id: int) -> str:
    return f"{CATALOG_PREFIX}/genre/{genre_id}"


class GenreForm(FormSchema):
    """Fields accepted by the genre create and update forms."""

    name: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) < GENRE_NAME_MIN_LENGTH:
            raise PydanticCustomError("name_length", "Genre name must contain at least 3 characters")
        if len(v) > GENRE_NAME_MAX_LENGTH:
            raise PydanticCustomError("name_length", "Genre name must contain at most 100 characters")
        return v


class GenreCreate(BaseModel):
    """Schema for inserting a genre."""

    name: str


class GenreRead(BaseModel):
    """A stored genre."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return genre_url(self.id)


class GenreDraft(BaseModel):
    """Genre values as submitted, used to redisplay a rejected form."""

    id: Optional[int] = None
    name: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> Optional[str]:
        return genre_url(self.id) if self.id is not None else None
