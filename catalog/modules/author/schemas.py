"""Pydantic schemas for author entities."""

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationInfo, computed_field, field_validator
from pydantic_core import PydanticCustomError

from ..common.constants import CATALOG_PREFIX
from ..common.validation import FormSchema, parse_optional_iso_date

AUTHOR_NAME_MAX_LENGTH = 100

_NAME_LABELS = {
    "first_name": ("First name", ""),
    "family_name": ("Family name", "."),
}

_DATE_MESSAGES = {
    "date_of_birth": "Invalid date of birth",
    "date_of_death": "Invalid date of death",
}


def author_url(author_id: int) -> str:
    return f"{CATALOG_PREFIX}/author/{author_id}"


class AuthorForm(FormSchema):
    """Fields accepted by the author create and update forms.

    Names must be non-empty, ASCII letters and digits only, and at most 100
    characters. Dates are optional ISO-8601 values; a blank date means the
    date is unknown.
    """

    first_name: str = ""
    family_name: str = ""
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    @field_validator("first_name", "family_name")
    @classmethod
    def validate_name(cls, v: str, info: ValidationInfo) -> str:
        label, stop = _NAME_LABELS[info.field_name]
        if not v:
            raise PydanticCustomError("name_required", f"{label} must be specified{stop}")
        if not (v.isascii() and v.isalnum()):
            raise PydanticCustomError("name_alphanumeric", f"{label} has non-alphanumeric characters{stop}")
        if len(v) > AUTHOR_NAME_MAX_LENGTH:
            raise PydanticCustomError("name_length", f"{label} must contain at most 100 characters{stop}")
        return v

    @field_validator("date_of_birth", "date_of_death", mode="before")
    @classmethod
    def validate_date(cls, v: Any, info: ValidationInfo) -> Optional[date]:
        return parse_optional_iso_date(v, _DATE_MESSAGES[info.field_name])


class AuthorCreate(BaseModel):
    """Schema for inserting an author."""

    first_name: str
    family_name: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None


class AuthorRead(BaseModel):
    """A stored author."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    family_name: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        return author_url(self.id)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        """Full name as "family_name, first_name", blank if either part is missing."""
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lifespan(self) -> str:
        """Formatted as "birth - death". A missing birth reads "unknown"; a missing death is left open."""
        if not self.date_of_birth and not self.date_of_death:
            return ""
        birth = self.date_of_birth.isoformat() if self.date_of_birth else "unknown"
        death = self.date_of_death.isoformat() if self.date_of_death else ""
        return f"{birth} - {death}".rstrip()


class AuthorDraft(BaseModel):
    """Author values as submitted, used to redisplay a rejected form.

    Dates stay in their submitted form when they failed to parse.
    """

    id: Optional[int] = None
    first_name: Optional[str] = None
    family_name: Optional[str] = None
    date_of_birth: Union[date, str, None] = None
    date_of_death: Union[date, str, None] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> Optional[str]:
        return author_url(self.id) if self.id is not None else None
