"""Form validation built on pydantic schemas.

Form schemas declare one rule chain per field through pydantic field
validators. ``FormValidator`` runs a schema over submitted form data and
never raises: it reports the sanitized values together with an ordered
list of field errors so a form can be redisplayed pre-filled.
"""

import re
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

_REDUCED_ISO_DATE = re.compile(r"(\d{4})(?:-(\d{2}))?")


class FieldError(BaseModel):
    """A single rejected form field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationOutcome(BaseModel):
    """Result of running a form schema over submitted data."""

    values: Dict[str, Any]
    errors: List[FieldError] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors


class FormSchema(BaseModel):
    """Base class for form schemas.

    Strings are trimmed before any field rule runs and every field is
    validated even when the form omitted it.
    """

    model_config = ConfigDict(str_strip_whitespace=True, validate_default=True, extra="ignore")


def sanitize(value: Any) -> Any:
    """Trim submitted strings, leaving other values untouched."""
    if isinstance(value, str):
        return value.strip()
    return value


def parse_optional_iso_date(value: Any, message: str) -> Optional[date]:
    """Parse an optional ISO-8601 date.

    Blank values mean "not provided". Reduced precision dates ("1973",
    "1973-06") mean the first day of that year or month. Full timestamps are
    accepted and truncated to their date.
    """
    value = sanitize(value)
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        reduced = _REDUCED_ISO_DATE.fullmatch(value)
        if reduced:
            year, month = reduced.groups()
            try:
                return date(int(year), int(month or 1), 1)
            except ValueError:
                raise PydanticCustomError("iso_date", message) from None
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            pass
    raise PydanticCustomError("iso_date", message)


class FormValidator:
    """Applies a form schema to submitted fields."""

    def validate(self, schema: Type[FormSchema], data: Mapping[str, Any]) -> ValidationOutcome:
        """Validate ``data`` against ``schema``.

        Args:
            schema: Form schema declaring the field rules
            data: Submitted form fields

        Returns:
            The validated values on success. On failure, the trimmed
            submitted values for every schema field and the field errors in
            schema field order.
        """
        try:
            form = schema.model_validate(dict(data))
        except PydanticValidationError as exc:
            values = {name: sanitize(data.get(name)) for name in schema.model_fields}
            return ValidationOutcome(values=values, errors=self._field_errors(schema, exc))

        return ValidationOutcome(values=form.model_dump())

    @staticmethod
    def _field_errors(schema: Type[FormSchema], exc: PydanticValidationError) -> List[FieldError]:
        field_order = list(schema.model_fields)
        errors = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            errors.append(FieldError(field=field, message=error["msg"]))

        return sorted(errors, key=lambda e: field_order.index(e.field) if e.field in field_order else len(field_order))
