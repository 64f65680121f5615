"""Common constants used across the application."""

from enum import Enum
from typing import Callable, Dict, Type

from fastapi import HTTPException, status

from .exceptions import (
    DomainError,
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)

CATALOG_PREFIX = "/catalog"


class EntityKind(str, Enum):
    """Collections held by the document store."""

    AUTHOR = "Author"
    GENRE = "Genre"
    BOOK = "Book"


EXCEPTION_MAPPING: Dict[Type[DomainError], Callable[[str], HTTPException]] = {
    ResourceNotFoundError: lambda message: HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message),
    ResourceExistsError: lambda message: HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message),
    ValidationError: lambda message: HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=message),
}
