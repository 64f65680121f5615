"""Mapping of domain exceptions to HTTP error pages."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from ....infrastructure.logging import get_logger
from ..constants import EXCEPTION_MAPPING
from ..exceptions import DomainError

logger = get_logger(__name__)


def map_exception(error: DomainError) -> HTTPException:
    """Map a domain exception to a corresponding HTTP exception."""
    for exception_class, mapper in EXCEPTION_MAPPING.items():
        if isinstance(error, exception_class):
            return mapper(str(error))

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"An unexpected error occurred: {str(error)}"
    )


def register_exception_handlers(app: FastAPI, templates: Jinja2Templates) -> None:
    """Register a handler rendering domain exceptions with the error template."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> Response:
        http_exception = map_exception(exc)
        logger.info(
            f"{request.method} {request.url.path} -> {http_exception.status_code}",
            extra={"error_type": type(exc).__name__, "detail": http_exception.detail},
        )
        return templates.TemplateResponse(
            request,
            "error.html",
            context={
                "title": "Error",
                "status_code": http_exception.status_code,
                "message": http_exception.detail,
            },
            status_code=http_exception.status_code,
        )
