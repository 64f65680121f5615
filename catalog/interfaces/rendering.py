"""Jinja2 template rendering for the catalog pages."""

from datetime import date
from pathlib import Path
from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"


def date_input(value: Any) -> str:
    """Format a value for an ``<input type="date">``.

    Parsed dates become ISO strings; unparsed submissions are shown as typed.
    """
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["date_input"] = date_input


class TemplateRenderer:
    """Request-scoped renderer for the catalog templates.

    Template names are given without extension: ``render("genre_list", ...)``
    renders ``genre_list.html``.
    """

    def __init__(self, templates: Jinja2Templates, request: Request):
        self.templates = templates
        self.request = request

    def render(self, template_name: str, data: Mapping[str, Any], status_code: int = 200) -> Response:
        return self.templates.TemplateResponse(
            self.request,
            f"{template_name}.html",
            context=dict(data),
            status_code=status_code,
        )
