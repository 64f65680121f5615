"""Author pages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from ...modules.author.services import AuthorService
from ..api.dependencies import get_author_service

router = APIRouter(tags=["Authors"])


@router.get("/authors", response_class=HTMLResponse, summary="List Authors")
async def author_list(author_service: AuthorService = Depends(get_author_service)) -> Response:
    """Display list of all authors."""
    return await author_service.list_authors()


@router.get("/author/create", response_class=HTMLResponse, summary="Author Create Form")
async def author_create_get(author_service: AuthorService = Depends(get_author_service)) -> Response:
    """Display the author create form."""
    return await author_service.show_create_form()


@router.post("/author/create", response_class=HTMLResponse, summary="Create Author")
async def author_create_post(
    request: Request, author_service: AuthorService = Depends(get_author_service)
) -> Response:
    """Handle the author create form."""
    form = await request.form()
    return await author_service.create_author(dict(form))


@router.get("/author/{author_id}", response_class=HTMLResponse, summary="Author Detail")
async def author_detail(author_id: int, author_service: AuthorService = Depends(get_author_service)) -> Response:
    """Display detail page for a specific author."""
    return await author_service.get_author_detail(author_id)


@router.get("/author/{author_id}/update", response_class=HTMLResponse, summary="Author Update Form")
async def author_update_get(author_id: int, author_service: AuthorService = Depends(get_author_service)) -> Response:
    """Display the author update form."""
    return await author_service.show_update_form(author_id)


@router.post("/author/{author_id}/update", response_class=HTMLResponse, summary="Update Author")
async def author_update_post(
    author_id: int, request: Request, author_service: AuthorService = Depends(get_author_service)
) -> Response:
    """Handle the author update form."""
    form = await request.form()
    return await author_service.update_author(author_id, dict(form))


@router.get("/author/{author_id}/delete", response_class=HTMLResponse, summary="Author Delete Form")
async def author_delete_get(author_id: int, author_service: AuthorService = Depends(get_author_service)) -> Response:
    """Display the author delete confirmation."""
    return await author_service.show_delete_form(author_id)


@router.post("/author/{author_id}/delete", response_class=HTMLResponse, summary="Delete Author")
async def author_delete_post(
    author_id: int, request: Request, author_service: AuthorService = Depends(get_author_service)
) -> Response:
    """Handle the author delete confirmation."""
    form = await request.form()
    return await author_service.delete_author(author_id, dict(form))
