"""Genre pages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from ...modules.genre.services import GenreService
from ..api.dependencies import get_genre_service

router = APIRouter(tags=["Genres"])


@router.get("/genres", response_class=HTMLResponse, summary="List Genres")
async def genre_list(genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Display list of all genres."""
    return await genre_service.list_genres()


@router.get("/genre/create", response_class=HTMLResponse, summary="Genre Create Form")
async def genre_create_get(genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Display the genre create form."""
    return await genre_service.show_create_form()


@router.post("/genre/create", response_class=HTMLResponse, summary="Create Genre")
async def genre_create_post(request: Request, genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Handle the genre create form."""
    form = await request.form()
    return await genre_service.create_genre(dict(form))


@router.get("/genre/{genre_id}", response_class=HTMLResponse, summary="Genre Detail")
async def genre_detail(genre_id: int, genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Display detail page for a specific genre."""
    return await genre_service.get_genre_detail(genre_id)


@router.get("/genre/{genre_id}/update", response_class=HTMLResponse, summary="Genre Update Form")
async def genre_update_get(genre_id: int, genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Display the genre update form."""
    return await genre_service.show_update_form(genre_id)


@router.post("/genre/{genre_id}/update", response_class=HTMLResponse, summary="Update Genre")
async def genre_update_post(
    genre_id: int, request: Request, genre_service: GenreService = Depends(get_genre_service)
) -> Response:
    """Handle the genre update form."""
    form = await request.form()
    return await genre_service.update_genre(genre_id, dict(form))


@router.get("/genre/{genre_id}/delete", response_class=HTMLResponse, summary="Genre Delete Form")
async def genre_delete_get(genre_id: int, genre_service: GenreService = Depends(get_genre_service)) -> Response:
    """Display the genre delete confirmation."""
    return await genre_service.show_delete_form(genre_id)


@router.post("/genre/{genre_id}/delete", response_class=HTMLResponse, summary="Delete Genre")
async def genre_delete_post(
    genre_id: int, request: Request, genre_service: GenreService = Depends(get_genre_service)
) -> Response:
    """Handle the genre delete confirmation."""
    form = await request.form()
    return await genre_service.delete_genre(genre_id, dict(form))
