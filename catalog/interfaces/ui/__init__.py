from fastapi import APIRouter

from ...modules.common.constants import CATALOG_PREFIX
from .author import router as author_router
from .genre import router as genre_router

router = APIRouter(prefix=CATALOG_PREFIX)
router.include_router(genre_router)
router.include_router(author_router)
