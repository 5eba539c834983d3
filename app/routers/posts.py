import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app import dependencies as deps
from app.errors import BlogApiError
from app.schemas.blog import Post, PreviewPost
from app.services.posts_service import PostsService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PreviewPost])
def list_posts(
    locale: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
    settings: Settings = Depends(deps.get_settings),
):
    """Get preview metadata for every post in a locale."""
    locale = locale or settings.DEFAULT_LOCALE
    try:
        return service.list_previews(locale)
    except BlogApiError as e:
        logger.error(f"Error listing posts for locale {locale}: {e}")
        return _error_response(e)


@router.get("/posts/{slug}", response_model=Post)
def get_post(
    slug: str,
    locale: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
    settings: Settings = Depends(deps.get_settings),
):
    """Get a single post by slug."""
    locale = locale or settings.DEFAULT_LOCALE
    try:
        return service.get_post(slug, locale)
    except BlogApiError as e:
        logger.error(f"Error retrieving post {slug}/{locale}: {e}")
        return _error_response(e)


def _error_response(error: BlogApiError) -> PlainTextResponse:
    return PlainTextResponse(f"ERROR: {error}", status_code=500)
