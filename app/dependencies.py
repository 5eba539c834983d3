import httpx
from fastapi import Depends, Request

from app.repos.posts_repo import GitHubPostsRepo
from app.services.posts_service import PostsService
from app.settings import Settings


def get_settings(request: Request) -> Settings:
    """Settings bound to the running app by create_app()."""
    return request.app.state.settings


def get_http_client(settings: Settings = Depends(get_settings)):
    client = httpx.Client(timeout=httpx.Timeout(settings.FETCH_TIMEOUT_SECONDS))
    try:
        yield client
    finally:
        client.close()


def get_posts_repo(
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    return GitHubPostsRepo(client, settings)


def get_posts_service(
    repo=Depends(get_posts_repo),
    settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        extension=settings.POSTS_EXTENSION,
        max_workers=settings.FETCH_CONCURRENCY,
        failure_policy=settings.AGGREGATION_FAILURE_POLICY,
    )
