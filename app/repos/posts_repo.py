import logging

import httpx

from app.errors import FetchError
from app.settings import Settings

logger = logging.getLogger(__name__)

DOT_SEGMENTS = (".", "..")


class GitHubPostsRepo:
    """Reads post files and the repository tree straight from GitHub."""

    def __init__(self, client: httpx.Client, settings: Settings):
        self.client = client
        self.settings = settings

    def fetch_post_document(self, slug: str, locale: str) -> str:
        message = f"error fetching post {slug}/{locale}"
        if slug in DOT_SEGMENTS or locale in DOT_SEGMENTS:
            raise FetchError(f"{message}: invalid path segment")
        url = self.settings.post_url(slug, locale)
        response = self._get(url, message)
        return response.text

    def fetch_tree(self) -> bytes:
        response = self._get(
            self.settings.tree_url,
            "error fetching repository tree",
            headers={"Accept": "application/vnd.github+json"},
        )
        return response.content

    def _get(self, url: str, message: str, headers: dict | None = None):
        logger.debug(f"GET {url}")
        request_headers = {
            "Authorization": f"Bearer {self.settings.GITHUB_AUTH_TOKEN}",
            **(headers or {}),
        }
        try:
            response = self.client.get(url, headers=request_headers)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(message, cause=e) from e
        return response
