import json
import textwrap

import httpx
import pytest

from app.errors import FetchError
from app.settings import Settings

RAW_BASE = "https://raw.githubusercontent.com/mariandotg/blog/main/posts"
TREE_URL = "https://api.github.com/repos/mariandotg/blog/git/trees/main?recursive=1"


def make_settings(**overrides) -> Settings:
    values = {"API_SECRET": "abc123", "GITHUB_AUTH_TOKEN": "gh-token"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


def tree_bytes(*paths: str, item_type: str = "blob") -> bytes:
    return json.dumps(
        {
            "sha": "abc",
            "tree": [
                {"path": path, "type": item_type, "sha": f"sha-{i}", "url": ""}
                for i, path in enumerate(paths)
            ],
        }
    ).encode()


def post_document(raw: str) -> str:
    return textwrap.dedent(raw).lstrip()


class FakeGitHub:
    """
    Routes requests for a MockTransport to canned responses by URL.
    Unknown URLs answer 404. Every request is recorded in ``requests``.
    """

    def __init__(self, responses: dict[str, httpx.Response | bytes | str]):
        self.responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.get(str(request.url))
        if response is None:
            return httpx.Response(404, text="404: Not Found")
        if isinstance(response, httpx.Response):
            return response
        if isinstance(response, str):
            return httpx.Response(200, text=response)
        return httpx.Response(200, content=response)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    ``documents`` maps (slug, locale) to raw text or an exception to raise.
    """

    def __init__(self, tree: bytes = b'{"tree": []}', documents=None):
        self.tree = tree
        self.documents = documents or {}
        self.calls = []

    def fetch_tree(self) -> bytes:
        self.calls.append("tree")
        if isinstance(self.tree, Exception):
            raise self.tree
        return self.tree

    def fetch_post_document(self, slug: str, locale: str) -> str:
        self.calls.append((slug, locale))
        document = self.documents.get((slug, locale))
        if document is None:
            raise FetchError(f"error fetching post {slug}/{locale}")
        if isinstance(document, Exception):
            raise document
        return document


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_previews_return=None, get_post_return=None, error=None):
        self._list_previews_return = list_previews_return or []
        self._get_post_return = get_post_return
        self.error = error
        self.calls = []

    def list_previews(self, locale: str):
        self.calls.append(("list", locale))
        if self.error:
            raise self.error
        return self._list_previews_return

    def get_post(self, slug: str, locale: str):
        self.calls.append(("get", slug, locale))
        if self.error:
            raise self.error
        return self._get_post_return
