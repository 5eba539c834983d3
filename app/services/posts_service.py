import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from pydantic import ValidationError

from app.errors import (
    BlogApiError,
    ContentParseError,
    HeaderParseError,
    MalformedDocument,
    TreeDecodeError,
)
from app.schemas.blog import Post, PreviewPost, TreeItem, TreeResponse
from app.services.frontmatter_parser import parse_frontmatter

logger = logging.getLogger(__name__)

ABORT = "abort"
SKIP = "skip"


class PostsService:
    def __init__(
        self,
        repo,
        extension: str = ".mdx",
        max_workers: int = 1,
        failure_policy: str = ABORT,
    ):
        if failure_policy not in (ABORT, SKIP):
            raise ValueError(f"Unknown failure policy: {failure_policy}")
        self.repo = repo
        self.extension = extension
        self.max_workers = max(1, max_workers)
        self.failure_policy = failure_policy

    def get_post(self, slug: str, locale: str) -> Post:
        document = self.repo.fetch_post_document(slug, locale)
        try:
            frontmatter, content = parse_frontmatter(document)
        except (HeaderParseError, MalformedDocument) as e:
            raise ContentParseError(
                f"error parsing frontmatter of {slug}/{locale}", cause=e
            ) from e

        if not frontmatter.slug:
            frontmatter.slug = slug
        return Post(frontmatter=frontmatter, content=content.strip())

    def list_previews(self, locale: str) -> List[PreviewPost]:
        """Preview every post available in ``locale``, in tree order."""
        tree = decode_tree(self.repo.fetch_tree())
        slugs = [
            derive_slug(item.path)
            for item in select_locale_items(tree.tree, locale, self.extension)
        ]
        logger.info(f"Found {len(slugs)} posts for locale {locale}")

        posts = self._fetch_posts(slugs, locale)
        return [PreviewPost.from_post(post) for post in posts if post is not None]

    def _fetch_posts(self, slugs: List[str], locale: str) -> List[Optional[Post]]:
        if not slugs:
            return []

        results: List[Optional[Post]] = [None] * len(slugs)
        workers = min(self.max_workers, len(slugs))
        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            futures = [executor.submit(self.get_post, slug, locale) for slug in slugs]
            # Collect by index so the output keeps tree order
            for index, future in enumerate(futures):
                try:
                    results[index] = future.result()
                except BlogApiError as e:
                    if self.failure_policy == ABORT:
                        raise
                    logger.warning(f"Skipping post {slugs[index]}: {e}")
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
        return results


def decode_tree(raw: bytes) -> TreeResponse:
    try:
        return TreeResponse.model_validate_json(raw)
    except ValidationError as e:
        raise TreeDecodeError("error decoding repository tree", cause=e) from e


def select_locale_items(
    items: List[TreeItem], locale: str, extension: str = ".mdx"
) -> List[TreeItem]:
    suffix = f"/{locale}{extension}"
    return [
        item for item in items if item.type == "blob" and item.path.endswith(suffix)
    ]


def derive_slug(path: str) -> str:
    """'posts/hello-world/en.mdx' -> 'hello-world'"""
    segments = path.split("/")
    if len(segments) < 2:
        raise TreeDecodeError(f"cannot derive slug from path {path!r}")
    return segments[1]
