from typing import Optional


class BlogApiError(Exception):
    """Base error carrying an optional underlying cause."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigError(BlogApiError):
    """Required configuration is missing; raised at startup only."""


class AuthError(BlogApiError):
    pass


class FetchError(BlogApiError):
    """Transport, status, timeout or body-read failure talking to GitHub."""


class TreeDecodeError(BlogApiError):
    pass


class HeaderParseError(BlogApiError):
    pass


class MalformedDocument(BlogApiError):
    pass


class ContentParseError(BlogApiError):
    """Wraps header/body parse failures raised while fetching a post."""
