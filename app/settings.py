import urllib.parse
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Our own API secret, checked against the Authorization header
    API_SECRET: str = ""

    # GitHub
    GITHUB_AUTH_TOKEN: str = ""
    GITHUB_OWNER: str = "mariandotg"
    GITHUB_REPO: str = "blog"
    GITHUB_BRANCH: str = "main"
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_RAW_URL: str = "https://raw.githubusercontent.com"

    # Posts layout
    POSTS_DIR: str = "posts"
    POSTS_EXTENSION: str = ".mdx"
    DEFAULT_LOCALE: str = "en"

    # Outbound fetches
    FETCH_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    FETCH_CONCURRENCY: int = Field(default=4, ge=1)
    AGGREGATION_FAILURE_POLICY: Literal["abort", "skip"] = "abort"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    @property
    def tree_url(self) -> str:
        return (
            f"{self.GITHUB_API_URL.rstrip('/')}/repos/{self.GITHUB_OWNER}/"
            f"{self.GITHUB_REPO}/git/trees/{self.GITHUB_BRANCH}?recursive=1"
        )

    @property
    def raw_posts_url(self) -> str:
        return (
            f"{self.GITHUB_RAW_URL.rstrip('/')}/{self.GITHUB_OWNER}/"
            f"{self.GITHUB_REPO}/{self.GITHUB_BRANCH}/{self.POSTS_DIR}"
        )

    def post_url(self, slug: str, locale: str) -> str:
        # Each part stays a single path segment
        slug = urllib.parse.quote(slug, safe="")
        locale = urllib.parse.quote(locale, safe="")
        return f"{self.raw_posts_url}/{slug}/{locale}{self.POSTS_EXTENSION}"
