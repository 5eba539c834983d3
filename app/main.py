import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI

from app.errors import AuthError, ConfigError
from app.routers import posts
from app.security import AccessGate, auth_error_handler
from app.settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info(
        f"Serving posts from {settings.GITHUB_OWNER}/{settings.GITHUB_REPO}"
        f"@{settings.GITHUB_BRANCH}"
    )
    try:
        yield
    finally:
        logger.info("Repo Blog API shut down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around ``settings``.

    Refuses to build an app when API_SECRET or GITHUB_AUTH_TOKEN is missing.
    """
    settings = settings or Settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not settings.API_SECRET:
        raise ConfigError("API_SECRET is not configured")
    if not settings.GITHUB_AUTH_TOKEN:
        raise ConfigError("GITHUB_AUTH_TOKEN is not configured")

    gate = AccessGate(settings.API_SECRET)
    app = FastAPI(
        title="Repo Blog API",
        description="Blog posts served from a GitHub repository",
        lifespan=lifespan,
        dependencies=[Depends(gate)],
    )
    app.state.settings = settings
    app.add_exception_handler(AuthError, auth_error_handler)

    app.include_router(posts.router)

    @app.get("/")
    async def root():
        return {"message": "Repo Blog API is running"}

    return app


def run():
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
