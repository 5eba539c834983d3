import logging
import secrets

from fastapi import Request, Security
from fastapi.responses import JSONResponse
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_401_UNAUTHORIZED

from app.errors import AuthError

logger = logging.getLogger(__name__)

API_KEY_NAME = "Authorization"
BEARER_PREFIX = "Bearer "
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


class AccessGate:
    """Checks the caller's Authorization header against a fixed secret."""

    def __init__(self, secret: str):
        self.secret = secret

    def authorize(self, credential: str | None) -> bool:
        return self.check(credential) is None

    def check(self, credential: str | None) -> str | None:
        """Return the reason for denying ``credential``, or None to allow it."""
        value = (credential or "").strip()
        if not value:
            return "Authorization header is empty or missing"

        value = value.removeprefix(BEARER_PREFIX)
        if not secrets.compare_digest(value.encode(), self.secret.encode()):
            return "Unauthorized access, wrong secret"
        return None

    def __call__(self, api_key: str | None = Security(api_key_header)) -> str:
        reason = self.check(api_key)
        if reason:
            raise AuthError(reason)
        return api_key


def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=HTTP_401_UNAUTHORIZED, content={"error": str(exc)})
