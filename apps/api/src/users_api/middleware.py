"""CORS setup for the Users API."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

# Response headers browser clients of the users resource must be able to read
EXPOSED_HEADERS = ["Location", "X-Pagination", "Allow"]
ALLOWED_METHODS = ["GET", "HEAD", "POST", "PATCH", "DELETE", "OPTIONS"]

DEV_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Origins allowed to call the API: the configured UI, plus local dev servers outside production."""
    origins = [ui_url.rstrip("/")] if ui_url else []
    if environment.lower() in {"development", "dev", "local"}:
        origins.extend(DEV_ORIGINS)
    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """CORS headers for error responses built outside the middleware; empty for unknown origins."""
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Expose-Headers": ", ".join(EXPOSED_HEADERS),
    }


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["Accept", "Content-Type"],
        expose_headers=EXPOSED_HEADERS,
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
