"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .api.errors import register_error_handlers
from .core import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    SESSION_MAX_AGE,
    SESSION_SECRET,
    configure_logging,
    engine,
)
from .security import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_RESET:
        logger.warning("DB_RESET is set; dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


def create_app() -> FastAPI:
    configure_logging(LOG_LEVEL)

    app = FastAPI(title="GitHub Posts API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SESSION_SECRET,
        session_cookie="sid",
        max_age=SESSION_MAX_AGE,
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
        domain=COOKIE_DOMAIN,
    )
    app.add_middleware(SecurityHeadersMiddleware)

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    logger.info("Server listening on %s:%s", HOST, PORT)
    uvicorn.run("server.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
