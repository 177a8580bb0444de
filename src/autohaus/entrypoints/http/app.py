from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from autohaus.adapters.local_file_storage import LocalFileStorage
from autohaus.adapters.smtp_email_sender import SmtpEmailSender
from autohaus.entrypoints.http.exception_handlers import register_exception_handlers
from autohaus.entrypoints.http.routes.admin import router as admin_router
from autohaus.entrypoints.http.routes.auth import router as auth_router
from autohaus.entrypoints.http.routes.catalog import router as catalog_router
from autohaus.entrypoints.http.routes.health import router as health_router
from autohaus.entrypoints.http.routes.home import router as home_router
from autohaus.entrypoints.http.routes.leads import router as leads_router
from autohaus.entrypoints.http.routes.staff import router as staff_router
from autohaus.infra.config import Settings, get_settings
from autohaus.infra.db.session import Database
from autohaus.infra.logging_config import configure_logging

logger = logging.getLogger(__name__)

SESSION_MAX_AGE_SECONDS = 60 * 60 * 8


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    configure_logging(settings.LOG_LEVEL)

    database: Database | None = app.state.database
    if database is not None:
        database.connect()
        logger.info("Database connected", extra={"app_env": settings.APP_ENV})
    else:
        logger.warning("DATABASE_URL is not set; catalog endpoints will fail")

    try:
        yield
    finally:
        if database is not None:
            database.disconnect()
            logger.info("Database disconnected")


def _database_from(settings: Settings) -> Database | None:
    if not settings.DATABASE_URL:
        return None
    return Database(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        echo=settings.DB_ECHO,
    )


def build_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Autohaus API",
        description="""
        Dealership inventory and lead-capture API.

        ## Features
        - Browse gas and electric inventory with filters, sorting, pagination and facets
        - Vehicle detail pages with related listings and structured data
        - Contact, test-drive, quick-message and financing forms
        - Back-office inventory and staff management

        ## Authentication
        Public endpoints need none. `/admin/*` requires an admin session
        obtained from `POST /login` (signed cookie).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Autohaus Team",
            "email": "dev@autohaus.example",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    # Process-wide resources shared by request dependencies
    app.state.settings = settings
    app.state.database = database if database is not None else _database_from(settings)
    app.state.email_sender = SmtpEmailSender(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        sender=settings.sender_email,
        use_tls=settings.SMTP_USE_TLS,
        timeout=settings.SMTP_TIMEOUT_SECONDS,
    )
    app.state.file_storage = LocalFileStorage(
        settings.UPLOAD_DIR, url_prefix=settings.UPLOAD_URL_PREFIX
    )

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.APP_SECRET,
        max_age=SESSION_MAX_AGE_SECONDS,
        https_only=settings.APP_ENV == "production",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers (staff before the /admin/{kind} routes)
    app.include_router(health_router)
    app.include_router(home_router)
    app.include_router(auth_router)
    app.include_router(staff_router)
    app.include_router(admin_router)
    app.include_router(catalog_router)
    app.include_router(leads_router)

    return app


app = build_app()
