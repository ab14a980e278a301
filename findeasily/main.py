# 📄 File: findeasily/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the FindEasily site, connects the database, mail and photo
# storage, and makes sure everything is ready before the first visitor arrives.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point. The lifespan owns the DatabaseManager, the event
# handler registry with its queue worker, and the FileService, all exposed on app.state for the
# request dependencies.
#
# 🔗 Dependencies:
# - FastAPI framework, Starlette SessionMiddleware, CORS middleware
# - slowapi limiter (shared.core.rate_limiter)
# - findeasily.shared.config.settings
# - findeasily.shared.infrastructure (database, storage)
# - findeasily.shared.events (registry, queue, publisher)
# - findeasily.api (routers, middleware, exception handlers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from findeasily.api.middleware import RequestLoggingMiddleware, register_exception_handlers
from findeasily.api.v1 import api_router
from findeasily.modules.user_management.domain.events.handlers import UserEventSubscribers
from findeasily.modules.user_management.domain.services.token_service import TokenService
from findeasily.modules.user_management.infrastructure.database.token_repository_impl import SQLAlchemyTokenRepository
from findeasily.modules.user_management.infrastructure.external.mail_sender import LoggingMailSender, MailSender
from findeasily.shared.config.settings import Settings, get_settings
from findeasily.shared.core.rate_limiter import limiter
from findeasily.shared.events import AsyncioEventQueue, EventHandlerRegistry, EventPublisher
from findeasily.shared.infrastructure.database.connection import DatabaseManager
from findeasily.shared.infrastructure.storage.file_manager import FileService
from findeasily.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None, mail_sender: Optional[MailSender] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to use, the cached environment settings by default
        mail_sender: Outbound mail delivery, a logging sender by default

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    mail_sender = mail_sender or LoggingMailSender()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting up ({settings.ENVIRONMENT})")

        database = DatabaseManager(settings.DATABASE_URL, echo=settings.DB_ECHO)
        await database.initialize()
        if settings.DB_CREATE_ALL:
            await database.create_all()

        @asynccontextmanager
        async def token_service_factory() -> AsyncIterator[TokenService]:
            async with database.session() as session:
                yield TokenService(
                    SQLAlchemyTokenRepository(session),
                    expire_hours=settings.PASSWORD_RESET_TOKEN_EXPIRE_HOURS,
                )

        registry = EventHandlerRegistry()
        UserEventSubscribers(mail_sender, token_service_factory, settings.SITE_URL).register(registry)
        event_queue = AsyncioEventQueue(registry, max_size=settings.EVENT_QUEUE_MAX_SIZE)
        await event_queue.start()

        app.state.database = database
        app.state.event_queue = event_queue
        app.state.event_publisher = EventPublisher(event_queue)
        app.state.file_service = FileService(
            settings.UPLOAD_DIR,
            max_size=settings.MAX_UPLOAD_SIZE,
            allowed_extensions=settings.allowed_image_extensions,
        )
        logger.info("Startup complete")

        try:
            yield
        finally:
            logger.info("Shutting down")
            await event_queue.stop(drain=True)
            await database.close()
            logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.limiter = limiter

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # last added runs first
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE,
        https_only=settings.ENVIRONMENT == "production",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Home page: application information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": "/health",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used when running ``python -m findeasily.main`` or the ``findeasily`` script.
    """
    settings = get_settings()
    uvicorn.run(
        "findeasily.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
