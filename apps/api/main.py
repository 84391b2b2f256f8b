"""FastAPI application main entry point."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.application.services import AuthService, CatalogService, OrderApplicationService
from core.infrastructure.database.config import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from core.infrastructure.logging import configure_logging
from core.infrastructure.security import PasswordHasher, TokenService
from core.settings import AppSettings, get_app_settings

from apps.api.errors import register_exception_handlers
from apps.api.routes import auth, orders, pages, products, users

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the application and wire its components from `settings`.

    Args:
        settings: Explicit configuration; loaded from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_app_settings()
    configure_logging(settings.server.log_level)

    engine = create_engine(settings.database)
    session_factory = create_session_factory(engine)
    hasher = PasswordHasher(rounds=settings.auth.bcrypt_rounds)
    tokens = TokenService(
        secret=settings.auth.jwt_secret.get_secret_value(),
        algorithm=settings.auth.jwt_algorithm,
        ttl_hours=settings.auth.token_ttl_hours,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Cookie Orders API starting up...")
        await init_database(engine)
        yield
        await close_database(engine)
        logger.info("👋 Cookie Orders API shutting down...")

    app = FastAPI(
        title="Cookie Orders API",
        description="Order taking for a small cookie shop",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.order_service = OrderApplicationService(session_factory)
    app.state.auth_service = AuthService(session_factory, hasher, tokens)
    app.state.catalog_service = CatalogService()

    # Configure CORS
    origins = settings.server.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        logger.info(f"→ {request.method} {request.url.path}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"← {request.method} {request.url.path} "
            f"[{response.status_code}] ({duration:.3f}s)"
        )
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix="/api")
    app.include_router(orders.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(pages.router)

    return app


def run() -> None:
    """Console entrypoint: load settings once and serve with uvicorn."""
    import uvicorn

    settings = get_app_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.lower(),
    )


if __name__ == "__main__":
    run()
