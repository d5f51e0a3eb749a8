"""Customer Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CustomerServiceError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, schema and token store initialized on startup via lifespan

Run with:
    uvicorn customer_service.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_service.api.error_handlers import register_error_handlers
from customer_service.api.routes import customers, health, oauth
from customer_service.config import get_settings
from customer_service.infrastructure.database import init_db
from customer_service.infrastructure.observability import setup_logging
from customer_service.infrastructure.token_store import init_token_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    init_token_store(
        settings.oauth2_client_id,
        settings.oauth2_client_secret,
        settings.oauth2_scopes,
        settings.oauth2_token_ttl_seconds,
    )
    logger.info("Customer Service API started")
    yield
    await manager.dispose()
    logger.info("Customer Service API shutting down")


app = FastAPI(
    title="Customer Service API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(oauth.router)
app.include_router(customers.router)

register_error_handlers(app)
