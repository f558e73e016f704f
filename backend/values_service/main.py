"""Values API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Backing-service handles built once in the lifespan and stored on app.state
    - No traffic is served until StartupCoordinator verified the store and table;
      StartupError propagates out of the lifespan and the server exits
    - Shutdown drains pending intake side effects before closing connections
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from values_service.api.error_handlers import register_error_handlers
from values_service.api.routes import health, values
from values_service.config import Settings, get_settings
from values_service.core.errors import StartupError
from values_service.infrastructure.cache import RedisValueCache
from values_service.infrastructure.database import DatabaseSessionManager
from values_service.infrastructure.notifications import RedisNotificationChannel
from values_service.infrastructure.observability import setup_logging
from values_service.infrastructure.redis_client import create_redis_client
from values_service.infrastructure.value_store import SqlValueStore
from values_service.services.startup_coordinator import StartupCoordinator
from values_service.services.value_intake import ValueIntakeService

logger = logging.getLogger(__name__)


def build_db_manager(settings: Settings) -> DatabaseSessionManager:
    timeout = settings.database_connect_timeout
    return DatabaseSessionManager(
        settings.store_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        connect_args={"timeout": timeout, "command_timeout": timeout},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = build_db_manager(settings)
    store = SqlValueStore(db_manager)
    cache = RedisValueCache(create_redis_client(
        settings.redis_host, settings.redis_port, settings.redis_timeout,
    ))
    channel = RedisNotificationChannel(create_redis_client(
        settings.redis_host, settings.redis_port, settings.redis_timeout,
    ))

    coordinator = StartupCoordinator(
        store,
        max_attempts=settings.startup_max_attempts,
        retry_delay_ms=settings.startup_retry_delay_ms,
    )
    try:
        await coordinator.run()
    except StartupError as e:
        logger.critical(f"Failed to start: {e.message}")
        await db_manager.dispose()
        await cache.close()
        await channel.close()
        raise

    service = ValueIntakeService(store, cache, channel)
    app.state.db_manager = db_manager
    app.state.cache = cache
    app.state.intake_service = service
    logger.info("Values API started")
    yield
    logger.info("Values API shutting down")
    await service.drain()
    await cache.close()
    await channel.close()
    await db_manager.dispose()


app = FastAPI(title="Values API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(values.router)

register_error_handlers(app)
