"""Request Dependencies: hand the lifespan-built service objects to route handlers.

Invariants:
    - Objects live on app.state, created once by the lifespan
    - A dependency called before startup finished raises RuntimeError
"""

from fastapi import Request

from values_service.infrastructure.database import DatabaseSessionManager
from values_service.infrastructure.cache import RedisValueCache
from values_service.services.value_intake import ValueIntakeService


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized")
    return value


def get_intake_service(request: Request) -> ValueIntakeService:
    return _state(request, "intake_service")


def get_db_manager(request: Request) -> DatabaseSessionManager:
    return _state(request, "db_manager")


def get_cache(request: Request) -> RedisValueCache:
    return _state(request, "cache")
