"""SQLAlchemy Declarative Base: shared metadata for every table the service owns.

Invariants:
    - Base.metadata is the single source of truth for table definitions
    - Startup schema creation runs create_all against this metadata
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Values Service tables."""
    pass
