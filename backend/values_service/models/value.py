"""Values Table: one append-only row per accepted submission.

Invariants:
    - Single nullable INTEGER column "number"; no primary key, no uniqueness
    - Rows are inserted by intake and never updated or deleted

Design Decisions:
    - Core Table instead of an ORM class: the ORM mapper requires a primary key
      and this table deliberately has none
"""

from sqlalchemy import Column, Integer, Table

from values_service.db.base import Base

VALUES_TABLE = "values"

values_table = Table(
    VALUES_TABLE,
    Base.metadata,
    Column("number", Integer),
)
