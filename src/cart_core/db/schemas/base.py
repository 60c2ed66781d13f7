"""
SQLAlchemy declarative base for the carts schema.

Alembic autogenerate compares migrations against Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
