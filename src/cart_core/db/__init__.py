"""
Database ORM models and clients for carts.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from cart_core.db.carts import CartStore
from cart_core.db.schemas.base import Base
from cart_core.db.schemas.cart import CartRecord

__all__ = ["Base", "CartRecord", "CartStore"]
