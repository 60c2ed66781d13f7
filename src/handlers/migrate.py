"""Migration handler — applies pending Alembic revisions to the carts database."""

from typing import Any

from cart_core.services.migration import run_migrations


def handler(event: dict[str, Any], context: object) -> dict[str, str]:
    return run_migrations()
