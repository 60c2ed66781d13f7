"""Shared test fixtures for the cart service."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def id_sequence():
    """Deterministic group id generator: group-1, group-2, ..."""
    counter = {"n": 0}

    def _next_id() -> str:
        counter["n"] += 1
        return f"group-{counter['n']}"

    return _next_id


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from cart_core.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.aurora_host} port={config.aurora_port} "
        f"dbname={config.aurora_database} user={config.aurora_user} "
        f"password={config.aurora_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def stored_cart(pg_connection):
    """Insert an anonymous cart row and delete it afterwards."""
    import json
    import uuid

    from cart_core.tokens import hash_token

    cart_id = f"cart-{uuid.uuid4().hex[:12]}"
    token = "anon-token-123"
    items = [
        {"_id": "i1", "shopId": "s1", "supportedFulfillmentTypes": ["shipping", "pickup"], "quantity": 2},
        {"_id": "i2", "shopId": "s1", "supportedFulfillmentTypes": ["shipping"]},
    ]
    shipping = [{"_id": "g1", "shopId": "s1", "type": "shipping", "itemIds": ["i1", "gone"]}]

    with pg_connection.cursor() as cur:
        cur.execute(
            """
            INSERT INTO carts (id, anonymous_access_token, shop_id, items, shipping)
            VALUES (%s, %s, %s, %s, %s)
        """,
            (cart_id, hash_token(token), "s1", json.dumps(items), json.dumps(shipping)),
        )
        pg_connection.commit()

    yield {"cart_id": cart_id, "token": token}

    with pg_connection.cursor() as cur:
        cur.execute("DELETE FROM carts WHERE id = %s", (cart_id,))
        pg_connection.commit()
