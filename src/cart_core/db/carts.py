"""Aurora PostgreSQL cart store — connection management, cart lookup and persistence."""

import json
import logging
from typing import Any

import boto3
import psycopg
from psycopg.rows import dict_row
from pydantic import ValidationError
from sqlalchemy.engine import URL

from cart_core.config import Config
from cart_core.errors import CartStorageError, InvalidCartError, InvalidParameterError, NotFoundError
from cart_core.models import Cart
from cart_core.tokens import hash_token

logger = logging.getLogger(__name__)

_JSON_COLUMNS = ("items", "shipping", "billing", "workflow")

_ANONYMOUS_CART_SQL = """
    SELECT id, anonymous_access_token, account_id, shop_id,
           items, shipping, billing, workflow, created_at, updated_at
    FROM {table}
    WHERE id = %s
      AND anonymous_access_token = %s
    LIMIT 1
"""

_SAVE_CART_SQL = """
    UPDATE {table}
    SET items = %s, shipping = %s, billing = %s, workflow = %s,
        updated_at = NOW(), version = version + 1
    WHERE id = %s
"""


def _decode_json(value: str | None) -> Any:
    if not value:
        return None
    return json.loads(value)


def _encode_json(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value)


def row_to_cart(row: dict[str, Any]) -> Cart:
    """Build a Cart from a carts row, decoding its JSON text columns."""
    try:
        decoded = {column: _decode_json(row.get(column)) for column in _JSON_COLUMNS}
    except json.JSONDecodeError as e:
        raise InvalidCartError(f"Cart {row.get('id')} has malformed JSON: {e}") from e

    try:
        return Cart(
            id=row["id"],
            items=decoded["items"],
            groups=decoded["shipping"],
            billing=decoded["billing"],
            workflow=decoded["workflow"],
            anonymous_access_token=row.get("anonymous_access_token"),
            account_id=row.get("account_id"),
            shop_id=row.get("shop_id"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )
    except ValidationError as e:
        raise InvalidCartError(f"Cart {row.get('id')} failed validation: {e}") from e


def cart_to_params(cart: Cart) -> tuple[str | None, str | None, str | None, str | None, str]:
    """JSON-encode the cart sub-documents in the column order of the update statement."""
    dumped = cart.model_dump(mode="json", by_alias=True, include={"items", "groups", "billing", "workflow"})
    return (
        _encode_json(dumped.get("items")),
        _encode_json(dumped.get("shipping")),
        _encode_json(dumped.get("billing")),
        _encode_json(dumped.get("workflow")),
        cart.id,
    )


class CartStore:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.aurora_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.aurora_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.aurora_host,
            "port": str(self._config.aurora_port),
            "dbname": self._config.aurora_database,
            "user": self._config.aurora_user,
            "password": self._config.aurora_password,
        }

    def connection_params(self) -> dict[str, Any]:
        """Resolved connection settings, from Secrets Manager when a secret ARN is configured."""
        creds = self._get_credentials()
        return {
            "host": creds.get("host", self._config.aurora_host),
            "port": int(creds.get("port", self._config.aurora_port)),
            "dbname": creds.get("dbname", self._config.aurora_database),
            "user": creds.get("username", creds.get("user", self._config.aurora_user)),
            "password": creds.get("password", self._config.aurora_password),
        }

    def sqlalchemy_url(self) -> str:
        params = self.connection_params()
        url = URL.create(
            "postgresql+psycopg",
            username=params["user"],
            password=params["password"],
            host=params["host"],
            port=params["port"],
            database=params["dbname"],
        )
        return url.render_as_string(hide_password=False)

    def connect(self) -> psycopg.Connection:
        try:
            self._conn = psycopg.connect(**self.connection_params(), row_factory=dict_row)
        except psycopg.Error as e:
            raise CartStorageError(f"Could not connect to the carts database: {e}") from e
        return self._conn

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection, reconnecting if a warm connection was dropped."""
        if self._conn is None or self._conn.closed:
            return self.connect()
        return self._conn

    def _end_transaction(self, conn: psycopg.Connection) -> None:
        """Roll back so a reused connection never sits idle or aborted in a transaction."""
        try:
            conn.rollback()
        except psycopg.Error:
            logger.warning("Rollback failed, dropping the carts connection", exc_info=True)
            self.disconnect()

    def health_check(self) -> bool:
        try:
            conn = self._require_connection()
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            self._end_transaction(conn)
            return True
        except Exception:
            return False

    def anonymous_cart_by_cart_id(self, cart_id: str | None, cart_token: str | None) -> Cart | None:
        """Look up an anonymous cart by id and raw access token.

        Returns None when no cart matches the id and hashed token.
        """
        if not cart_id:
            raise InvalidParameterError("You must provide a cartId")

        anonymous_access_token = hash_token(cart_token)
        logger.debug("anonymous_cart_by_cart_id starting for cart %s", cart_id)

        conn = self._require_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(
                    _ANONYMOUS_CART_SQL.format(table=self._config.carts_table),
                    (cart_id, anonymous_access_token),
                )
                row = cur.fetchone()
        except psycopg.Error as e:
            logger.exception("Cart lookup failed for cart %s", cart_id)
            raise CartStorageError(f"Cart lookup failed: {e}") from e
        finally:
            self._end_transaction(conn)

        if row is None:
            return None
        return row_to_cart(row)

    def save_cart(self, cart: Cart) -> None:
        conn = self._require_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(_SAVE_CART_SQL.format(table=self._config.carts_table), cart_to_params(cart))
                updated = cur.rowcount
            conn.commit()
        except psycopg.Error as e:
            self._end_transaction(conn)
            logger.exception("Cart save failed for cart %s", cart.id)
            raise CartStorageError(f"Cart save failed: {e}") from e

        if updated == 0:
            raise NotFoundError(f"Cart {cart.id} not found")

    def __enter__(self) -> "CartStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
