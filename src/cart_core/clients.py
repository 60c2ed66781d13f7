"""Lazy-initialized cart store — reused across warm Lambda invocations."""

from functools import lru_cache

from cart_core.config import get_config
from cart_core.db.carts import CartStore


@lru_cache(maxsize=1)
def get_cart_store() -> CartStore:
    store = CartStore(get_config())
    store.connect()
    return store
