"""Cart mutation service — loads a cart, regroups it, and persists the result."""

import logging

from cart_core.db.carts import CartStore
from cart_core.errors import NotFoundError
from cart_core.ids import IdGenerator, random_id
from cart_core.models import Cart
from cart_core.services.fulfillment_groups import update_cart_fulfillment_groups

logger = logging.getLogger(__name__)


def get_anonymous_cart(store: CartStore, cart_id: str | None, cart_token: str | None) -> Cart:
    cart = store.anonymous_cart_by_cart_id(cart_id, cart_token)
    if cart is None:
        raise NotFoundError(f"Cart {cart_id} not found for the given token")
    return cart


def regroup_anonymous_cart(
    store: CartStore,
    cart_id: str | None,
    cart_token: str | None,
    id_generator: IdGenerator = random_id,
) -> Cart:
    """Recompute fulfillment groups for an anonymous cart and save it.

    The caller must serialize concurrent mutations of the same cart.
    """
    cart = get_anonymous_cart(store, cart_id, cart_token)
    updated = update_cart_fulfillment_groups(cart, id_generator=id_generator)
    store.save_cart(updated)
    logger.info("Regrouped cart %s into %d fulfillment groups", updated.id, len(updated.groups or []))
    return updated
