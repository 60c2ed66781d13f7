"""Recompute and persist the fulfillment groups of an anonymous cart."""

import logging
from typing import Any

from cart_core.clients import get_cart_store
from cart_core.errors import CartServiceError
from cart_core.services.cart import regroup_anonymous_cart

from handlers.responses import cart_request_params, configure_logging, error_response, json_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    configure_logging()
    cart_id, cart_token = cart_request_params(event)

    try:
        cart = regroup_anonymous_cart(get_cart_store(), cart_id, cart_token)
    except CartServiceError as e:
        logger.warning("Fulfillment regroup failed for %s: %s", cart_id, e.message)
        return error_response(e)

    groups = [group.model_dump(mode="json", by_alias=True) for group in cart.groups or []]
    return json_response(200, {"cartId": cart.id, "shipping": groups})
