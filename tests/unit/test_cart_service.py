from unittest.mock import MagicMock

import pytest

from cart_core.errors import ErrorCode, InvalidParameterError, NotFoundError
from cart_core.models import Cart
from cart_core.services.cart import get_anonymous_cart, regroup_anonymous_cart


def stored_cart() -> Cart:
    return Cart.model_validate(
        {
            "_id": "cart-1",
            "items": [{"_id": "i1", "shopId": "s1", "supportedFulfillmentTypes": ["shipping", "pickup"]}],
            "shipping": [{"_id": "g1", "shopId": "s1", "type": "shipping", "itemIds": ["i1", "i9"]}],
        }
    )


def test_get_anonymous_cart_returns_cart():
    store = MagicMock()
    store.anonymous_cart_by_cart_id.return_value = stored_cart()

    cart = get_anonymous_cart(store, "cart-1", "tok")

    assert cart.id == "cart-1"
    store.anonymous_cart_by_cart_id.assert_called_once_with("cart-1", "tok")


def test_get_anonymous_cart_not_found():
    store = MagicMock()
    store.anonymous_cart_by_cart_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        get_anonymous_cart(store, "cart-1", "bad-token")
    assert exc_info.value.code == ErrorCode.CART_NOT_FOUND


def test_regroup_saves_allocated_cart(id_sequence):
    store = MagicMock()
    store.anonymous_cart_by_cart_id.return_value = stored_cart()

    result = regroup_anonymous_cart(store, "cart-1", "tok", id_generator=id_sequence)

    assert [(g.id, g.type, g.item_ids) for g in result.groups] == [
        ("g1", "shipping", ["i1"]),
        ("group-1", "pickup", ["i1"]),
    ]
    store.save_cart.assert_called_once_with(result)


def test_regroup_propagates_store_errors():
    store = MagicMock()
    store.anonymous_cart_by_cart_id.side_effect = InvalidParameterError("You must provide a cartId")

    with pytest.raises(InvalidParameterError):
        regroup_anonymous_cart(store, None, "tok")
    store.save_cart.assert_not_called()


def test_regroup_does_not_save_missing_cart():
    store = MagicMock()
    store.anonymous_cart_by_cart_id.return_value = None

    with pytest.raises(NotFoundError):
        regroup_anonymous_cart(store, "cart-1", "tok")
    store.save_cart.assert_not_called()
