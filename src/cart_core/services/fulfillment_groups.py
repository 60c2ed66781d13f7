"""Fulfillment group allocation for carts.

A cart needs one fulfillment group per fulfillment type per shop, each holding
only that shop's items. Every time a cart changes, missing groups are created,
every item is assigned to the groups it belongs in, and ids of items that have
left the cart are dropped. Groups themselves are never removed.
"""

import logging

from cart_core.errors import InvalidCartError
from cart_core.ids import IdGenerator, random_id
from cart_core.models import DEFAULT_FULFILLMENT_TYPE, Cart, CartItem, FulfillmentGroup

logger = logging.getLogger(__name__)


def find_group(groups: list[FulfillmentGroup], shop_id: str, fulfillment_type: str) -> FulfillmentGroup | None:
    """Return the group for this shop and fulfillment type, if the cart has one."""
    return next((g for g in groups if g.shop_id == shop_id and g.type == fulfillment_type), None)


def fulfillment_types_for_item(item: CartItem) -> list[str]:
    """Types an item must be grouped under.

    An explicit selection wins. Otherwise the item belongs in a group for every
    type it supports, falling back to shipping.
    """
    if item.selected_fulfillment_type:
        return [item.selected_fulfillment_type]
    return item.supported_fulfillment_types or [DEFAULT_FULFILLMENT_TYPE]


def _add_item_to_group(
    groups: list[FulfillmentGroup],
    fulfillment_type: str,
    item: CartItem,
    id_generator: IdGenerator,
) -> None:
    group = find_group(groups, item.shop_id, fulfillment_type)
    if group is None:
        group = FulfillmentGroup(
            id=id_generator(),
            shop_id=item.shop_id,
            type=fulfillment_type,
            item_ids=[item.id],
        )
        groups.append(group)
        logger.debug("Created %s group %s for shop %s", fulfillment_type, group.id, item.shop_id)
    elif group.item_ids is None:
        group.item_ids = [item.id]
    elif item.id not in group.item_ids:
        group.item_ids.append(item.id)


def update_cart_fulfillment_groups(cart: Cart | None, id_generator: IdGenerator = random_id) -> Cart:
    """Return a copy of ``cart`` with its fulfillment groups brought up to date.

    Memberships are only ever added here. An item whose selected type changes
    keeps its membership in groups it was added to earlier for as long as it
    stays in the cart; only items that left the cart are pruned.
    """
    if cart is None:
        raise InvalidCartError("Cannot update fulfillment groups without a cart")

    updated = cart.model_copy(deep=True)
    groups = list(updated.groups or [])

    for item in updated.items or []:
        for fulfillment_type in fulfillment_types_for_item(item):
            _add_item_to_group(groups, fulfillment_type, item, id_generator)

    # Items may also have been removed since the groups were last updated
    cart_item_ids = updated.item_ids()
    for group in groups:
        group.item_ids = [item_id for item_id in group.item_ids or [] if item_id in cart_item_ids]

    updated.groups = groups
    return updated
