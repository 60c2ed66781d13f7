"""
Business services for carts.

- fulfillment_groups.py: assigns cart items to per-shop, per-type fulfillment groups
- cart.py: loads, regroups and saves anonymous carts
- migration.py: applies the carts schema with Alembic
"""

from cart_core.services.cart import get_anonymous_cart, regroup_anonymous_cart
from cart_core.services.fulfillment_groups import find_group, update_cart_fulfillment_groups

__all__ = ["find_group", "get_anonymous_cart", "regroup_anonymous_cart", "update_cart_fulfillment_groups"]
