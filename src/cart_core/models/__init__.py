"""
Pydantic models for carts.
"""

from cart_core.models.cart import DEFAULT_FULFILLMENT_TYPE, Cart, CartItem, FulfillmentGroup

__all__ = ["Cart", "CartItem", "DEFAULT_FULFILLMENT_TYPE", "FulfillmentGroup"]
