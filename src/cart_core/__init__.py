"""
Cart fulfillment package.

Cart models, fulfillment group allocation, and cart storage live here.
Lambda handlers in src/handlers/ are thin wrappers that call into cart_core/.
"""

__all__: list[str] = []
