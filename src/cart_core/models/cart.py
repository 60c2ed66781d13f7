"""Pydantic models for carts and their fulfillment groups.

Stored JSON uses camelCase keys and ``_id``. Models accept either the alias or
the field name and keep unknown keys, so a load/save round trip is lossless.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FULFILLMENT_TYPE = "shipping"


class _CartDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class CartItem(_CartDocument):
    id: str = Field(alias="_id")
    shop_id: str = Field(alias="shopId")
    supported_fulfillment_types: list[str] | None = Field(default=None, alias="supportedFulfillmentTypes")
    selected_fulfillment_type: str | None = Field(default=None, alias="selectedFulfillmentType")


class FulfillmentGroup(_CartDocument):
    id: str = Field(alias="_id")
    shop_id: str = Field(alias="shopId")
    type: str
    item_ids: list[str] | None = Field(default=None, alias="itemIds")


class Cart(_CartDocument):
    id: str = Field(alias="_id")
    items: list[CartItem] | None = None
    groups: list[FulfillmentGroup] | None = Field(default=None, alias="shipping")
    billing: Any = None
    workflow: Any = None
    anonymous_access_token: str | None = Field(default=None, alias="anonymousAccessToken")
    shop_id: str | None = Field(default=None, alias="shopId")
    account_id: str | None = Field(default=None, alias="accountId")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    def item_ids(self) -> set[str]:
        return {item.id for item in self.items or []}
