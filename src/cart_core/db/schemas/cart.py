"""SQLAlchemy ORM model for the carts table."""

from sqlalchemy import Index, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from cart_core.db.schemas.base import Base


class CartRecord(Base):
    __tablename__ = "carts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    anonymous_access_token: Mapped[str | None] = mapped_column(String(64))
    account_id: Mapped[str | None] = mapped_column(String(64))
    shop_id: Mapped[str | None] = mapped_column(String(64))
    # JSON documents stored as text; decoded by CartStore
    items: Mapped[str | None] = mapped_column(Text)
    shipping: Mapped[str | None] = mapped_column(Text)
    billing: Mapped[str | None] = mapped_column(Text)
    workflow: Mapped[str | None] = mapped_column(Text)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
    updated_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
    version: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")

    __table_args__ = (
        Index("idx_carts_anonymous_access_token", "anonymous_access_token"),
        Index("idx_carts_account_id", "account_id"),
    )
