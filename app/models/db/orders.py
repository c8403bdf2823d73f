"""
Order management models
"""

from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product


class Order(Base, TimestampMixin):
    """Órdenes de compra generadas a partir del carrito"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False)
    order_date = Column(Date, nullable=False, default=date.today)
    total_amount = Column(Numeric(12, 2), nullable=False)
    # PENDING, CONFIRMED, PROCESSING, SHIPPED, IN_TRANSIT, DELIVERED, CANCELLED
    order_status = Column(String(20), nullable=False, default="PENDING")

    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="selectin",
    )

    # Índices
    __table_args__ = (
        Index("idx_orders_user", user_id),
        Index("idx_orders_shop", shop_id),
        Index("idx_orders_status", order_status),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, status='{self.order_status}', total={self.total_amount})>"


class OrderItem(Base, TimestampMixin):
    """Items individuales de una orden"""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)  # Precio unitario al momento de la compra

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product"] = relationship("Product", lazy="joined")

    __table_args__ = (
        Index("idx_order_items_order", order_id),
        Index("idx_order_items_product", product_id),
    )

    def __repr__(self):
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity}, price={self.price})>"

    @property
    def product_name(self) -> str | None:
        return self.product.name if self.product else None

    @property
    def product_brand(self) -> str | None:
        return self.product.brand if self.product else None
