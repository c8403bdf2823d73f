"""
Shopping cart models
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product


class Cart(Base, TimestampMixin):
    """Carrito de compras de un usuario (uno por usuario)"""

    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))

    items: Mapped[List["CartItem"]] = relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Cart(id={self.id}, user_id={self.user_id}, total={self.total_amount})>"

    @property
    def shop_id(self) -> int | None:
        """Tienda de los productos del carrito (todos pertenecen a la misma)."""
        return self.items[0].product.shop_id if self.items else None


class CartItem(Base, TimestampMixin):
    """Línea del carrito con el precio unitario capturado al agregar el producto"""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Numeric(12, 2), nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)

    cart: Mapped["Cart"] = relationship("Cart", back_populates="items")
    product: Mapped["Product"] = relationship("Product", lazy="joined")

    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="uq_cart_items_cart_product"),
        Index("idx_cart_items_product", product_id),
    )

    def __repr__(self):
        return f"<CartItem(product_id={self.product_id}, quantity={self.quantity}, unit_price={self.unit_price})>"

    @property
    def product_name(self) -> str | None:
        return self.product.name if self.product else None
