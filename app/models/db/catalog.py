"""
Product catalog models: Categories, Products and their Images
"""

from typing import List, Optional

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """
    Categorías de productos organizadas en árbol (parent_id nulo = categoría raíz).

    El árbol se carga completo y se recorre en memoria con CategoryTree, por
    eso no hay colección de hijos mapeada.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    __table_args__ = (Index("idx_categories_parent", parent_id),)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}', parent_id={self.parent_id})>"


class Product(Base, TimestampMixin):
    """Productos publicados por una tienda"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    brand = Column(String(100), nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    inventory = Column(Integer, nullable=False, default=0)
    description = Column(Text)

    # Foreign Keys
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False)

    # Relationships
    category: Mapped["Category"] = relationship("Category", lazy="joined")
    images: Mapped[List["Image"]] = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Image.id",
        lazy="selectin",
    )

    # Índices
    __table_args__ = (
        UniqueConstraint("shop_id", "name", name="uq_products_shop_name"),
        CheckConstraint("inventory >= 0", name="check_inventory_non_negative"),
        Index("idx_products_shop", shop_id),
        Index("idx_products_category", category_id),
        Index("idx_products_brand_name", brand, name),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', brand='{self.brand}', price={self.price})>"


class Image(Base, TimestampMixin):
    """Imágenes de producto almacenadas en Cloudinary"""

    __tablename__ = "images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_name = Column(String(255), nullable=False)
    file_type = Column(String(100))
    image_url = Column(String(1000), nullable=False)
    public_id = Column(String(500), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    product: Mapped[Optional["Product"]] = relationship("Product", back_populates="images")

    __table_args__ = (Index("idx_images_product", product_id),)

    def __repr__(self):
        return f"<Image(id={self.id}, file_name='{self.file_name}')>"
