"""
Shop (tenant storefront) model
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .user import User


class Shop(Base, TimestampMixin):
    """Tienda de un usuario. Un usuario puede tener como máximo una tienda."""

    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), unique=True, nullable=False, index=True)
    address = Column(String(255))
    contact_number = Column(String(30))
    contact_email = Column(String(255))
    description = Column(Text)
    owner_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    owner: Mapped["User"] = relationship("User", back_populates="shop")

    def __repr__(self):
        return f"<Shop(id={self.id}, name='{self.name}')>"
