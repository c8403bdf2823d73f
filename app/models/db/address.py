"""
Saved address model
"""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .user import UserAccount


class Address(Base, TimestampMixin):
    """
    Dirección guardada de una cuenta.

    Por cuenta y por address_type existe como máximo una dirección con
    is_default=True (y exactamente una mientras el grupo no esté vacío).
    """

    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255), nullable=False)
    house_number = Column(String(20))
    floor = Column(String(20))
    city = Column(String(100), nullable=False)
    state = Column(String(100))
    zip = Column(String(20))
    country = Column(String(100), nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    address_type = Column(String(10), nullable=False)  # SHIPPING, BILLING, BOTH

    user_account_id = Column(Integer, ForeignKey("user_accounts.id", ondelete="CASCADE"), nullable=False)

    user_account: Mapped["UserAccount"] = relationship("UserAccount", back_populates="addresses")

    __table_args__ = (
        Index("idx_addresses_account_type", user_account_id, address_type),
        Index("idx_addresses_location", country, city, state),
    )

    def __repr__(self):
        return f"<Address(id={self.id}, type='{self.address_type}', default={self.is_default})>"
