"""
User, role and profile models
"""

from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .address import Address
    from .shop import Shop


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(Base):
    """Roles de seguridad (ROLE_USER, ROLE_ADMIN, ROLE_SHOP_OWNER)"""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False)

    def __repr__(self):
        return f"<Role(name='{self.name}')>"


class User(Base, TimestampMixin):
    """
    Usuario registrado de la plataforma.

    Attributes:
        first_name / last_name: Datos personales
        email: Email único, usado como login
        password_hash: Hash bcrypt de la contraseña
        roles: Roles asignados
        account: Perfil extendido (1:1)
        shop: Tienda propia, si la tiene (0..1)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    roles: Mapped[List["Role"]] = relationship("Role", secondary=user_roles, lazy="selectin")
    account: Mapped["UserAccount"] = relationship(
        "UserAccount",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    shop: Mapped["Shop"] = relationship("Shop", back_populates="owner", uselist=False, lazy="selectin")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"

    @property
    def role_names(self) -> list[str]:
        return sorted(role.name for role in self.roles)

    @property
    def shop_id(self) -> int | None:
        return self.shop.id if self.shop else None

    def has_role(self, role_name: str) -> bool:
        return any(role.name == role_name for role in self.roles)


class UserAccount(Base, TimestampMixin):
    """Perfil de la cuenta: preferencias, datos de contacto y direcciones guardadas"""

    __tablename__ = "user_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    username = Column(String(50), unique=True, nullable=True)
    profile_picture_url = Column(String(500))
    phone_number = Column(String(30))
    date_of_birth = Column(Date)
    gender = Column(String(10))  # MALE, FEMALE, OTHER

    # Preferences
    dashboard_color = Column(String(7), nullable=False, default="#FFFFFF")
    preferred_theme = Column(String(10), nullable=False, default="LIGHT")
    preferred_language = Column(String(10), nullable=False, default="en")
    account_status = Column(String(20), nullable=False, default="PENDING")

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="account")
    addresses: Mapped[List["Address"]] = relationship(
        "Address",
        back_populates="user_account",
        cascade="all, delete-orphan",
        order_by="Address.id",
        lazy="selectin",
    )

    __table_args__ = (Index("idx_user_accounts_user", user_id),)

    def __repr__(self):
        return f"<UserAccount(user_id={self.user_id}, username='{self.username}')>"

    @property
    def age(self) -> int:
        """Edad en años completos según date_of_birth (0 si no se conoce)."""
        if not self.date_of_birth:
            return 0
        today = date.today()
        born = self.date_of_birth
        return today.year - born.year - ((today.month, today.day) < (born.month, born.day))
