"""
Unit tests for domain building blocks and their HTTP mapping.
"""

from decimal import Decimal

import pytest

from app.api.exception_handlers import domain_status_code
from app.config.settings import Settings
from app.core.domain import (
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InsufficientStockException,
    IntegrationException,
    InvalidOperationException,
    ValidationException,
    to_money,
)
from app.domains.ecommerce.domain.value_objects import AddressType


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, Decimal("0.00")),
        (3, Decimal("3.00")),
        (19.999, Decimal("20.00")),
        ("0.005", Decimal("0.01")),
        (Decimal("1.234"), Decimal("1.23")),
    ],
)
def test_to_money(value, expected):
    assert to_money(value) == expected


@pytest.mark.parametrize(
    "exc,status_code",
    [
        (EntityNotFoundException("Product", 1), 404),
        (DuplicateEntityException("User", "email", "a@email.com"), 409),
        (InsufficientStockException(1, 5, 2), 409),
        (BusinessRuleViolationException("empty_cart"), 400),
        (InvalidOperationException("cancel", "SHIPPED"), 400),
        (ValidationException("bad", field="quantity"), 422),
        (AuthorizationException("delete_shop", "shop 1", 2), 403),
        (IntegrationException("cloudinary", "down"), 502),
        (DomainException("generic"), 400),
    ],
)
def test_domain_status_codes(exc, status_code):
    assert domain_status_code(exc) == status_code


def test_exception_payloads():
    exc = EntityNotFoundException("Shop", 7)
    assert exc.to_dict() == {
        "code": "ENTITY_NOT_FOUND",
        "message": "Shop with ID 7 not found",
        "details": {"entity_type": "Shop", "entity_id": "7"},
    }
    assert ValidationException("bad", field="name").details == {"field": "name"}
    assert BusinessRuleViolationException("single_shop_cart").details["rule"] == "single_shop_cart"


def test_address_type_resolution():
    assert AddressType.resolve("both") == AddressType.BOTH
    with pytest.raises(ValidationException):
        AddressType.resolve("office")


def test_settings_parse_comma_separated_lists():
    settings = Settings(ALLOWED_IMAGE_TYPES="image/png, image/jpeg", CORS_ORIGINS="https://a.test,https://b.test")
    assert settings.ALLOWED_IMAGE_TYPES == ["image/png", "image/jpeg"]
    assert settings.CORS_ORIGINS == ["https://a.test", "https://b.test"]


def test_settings_sync_database_url():
    settings = Settings(DATABASE_URL="postgresql+asyncpg://shop:pw@db:5432/dreamshops")
    assert settings.database_url == "postgresql://shop:pw@db:5432/dreamshops"

    settings = Settings(DATABASE_URL=None, DB_USER="shop", DB_PASSWORD=None, DB_HOST="db", DB_NAME="dreamshops")
    assert settings.database_url == "postgresql://shop@db:5432/dreamshops"
