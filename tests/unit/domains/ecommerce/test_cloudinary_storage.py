"""
Unit Tests for CloudinaryStorage

The SDK module functions are patched, so no request leaves the process.
"""

from unittest.mock import patch

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from app.config.settings import Settings
from app.core.domain import IntegrationException
from app.domains.ecommerce.infrastructure.services.cloudinary_storage import CloudinaryStorage

FOLDER = "dreamshops/shops/shop-1/products"


@pytest.fixture
def storage():
    settings = Settings(CLOUDINARY_CLOUD_NAME="demo", CLOUDINARY_API_KEY="key", CLOUDINARY_API_SECRET="secret")
    return CloudinaryStorage(settings)


@pytest.fixture
def sdk_upload():
    with patch("cloudinary.config"), patch("cloudinary.uploader.upload") as upload:
        upload.return_value = {
            "public_id": f"{FOLDER}/product-1-photo",
            "secure_url": "https://res.cloudinary.com/demo/product-1-photo.jpg",
        }
        yield upload


class TestUpload:
    @pytest.mark.asyncio
    async def test_same_public_id_replaces_the_asset(self, storage, sdk_upload):
        result = await storage.upload(b"img", FOLDER, "product-1-photo")

        options = sdk_upload.call_args.kwargs
        assert options["public_id"] == "product-1-photo"
        assert options["folder"] == FOLDER
        assert options["resource_type"] == "auto"
        assert options["overwrite"] is True
        assert options["invalidate"] is True
        assert result["public_id"] == f"{FOLDER}/product-1-photo"

    @pytest.mark.asyncio
    async def test_full_public_id_without_folder(self, storage, sdk_upload):
        await storage.upload(b"img", None, f"{FOLDER}/product-1-photo", overwrite=True)

        options = sdk_upload.call_args.kwargs
        assert "folder" not in options
        assert options["public_id"] == f"{FOLDER}/product-1-photo"

    @pytest.mark.asyncio
    async def test_sdk_error_becomes_integration_error(self, storage, sdk_upload):
        sdk_upload.side_effect = CloudinaryError("quota exceeded")

        with pytest.raises(IntegrationException) as exc_info:
            await storage.upload(b"img", FOLDER, "product-1-photo")
        assert exc_info.value.service == "cloudinary"

    @pytest.mark.asyncio
    async def test_requires_credentials(self):
        storage = CloudinaryStorage(Settings(CLOUDINARY_CLOUD_NAME=None, CLOUDINARY_API_KEY=None))

        with pytest.raises(IntegrationException):
            await storage.upload(b"img", FOLDER, "product-1-photo")


class TestDestroy:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("outcome", ["ok", "not found"])
    async def test_destroy(self, storage, outcome):
        with patch("cloudinary.config"), patch("cloudinary.uploader.destroy") as destroy:
            destroy.return_value = {"result": outcome}
            await storage.destroy("product-1-photo")

        destroy.assert_called_once_with("product-1-photo", invalidate=True)

    @pytest.mark.asyncio
    async def test_unexpected_result(self, storage):
        with patch("cloudinary.config"), patch("cloudinary.uploader.destroy", return_value={"result": "error"}):
            with pytest.raises(IntegrationException):
                await storage.destroy("product-1-photo")
