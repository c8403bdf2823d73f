"""
Cloudinary Storage Adapter

Implements ICloudStorage on top of the Cloudinary Python SDK. The SDK is
blocking, so every call runs in a worker thread.
"""

import asyncio
import io
import logging

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from app.config.settings import Settings, get_settings
from app.core.domain import IntegrationException
from app.domains.ecommerce.application.ports import ICloudStorage

logger = logging.getLogger(__name__)


class CloudinaryStorage(ICloudStorage):
    """
    Cloud asset store backed by Cloudinary.

    Uploads use resource_type="auto" so the provider detects the media type.
    """

    SERVICE_NAME = "cloudinary"

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._configured = False

    def _ensure_configured(self) -> None:
        if self._configured:
            return
        if not self._settings.cloudinary_configured:
            raise IntegrationException(
                self.SERVICE_NAME,
                "Cloudinary credentials are not configured (CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, "
                "CLOUDINARY_API_SECRET)",
            )
        cloudinary.config(
            cloud_name=self._settings.CLOUDINARY_CLOUD_NAME,
            api_key=self._settings.CLOUDINARY_API_KEY,
            api_secret=self._settings.CLOUDINARY_API_SECRET,
            secure=True,
        )
        self._configured = True

    async def upload(self, content: bytes, folder: str | None, public_id: str, overwrite: bool = True) -> dict:
        """
        Upload a file.

        Args:
            content: Raw file bytes
            folder: Destination folder (None when public_id already holds the full path)
            public_id: Asset identifier inside the folder
            overwrite: Replace an existing asset with the same public_id (provider default)

        Returns:
            Cloudinary upload response (includes secure_url and public_id)
        """
        self._ensure_configured()
        options: dict = {
            "public_id": public_id,
            "resource_type": "auto",
            "overwrite": overwrite,
            "invalidate": overwrite,
        }
        if folder:
            options["folder"] = folder

        try:
            result = await asyncio.to_thread(cloudinary.uploader.upload, io.BytesIO(content), **options)
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload failed for {folder}/{public_id}: {e}")
            raise IntegrationException(self.SERVICE_NAME, f"Failed to upload file: {e}", e) from e

        logger.info(f"Uploaded asset {result.get('public_id')} to Cloudinary")
        return result

    async def destroy(self, public_id: str) -> None:
        """Delete an asset by its public id."""
        self._ensure_configured()
        try:
            result = await asyncio.to_thread(cloudinary.uploader.destroy, public_id, invalidate=True)
        except CloudinaryError as e:
            logger.error(f"Cloudinary destroy failed for {public_id}: {e}")
            raise IntegrationException(self.SERVICE_NAME, f"Failed to delete file: {e}", e) from e

        if result.get("result") not in ("ok", "not found"):
            raise IntegrationException(self.SERVICE_NAME, f"Failed to delete file {public_id}: {result}")
        logger.info(f"Deleted asset {public_id} from Cloudinary ({result.get('result')})")
