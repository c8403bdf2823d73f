"""
Image Service

Product image upload, replacement and deletion backed by Cloudinary.
"""

import logging
import os
import re

from app.config.settings import Settings, get_settings
from app.core.domain import EntityNotFoundException, IntegrationException, ValidationException
from app.domains.ecommerce.application.dto import UploadedFile
from app.domains.ecommerce.application.ports import ICloudStorage, IImageRepository, IProductRepository
from app.models.db import Image, Product

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(file_name: str) -> str:
    """
    Asset-safe slug of a file name.

    "My Photo (1).JPG" -> "my-photo-1"
    """
    base, _ = os.path.splitext(file_name or "")
    slug = _NON_ALNUM.sub("-", base.lower()).strip("-")
    return slug or "image"


def product_folder(root_folder: str, shop_id: int) -> str:
    return f"{root_folder}/shops/shop-{shop_id}/products"


def product_public_id(product_id: int, file_name: str) -> str:
    return f"product-{product_id}-{slugify(file_name)}"


class ImageService:
    """
    Application service for product images.

    Assets live under {root}/shops/shop-{shop_id}/products with the public
    ID product-{product_id}-{slug}, so uploading the same file name again
    for a product replaces the stored asset and its existing image row.
    """

    def __init__(
        self,
        image_repository: IImageRepository,
        product_repository: IProductRepository,
        cloud_storage: ICloudStorage,
        settings: Settings | None = None,
    ):
        self.image_repository = image_repository
        self.product_repository = product_repository
        self.cloud_storage = cloud_storage
        self.settings = settings or get_settings()

    async def save_images(self, product_id: int, files: list[UploadedFile]) -> list[Image]:
        """
        Upload one or more images for a product.

        All files are validated before anything is uploaded. If the batch
        fails halfway, the assets it created are removed from the store.

        Raises:
            EntityNotFoundException: if the product doesn't exist
            ValidationException: on an empty batch or an invalid file
            IntegrationException: if the upload fails
        """
        product = await self._get_product(product_id)
        if not files:
            raise ValidationException("At least one file is required", field="files")
        for file in files:
            self._validate_file(file)

        folder = product_folder(self.settings.CLOUDINARY_ROOT_FOLDER, product.shop_id)
        existing = {image.public_id: image for image in await self.image_repository.get_by_product_id(product.id)}
        saved = []
        created_assets: list[str] = []
        try:
            for file in files:
                public_id = product_public_id(product.id, file.file_name)
                result = await self.cloud_storage.upload(file.content, folder, public_id, overwrite=True)
                image = existing.get(result["public_id"])
                if image is None:
                    created_assets.append(result["public_id"])
                    image = Image(public_id=result["public_id"], product_id=product.id)
                    existing[image.public_id] = image
                image.file_name = file.file_name
                image.file_type = file.content_type
                image.image_url = result["secure_url"]
                saved.append(await self.image_repository.save(image))
        except Exception:
            await self._discard_assets(created_assets)
            raise

        logger.info(f"Uploaded {len(saved)} image(s) for product {product_id}")
        return saved

    async def update_image(self, image_id: int, file: UploadedFile) -> Image:
        """Replace the asset of an existing image, keeping its public ID."""
        image = await self.get_image_by_id(image_id)
        self._validate_file(file)

        result = await self.cloud_storage.upload(file.content, None, image.public_id, overwrite=True)
        image.file_name = file.file_name
        image.file_type = file.content_type
        image.image_url = result["secure_url"]
        return await self.image_repository.save(image)

    async def delete_image(self, image_id: int) -> None:
        image = await self.get_image_by_id(image_id)
        await self.cloud_storage.destroy(image.public_id)
        await self.image_repository.delete(image)
        logger.info(f"Deleted image {image_id} ({image.public_id})")

    async def get_image_by_id(self, image_id: int) -> Image:
        image = await self.image_repository.get_by_id(image_id)
        if image is None:
            raise EntityNotFoundException("Image", image_id)
        return image

    async def get_images_by_product_id(self, product_id: int) -> list[Image]:
        await self._get_product(product_id)
        return await self.image_repository.get_by_product_id(product_id)

    async def _get_product(self, product_id: int) -> Product:
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)
        return product

    async def _discard_assets(self, public_ids: list[str]) -> None:
        # The rows are rolled back with the request, the assets are not
        for public_id in public_ids:
            try:
                await self.cloud_storage.destroy(public_id)
            except IntegrationException as e:
                logger.warning(f"Could not remove orphaned asset {public_id}: {e}")

    def _validate_file(self, file: UploadedFile) -> None:
        if not file.content:
            raise ValidationException(f"File '{file.file_name}' is empty", field="file")
        if file.content_type not in self.settings.ALLOWED_IMAGE_TYPES:
            raise ValidationException(
                f"File type '{file.content_type}' is not allowed",
                field="file",
                details={"allowed_types": self.settings.ALLOWED_IMAGE_TYPES},
            )
        if len(file.content) > self.settings.MAX_FILE_SIZE:
            raise ValidationException(
                f"File '{file.file_name}' exceeds the maximum size of {self.settings.MAX_FILE_SIZE} bytes",
                field="file",
            )
