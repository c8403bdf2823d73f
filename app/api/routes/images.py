"""
Product image endpoints (Cloudinary-backed)
"""

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from app.api.dependencies import get_current_user, is_admin
from app.core.domain import AuthorizationException
from app.domains.ecommerce.api.dependencies import get_image_service, get_product_service
from app.domains.ecommerce.api.schemas import ImageResponse
from app.domains.ecommerce.application.dto import UploadedFile
from app.domains.ecommerce.application.services import ImageService, ProductService
from app.models.db import User

router = APIRouter(prefix="/images", tags=["images"])


async def _read_upload(upload: UploadFile) -> UploadedFile:
    return UploadedFile(
        file_name=upload.filename or "image",
        content_type=upload.content_type,
        content=await upload.read(),
    )


async def _ensure_product_owner_or_admin(
    product_id: int,
    product_service: ProductService,
    current_user: User,
    operation: str,
) -> None:
    product = await product_service.get_product_by_id(product_id)
    if current_user.shop_id != product.shop_id and not is_admin(current_user):
        raise AuthorizationException(operation, f"product {product_id}", current_user.id)


@router.post("/product/{product_id}", response_model=list[ImageResponse], status_code=status.HTTP_201_CREATED)
async def save_images(
    product_id: int,
    files: list[UploadFile] = File(...),  # noqa: B008
    service: ImageService = Depends(get_image_service),  # noqa: B008
    product_service: ProductService = Depends(get_product_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Upload one or more images for a product (multipart field "files")."""
    await _ensure_product_owner_or_admin(product_id, product_service, current_user, "save_images")
    uploads = [await _read_upload(upload) for upload in files]
    return await service.save_images(product_id, uploads)


@router.get("/product/{product_id}", response_model=list[ImageResponse])
async def get_images_by_product_id(
    product_id: int,
    service: ImageService = Depends(get_image_service),  # noqa: B008
):
    return await service.get_images_by_product_id(product_id)


@router.get("/{image_id}", response_model=ImageResponse)
async def get_image_by_id(
    image_id: int,
    service: ImageService = Depends(get_image_service),  # noqa: B008
):
    return await service.get_image_by_id(image_id)


@router.put("/{image_id}", response_model=ImageResponse)
async def update_image(
    image_id: int,
    file: UploadFile = File(...),  # noqa: B008
    service: ImageService = Depends(get_image_service),  # noqa: B008
    product_service: ProductService = Depends(get_product_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Replace the stored file of an image, keeping its public ID."""
    image = await service.get_image_by_id(image_id)
    await _ensure_product_owner_or_admin(image.product_id, product_service, current_user, "update_image")
    return await service.update_image(image_id, await _read_upload(file))


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    image_id: int,
    service: ImageService = Depends(get_image_service),  # noqa: B008
    product_service: ProductService = Depends(get_product_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    image = await service.get_image_by_id(image_id)
    await _ensure_product_owner_or_admin(image.product_id, product_service, current_user, "delete_image")
    await service.delete_image(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
