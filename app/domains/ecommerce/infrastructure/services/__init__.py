"""
E-commerce Infrastructure Services

Adapters for external providers used by the e-commerce domain.
"""

from app.domains.ecommerce.infrastructure.services.cloudinary_storage import CloudinaryStorage

__all__ = [
    "CloudinaryStorage",
]
