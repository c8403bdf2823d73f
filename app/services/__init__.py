"""
Services Module

Cross-cutting services shared by the API layer.
"""

from app.services.token_service import TokenService

__all__ = ["TokenService"]
