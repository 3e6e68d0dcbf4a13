# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .upload_service import UploadService

__all__ = [
    "UploadService",
]
