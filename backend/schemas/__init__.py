"""
Package de schemas Pydantic.

Re-exporta os schemas de fronteira: `from schemas import CaptureRequest, ...`
"""
from schemas.capture import (
    CaptureRequest,
    CaptureResponse,
    ExtractedProductSchema,
    ValidationErrorSchema,
    ValidationResultSchema,
)

__all__ = [
    "CaptureRequest",
    "CaptureResponse",
    "ExtractedProductSchema",
    "ValidationErrorSchema",
    "ValidationResultSchema",
]
