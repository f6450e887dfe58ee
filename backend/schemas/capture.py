from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from exceptions import ValidationError
from services.models import (
    CaptureMethod,
    CapturedText,
    CaptureOutcome,
    ExtractedProduct,
    ValidationResult,
)


# ============== ENTRADA ==============

class CaptureRequest(BaseModel):
    """Texto capturado e, opcionalmente, preço e quantidade já conhecidos."""
    text: str = Field(default="", max_length=5000)
    source: CaptureMethod
    price: Optional[float] = None
    quantity: int = Field(default=1)

    @field_validator("source", mode="before")
    @classmethod
    def validate_source(cls, v):
        try:
            return CaptureMethod.from_value(v)
        except ValueError:
            raise ValueError(f"Método de captura inválido: {v}")

    def to_captured(self) -> CapturedText:
        return CapturedText(raw=self.text, source=self.source)


# ============== SAÍDA ==============

class ExtractedProductSchema(BaseModel):
    name: str
    price: Optional[float] = None
    confidence: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_product(cls, product: ExtractedProduct) -> "ExtractedProductSchema":
        return cls(name=product.name, price=product.price, confidence=product.confidence)


class ValidationErrorSchema(BaseModel):
    kind: str
    description: str
    recovery_suggestion: str

    @classmethod
    def from_error(cls, error: ValidationError) -> "ValidationErrorSchema":
        return cls(
            kind=error.kind,
            description=error.error_description,
            recovery_suggestion=error.recovery_suggestion,
        )


class ValidationResultSchema(BaseModel):
    """Veredito serializável; is_valid é sempre igual a `not errors`."""
    is_valid: bool
    errors: List[ValidationErrorSchema] = []
    warnings: List[str] = []
    suggestions: List[str] = []
    metadata: Dict[str, str] = {}

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultSchema":
        return cls(
            is_valid=result.is_valid,
            errors=[ValidationErrorSchema.from_error(e) for e in result.errors],
            warnings=list(result.warnings),
            suggestions=list(result.suggestions),
            metadata=dict(result.metadata),
        )


class CaptureResponse(BaseModel):
    source: CaptureMethod
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    product: ExtractedProductSchema
    validation: ValidationResultSchema

    @classmethod
    def from_outcome(cls, outcome: CaptureOutcome) -> "CaptureResponse":
        return cls(
            source=outcome.normalized.source,
            text=outcome.normalized.text,
            confidence=outcome.confidence,
            product=ExtractedProductSchema.from_product(outcome.product),
            validation=ValidationResultSchema.from_result(outcome.result),
        )
