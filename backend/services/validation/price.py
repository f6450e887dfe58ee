"""
Validação de preços com contexto da fonte (OCR, voz ou manual).
"""

from typing import List, Optional

from config import ConfidenceConfig, Messages
from services.extraction.price_parser import parse_decimal
from services.models import CaptureMethod, ValidationResult
from utils.formatting import format_currency, format_percent, round_to_cents

from .product import validate_price


def validate_price_for_source(
    price: Optional[float],
    source: CaptureMethod,
    confidence: float = 1.0,
) -> ValidationResult:
    """
    Validação base do preço mais os limiares de confiança da fonte.

    Args:
        price: Preço a validar
        source: Método que produziu o preço
        confidence: Confiança da captura (0.0 a 1.0)

    Returns:
        ValidationResult; se a validação base falhar, é devolvida tal como está
    """
    base = validate_price(price, source)
    if not base.is_valid:
        return base

    warnings: List[str] = []
    suggestions: List[str] = []

    if source is CaptureMethod.SCANNER:
        if confidence < ConfidenceConfig.OCR_PRICE_THRESHOLD:
            warnings.append(
                Messages.OCR_PRICE_LOW_CONFIDENCE.format(confidence=format_percent(confidence))
            )
            suggestions.append(Messages.SUGGEST_CONFIRM_PRICE)
    elif source is CaptureMethod.VOICE:
        if confidence < ConfidenceConfig.VOICE_PRICE_THRESHOLD:
            warnings.append(
                Messages.VOICE_PRICE_LOW_CONFIDENCE.format(confidence=format_percent(confidence))
            )
            suggestions.append(Messages.SUGGEST_REPEAT_PRICE_CLEARLY)
    else:
        value = float(price)
        rounded = round_to_cents(value)
        if rounded != value:
            suggestions.append(Messages.SUGGEST_ROUNDED_PRICE.format(price=format_currency(rounded)))

    return base.merge(ValidationResult.success(warnings=warnings, suggestions=suggestions))


def is_valid_price_string(text: Optional[str]) -> bool:
    """Texto de preço em formato português aceite por parse_decimal."""
    return parse_decimal(text) is not None
