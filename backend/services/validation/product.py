"""
Validações de produto: nome, preço, quantidade e regras por método de captura.

Todas as funções devolvem ValidationResult e nunca lançam exceção para
entrada inválida.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import List, Optional, Union

from config import BusinessRules, ConfidenceConfig, Messages, MethodAdvisoryRules
from exceptions import InvalidPrice, InvalidProductName, InvalidQuantity
from services.extraction.confidence import score
from services.extraction.ocr_corrector import OCRCorrectionStrategy, correct_ocr
from services.extraction.regex_cache import RegexCache
from services.extraction.spoken_price import SpokenPriceStrategy, extract_product_and_price
from services.extraction.text_normalizer import (
    contains_dangerous,
    normalize,
    normalize_product_name,
    sanitize,
)
from services.models import CaptureMethod, ValidationResult
from utils.formatting import format_currency, format_percent, round_to_cents


# === Nome ===

def product_name_invalid_reason(name: Optional[str]) -> Optional[str]:
    """
    Razão pela qual o nome é inválido, ou None se for válido.

    Sequências perigosas são reportadas antes do tamanho.
    """
    cleaned = normalize(name)
    if not cleaned:
        return Messages.NAME_EMPTY
    if contains_dangerous(cleaned):
        return Messages.NAME_DANGEROUS
    if len(cleaned) < BusinessRules.MIN_PRODUCT_NAME_LENGTH:
        return Messages.NAME_TOO_SHORT.format(min=BusinessRules.MIN_PRODUCT_NAME_LENGTH)
    if len(cleaned) > BusinessRules.MAX_PRODUCT_NAME_LENGTH:
        return Messages.NAME_TOO_LONG.format(max=BusinessRules.MAX_PRODUCT_NAME_LENGTH)
    return None


def validate_product_name(
    name: Optional[str],
    cache: Optional[RegexCache] = None,
) -> ValidationResult:
    """
    Valida o nome de um produto.

    Falha com InvalidProductName se vazio, perigoso ou fora de 1-100
    caracteres. Avisa quando o texto foi sanitizado ou tem baixa
    qualidade, e sugere a capitalização portuguesa quando difere.
    """
    reason = product_name_invalid_reason(name)
    if reason is not None:
        return ValidationResult.failure([InvalidProductName(reason)])

    warnings: List[str] = []
    suggestions: List[str] = []

    sanitized = sanitize(name)
    if sanitized != normalize(name):
        warnings.append(Messages.NAME_SANITIZED)
        suggestions.append(Messages.SUGGEST_SANITIZED.format(value=sanitized))

    formatted = normalize_product_name(name)
    if formatted != name:
        suggestions.append(Messages.SUGGEST_FORMAT.format(value=formatted))

    confidence = score(name, cache)
    if confidence < ConfidenceConfig.PRODUCT_NAME_THRESHOLD:
        warnings.append(Messages.LOW_TEXT_QUALITY.format(confidence=format_percent(confidence)))

    return ValidationResult.success(warnings=warnings, suggestions=suggestions)


# === Preço ===

def finite_price(price: object) -> Optional[float]:
    """Valor do preço como float se for número finito (int, float ou Decimal), senão None."""
    if isinstance(price, Decimal):
        return float(price) if price.is_finite() else None
    if isinstance(price, bool) or not isinstance(price, Real):
        return None
    value = float(price)
    return value if math.isfinite(value) else None


def price_invalid_reason(price: object) -> Optional[str]:
    """Razão pela qual o preço é inválido, ou None se for válido."""
    if isinstance(price, Decimal):
        if price.is_nan():
            return Messages.PRICE_NAN
        if price.is_infinite():
            return Messages.PRICE_NOT_FINITE
    elif isinstance(price, bool) or not isinstance(price, Real):
        return Messages.PRICE_INVALID_FORMAT
    value = float(price)
    if math.isnan(value):
        return Messages.PRICE_NAN
    if math.isinf(value):
        return Messages.PRICE_NOT_FINITE
    if value < BusinessRules.MIN_PRICE:
        return Messages.PRICE_BELOW_MIN.format(min=format_currency(BusinessRules.MIN_PRICE))
    if value > BusinessRules.MAX_PRICE:
        return Messages.PRICE_EXCEEDS_MAX.format(max=format_currency(BusinessRules.MAX_PRICE))
    return None


def validate_price_for_method(price: float, method: CaptureMethod) -> ValidationResult:
    """Avisos e sugestões de preço que dependem do método de captura."""
    warnings: List[str] = []
    suggestions: List[str] = []

    if method.estimated_processing_time > MethodAdvisoryRules.SLOW_PROCESSING_SECONDS:
        warnings.append(Messages.SLOW_PROCESSING.format(
            method=method.title,
            seconds=int(method.estimated_processing_time),
        ))

    if method.uses_llm_processing and price > MethodAdvisoryRules.LLM_HIGH_PRICE:
        suggestions.append(Messages.SUGGEST_LLM_CHECK)

    if method is not CaptureMethod.MANUAL:
        suggestions.append(Messages.SUGGEST_FALLBACK.format(method=method.fallback_method.title))

    return ValidationResult.success(warnings=warnings, suggestions=suggestions)


def validate_price(
    price: Union[float, int, Decimal, None],
    method: Optional[CaptureMethod] = None,
) -> ValidationResult:
    """
    Valida um preço.

    Falha com InvalidPrice se não for número finito em [0,01 €, 999 999,99 €].
    Sugere o arredondamento ao cêntimo quando muda o valor e, com método,
    acrescenta os avisos do método.

    Examples:
        >>> validate_price(2.50).is_valid
        True
        >>> validate_price(1000000.00).is_valid
        False
    """
    reason = price_invalid_reason(price)
    if reason is not None:
        return ValidationResult.failure([InvalidPrice(reason)])

    value = float(price)
    suggestions: List[str] = []
    rounded = round_to_cents(value)
    if rounded != value:
        suggestions.append(Messages.SUGGEST_ROUNDED_PRICE.format(price=format_currency(rounded)))

    result = ValidationResult.success(suggestions=suggestions)
    if method is not None:
        result = result.merge(validate_price_for_method(value, method))
    return result


# === Quantidade ===

def validate_quantity(quantity: Union[int, float, None]) -> ValidationResult:
    """Quantidade inteira entre 1 e 10000; avisa acima de 100."""
    if isinstance(quantity, bool) or not isinstance(quantity, Real):
        return ValidationResult.failure([InvalidQuantity(Messages.QUANTITY_NOT_INTEGER)])
    if isinstance(quantity, float) and not quantity.is_integer():
        return ValidationResult.failure([InvalidQuantity(Messages.QUANTITY_NOT_INTEGER)])

    value = int(quantity)
    if value < BusinessRules.MIN_QUANTITY:
        return ValidationResult.failure([
            InvalidQuantity(Messages.QUANTITY_BELOW_MIN.format(min=BusinessRules.MIN_QUANTITY))
        ])
    if value > BusinessRules.MAX_QUANTITY:
        return ValidationResult.failure([
            InvalidQuantity(Messages.QUANTITY_EXCEEDS_MAX.format(max=BusinessRules.MAX_QUANTITY))
        ])

    warnings = []
    if value > BusinessRules.HIGH_QUANTITY_WARNING:
        warnings.append(Messages.QUANTITY_HIGH.format(quantity=value))
    return ValidationResult.success(warnings=warnings)


# === Regras por método de captura ===

def _price_missing(price: Optional[float]) -> bool:
    return price is None or price == 0


def validate_ocr_input(
    name: str,
    price: Optional[float],
    ocr_strategy: Union[OCRCorrectionStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> ValidationResult:
    """Leitura OCR: baixa confiança, texto corrigido e preço não detetado."""
    warnings: List[str] = []
    suggestions: List[str] = []

    confidence = score(name, cache)
    if confidence < ConfidenceConfig.OCR_METHOD_THRESHOLD:
        warnings.append(Messages.LOW_OCR_CONFIDENCE.format(confidence=format_percent(confidence)))
        suggestions.append(Messages.SUGGEST_LIGHTING)

    corrected = correct_ocr(name, ocr_strategy)
    if corrected != normalize(name):
        suggestions.append(Messages.SUGGEST_OCR_CORRECTED.format(value=corrected))

    if _price_missing(price):
        warnings.append(Messages.OCR_PRICE_NOT_DETECTED)
        suggestions.append(Messages.SUGGEST_CONFIRM_PRICE)

    return ValidationResult.success(warnings=warnings, suggestions=suggestions)


def validate_voice_input(
    name: str,
    price: Optional[float],
    spoken_strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> ValidationResult:
    """Transcrição de voz: volta a extrair produto e preço como verificação cruzada."""
    warnings: List[str] = []
    suggestions: List[str] = []

    extracted_product, extracted_price = extract_product_and_price(name, spoken_strategy, cache)

    if extracted_price is None and _price_missing(price):
        warnings.append(Messages.VOICE_PRICE_NOT_IDENTIFIED)
        suggestions.append(Messages.SUGGEST_REPEAT_PRICE)

    if not extracted_product:
        warnings.append(Messages.VOICE_PRODUCT_UNCLEAR)
        suggestions.append(Messages.SUGGEST_REPEAT_PRODUCT)

    confidence = score(name, cache)
    if confidence < ConfidenceConfig.VOICE_METHOD_THRESHOLD:
        warnings.append(
            Messages.VOICE_TRANSCRIPTION_IMPRECISE.format(confidence=format_percent(confidence))
        )

    return ValidationResult.success(warnings=warnings, suggestions=suggestions)


def validate_manual_input(name: str, price: Optional[float]) -> ValidationResult:
    """Entrada manual: apenas sugestões, o utilizador já confirmou os dados."""
    suggestions: List[str] = []

    formatted = normalize_product_name(name)
    if formatted != name:
        suggestions.append(Messages.SUGGEST_FORMAT.format(value=formatted))

    value = finite_price(price)
    if value is not None:
        rounded = round_to_cents(value)
        if rounded != value:
            suggestions.append(Messages.SUGGEST_ROUNDED_PRICE.format(price=format_currency(rounded)))

    return ValidationResult.success(suggestions=suggestions)


def validate_for_method(
    name: str,
    price: Optional[float],
    method: CaptureMethod,
    ocr_strategy: Union[OCRCorrectionStrategy, str, None] = None,
    spoken_strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> ValidationResult:
    """
    Despacha para a verificação específica do método de captura.

    Estas verificações só produzem avisos e sugestões.
    """
    if method is CaptureMethod.SCANNER:
        return validate_ocr_input(name, price, ocr_strategy, cache)
    if method is CaptureMethod.VOICE:
        return validate_voice_input(name, price, spoken_strategy, cache)
    return validate_manual_input(name, price)
