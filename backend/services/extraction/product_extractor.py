"""
Extração de (nome, preço) adequada a cada método de captura.

- voice: parser de preços falados
- scanner: correção OCR seguida de extração numérica
- manual: extração numérica
"""

from typing import Optional, Tuple, Union

from logging_config import get_logger
from utils.formatting import round_to_cents
from services.models import CaptureMethod, ExtractedProduct

from .confidence import score
from .ocr_corrector import OCRCorrectionStrategy, correct_ocr
from .regex_cache import RegexCache
from .spoken_price import (
    SpokenPriceStrategy,
    extract_product_and_price,
    match_numeric_price,
    residual_product_name,
)
from .text_normalizer import normalize, normalize_product_name

logger = get_logger('services.extraction.product_extractor')


def split_numeric_price(
    text: Optional[str],
    cache: Optional[RegexCache] = None,
) -> Tuple[str, Optional[float]]:
    """
    Separa o primeiro preço numérico do resto do texto.

    Examples:
        >>> split_numeric_price("Leite Mimosa 1,29 €")
        ('Leite Mimosa', 1.29)
    """
    cleaned = normalize(text)
    if not cleaned:
        return "", None
    match = match_numeric_price(cleaned)
    if match is None:
        return normalize_product_name(cleaned), None
    return residual_product_name(cleaned, match.spans, cache), round_to_cents(match.value)


def extract_product(
    text: Optional[str],
    method: CaptureMethod,
    ocr_strategy: Union[OCRCorrectionStrategy, str, None] = None,
    spoken_strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> ExtractedProduct:
    """
    Extrai o produto de um texto capturado pelo método indicado.

    A confiança é calculada sobre o texto antes de qualquer correção,
    para refletir o ruído original.

    Args:
        text: Texto capturado
        method: Método de captura
        ocr_strategy: Estratégia de correção OCR (scanner)
        spoken_strategy: Estratégia de preços falados (voice)
        cache: Cache de regex

    Returns:
        ExtractedProduct com nome, preço (ou None) e confiança
    """
    confidence = score(text, cache)

    if method is CaptureMethod.VOICE:
        name, price = extract_product_and_price(text, spoken_strategy, cache)
    elif method is CaptureMethod.SCANNER:
        name, price = split_numeric_price(correct_ocr(text, ocr_strategy), cache)
    else:
        name, price = split_numeric_price(text, cache)

    logger.debug(f"[EXTRACT] {method.value}: nome={name!r} preço={price} confiança={confidence:.2f}")
    return ExtractedProduct(name=name, price=price, confidence=confidence)
