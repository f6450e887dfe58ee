"""
Validador principal do CadaEuro.

Combina as validações de nome, preço (com contexto do método e da
confiança), quantidade e regras do método de captura num único
ValidationResult. Não guarda estado mutável: as estratégias e o cache
de regex são fixados na construção.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from config import Messages
from exceptions import InvalidProductName
from logging_config import get_logger, log_capture
from services.extraction.ocr_corrector import OCRCorrectionStrategy
from services.extraction.product_extractor import extract_product
from services.extraction.regex_cache import RegexCache
from services.extraction.spoken_price import SpokenPriceStrategy
from services.models import CaptureMethod, ValidationResult, dedupe
from utils.formatting import format_decimal, round_to_cents

from .price import validate_price_for_source
from .product import finite_price, validate_for_method, validate_product_name, validate_quantity

logger = get_logger('services.validation.engine')


@dataclass(frozen=True)
class CadaEuroValidator:
    """
    Ponto de entrada das validações de produtos capturados.

    Attributes:
        ocr_strategy: Estratégia de correção OCR (None = configuração)
        spoken_strategy: Estratégia de preços falados (None = configuração)
        cache: Cache de regex partilhado pelos extratores
    """
    ocr_strategy: Union[OCRCorrectionStrategy, str, None] = None
    spoken_strategy: Union[SpokenPriceStrategy, str, None] = None
    cache: Optional[RegexCache] = None

    def validate_product(
        self,
        name: Optional[str],
        price: Optional[float],
        quantity: int = 1,
        method: Union[CaptureMethod, str] = CaptureMethod.MANUAL,
        confidence: float = 1.0,
    ) -> ValidationResult:
        """
        Validação completa de um produto.

        Args:
            name: Nome do produto
            price: Preço em euros
            quantity: Quantidade
            method: Método de captura
            confidence: Confiança da captura (0.0 a 1.0)

        Returns:
            ValidationResult com erros de todas as validações e avisos e
            sugestões sem duplicados
        """
        method = CaptureMethod.from_value(method)
        name = name or ""

        result = validate_product_name(name, self.cache).merge(
            validate_price_for_source(price, method, confidence),
            validate_quantity(quantity),
            validate_for_method(
                name,
                price,
                method,
                ocr_strategy=self.ocr_strategy,
                spoken_strategy=self.spoken_strategy,
                cache=self.cache,
            ),
        )
        result = ValidationResult(
            errors=tuple(dict.fromkeys(result.errors)),
            warnings=dedupe(result.warnings),
            suggestions=dedupe(result.suggestions),
            metadata=result.metadata,
        )

        metadata = {
            "method": method.value,
            "analytics_name": method.analytics_name,
            "confidence": f"{confidence:.2f}",
        }
        value = finite_price(price)
        if value is not None:
            metadata["price"] = format_decimal(round_to_cents(value))
        result = result.with_metadata(**metadata)

        if result.is_valid:
            log_capture(logger, "validated", method=method.name.lower(), confidence=confidence,
                        level=logging.DEBUG, warnings=len(result.warnings))
        else:
            log_capture(logger, "rejected", method=method.name.lower(), confidence=confidence,
                        errors=",".join(e.kind for e in result.errors))
        return result

    def validate_text_input(
        self,
        text: Optional[str],
        method: Union[CaptureMethod, str],
    ) -> ValidationResult:
        """
        Extrai produto e preço do texto livre e valida o resultado.

        Sem nome de produto, falha logo com InvalidProductName. Sem preço,
        valida com 0.0, o que resulta em InvalidPrice.
        """
        method = CaptureMethod.from_value(method)
        product = extract_product(
            text,
            method,
            ocr_strategy=self.ocr_strategy,
            spoken_strategy=self.spoken_strategy,
            cache=self.cache,
        )

        if not product.name:
            log_capture(logger, "rejected", method=method.name.lower(),
                        confidence=product.confidence, errors=InvalidProductName.kind)
            return ValidationResult.failure(
                [InvalidProductName(Messages.NAME_NOT_EXTRACTED)],
                metadata={"method": method.value, "confidence": f"{product.confidence:.2f}"},
            )

        price = product.price if product.price is not None else 0.0
        result = self.validate_product(
            product.name,
            price,
            method=method,
            confidence=product.confidence,
        )
        return result.with_metadata(
            extracted_name=product.name,
            extracted_price="" if product.price is None else format_decimal(product.price),
        )


# Instância padrão (estratégias da configuração, cache do módulo)
cadaeuro_validator = CadaEuroValidator()


def validate_product(
    name: Optional[str],
    price: Optional[float],
    quantity: int = 1,
    method: Union[CaptureMethod, str] = CaptureMethod.MANUAL,
    confidence: float = 1.0,
) -> ValidationResult:
    """Atalho para cadaeuro_validator.validate_product."""
    return cadaeuro_validator.validate_product(name, price, quantity, method, confidence)


def validate_text_input(text: Optional[str], method: Union[CaptureMethod, str]) -> ValidationResult:
    """Atalho para cadaeuro_validator.validate_text_input."""
    return cadaeuro_validator.validate_text_input(text, method)
