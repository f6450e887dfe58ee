"""
Pipeline de captura do CadaEuro.

Texto bruto -> normalização -> (correção OCR, se scanner) -> confiança ->
extração de produto e preço -> validação -> CaptureOutcome.

Sem preço reconhecido o resultado não é um erro: fica marcado para
confirmação manual. Em modo estrito as falhas típicas de cada método
passam a erros (OcrValidationFailed, VoiceValidationFailed,
ManualInputInvalid).
"""

from typing import Iterable, List, Optional, Union

from config import ConfidenceConfig, Messages
from exceptions import (
    InvalidProductName,
    ManualInputInvalid,
    OcrValidationFailed,
    ValidationError,
    VoiceValidationFailed,
)
from logging_config import get_logger, log_capture, log_timing
from utils.formatting import format_percent

from .extraction.confidence import best_quality_text
from .extraction.ocr_corrector import OCRCorrectionStrategy, correct_ocr, ocr_corrections_applied
from .extraction.product_extractor import extract_product
from .extraction.regex_cache import RegexCache
from .extraction.spoken_price import SpokenPriceStrategy
from .extraction.text_normalizer import normalize
from .models import (
    CaptureMethod,
    CapturedText,
    CaptureOutcome,
    ExtractedProduct,
    NormalizedText,
    ValidationResult,
)
from .validation.engine import CadaEuroValidator
from .validation.product import validate_for_method, validate_product_name, validate_quantity

logger = get_logger('services.capture_pipeline')


class CapturePipeline:
    """
    Executa o fluxo completo de uma captura.

    Attributes:
        cache: Cache de regex partilhado por todas as etapas
        strict: Se True, falhas específicas do método são erros
    """

    def __init__(
        self,
        cache: Optional[RegexCache] = None,
        ocr_strategy: Union[OCRCorrectionStrategy, str, None] = None,
        spoken_strategy: Union[SpokenPriceStrategy, str, None] = None,
        strict: bool = False,
    ):
        self.cache = cache
        self.ocr_strategy = ocr_strategy
        self.spoken_strategy = spoken_strategy
        self.strict = strict
        self.validator = CadaEuroValidator(
            ocr_strategy=ocr_strategy,
            spoken_strategy=spoken_strategy,
            cache=cache,
        )

    def extract(self, captured: CapturedText) -> ExtractedProduct:
        """Apenas a extração de (nome, preço, confiança)."""
        return extract_product(
            captured.raw,
            captured.source,
            ocr_strategy=self.ocr_strategy,
            spoken_strategy=self.spoken_strategy,
            cache=self.cache,
        )

    def process(
        self,
        captured: CapturedText,
        price: Optional[float] = None,
        quantity: int = 1,
    ) -> CaptureOutcome:
        """
        Processa uma captura do início ao fim.

        Args:
            captured: Texto bruto e método de captura
            price: Preço já conhecido (ex: formulário manual); tem prioridade
                sobre o preço extraído do texto
            quantity: Quantidade

        Returns:
            CaptureOutcome com produto, veredito, texto normalizado e confiança
        """
        source = captured.source
        with log_timing(logger, f"captura_{source.name.lower()}"):
            normalized = NormalizedText(
                text=normalize(captured.raw),
                source=source,
                original=captured.raw,
            )
            product = self.extract(captured)
            if price is not None:
                product = ExtractedProduct(
                    name=product.name,
                    price=price,
                    confidence=product.confidence,
                )

            result = self._validate(product, source, quantity)
            result = result.merge(self._strict_checks(normalized, product))
            result = result.with_metadata(**self._metadata(normalized, product))

        log_capture(
            logger,
            "captured" if result.is_valid else "rejected",
            method=source.name.lower(),
            confidence=product.confidence,
            price=product.price,
        )
        return CaptureOutcome(
            product=product,
            result=result,
            normalized=normalized,
            confidence=product.confidence,
        )

    def process_candidates(
        self,
        candidates: Iterable[Optional[str]],
        source: Union[CaptureMethod, str],
        price: Optional[float] = None,
        quantity: int = 1,
    ) -> CaptureOutcome:
        """
        Escolhe a tentativa com maior confiança (ex: várias leituras OCR) e processa-a.
        """
        source = CaptureMethod.from_value(source)
        candidates = list(candidates)
        best = best_quality_text(candidates, self.cache)
        logger.debug(f"[CAPTURE] {len(candidates)} tentativas, escolhida: {best!r}")
        return self.process(CapturedText(raw=best or "", source=source), price, quantity)

    def _validate(
        self,
        product: ExtractedProduct,
        source: CaptureMethod,
        quantity: int,
    ) -> ValidationResult:
        if not product.name:
            return ValidationResult.failure([InvalidProductName(Messages.NAME_NOT_EXTRACTED)])

        if product.price is not None:
            return self.validator.validate_product(
                product.name,
                product.price,
                quantity,
                source,
                product.confidence,
            )

        # Sem preço: nome, quantidade e avisos do método; preço fica por confirmar
        return validate_product_name(product.name, self.cache).merge(
            validate_quantity(quantity),
            validate_for_method(
                product.name,
                None,
                source,
                ocr_strategy=self.ocr_strategy,
                spoken_strategy=self.spoken_strategy,
                cache=self.cache,
            ),
        )

    def _strict_checks(self, normalized: NormalizedText, product: ExtractedProduct) -> ValidationResult:
        if not self.strict:
            return ValidationResult()

        errors: List[ValidationError] = []
        source = normalized.source
        if source is CaptureMethod.SCANNER and product.confidence < ConfidenceConfig.OCR_METHOD_THRESHOLD:
            errors.append(OcrValidationFailed(
                Messages.LOW_OCR_CONFIDENCE.format(confidence=format_percent(product.confidence)),
                product.confidence,
            ))
        if product.price is None:
            if source is CaptureMethod.VOICE:
                errors.append(VoiceValidationFailed(Messages.VOICE_PRICE_NOT_IDENTIFIED, normalized.text))
            elif source is CaptureMethod.MANUAL:
                errors.append(ManualInputInvalid(Messages.PRICE_INVALID_FORMAT))
            elif not errors:
                errors.append(OcrValidationFailed(Messages.OCR_PRICE_NOT_DETECTED, product.confidence))
        return ValidationResult(errors=tuple(errors))

    def _metadata(self, normalized: NormalizedText, product: ExtractedProduct) -> dict:
        metadata = {
            "source": normalized.source.value,
            "needs_price_confirmation": str(product.needs_price_confirmation).lower(),
        }
        if normalized.source is CaptureMethod.SCANNER:
            corrected = correct_ocr(normalized.text, self.ocr_strategy)
            changes = ocr_corrections_applied(normalized.text, corrected)
            if changes:
                metadata["ocr_corrections"] = "; ".join(f"{a} -> {b}" for a, b in changes)
        return metadata
