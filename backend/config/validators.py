"""
Validação das configurações do CadaEuro.

Os limiares de confiança e as estratégias vêm do ambiente, por isso
são verificados uma vez no arranque (ou a pedido) antes de os
validadores serem construídos.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from logging_config import get_logger

logger = get_logger('config.validators')

_STRATEGY_CHOICES: Dict[str, Tuple[str, ...]] = {
    "CADAEURO_SPOKEN_PRICE_STRATEGY": ("keyword_tables", "grammar"),
    "CADAEURO_OCR_CORRECTION_STRATEGY": ("contextual", "blind"),
}


@dataclass
class ConfigIssue:
    """Problema encontrado numa variável de configuração."""
    config_name: str
    value: Any
    message: str


@dataclass
class ConfigValidationResult:
    """Erros bloqueiam o arranque; avisos apenas são registados."""
    errors: List[ConfigIssue] = field(default_factory=list)
    warnings: List[ConfigIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error(self, config_name: str, value: Any, message: str) -> None:
        self.errors.append(ConfigIssue(config_name, value, message))

    def warn(self, config_name: str, value: Any, message: str) -> None:
        self.warnings.append(ConfigIssue(config_name, value, message))


def _thresholds() -> List[Tuple[str, float]]:
    from .extraction import ConfidenceConfig as CC

    return [
        ("CONFIDENCE_OCR_METHOD_THRESHOLD", CC.OCR_METHOD_THRESHOLD),
        ("CONFIDENCE_VOICE_METHOD_THRESHOLD", CC.VOICE_METHOD_THRESHOLD),
        ("CONFIDENCE_OCR_PRICE_THRESHOLD", CC.OCR_PRICE_THRESHOLD),
        ("CONFIDENCE_VOICE_PRICE_THRESHOLD", CC.VOICE_PRICE_THRESHOLD),
        ("CONFIDENCE_PRODUCT_NAME_THRESHOLD", CC.PRODUCT_NAME_THRESHOLD),
    ]


def validate_thresholds() -> ConfigValidationResult:
    """
    Valida limiares de confiança, estratégias e tamanho do cache de regex.

    Limiares fora de [0, 1], estratégias desconhecidas e cache com
    tamanho < 1 são erros. Um limiar de preço por fonte abaixo do
    limiar do respetivo método é apenas aviso: o preço passaria a ser
    aceite com menos confiança do que o próprio texto.

    Returns:
        ConfigValidationResult com erros e avisos
    """
    from .extraction import (
        ConfidenceConfig as CC,
        OCRCorrectionConfig,
        RegexCacheConfig,
        SpokenPriceConfig,
    )

    result = ConfigValidationResult()

    for name, value in _thresholds():
        if not 0.0 <= value <= 1.0:
            result.error(name, value, "Deve estar entre 0 e 1")

    for label, price, method in (
        ("OCR", CC.OCR_PRICE_THRESHOLD, CC.OCR_METHOD_THRESHOLD),
        ("VOICE", CC.VOICE_PRICE_THRESHOLD, CC.VOICE_METHOD_THRESHOLD),
    ):
        if price < method:
            result.warn(
                f"{label}_THRESHOLDS",
                f"{price} < {method}",
                f"CONFIDENCE_{label}_PRICE_THRESHOLD deve ser >= "
                f"CONFIDENCE_{label}_METHOD_THRESHOLD",
            )

    strategies = {
        "CADAEURO_SPOKEN_PRICE_STRATEGY": SpokenPriceConfig.STRATEGY,
        "CADAEURO_OCR_CORRECTION_STRATEGY": OCRCorrectionConfig.STRATEGY,
    }
    for name, value in strategies.items():
        choices = _STRATEGY_CHOICES[name]
        if value not in choices:
            result.error(name, value, f"Deve ser um de: {', '.join(choices)}")

    if RegexCacheConfig.MAX_SIZE < 1:
        result.error("REGEX_CACHE_MAX_SIZE", RegexCacheConfig.MAX_SIZE, "Deve ser >= 1")

    for issue in result.errors:
        logger.error(f"[CONFIG] {issue.config_name}={issue.value}: {issue.message}")
    for issue in result.warnings:
        logger.warning(f"[CONFIG] {issue.config_name}={issue.value}: {issue.message}")

    return result


def get_config_summary() -> Dict[str, Any]:
    """Resumo das configurações efetivas, para diagnóstico."""
    from .base import ENVIRONMENT, LOCALE
    from .extraction import (
        ConfidenceConfig as CC,
        OCRCorrectionConfig,
        RegexCacheConfig,
        SpokenPriceConfig,
    )

    return {
        "environment": ENVIRONMENT,
        "locale": LOCALE,
        "confidence": {
            "ocr_method": CC.OCR_METHOD_THRESHOLD,
            "voice_method": CC.VOICE_METHOD_THRESHOLD,
            "ocr_price": CC.OCR_PRICE_THRESHOLD,
            "voice_price": CC.VOICE_PRICE_THRESHOLD,
            "product_name": CC.PRODUCT_NAME_THRESHOLD,
        },
        "spoken_price_strategy": SpokenPriceConfig.STRATEGY,
        "ocr_correction_strategy": OCRCorrectionConfig.STRATEGY,
        "regex_cache_max_size": RegexCacheConfig.MAX_SIZE,
    }
