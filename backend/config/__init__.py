"""
Configuracoes do CadaEuro.

Este modulo re-exporta todas as configuracoes.

Exemplo:
    from config import BusinessRules, ConfidenceConfig, Messages
"""

from .base import (
    ENVIRONMENT,
    LOCALE,
    env_bool,
    env_float,
    env_int,
    env_str,
)
from .extraction import (
    ConfidenceConfig,
    ConfidenceWeights,
    OCRCorrectionConfig,
    RegexCacheConfig,
    SpokenPriceConfig,
)
from .messages import Messages
from .rules import BusinessRules, MethodAdvisoryRules
from .validators import get_config_summary, validate_thresholds

__all__ = [
    # Base
    "env_bool",
    "env_int",
    "env_float",
    "env_str",
    "ENVIRONMENT",
    "LOCALE",
    # Regras
    "BusinessRules",
    "MethodAdvisoryRules",
    # Extracao
    "ConfidenceConfig",
    "ConfidenceWeights",
    "SpokenPriceConfig",
    "OCRCorrectionConfig",
    "RegexCacheConfig",
    # Mensagens
    "Messages",
    # Validadores
    "validate_thresholds",
    "get_config_summary",
]
