"""
Configuracoes de extracao e confianca do CadaEuro.
"""
from .base import env_float, env_int, env_str


class ConfidenceConfig:
    """Limiares de confianca usados como gatilho de avisos."""
    # Checagens por metodo (validate_for_method)
    OCR_METHOD_THRESHOLD = env_float("CONFIDENCE_OCR_METHOD_THRESHOLD", 0.5)
    VOICE_METHOD_THRESHOLD = env_float("CONFIDENCE_VOICE_METHOD_THRESHOLD", 0.6)
    # Checagens por fonte do preco (validate_price_for_source)
    OCR_PRICE_THRESHOLD = env_float("CONFIDENCE_OCR_PRICE_THRESHOLD", 0.8)
    VOICE_PRICE_THRESHOLD = env_float("CONFIDENCE_VOICE_PRICE_THRESHOLD", 0.7)
    # Qualidade do nome do produto
    PRODUCT_NAME_THRESHOLD = env_float("CONFIDENCE_PRODUCT_NAME_THRESHOLD", 0.7)


class ConfidenceWeights:
    """Pesos da heuristica de confianca."""
    STRANGE_CHAR_PENALTY = 0.5
    CURRENCY_BONUS = 0.1
    DECIMAL_AMOUNT_BONUS = 0.2
    SHORT_TEXT_PENALTY = 0.3
    LONG_TEXT_PENALTY = 0.2
    SHORT_TEXT_LENGTH = 3
    LONG_TEXT_LENGTH = 50


class SpokenPriceConfig:
    """Configuracoes do parser de precos falados."""
    # "keyword_tables" (comportamento legado) ou "grammar"
    STRATEGY = env_str("CADAEURO_SPOKEN_PRICE_STRATEGY", "keyword_tables")


class OCRCorrectionConfig:
    """Configuracoes do corretor de OCR."""
    # "contextual" (por token) ou "blind" (substituicao literal legada)
    STRATEGY = env_str("CADAEURO_OCR_CORRECTION_STRATEGY", "contextual")


class RegexCacheConfig:
    """Configuracoes do cache de expressoes regulares compiladas."""
    MAX_SIZE = env_int("REGEX_CACHE_MAX_SIZE", 50)
