"""
Módulos de extração de dados de texto capturado.

Contém normalização e sanitização de texto, correção de OCR, pontuação
de confiança e extração de preços numéricos e falados.
"""

from .regex_cache import RegexCache, default_regex_cache

from .patterns import Patterns, DANGEROUS_SEQUENCES

from .text_normalizer import (
    normalize,
    sanitize,
    contains_dangerous,
    normalize_product_name,
    is_valid_product_name,
    is_valid_list_name,
    valid_product_names,
    text_statistics,
    information_density,
    smart_join,
    pluralize,
    TextStatistics,
)

from .ocr_corrector import (
    OCRCorrectionStrategy,
    correct_ocr,
    ocr_corrections_applied,
)

from .confidence import score, best_quality_text

from .price_parser import (
    parse_decimal,
    is_valid_price,
    is_valid_price_input,
    extract_all_prices,
    round_to_cents,
    format_decimal,
    format_currency,
)

from .number_words import NUMBER_WORDS, FRACTION_WORDS, words_to_number

from .spoken_price import (
    SpokenPriceStrategy,
    PriceMatch,
    extract_product_and_price,
    find_spoken_price,
    parse_spoken_price,
    match_numeric_price,
    tokenize,
)

from .product_extractor import extract_product, split_numeric_price

__all__ = [
    # Cache
    'RegexCache',
    'default_regex_cache',
    # Padrões
    'Patterns',
    'DANGEROUS_SEQUENCES',
    # Normalização
    'normalize',
    'sanitize',
    'contains_dangerous',
    'normalize_product_name',
    'is_valid_product_name',
    'is_valid_list_name',
    'valid_product_names',
    'text_statistics',
    'information_density',
    'smart_join',
    'pluralize',
    'TextStatistics',
    # OCR
    'OCRCorrectionStrategy',
    'correct_ocr',
    'ocr_corrections_applied',
    # Confiança
    'score',
    'best_quality_text',
    # Preços numéricos
    'parse_decimal',
    'is_valid_price',
    'is_valid_price_input',
    'extract_all_prices',
    'round_to_cents',
    'format_decimal',
    'format_currency',
    # Preços falados
    'NUMBER_WORDS',
    'FRACTION_WORDS',
    'words_to_number',
    'SpokenPriceStrategy',
    'PriceMatch',
    'extract_product_and_price',
    'find_spoken_price',
    'parse_spoken_price',
    'match_numeric_price',
    'tokenize',
    # Extração por método
    'extract_product',
    'split_numeric_price',
]
