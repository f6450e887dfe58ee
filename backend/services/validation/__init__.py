"""
Motor de validação de produtos e listas capturados.

Funções puras que devolvem ValidationResult; CadaEuroValidator combina-as.
"""

from .product import (
    validate_product_name,
    validate_price,
    validate_price_for_method,
    validate_quantity,
    validate_for_method,
    validate_ocr_input,
    validate_voice_input,
    validate_manual_input,
    product_name_invalid_reason,
    price_invalid_reason,
)

from .price import validate_price_for_source, is_valid_price_string

from .lists import validate_list_name, validate_list, list_name_invalid_reason

from .engine import (
    CadaEuroValidator,
    cadaeuro_validator,
    validate_product,
    validate_text_input,
)

__all__ = [
    # Produto
    'validate_product_name',
    'validate_price',
    'validate_price_for_method',
    'validate_quantity',
    'validate_for_method',
    'validate_ocr_input',
    'validate_voice_input',
    'validate_manual_input',
    'product_name_invalid_reason',
    'price_invalid_reason',
    # Preço por fonte
    'validate_price_for_source',
    'is_valid_price_string',
    # Listas
    'validate_list_name',
    'validate_list',
    'list_name_invalid_reason',
    # Validador principal
    'CadaEuroValidator',
    'cadaeuro_validator',
    'validate_product',
    'validate_text_input',
]
