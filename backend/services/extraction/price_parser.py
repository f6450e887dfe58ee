"""
Parser de preços numéricos no formato português.

Usado pela entrada manual e pelas partes numéricas do OCR.
"""

import math
from typing import List, Optional

from config import BusinessRules
from utils.formatting import format_currency, format_decimal, round_to_cents

from .patterns import Patterns
from .regex_cache import RegexCache, resolve_cache

__all__ = [
    "parse_decimal",
    "is_valid_price",
    "is_valid_price_input",
    "extract_all_prices",
    "round_to_cents",
    "format_decimal",
    "format_currency",
]


def is_valid_price(value: Optional[float]) -> bool:
    """Preço finito dentro de [MIN_PRICE, MAX_PRICE]."""
    if value is None or not math.isfinite(value):
        return False
    return BusinessRules.MIN_PRICE <= value <= BusinessRules.MAX_PRICE


def parse_decimal(text: Optional[str]) -> Optional[float]:
    """
    Converte um preço português ("2,50", "2,50 €") em float.

    Args:
        text: Valor com vírgula ou ponto decimal, com ou sem símbolo do euro

    Returns:
        Valor arredondado ao cêntimo, ou None se não for número ou
        estiver fora dos limites de preço

    Examples:
        >>> parse_decimal("2,50 €")
        2.5
        >>> parse_decimal("0,00") is None
        True
    """
    if text is None:
        return None
    candidate = Patterns.CURRENCY_AFFIX.sub("", text.strip()).replace(",", ".")
    if not Patterns.DECIMAL_INPUT.match(candidate):
        return None
    try:
        value = float(candidate)
    except ValueError:
        return None
    if not is_valid_price(value):
        return None
    return round_to_cents(value)


def is_valid_price_input(text: Optional[str]) -> bool:
    """Apenas dígitos e no máximo uma vírgula, e valor aceite por parse_decimal."""
    if not text:
        return False
    if any(ch not in "0123456789," for ch in text):
        return False
    if text.count(",") > 1:
        return False
    return parse_decimal(text) is not None


def extract_all_prices(text: Optional[str], cache: Optional[RegexCache] = None) -> List[float]:
    """
    Extrai todos os preços com duas casas decimais de um texto.

    Usado em capturas estilo talão com vários itens.

    Examples:
        >>> extract_all_prices("Pão 0,45 € Leite 1,29 €")
        [0.45, 1.29]
    """
    if not text:
        return []
    pattern = resolve_cache(cache).get(Patterns.PRICE_IN_TEXT.pattern)
    prices = []
    for match in pattern.finditer(text):
        value = parse_decimal(match.group(1))
        if value is not None:
            prices.append(value)
    return prices
