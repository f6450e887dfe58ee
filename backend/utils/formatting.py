"""
Formatação monetária e percentual em pt_PT.

Vírgula como separador decimal, espaço como separador de milhares e
símbolo do euro após o valor ("1 234,50 €").
"""
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from config import BusinessRules

_CENT = Decimal("0.01")


def round_to_cents(value: Union[float, Decimal]) -> float:
    """
    Arredonda para o cêntimo mais próximo (meio para cima).

    Usa Decimal sobre a representação textual do float para que
    2.675 arredonde para 2.68 e não para 2.67. Valores Decimal são
    arredondados diretamente.

    Args:
        value: Valor em euros

    Returns:
        Valor arredondado a 2 casas decimais (o próprio valor se não finito)
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            return float("nan") if value.is_nan() else float(value)
        exact = value
    elif not math.isfinite(value):
        return value
    else:
        exact = Decimal(repr(value))
    try:
        rounded = exact.quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return float(value)
    return float(rounded)


def format_decimal(value: float, grouping: bool = False) -> str:
    """
    Formata um valor com duas casas decimais no formato português.

    Examples:
        >>> format_decimal(2.5)
        '2,50'
        >>> format_decimal(1234.5, grouping=True)
        '1 234,50'
    """
    rounded = Decimal(repr(round_to_cents(value))).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    integer_part, fraction_part = f"{abs(rounded):.2f}".split(".")
    if grouping:
        integer_part = f"{int(integer_part):,}".replace(",", BusinessRules.THOUSANDS_SEPARATOR)
    return f"{sign}{integer_part}{BusinessRules.DECIMAL_SEPARATOR}{fraction_part}"


def format_currency(value: float, grouping: bool = False) -> str:
    """
    Formata um valor monetário em euros.

    Examples:
        >>> format_currency(2.5)
        '2,50 €'
    """
    if not math.isfinite(value):
        value = 0.0
    return f"{format_decimal(value, grouping=grouping)} {BusinessRules.CURRENCY_SYMBOL}"


def format_percent(fraction: float) -> str:
    """Formata uma fração (0-1) como percentagem com uma casa decimal ("42,0%")."""
    return f"{fraction * 100:.1f}".replace(".", BusinessRules.DECIMAL_SEPARATOR) + "%"
