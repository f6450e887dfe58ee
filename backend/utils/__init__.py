# Utilitários partilhados

from .formatting import format_currency, format_decimal, format_percent, round_to_cents

__all__ = [
    "round_to_cents",
    "format_decimal",
    "format_currency",
    "format_percent",
]
