"""
Tabelas de números por extenso em português europeu.

A mesma palavra tem dois significados conforme o contexto: "cinco euros"
vale 5, mas em "dois euros e cinco" a tabela de frações lê 0.05.
"""

from typing import Dict, Iterable, Optional, Pattern

from .regex_cache import RegexCache, resolve_cache

NUMBER_WORDS: Dict[str, int] = {
    "zero": 0, "um": 1, "uma": 1, "dois": 2, "duas": 2, "três": 3,
    "quatro": 4, "cinco": 5, "seis": 6, "sete": 7, "oito": 8,
    "nove": 9, "dez": 10, "onze": 11, "doze": 12, "treze": 13,
    "catorze": 14, "quinze": 15, "dezasseis": 16, "dezassete": 17,
    "dezoito": 18, "dezanove": 19, "vinte": 20, "trinta": 30,
    "quarenta": 40, "cinquenta": 50, "sessenta": 60, "setenta": 70,
    "oitenta": 80, "noventa": 90, "cem": 100, "cento": 100,
}

# Valores em euros quando a palavra aparece como fração ("e vinte")
FRACTION_WORDS: Dict[str, float] = {
    "meio": 0.5, "meia": 0.5,
    "cinco": 0.05, "dez": 0.10, "quinze": 0.15, "vinte": 0.20,
    "vinte e cinco": 0.25, "trinta": 0.30, "quarenta": 0.40,
    "cinquenta": 0.50,
}

HALF_WORDS = ("meio", "meia")


def alternation(words: Iterable[str]) -> str:
    """Alternância regex com as palavras mais longas primeiro."""
    return "|".join(sorted(words, key=len, reverse=True))


NUMBER_ALTERNATION = alternation(NUMBER_WORDS)
FRACTION_ALTERNATION = alternation(FRACTION_WORDS)

# "vinte e cinco": palavras ligadas por "e"
COMPOUND_NUMBER = rf"(?:{NUMBER_ALTERNATION})(?:\s+e\s+(?:{NUMBER_ALTERNATION}))*"


def continues_compound(previous: int, following: int) -> bool:
    """'vinte e cinco', 'cento e vinte': dezenas/centenas seguidas de valor menor."""
    return previous >= 20 and previous % 10 == 0 and following < previous


def words_to_number(phrase: str) -> Optional[int]:
    """
    Soma as palavras de um número composto ligado por "e".

    Returns:
        Valor inteiro, ou None se alguma palavra não for número ou se a
        composição não fizer sentido ("dois e cinquenta")

    Examples:
        >>> words_to_number("vinte e cinco")
        25
        >>> words_to_number("cento e vinte")
        120
    """
    total = 0
    previous: Optional[int] = None
    for word in phrase.lower().split():
        if word == "e":
            continue
        value = NUMBER_WORDS.get(word)
        if value is None:
            return None
        if previous is not None and not continues_compound(previous, value):
            return None
        total += value
        previous = value
    return total if previous is not None else None


def fraction_value(phrase: str) -> Optional[float]:
    """Valor de uma palavra da tabela de frações ("meia" -> 0.5)."""
    return FRACTION_WORDS.get(" ".join(phrase.lower().split()))


def compile_number_pattern(
    template: str,
    cache: Optional[RegexCache] = None,
    flags: int = 0,
) -> Pattern[str]:
    """
    Compila um padrão com os marcadores {number}, {compound} e {fraction}.

    A compilação passa pelo RegexCache, para que cada padrão seja
    compilado uma única vez.
    """
    pattern = template.format(
        number=NUMBER_ALTERNATION,
        compound=COMPOUND_NUMBER,
        fraction=FRACTION_ALTERNATION,
    )
    return resolve_cache(cache).get(pattern, flags)
