"""
Pontuação heurística de qualidade de texto capturado.

O valor (0.0 a 1.0) não é uma probabilidade: serve para ordenar
tentativas de OCR e como gatilho de avisos nas validações.
"""

from typing import Iterable, Optional

from config import ConfidenceWeights as W

from .patterns import Patterns
from .regex_cache import RegexCache, resolve_cache
from .text_normalizer import normalize

# Pontuação comum em rótulos de preço, não penalizada
ALLOWED_SYMBOLS = frozenset("€,.-()")


def _is_strange(ch: str) -> bool:
    return not (ch.isalpha() or ch.isnumeric() or ch.isspace() or ch in ALLOWED_SYMBOLS)


def score(text: Optional[str], cache: Optional[RegexCache] = None) -> float:
    """
    Calcula a confiança da qualidade do texto.

    Parte de 1.0, penaliza caracteres estranhos e textos muito curtos ou
    longos, bonifica o símbolo do euro e valores com duas casas decimais.

    Args:
        text: Texto a avaliar (normalizado antes do cálculo)
        cache: Cache de regex (usa o padrão do módulo se omitido)

    Returns:
        Confiança entre 0.0 e 1.0; 0.0 para texto vazio
    """
    cleaned = normalize(text)
    if not cleaned:
        return 0.0

    length = len(cleaned)
    result = 1.0

    strange = sum(1 for ch in cleaned if _is_strange(ch))
    result -= W.STRANGE_CHAR_PENALTY * strange / length

    if "€" in cleaned:
        result += W.CURRENCY_BONUS
    amount = resolve_cache(cache).get(Patterns.TWO_DECIMAL_AMOUNT.pattern)
    if amount.search(cleaned):
        result += W.DECIMAL_AMOUNT_BONUS

    if length < W.SHORT_TEXT_LENGTH:
        result -= W.SHORT_TEXT_PENALTY
    if length > W.LONG_TEXT_LENGTH:
        result -= W.LONG_TEXT_PENALTY

    return max(0.0, min(1.0, result))


def best_quality_text(
    candidates: Iterable[Optional[str]],
    cache: Optional[RegexCache] = None,
) -> Optional[str]:
    """
    Escolhe a tentativa com maior confiança.

    Em caso de empate fica a primeira; None se não houver candidatos.
    """
    best = None
    best_score = -1.0
    for candidate in candidates:
        current = score(candidate, cache)
        if current > best_score:
            best, best_score = candidate, current
    return best
