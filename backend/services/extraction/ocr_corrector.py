"""
Correção de artefactos comuns de OCR em rótulos de preço.

Duas estratégias:
- CONTEXTUAL (padrão): troca letra->dígito apenas em tokens que já parecem
  numéricos e devolve dígitos isolados entre letras à letra provável
  ("Le1te" -> "Leite").
- BLIND: tabela literal aplicada ao texto inteiro, pela ordem listada,
  sem olhar ao contexto. Mantida para compatibilidade com o comportamento
  antigo; corrompe palavras com "O", "o", "l", "I" ou "S".

Ambas partilham as regras de pontuação, espaçamento do euro e unidades.
"""

import difflib
import re
from enum import Enum
from typing import List, Optional, Tuple, Union

from config import OCRCorrectionConfig
from exceptions import ConfigurationError
from logging_config import get_logger

from .patterns import Patterns
from .text_normalizer import normalize

logger = get_logger('services.extraction.ocr_corrector')


class OCRCorrectionStrategy(str, Enum):
    """Estratégia de correção OCR."""
    CONTEXTUAL = "contextual"
    BLIND = "blind"


# Confusões letra -> dígito (ordem relevante para a estratégia BLIND)
CHARACTER_CORRECTIONS: Tuple[Tuple[str, str], ...] = (
    ("O", "0"),
    ("o", "0"),
    ("l", "1"),
    ("I", "1"),
    ("S", "5"),
)

# Pontuação e espaçamento do símbolo do euro
PUNCTUATION_CORRECTIONS: Tuple[Tuple[str, str], ...] = (
    ("€ ", "€"),
    (" €", "€"),
    (",,", ","),
    ("..", "."),
)

# Abreviaturas de unidades em rótulos portugueses
UNIT_CORRECTIONS: Tuple[Tuple[str, str], ...] = (
    ("Lt.", "Litro"),
    ("Kg.", "Quilograma"),
    ("gr.", "gramas"),
    ("ml.", "mililitros"),
)

BLIND_CORRECTIONS = CHARACTER_CORRECTIONS + PUNCTUATION_CORRECTIONS + UNIT_CORRECTIONS

# Dígito entre letras -> letra provável
DIGIT_TO_LETTER = {
    "0": "o",
    "1": "i",
    "5": "s",
    "8": "b",
    "3": "e",
    "4": "a",
}

_LETTER_TO_DIGIT = str.maketrans(dict(CHARACTER_CORRECTIONS))

# Unidade só quando não colada a uma letra anterior ("Integr." fica intacto)
_UNIT_PATTERNS = tuple(
    (re.compile(r'(?<![^\W\d_])' + re.escape(wrong)), correct)
    for wrong, correct in UNIT_CORRECTIONS
)


def resolve_ocr_strategy(
    strategy: Union[OCRCorrectionStrategy, str, None] = None
) -> OCRCorrectionStrategy:
    """
    Resolve a estratégia pedida ou a configurada no ambiente.

    Raises:
        ConfigurationError: Se o nome da estratégia for desconhecido
    """
    value = strategy if strategy is not None else OCRCorrectionConfig.STRATEGY
    if isinstance(value, OCRCorrectionStrategy):
        return value
    try:
        return OCRCorrectionStrategy(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError("CADAEURO_OCR_CORRECTION_STRATEGY", value) from None


def correct_ocr(
    text: Optional[str],
    strategy: Union[OCRCorrectionStrategy, str, None] = None,
) -> str:
    """
    Corrige confusões típicas de OCR.

    Args:
        text: Texto reconhecido
        strategy: CONTEXTUAL, BLIND ou None para usar a configuração

    Returns:
        Texto corrigido e normalizado
    """
    resolved = resolve_ocr_strategy(strategy)
    cleaned = normalize(text)
    if not cleaned:
        return ""

    if resolved is OCRCorrectionStrategy.BLIND:
        corrected = _correct_blind(cleaned)
    else:
        corrected = _correct_contextual(cleaned)

    if corrected != cleaned:
        logger.debug(f"[OCR] {resolved.value}: {cleaned!r} -> {corrected!r}")
    return corrected


def _correct_blind(text: str) -> str:
    for wrong, correct in BLIND_CORRECTIONS:
        text = text.replace(wrong, correct)
    return normalize(text)


def _correct_contextual(text: str) -> str:
    for wrong, correct in PUNCTUATION_CORRECTIONS:
        text = text.replace(wrong, correct)

    tokens = [_correct_token(token) for token in text.split(" ")]
    text = " ".join(tokens)

    for pattern, correct in _UNIT_PATTERNS:
        text = pattern.sub(correct, text)
    return normalize(text)


def _correct_token(token: str) -> str:
    match = Patterns.OCR_NUMERIC_TOKEN.match(token)
    if match and any(ch.isdigit() for ch in match.group(2)):
        prefix, core, suffix, punct = match.groups()
        return prefix + core.translate(_LETTER_TO_DIGIT) + suffix + punct

    if not any(ch.isalpha() for ch in token):
        return token
    return _digits_to_letters(token)


def _digits_to_letters(token: str) -> str:
    chars = list(token)
    for i in range(1, len(token) - 1):
        letter = DIGIT_TO_LETTER.get(token[i])
        if letter is None:
            continue
        before, after = token[i - 1], token[i + 1]
        if not (before.isalpha() and after.isalpha()):
            continue
        if before.isupper() and after.isupper():
            letter = letter.upper()
        chars[i] = letter
    return "".join(chars)


def ocr_corrections_applied(original: Optional[str], corrected: str) -> List[Tuple[str, str]]:
    """
    Lista os trechos alterados pela correção, para metadados.

    Returns:
        Pares (antes, depois) na ordem em que aparecem
    """
    before = normalize(original).split()
    after = corrected.split()
    matcher = difflib.SequenceMatcher(a=before, b=after, autojunk=False)
    changes = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        changes.append((" ".join(before[i1:i2]), " ".join(after[j1:j2])))
    return changes
