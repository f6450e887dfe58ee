"""
Extração de produto e preço de transcrições de voz em português europeu.

Fluxo:
1. Padrões numéricos ("2,50 euros", "3 euros", "€ 2,50") têm prioridade.
2. Valores por extenso, por uma de duas estratégias:
   - KEYWORD_TABLES: tabelas de palavras junto às palavras-chave
     "euro"/"cêntimo", com a tabela de frações para "e <palavra>" logo
     depois dos euros ("dois euros e sete" -> 2.00).
   - GRAMMAR: tokenizador + parser descendente recursivo; qualquer número
     até 99 depois de "euros e" são cêntimos ("dois euros e sete" -> 2.07).
3. O produto é o texto sem os trechos de preço, capitalizado.

Sem preço, o produto é a transcrição inteira e o preço é None
("precisa de confirmação manual").
"""

import re
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from config import SpokenPriceConfig
from exceptions import ConfigurationError
from logging_config import get_logger
from utils.formatting import round_to_cents

from .number_words import (
    FRACTION_WORDS,
    HALF_WORDS,
    NUMBER_WORDS,
    compile_number_pattern,
    continues_compound,
    fraction_value,
    words_to_number,
)
from .patterns import Patterns
from .regex_cache import RegexCache, resolve_cache
from .text_normalizer import normalize, normalize_product_name

logger = get_logger('services.extraction.spoken_price')

Span = Tuple[int, int]

# Conectivos que ficam pendurados no fim depois de remover o preço
DANGLING_CONNECTIVES = {"e", "por", "a", "de"}


class SpokenPriceStrategy(str, Enum):
    """Estratégia de interpretação de valores por extenso."""
    KEYWORD_TABLES = "keyword_tables"
    GRAMMAR = "grammar"


class PriceMatch(NamedTuple):
    """Valor encontrado e os trechos do texto que o exprimem."""
    value: float
    spans: Tuple[Span, ...]


# Templates para compile_number_pattern ({compound}, {number}, {fraction})
_EURO_WORDS = r"\b({compound})\s+euros?\b"
_CENT_WORDS = r"\b({compound})\s+c[êe]ntimos?\b"
_FRACTION_AFTER_EURO = (
    r"\s+e\s+({fraction})\b"
    r"(?!(?:\s+e\s+(?:{number}))*\s+c[êe]ntimos?)"
)
_NUMBER_AND_HALF = r"\b({compound})\s+e\s+(meio|meia)\b(?:\s+euros?\b)?"
_HALF_EURO = r"\b(meio|meia)\s+euros?\b"

# Frases de preço removidas do nome do produto
_REMOVAL_TEMPLATES = (
    r"\d+\s*euros?\s*e\s*\d+\s*c[êe]ntimos?\b",
    r"\d+[,.]?\d*\s*euros?\b",
    r"€\s*\d+(?:[,.]\d+)?",
    r"\d+(?:[,.]\d+)?\s*€",
    r"\b(?:{number})\s*(?:euros?|c[êe]ntimos?)\b",
    r"\b(?:meio|meia)\s*euros?\b",
    r"\be\s+(?:meio|meia)\b",
)

# Padrões numéricos por ordem de prioridade
_NUMERIC_PATTERNS = (
    Patterns.SPOKEN_EUROS_AND_CENTS,
    Patterns.SPOKEN_DECIMAL_EUROS,
    Patterns.SPOKEN_EURO_SYMBOL_FIRST,
    Patterns.SPOKEN_INTEGER_EUROS,
    Patterns.SPOKEN_INTEGER_CENTS,
    Patterns.SPOKEN_BARE_AMOUNT,
)


def resolve_spoken_strategy(
    strategy: Union[SpokenPriceStrategy, str, None] = None
) -> SpokenPriceStrategy:
    """
    Resolve a estratégia pedida ou a configurada no ambiente.

    Raises:
        ConfigurationError: Se o nome da estratégia for desconhecido
    """
    value = strategy if strategy is not None else SpokenPriceConfig.STRATEGY
    if isinstance(value, SpokenPriceStrategy):
        return value
    try:
        return SpokenPriceStrategy(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError("CADAEURO_SPOKEN_PRICE_STRATEGY", value) from None


# =============================================================================
# PADRÕES NUMÉRICOS
# =============================================================================

def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def match_numeric_price(text: str) -> Optional[PriceMatch]:
    """Primeiro preço numérico ("2,50 euros", "€ 3", "1,29"), por ordem de prioridade."""
    for pattern in _NUMERIC_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        if pattern is Patterns.SPOKEN_EUROS_AND_CENTS:
            value = int(match.group(1)) + int(match.group(2)) / 100
        elif pattern is Patterns.SPOKEN_INTEGER_CENTS:
            value = int(match.group(1)) / 100
        else:
            value = _to_float(match.group(1))
        if value > 0:
            return PriceMatch(value, (match.span(),))
    return None


# =============================================================================
# ESTRATÉGIA KEYWORD_TABLES
# =============================================================================

def _overlaps(span: Span, spans: Sequence[Span]) -> bool:
    return any(span[0] < end and start < span[1] for start, end in spans)


def _match_keyword_tables(text: str, cache: RegexCache) -> Optional[PriceMatch]:
    flags = re.IGNORECASE
    spans: List[Span] = []
    euros = 0.0
    fraction = 0.0

    euro_match = compile_number_pattern(_EURO_WORDS, cache, flags).search(text)
    if euro_match:
        value = words_to_number(euro_match.group(1))
        if value is not None:
            euros = value
            spans.append(euro_match.span())
        after = compile_number_pattern(_FRACTION_AFTER_EURO, cache, flags).match(
            text, euro_match.end()
        )
        if after:
            fraction = fraction_value(after.group(1)) or 0.0
            spans.append(after.span())
    else:
        half_match = compile_number_pattern(_NUMBER_AND_HALF, cache, flags).search(text)
        if half_match and words_to_number(half_match.group(1)) is not None:
            euros = words_to_number(half_match.group(1))
            fraction = FRACTION_WORDS[half_match.group(2).lower()]
            spans.append(half_match.span())
        else:
            half_euro = compile_number_pattern(_HALF_EURO, cache, flags).search(text)
            if half_euro:
                fraction = FRACTION_WORDS[half_euro.group(1).lower()]
                spans.append(half_euro.span())

    cents = 0.0
    for cent_match in compile_number_pattern(_CENT_WORDS, cache, flags).finditer(text):
        if _overlaps(cent_match.span(), spans):
            continue
        value = words_to_number(cent_match.group(1))
        if value is not None:
            cents = value / 100
            spans.append(cent_match.span())
        break

    total = euros + cents + fraction
    if total <= 0:
        return None
    return PriceMatch(total, tuple(sorted(spans)))


# =============================================================================
# ESTRATÉGIA GRAMMAR
# =============================================================================

class TokenKind(str, Enum):
    NUMBER = "number"
    EURO = "euro"
    CENT = "cent"
    AND = "and"
    HALF = "half"
    WORD = "word"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    start: int
    end: int
    value: int = 0


_WORD_TOKEN = re.compile(r"\w+")
_KEYWORD_KINDS = {
    "euro": TokenKind.EURO,
    "euros": TokenKind.EURO,
    "cêntimo": TokenKind.CENT,
    "cêntimos": TokenKind.CENT,
    "centimo": TokenKind.CENT,
    "centimos": TokenKind.CENT,
    "e": TokenKind.AND,
}


def tokenize(text: str) -> List[Token]:
    """Divide a transcrição em tokens de número, moeda, "e", meio e palavra."""
    tokens = []
    for match in _WORD_TOKEN.finditer(text):
        word = match.group(0).lower()
        if word in NUMBER_WORDS:
            tokens.append(Token(TokenKind.NUMBER, word, match.start(), match.end(), NUMBER_WORDS[word]))
        elif word in HALF_WORDS:
            tokens.append(Token(TokenKind.HALF, word, match.start(), match.end()))
        else:
            kind = _KEYWORD_KINDS.get(word, TokenKind.WORD)
            tokens.append(Token(kind, word, match.start(), match.end()))
    return tokens


class _SpokenAmountParser:
    """
    Parser descendente recursivo sobre os tokens.

    Gramática:
        amount   := number EURO [AND (HALF | number [CENT])]
                  | number AND HALF [EURO]
                  | number AND number EURO
                  | number CENT
                  | HALF EURO
        number   := NUMBER (AND NUMBER)*
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens

    def _kind(self, index: int) -> Optional[TokenKind]:
        if 0 <= index < len(self.tokens):
            return self.tokens[index].kind
        return None

    def _number(self, index: int) -> Optional[Tuple[int, int]]:
        """Devolve (valor, índice seguinte) para um número composto."""
        if self._kind(index) is not TokenKind.NUMBER:
            return None
        previous = self.tokens[index].value
        total = previous
        nxt = index + 1
        while (
            self._kind(nxt) is TokenKind.AND
            and self._kind(nxt + 1) is TokenKind.NUMBER
            and continues_compound(previous, self.tokens[nxt + 1].value)
        ):
            previous = self.tokens[nxt + 1].value
            total += previous
            nxt += 2
        return total, nxt

    def _amount(self, index: int) -> Optional[Tuple[float, int]]:
        """Devolve (valor, índice do último token) de um preço em index."""
        if self._kind(index) is TokenKind.HALF and self._kind(index + 1) is TokenKind.EURO:
            return 0.5, index + 1

        number = self._number(index)
        if number is None:
            return None
        value, nxt = number

        if self._kind(nxt) is TokenKind.EURO:
            last = nxt
            if self._kind(nxt + 1) is TokenKind.AND:
                if self._kind(nxt + 2) is TokenKind.HALF:
                    return value + 0.5, nxt + 2
                cents = self._number(nxt + 2)
                if cents is not None and cents[0] <= 99:
                    cents_value, after = cents
                    last = after if self._kind(after) is TokenKind.CENT else after - 1
                    return value + cents_value / 100, last
            return float(value), last

        if self._kind(nxt) is TokenKind.CENT:
            return value / 100, nxt

        if self._kind(nxt) is TokenKind.AND:
            if self._kind(nxt + 1) is TokenKind.HALF:
                last = nxt + 1
                if self._kind(nxt + 2) is TokenKind.EURO:
                    last = nxt + 2
                return value + 0.5, last
            cents = self._number(nxt + 1)
            if cents is not None and cents[0] <= 99 and self._kind(cents[1]) is TokenKind.EURO:
                return value + cents[0] / 100, cents[1]

        return None

    def parse(self) -> Optional[PriceMatch]:
        for index in range(len(self.tokens)):
            parsed = self._amount(index)
            if parsed is None or parsed[0] <= 0:
                continue
            value, last = parsed
            span = (self.tokens[index].start, self.tokens[last].end)
            return PriceMatch(value, (span,))
        return None


def _match_grammar(text: str) -> Optional[PriceMatch]:
    return _SpokenAmountParser(tokenize(text)).parse()


# =============================================================================
# API PÚBLICA
# =============================================================================

def find_spoken_price(
    text: str,
    strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> Optional[PriceMatch]:
    """
    Procura o preço numa transcrição já normalizada.

    Padrões numéricos ganham sobre valores por extenso; de cada categoria
    só o primeiro trecho conta.
    """
    resolved = resolve_spoken_strategy(strategy)
    match = match_numeric_price(text)
    if match is None:
        if resolved is SpokenPriceStrategy.GRAMMAR:
            match = _match_grammar(text)
        else:
            match = _match_keyword_tables(text, resolve_cache(cache))
    if match is None:
        return None

    value = round_to_cents(match.value)
    if value <= 0:
        return None
    return PriceMatch(value, match.spans)


def parse_spoken_price(
    transcript: Optional[str],
    strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> Optional[float]:
    """Apenas o preço de uma transcrição, ou None."""
    match = find_spoken_price(normalize(transcript), strategy, cache)
    return match.value if match else None


def strip_price_phrases(text: str, cache: Optional[RegexCache] = None) -> str:
    """Remove todas as frases de preço que sobrem no texto."""
    for template in _REMOVAL_TEMPLATES:
        pattern = compile_number_pattern(template, cache, re.IGNORECASE)
        text = pattern.sub(" ", text)
    return normalize(text)


def _remove_spans(text: str, spans: Sequence[Span]) -> str:
    pieces = []
    cursor = 0
    for start, end in sorted(spans):
        if start < cursor:
            start = cursor
        pieces.append(text[cursor:start])
        cursor = max(cursor, end)
    pieces.append(text[cursor:])
    return " ".join(pieces)


def _strip_dangling(text: str) -> str:
    # Tokens só de pontuação ficam órfãos quando o preço entre eles sai
    words = [w for w in text.split() if any(ch.isalnum() for ch in w)]
    while words and words[-1].lower().strip(" ,;:-") in DANGLING_CONNECTIVES:
        words.pop()
    return " ".join(words).strip(" ,;:-")


def residual_product_name(
    text: str,
    spans: Sequence[Span],
    cache: Optional[RegexCache] = None,
) -> str:
    """Nome do produto: texto sem os trechos de preço, sem conectivos soltos, capitalizado."""
    residual = _remove_spans(text, spans)
    residual = strip_price_phrases(residual, cache)
    return normalize_product_name(_strip_dangling(residual))


def extract_product_and_price(
    transcript: Optional[str],
    strategy: Union[SpokenPriceStrategy, str, None] = None,
    cache: Optional[RegexCache] = None,
) -> Tuple[str, Optional[float]]:
    """
    Extrai produto e preço de uma transcrição de voz.

    Args:
        transcript: Transcrição em português europeu
        strategy: KEYWORD_TABLES, GRAMMAR ou None para usar a configuração
        cache: Cache de regex (usa o padrão do módulo se omitido)

    Returns:
        Tupla (produto, preço). Sem preço reconhecido, o produto é a
        transcrição inteira capitalizada e o preço é None.

    Examples:
        >>> extract_product_and_price("Leite Mimosa dois euros")
        ('Leite Mimosa', 2.0)
    """
    text = normalize(transcript)
    if not text:
        return "", None

    match = find_spoken_price(text, strategy, cache)
    if match is None:
        logger.debug(f"[VOICE] Sem preço em {text!r}")
        return normalize_product_name(text), None

    product = residual_product_name(text, match.spans, cache)
    logger.debug(f"[VOICE] {text!r} -> produto={product!r} preço={match.value}")
    return product, match.value
