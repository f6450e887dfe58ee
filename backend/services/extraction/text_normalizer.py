"""
Utilitários de normalização de texto capturado.

Este módulo contém funções para limpar espaços e caracteres de controlo,
sanitizar entradas, capitalizar nomes de produtos em português e
calcular estatísticas simples de texto.

Usa lru_cache para melhorar performance em chamadas repetidas.
"""

import unicodedata
from functools import lru_cache
from typing import Iterable, List, NamedTuple, Optional, Set

from config import BusinessRules

from .patterns import Patterns

# Conectivos que ficam em minúsculas (exceto na primeira palavra)
LOWERCASE_CONNECTIVES: Set[str] = {
    "de", "da", "do", "das", "dos", "e", "com", "sem", "para"
}


class TextStatistics(NamedTuple):
    """Contagens básicas de um texto normalizado."""
    words: int
    characters: int
    sentences: int


@lru_cache(maxsize=2048)
def normalize(text: Optional[str]) -> str:
    """
    Normaliza texto capturado.

    Remove espaços nas pontas, colapsa sequências de espaços e troca
    caracteres de controlo (incluindo quebras de linha) por separadores.
    Acentos portugueses ficam intactos. É idempotente.

    Args:
        text: Texto a normalizar

    Returns:
        Texto normalizado (possivelmente vazio)
    """
    if not text:
        return ""

    chars = []
    for ch in text:
        category = unicodedata.category(ch)
        if category == "Cc":
            chars.append(" ")
        elif category == "Cf":
            # Caracteres invisíveis (zero-width, BOM)
            continue
        else:
            chars.append(ch)

    return " ".join("".join(chars).split())


def contains_dangerous(text: Optional[str]) -> bool:
    """Verifica se o texto normalizado contém alguma sequência da denylist."""
    return bool(Patterns.DANGEROUS.search(normalize(text)))


def sanitize(text: Optional[str]) -> str:
    """
    Sanitiza texto livre para uso seguro.

    Remove tags HTML e sequências da denylist (sem distinção de caixa) até
    não restar nenhuma, e limita o tamanho. O resultado nunca satisfaz
    contains_dangerous().

    Args:
        text: Texto a sanitizar

    Returns:
        Texto sanitizado
    """
    cleaned = normalize(text)
    while True:
        previous = cleaned
        cleaned = Patterns.HTML_TAG.sub("", cleaned)
        cleaned = normalize(Patterns.DANGEROUS.sub("", cleaned))
        if cleaned == previous:
            break

    if len(cleaned) > BusinessRules.MAX_SANITIZED_LENGTH:
        cleaned = cleaned[:BusinessRules.MAX_SANITIZED_LENGTH].rstrip()
    return cleaned


@lru_cache(maxsize=1024)
def normalize_product_name(text: Optional[str]) -> str:
    """
    Capitalização portuguesa para nomes de produtos.

    Examples:
        >>> normalize_product_name("pão DE forma")
        'Pão de Forma'
    """
    cleaned = normalize(text)
    if not cleaned:
        return cleaned

    words = []
    for index, word in enumerate(cleaned.split(" ")):
        lower = word.lower()
        if index > 0 and lower in LOWERCASE_CONNECTIVES:
            words.append(lower)
        else:
            words.append(word.capitalize())
    return " ".join(words)


def _is_valid_name(text: Optional[str], min_length: int, max_length: int) -> bool:
    cleaned = normalize(text)
    if not cleaned:
        return False
    if not min_length <= len(cleaned) <= max_length:
        return False
    return not contains_dangerous(cleaned)


def is_valid_product_name(text: Optional[str]) -> bool:
    """Nome de produto com 1-100 caracteres e sem sequências perigosas."""
    return _is_valid_name(
        text,
        BusinessRules.MIN_PRODUCT_NAME_LENGTH,
        BusinessRules.MAX_PRODUCT_NAME_LENGTH,
    )


def is_valid_list_name(text: Optional[str]) -> bool:
    """Nome de lista com 1-50 caracteres e sem sequências perigosas."""
    return _is_valid_name(
        text,
        BusinessRules.MIN_LIST_NAME_LENGTH,
        BusinessRules.MAX_LIST_NAME_LENGTH,
    )


def valid_product_names(texts: Iterable[str]) -> List[str]:
    """Filtra apenas os nomes de produto válidos."""
    return [t for t in texts if is_valid_product_name(t)]


def text_statistics(text: Optional[str]) -> TextStatistics:
    """
    Conta palavras, caracteres e frases do texto normalizado.

    Um texto sem terminadores conta como uma frase.
    """
    cleaned = normalize(text)
    words = len(cleaned.split(" ")) if cleaned else 0
    sentences = len(Patterns.SENTENCE_END.findall(cleaned))
    return TextStatistics(words=words, characters=len(cleaned), sentences=max(1, sentences))


def information_density(text: Optional[str]) -> float:
    """Palavras por caractere (0.0 para texto vazio)."""
    stats = text_statistics(text)
    if stats.characters == 0:
        return 0.0
    return stats.words / stats.characters


def smart_join(texts: Iterable[Optional[str]], separator: str = ", ") -> str:
    """Junta textos normalizados, ignorando os vazios."""
    return separator.join(c for c in (normalize(t) for t in texts) if c)


def pluralize(word: str, count: int) -> str:
    """
    Plural simples em português.

    Examples:
        >>> pluralize("limão", 2)
        'limões'
        >>> pluralize("pastel", 3)
        'pasteis'
    """
    if count == 1:
        return word
    if word.endswith("ão"):
        return word[:-2] + "ões"
    if word.endswith("l"):
        return word[:-1] + "is"
    if word.endswith(("r", "s", "z")):
        return word + "es"
    return word + "s"
