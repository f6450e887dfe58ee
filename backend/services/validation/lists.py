"""
Validação de listas de compras.
"""

from collections.abc import Sequence
from typing import Any, List, Optional

from config import BusinessRules, Messages
from exceptions import InvalidList, InvalidListName
from services.extraction.text_normalizer import contains_dangerous, normalize, normalize_product_name
from services.models import ValidationResult


def list_name_invalid_reason(name: Optional[str]) -> Optional[str]:
    """Razão pela qual o nome da lista é inválido, ou None se for válido."""
    cleaned = normalize(name)
    if not cleaned:
        return Messages.LIST_NAME_EMPTY
    if contains_dangerous(cleaned):
        return Messages.NAME_DANGEROUS
    if len(cleaned) < BusinessRules.MIN_LIST_NAME_LENGTH:
        return Messages.NAME_TOO_SHORT.format(min=BusinessRules.MIN_LIST_NAME_LENGTH)
    if len(cleaned) > BusinessRules.MAX_LIST_NAME_LENGTH:
        return Messages.NAME_TOO_LONG.format(max=BusinessRules.MAX_LIST_NAME_LENGTH)
    return None


def validate_list_name(name: Optional[str]) -> ValidationResult:
    """Nome de lista com 1-50 caracteres; sugere a capitalização portuguesa."""
    reason = list_name_invalid_reason(name)
    if reason is not None:
        return ValidationResult.failure([InvalidListName(reason)])

    suggestions = []
    formatted = normalize_product_name(name)
    if formatted != name:
        suggestions.append(Messages.SUGGEST_LIST_NAME.format(value=formatted))
    return ValidationResult.success(suggestions=suggestions)


def validate_list(name: Optional[str], items: Any = ()) -> ValidationResult:
    """
    Valida uma lista de compras completa.

    Args:
        name: Nome da lista
        items: Produtos da lista (sequência)

    Returns:
        ValidationResult com InvalidListName/InvalidList ou aviso de lista vazia
    """
    result = validate_list_name(name)

    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        return result.merge(ValidationResult.failure([InvalidList(Messages.LIST_NOT_SEQUENCE)]))

    if not result.is_valid:
        return result

    warnings: List[str] = []
    suggestions: List[str] = []
    if not items:
        warnings.append(Messages.LIST_EMPTY)
        suggestions.append(Messages.SUGGEST_ADD_PRODUCT)

    return ValidationResult.success(warnings=warnings, suggestions=suggestions).merge(result)
