"""
Exceções específicas do CadaEuro.

Este módulo define a taxonomia fechada de erros de validação de capturas
(nome, preço, quantidade, listas e falhas específicas por método) e as
exceções de configuração.

Os validadores nunca lançam estas exceções para entradas inválidas: devolvem-nas
dentro de um ValidationResult. Quem precisa de fluxo por exceção usa
ValidationResult.throw_if_invalid().
"""

from typing import List, Optional, Sequence

from config import BusinessRules, Messages
from utils.formatting import format_currency, format_percent


class CadaEuroError(Exception):
    """Exceção base para todas as exceções do CadaEuro."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


# === Exceções de Configuração ===

class ConfigurationError(CadaEuroError):
    """Erro de configuração (estratégia desconhecida, limiar fora do range)."""

    def __init__(self, setting: str, value: object, details: Optional[str] = None):
        self.setting = setting
        self.value = value
        super().__init__(f"Configuração inválida para {setting}: {value!r}", details)


# === Exceções de Validação ===

class ValidationError(CadaEuroError):
    """
    Base da taxonomia fechada de erros de validação.

    Cada variante expõe `kind`, `reason`, `error_description` e
    `recovery_suggestion`, para que a camada de UI mostre orientação
    sem conhecer as regras.
    """

    kind = "validation_error"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(self.error_description)

    @property
    def error_description(self) -> str:
        return self.reason

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_DEFAULT

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"

    def _identity(self) -> tuple:
        return (self.reason,)


class InvalidProductName(ValidationError):
    """Nome de produto inválido."""

    kind = "invalid_product_name"

    @property
    def error_description(self) -> str:
        return f"Nome de produto inválido: {self.reason}"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_PRODUCT_NAME.format(
            min=BusinessRules.MIN_PRODUCT_NAME_LENGTH,
            max=BusinessRules.MAX_PRODUCT_NAME_LENGTH,
        )


class InvalidPrice(ValidationError):
    """Preço inválido."""

    kind = "invalid_price"

    @property
    def error_description(self) -> str:
        return f"Preço inválido: {self.reason}"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_PRICE.format(
            min=format_currency(BusinessRules.MIN_PRICE),
            max=format_currency(BusinessRules.MAX_PRICE),
        )


class InvalidQuantity(ValidationError):
    """Quantidade inválida."""

    kind = "invalid_quantity"

    @property
    def error_description(self) -> str:
        return f"Quantidade inválida: {self.reason}"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_QUANTITY.format(
            min=BusinessRules.MIN_QUANTITY,
            max=BusinessRules.MAX_QUANTITY,
        )


class InvalidListName(ValidationError):
    """Nome de lista inválido."""

    kind = "invalid_list_name"

    @property
    def error_description(self) -> str:
        return f"Nome de lista inválido: {self.reason}"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_LIST_NAME.format(
            min=BusinessRules.MIN_LIST_NAME_LENGTH,
            max=BusinessRules.MAX_LIST_NAME_LENGTH,
        )


class InvalidList(ValidationError):
    """Lista vazia ou inválida."""

    kind = "invalid_list"

    @property
    def error_description(self) -> str:
        return f"Lista inválida: {self.reason}"


class OcrValidationFailed(ValidationError):
    """Falha específica de leitura OCR, com a confiança obtida."""

    kind = "ocr_validation_failed"

    def __init__(self, reason: str, confidence: float):
        self.confidence = confidence
        super().__init__(reason)

    @property
    def error_description(self) -> str:
        return f"Falha na validação OCR: {self.reason} (confiança: {format_percent(self.confidence)})"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_OCR

    def _identity(self) -> tuple:
        return (self.reason, self.confidence)


class VoiceValidationFailed(ValidationError):
    """Falha específica de transcrição de voz, com a transcrição original."""

    kind = "voice_validation_failed"

    def __init__(self, reason: str, transcript: str):
        self.transcript = transcript
        super().__init__(reason)

    @property
    def error_description(self) -> str:
        return f"Falha na validação de voz: {self.reason} (transcrição: '{self.transcript}')"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_VOICE

    def _identity(self) -> tuple:
        return (self.reason, self.transcript)


class ManualInputInvalid(ValidationError):
    """Entrada manual inválida."""

    kind = "manual_input_invalid"

    @property
    def error_description(self) -> str:
        return f"Entrada manual inválida: {self.reason}"

    @property
    def recovery_suggestion(self) -> str:
        return Messages.RECOVERY_MANUAL


class MultipleErrors(ValidationError):
    """Agrega mais de um erro de validação num único erro lançável."""

    kind = "multiple_errors"

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors: List[ValidationError] = list(errors)
        super().__init__("; ".join(e.error_description for e in self.errors))

    @property
    def error_description(self) -> str:
        return f"Múltiplos erros: {self.reason}"

    def _identity(self) -> tuple:
        return tuple(self.errors)


class BusinessRuleViolation(ValidationError):
    """Violação de uma regra de negócio nomeada."""

    kind = "business_rule_violation"

    def __init__(self, rule: str, reason: str):
        self.rule = rule
        super().__init__(reason)

    @property
    def error_description(self) -> str:
        return f"Violação da regra '{self.rule}': {self.reason}"

    def _identity(self) -> tuple:
        return (self.rule, self.reason)


VALIDATION_ERROR_TYPES = (
    InvalidProductName,
    InvalidPrice,
    InvalidQuantity,
    InvalidListName,
    InvalidList,
    OcrValidationFailed,
    VoiceValidationFailed,
    ManualInputInvalid,
    MultipleErrors,
    BusinessRuleViolation,
)
