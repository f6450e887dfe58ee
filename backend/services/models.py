"""
Modelos compartilhados para os serviços do CadaEuro.

Centraliza enums e dataclasses usados por múltiplos módulos
para evitar dependências circulares e facilitar manutenção.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from exceptions import MultipleErrors, ValidationError


def dedupe(items: Iterable[str]) -> Tuple[str, ...]:
    """Remove duplicados mantendo a ordem da primeira ocorrência."""
    return tuple(dict.fromkeys(items))


# === Métodos de captura ===

class CaptureMethod(str, Enum):
    """Método de captura de um produto."""
    SCANNER = "camera"
    VOICE = "mic"
    MANUAL = "keyboard"

    @property
    def title(self) -> str:
        return _METHOD_TITLES[self]

    @property
    def analytics_name(self) -> str:
        return _METHOD_ANALYTICS[self]

    @property
    def priority(self) -> int:
        """Ordem de apresentação (1 = primeiro)."""
        return _METHOD_PRIORITY[self]

    @property
    def requires_permissions(self) -> bool:
        return self is not CaptureMethod.MANUAL

    @property
    def uses_llm_processing(self) -> bool:
        return self is not CaptureMethod.MANUAL

    @property
    def estimated_processing_time(self) -> float:
        """Tempo estimado de processamento, em segundos."""
        return _METHOD_PROCESSING_TIME[self]

    @property
    def is_instant(self) -> bool:
        return self.estimated_processing_time == 0.0

    @property
    def fallback_method(self) -> "CaptureMethod":
        return CaptureMethod.MANUAL

    @property
    def fallback_button_text(self) -> str:
        if self is CaptureMethod.MANUAL:
            return "Tentar novamente"
        return "Adicionar manualmente"

    @classmethod
    def by_priority(cls) -> List["CaptureMethod"]:
        return sorted(cls, key=lambda m: m.priority)

    @classmethod
    def instant_methods(cls) -> List["CaptureMethod"]:
        return [m for m in cls if m.is_instant]

    @classmethod
    def from_value(cls, value: Any) -> "CaptureMethod":
        """
        Resolve um método a partir do valor bruto ("camera") ou do nome ("scanner").

        Raises:
            ValueError: Se o valor não corresponde a nenhum método
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for method in cls:
            if key in (method.value, method.name.lower()):
                return method
        raise ValueError(f"Método de captura desconhecido: {value!r}")


_METHOD_TITLES = {
    CaptureMethod.SCANNER: "Capturar com câmara",
    CaptureMethod.VOICE: "Gravar com microfone",
    CaptureMethod.MANUAL: "Adicionar manualmente",
}

_METHOD_ANALYTICS = {
    CaptureMethod.SCANNER: "ocr_label_scan",
    CaptureMethod.VOICE: "voice_capture",
    CaptureMethod.MANUAL: "manual_input",
}

_METHOD_PRIORITY = {
    CaptureMethod.SCANNER: 1,
    CaptureMethod.VOICE: 2,
    CaptureMethod.MANUAL: 3,
}

_METHOD_PROCESSING_TIME = {
    CaptureMethod.SCANNER: 2.0,
    CaptureMethod.VOICE: 3.0,
    CaptureMethod.MANUAL: 0.0,
}


# === Textos capturados ===

@dataclass(frozen=True)
class CapturedText:
    """Texto bruto vindo de um canal de captura."""
    raw: str
    source: CaptureMethod


@dataclass(frozen=True)
class NormalizedText:
    """Texto capturado após limpeza; mantém a fonte e o texto original."""
    text: str
    source: CaptureMethod
    original: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class ExtractedProduct:
    """Par (nome, preço) extraído de um texto, com a confiança da extração."""
    name: str
    price: Optional[float]
    confidence: float

    @property
    def needs_price_confirmation(self) -> bool:
        return self.price is None

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário."""
        return {"name": self.name, "price": self.price, "confidence": self.confidence}


# === Resultado de validação ===

@dataclass(frozen=True)
class ValidationResult:
    """
    Veredito estruturado de uma validação.

    `is_valid` é derivado de `errors`: um resultado é válido se e só se
    não tiver erros. Avisos e sugestões nunca invalidam.
    """
    errors: Tuple[ValidationError, ...] = ()
    warnings: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    metadata: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", dedupe(self.warnings))
        object.__setattr__(self, "suggestions", dedupe(self.suggestions))
        object.__setattr__(self, "metadata", dict(self.metadata))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(
        cls,
        warnings: Iterable[str] = (),
        suggestions: Iterable[str] = (),
        metadata: Optional[Dict[str, str]] = None,
    ) -> "ValidationResult":
        return cls(
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        errors: Iterable[ValidationError],
        warnings: Iterable[str] = (),
        suggestions: Iterable[str] = (),
        metadata: Optional[Dict[str, str]] = None,
    ) -> "ValidationResult":
        errors = tuple(errors)
        if not errors:
            raise ValueError("failure() exige pelo menos um erro")
        return cls(
            errors=errors,
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
            metadata=metadata or {},
        )

    def merge(self, *others: "ValidationResult") -> "ValidationResult":
        """Combina resultados: erros concatenados, avisos e sugestões sem duplicados."""
        errors = list(self.errors)
        warnings = list(self.warnings)
        suggestions = list(self.suggestions)
        metadata = dict(self.metadata)
        for other in others:
            errors.extend(other.errors)
            warnings.extend(other.warnings)
            suggestions.extend(other.suggestions)
            metadata.update(other.metadata)
        return ValidationResult(
            errors=tuple(errors),
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
            metadata=metadata,
        )

    def with_metadata(self, **values: Any) -> "ValidationResult":
        metadata = dict(self.metadata)
        metadata.update({k: str(v) for k, v in values.items()})
        return ValidationResult(
            errors=self.errors,
            warnings=self.warnings,
            suggestions=self.suggestions,
            metadata=metadata,
        )

    def throw_if_invalid(self) -> None:
        """
        Lança o erro de validação se o resultado for inválido.

        Raises:
            ValidationError: O único erro, ou MultipleErrors se houver vários
        """
        if not self.errors:
            return
        if len(self.errors) == 1:
            raise self.errors[0]
        raise MultipleErrors(self.errors)

    @property
    def primary_message(self) -> Optional[str]:
        """Mensagem mais relevante: primeiro erro, senão primeiro aviso."""
        if self.errors:
            return self.errors[0].error_description
        if self.warnings:
            return self.warnings[0]
        return None

    @property
    def all_messages(self) -> List[str]:
        return (
            [e.error_description for e in self.errors]
            + list(self.warnings)
            + list(self.suggestions)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário."""
        return {
            "is_valid": self.is_valid,
            "errors": [
                {
                    "kind": e.kind,
                    "description": e.error_description,
                    "recovery_suggestion": e.recovery_suggestion,
                }
                for e in self.errors
            ],
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class CaptureOutcome:
    """Resultado do pipeline de captura."""
    product: ExtractedProduct
    result: ValidationResult
    normalized: NormalizedText
    confidence: float

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário."""
        return {
            "source": self.normalized.source.value,
            "text": self.normalized.text,
            "confidence": self.confidence,
            "product": self.product.to_dict(),
            "validation": self.result.to_dict(),
        }
