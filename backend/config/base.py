"""
Configuracoes base do CadaEuro.

Carrega o .env e fornece os leitores de variaveis de ambiente usados
pelas demais configuracoes. Valores ausentes, vazios ou mal formados
caem sempre no default; a verificacao de limites fica em validators.py.
"""
import os
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

load_dotenv()

T = TypeVar("T")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _env_value(key: str) -> Optional[str]:
    """Valor da variavel sem espacos, ou None se ausente/vazia."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_parsed(key: str, parse: Callable[[str], T], default: T) -> T:
    raw = _env_value(key)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError:
        return default


def env_bool(key: str, default: bool = False) -> bool:
    raw = (_env_value(key) or "").lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def env_int(key: str, default: int = 0) -> int:
    return _env_parsed(key, int, default)


def env_float(key: str, default: float = 0.0) -> float:
    return _env_parsed(key, float, default)


def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    value = _env_value(key)
    return default if value is None else value


# === Ambiente ===
ENVIRONMENT = env_str("ENVIRONMENT", "development")

# Tabelas de numerais e separadores decimais assumem pt_PT
LOCALE = "pt_PT"
