"""
Configuração de logging do CadaEuro.

Uso:
    from logging_config import get_logger
    logger = get_logger(__name__)

Variáveis de ambiente lidas por setup_logging:
    LOG_LEVEL   nível (default INFO)
    LOG_FILE    ficheiro adicional de log
    LOG_FORMAT  "json" para registos estruturados

Eventos de captura usam log_capture, que produz uma linha legível
("[REJECTED] method=voice confidence=0.42") e o mesmo conteúdo em
record.context para o formatter JSON.
"""
import json
import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Atributos de qualquer LogRecord; o resto veio por `extra`
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "context"}


class StructuredFormatter(logging.Formatter):
    """Formata cada registo como um objeto JSON numa linha."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        context = getattr(record, "context", None)
        if context is not None:
            payload["context"] = context
        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Adapter que junta campos fixos (ex: method) a cada registo."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_json: Optional[bool] = None
) -> None:
    """
    Configura o root logger, substituindo handlers anteriores.

    A consola escreve em stderr para que o stdout fique livre para a
    saída dos scripts (ex: relatório JSON de validate_capture).

    Args:
        level: DEBUG, INFO, WARNING ou ERROR (default: LOG_LEVEL ou INFO)
        log_file: ficheiro adicional (default: LOG_FILE)
        format_string: formato para o modo texto
        use_json: força ou desliga o formato JSON (default: LOG_FORMAT)
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if use_json is None:
        use_json = os.getenv("LOG_FORMAT", "").lower() == "json"
    formatter = StructuredFormatter() if use_json else logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers = [_handler(logging.StreamHandler(sys.stderr), log_level, formatter)]

    file_path = log_file or os.getenv("LOG_FILE")
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_handler(logging.FileHandler(path, encoding="utf-8"), log_level, formatter))

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_context_logger(name: str, **context) -> ContextLogger:
    """
    Logger com campos fixos em todos os registos.

    Example:
        logger = get_context_logger(__name__, method="voice")
        logger.info("Transcrição recebida")
    """
    return ContextLogger(logging.getLogger(name), context)


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    threshold_ms: Optional[float] = None
):
    """
    Regista a duração do bloco.

    Com threshold_ms só regista operações mais lentas que o limite.

    Example:
        with log_timing(logger, "captura_voice"):
            pipeline.process(captured)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        if threshold_ms is None or elapsed_ms > threshold_ms:
            logger.log(level, f"[timing] {operation} completed in {elapsed_ms:.2f}ms")


def log_capture(
    logger: logging.Logger,
    action: str,
    method: Optional[str] = None,
    confidence: Optional[float] = None,
    level: int = logging.INFO,
    **fields
) -> None:
    """
    Regista um evento de captura (validated, rejected, price_missing...).

    Args:
        logger: Logger a usar
        action: Nome do evento, vai para o prefixo em maiúsculas
        method: Método de captura
        confidence: Confiança do texto, arredondada a 3 casas
        level: Nível de log (default: INFO)
        **fields: Campos adicionais, por ordem
    """
    context: Dict[str, Any] = {"action": action}
    if method:
        context["method"] = method
    if confidence is not None:
        context["confidence"] = round(confidence, 3)
    context.update(fields)

    details = " ".join(f"{key}={value}" for key, value in context.items() if key != "action")
    message = f"[{action.upper()}] {details}" if details else f"[{action.upper()}]"
    logger.log(level, message, extra={"context": context})
