"""
Fixtures compartilhadas para testes do CadaEuro.
"""
import logging
import os
import sys

import pytest

# Adicionar o diretório backend ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.capture_pipeline import CapturePipeline
from services.extraction.ocr_corrector import OCRCorrectionStrategy
from services.extraction.regex_cache import RegexCache
from services.extraction.spoken_price import SpokenPriceStrategy
from services.validation.engine import CadaEuroValidator


# === Cache e validadores isolados por teste ===

@pytest.fixture
def regex_cache() -> RegexCache:
    """Cache de regex novo para cada teste."""
    return RegexCache(max_size=64)


@pytest.fixture
def validator(regex_cache) -> CadaEuroValidator:
    """Validador com estratégias padrão explícitas e cache isolado."""
    return CadaEuroValidator(
        ocr_strategy=OCRCorrectionStrategy.CONTEXTUAL,
        spoken_strategy=SpokenPriceStrategy.KEYWORD_TABLES,
        cache=regex_cache,
    )


@pytest.fixture
def pipeline(regex_cache) -> CapturePipeline:
    """Pipeline de captura não estrito."""
    return CapturePipeline(
        cache=regex_cache,
        ocr_strategy=OCRCorrectionStrategy.CONTEXTUAL,
        spoken_strategy=SpokenPriceStrategy.KEYWORD_TABLES,
    )


@pytest.fixture
def strict_pipeline(regex_cache) -> CapturePipeline:
    """Pipeline de captura em modo estrito."""
    return CapturePipeline(
        cache=regex_cache,
        ocr_strategy=OCRCorrectionStrategy.CONTEXTUAL,
        spoken_strategy=SpokenPriceStrategy.KEYWORD_TABLES,
        strict=True,
    )


# === Logging ===

@pytest.fixture
def restore_root_logging():
    """Restaura handlers e nível do root logger após testes que chamam setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
