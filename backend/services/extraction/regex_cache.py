"""
Cache de expressões regulares compiladas.

Padrões construídos em tempo de execução (tabelas de palavras, denylist)
são compilados uma única vez por chave. O cache é LRU, protegido por Lock,
e é passado explicitamente aos extratores; `default_regex_cache` existe
para quem não injeta um.
"""

import re
from collections import OrderedDict
from threading import Lock
from typing import Optional, Pattern, Tuple

from config import RegexCacheConfig
from logging_config import get_logger

logger = get_logger('services.extraction.regex_cache')


class RegexCache:
    """Cache LRU de padrões compilados, chaveado por (padrão, flags)."""

    def __init__(self, max_size: Optional[int] = None):
        self._max_size = max_size if max_size is not None else RegexCacheConfig.MAX_SIZE
        if self._max_size < 1:
            raise ValueError("max_size deve ser >= 1")
        self._cache: "OrderedDict[Tuple[str, int], Pattern[str]]" = OrderedDict()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def get(self, pattern: str, flags: int = 0) -> Pattern[str]:
        """
        Retorna o padrão compilado, compilando-o se ainda não estiver em cache.

        Args:
            pattern: Expressão regular
            flags: Flags do módulo re

        Returns:
            Padrão compilado
        """
        key = (pattern, flags)
        with self._lock:
            compiled = self._cache.get(key)
            if compiled is not None:
                # Move para o final (LRU: marca como recentemente usado)
                self._cache.move_to_end(key)
                self._hits += 1
                return compiled

            self._misses += 1
            compiled = re.compile(pattern, flags)
            if len(self._cache) >= self._max_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug(f"[REGEX_CACHE] Evicted {evicted[0][:40]!r}")
            self._cache[key] = compiled
            return compiled

    def __contains__(self, pattern: object) -> bool:
        with self._lock:
            return any(key[0] == pattern for key in self._cache)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Limpa todo o cache."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict:
        """Retorna estatísticas do cache."""
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
            }


default_regex_cache = RegexCache()


def resolve_cache(cache: Optional[RegexCache]) -> RegexCache:
    """Devolve o cache injetado ou a instância padrão do módulo."""
    return cache if cache is not None else default_regex_cache
