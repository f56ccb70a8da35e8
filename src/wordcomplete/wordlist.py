# src/wordcomplete/wordlist.py
"""
Per-language word lists, loaded lazily and kept for the life of the process.

Each language short code maps to a bundled resource named
``completionList.<code>.txt`` holding one word per line. Lists never change
while the process runs, so entries are never invalidated.
"""

from __future__ import annotations
import logging
import re
import threading
from typing import Dict, Optional, Tuple

from . import config as CFG
from .resources import ResourceLoader, make_loader

log = logging.getLogger(__name__)

WordList = Tuple[str, ...]

_EMPTY: WordList = ()


class WordListCache:
    """
    Language short code -> immutable word list.

    Lookups are safe from several threads: the check-then-insert runs under a
    lock and only fully built tuples are published.
    """

    def __init__(self, loader: ResourceLoader) -> None:
        self.loader = loader
        self._lists: Dict[str, WordList] = {}
        self._lock = threading.Lock()
        self._code_re = re.compile(CFG.LANGUAGE_CODE_PATTERN)

    def __contains__(self, code: str) -> bool:
        return code in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def get(self, code: str) -> WordList:
        """Word list for ``code``; empty for malformed codes or missing resources. Never raises."""
        if not self._code_re.fullmatch(code):
            # malformed codes are never cached
            return _EMPTY

        with self._lock:
            words = self._lists.get(code)
            if words is None:
                words = self._read(code)
                self._lists[code] = words
        return words

    def clear(self) -> None:
        with self._lock:
            self._lists.clear()

    def _read(self, code: str) -> WordList:
        name = CFG.RESOURCE_TEMPLATE.format(code=code)
        try:
            raw = self.loader.load(name)
        except (OSError, ImportError) as e:
            log.warning("Could not read word list %s: %s", name, e)
            return _EMPTY

        if raw is None:
            log.info("No word list for language %r", code)
            return _EMPTY

        text = raw.decode(CFG.ENCODING, errors="replace").strip()
        if not text:
            return _EMPTY

        words = tuple(text.split("\n"))
        log.info("Loaded word list %s: %d words", name, len(words))
        return words


_default_cache: Optional[WordListCache] = None
_default_lock = threading.Lock()


def default_cache() -> WordListCache:
    """The process-wide cache, reading from CFG.RESOURCE_DSN."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                _default_cache = WordListCache(make_loader(CFG.RESOURCE_DSN))
    return _default_cache
