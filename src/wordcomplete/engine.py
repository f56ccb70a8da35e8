# wordcomplete/engine.py
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from lsprotocol.types import CompletionItem, CompletionList

from . import config as CFG
from .annotate import annotate
from .fragments import create_fragmentizer, locate
from .language import DetectorFactory, LanguageResolver
from .logging import setup as setup_logging
from .models import Document
from .prefix import scan_prefix
from .wordlist import WordListCache, default_cache

log = logging.getLogger(__name__)


class CompletionEngine:
    """
    Thin orchestration layer that glues together:
      - fragmentation + locating the fragment under the cursor,
      - annotation + language resolution of that fragment,
      - prefix scanning,
      - the per-language word list cache and the fragment's dictionary.

    Every stage may give up; the engine then returns no completions.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        detector_factory: Optional[DetectorFactory] = None,
        word_lists: Optional[WordListCache] = None,
        verbose: Optional[bool] = None,
    ) -> None:
        if verbose is None:
            verbose = CFG.VERBOSE
        if verbose:
            setup_logging(logging.INFO)
        # the detector is built here, once, with stdout swallowed
        self.resolver = LanguageResolver(detector_factory)
        self.word_lists = word_lists if word_lists is not None else default_cache()

    # ------------- query -------------

    # /* ~~~ Candidates for the word being typed at ``position`` ~~~ */
    def create_completion_list(self, document: Document, position) -> List[str]:
        offset = document.offset_at(position)

        fragmentizer = create_fragmentizer(document.language_id)
        fragments = fragmentizer.fragmentize(document.text, document.settings)
        located = locate(fragments, offset)
        if located is None:
            log.debug("No fragment at offset %d", offset)
            return []
        fragment, local_offset = located

        annotated = annotate(document, fragment)

        language = self.resolver.resolve(annotated)
        if language is None:
            log.debug("Language of fragment at %d is unknown", fragment.from_pos)
            return []

        prefix = scan_prefix(fragment.code, local_offset)
        if not prefix:
            return []

        dictionary = fragment.settings.dictionary
        words = self.word_lists.get(language)
        if not words and not dictionary:
            return []

        # dictionary first, each source keeps its own order, no dedup
        candidates = [w for w in dictionary if w.startswith(prefix)]
        candidates.extend(w for w in words if w.startswith(prefix))
        log.debug("%d candidates for %r (%s)", len(candidates), prefix, language)
        return candidates


def to_completion_list(candidates: Iterable[str]) -> CompletionList:
    """Wrap candidate words the way the language server sends them."""
    return CompletionList(
        is_incomplete=False,
        items=[CompletionItem(label=word) for word in candidates],
    )


_engine: Optional[CompletionEngine] = None
_engine_lock = threading.Lock()


def create_completion_list(document: Document, position) -> List[str]:
    """Completions from a shared engine without language detection."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = CompletionEngine()
    return _engine.create_completion_list(document, position)
