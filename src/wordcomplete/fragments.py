# src/wordcomplete/fragments.py
"""
Code fragments: splitting a document into dialect spans, and finding the
span that holds the cursor.

Fragmentizers understand a document's markup dialect and return the spans
whose prose should be checked. Only a plaintext fragmentizer ships here;
markup-aware ones are registered by the hosting server.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple

from . import config as CFG
from .models import CodeFragment, Settings

log = logging.getLogger(__name__)


class Fragmentizer(Protocol):
    def fragmentize(self, code: str, settings: Settings) -> List[CodeFragment]: ...


class PlaintextFragmentizer:
    """The whole document is one plaintext fragment."""

    def __init__(self, code_language_id: str = CFG.DEFAULT_DIALECT) -> None:
        self.code_language_id = code_language_id

    def fragmentize(self, code: str, settings: Settings) -> List[CodeFragment]:
        return [CodeFragment(self.code_language_id, code, 0, settings)]


_FRAGMENTIZERS: Dict[str, Callable[[], Fragmentizer]] = {
    CFG.DEFAULT_DIALECT: PlaintextFragmentizer,
}


def register_fragmentizer(language_id: str, factory: Callable[[], Fragmentizer]) -> None:
    _FRAGMENTIZERS[language_id] = factory


def create_fragmentizer(language_id: str) -> Fragmentizer:
    """
    Factory keyed by the document's dialect identifier.
    Unknown dialects are checked as plaintext.
    """
    factory = _FRAGMENTIZERS.get(language_id)
    if factory is None:
        log.debug("No fragmentizer for %r, falling back to %s", language_id, CFG.DEFAULT_DIALECT)
        return PlaintextFragmentizer()
    return factory()


def locate(fragments: Sequence[CodeFragment], offset: int) -> Optional[Tuple[CodeFragment, int]]:
    """
    Return the innermost fragment covering ``offset`` and the offset relative
    to its start, or None when no fragment covers it.

    Innermost = greatest ``from_pos`` among the covering fragments; on equal
    ``from_pos`` the first one seen wins.
    """
    match: Optional[CodeFragment] = None
    for frag in fragments:
        if frag.from_pos <= offset < frag.from_pos + len(frag.code):
            if match is None or frag.from_pos > match.from_pos:
                match = frag

    if match is None:
        return None
    return match, offset - match.from_pos
