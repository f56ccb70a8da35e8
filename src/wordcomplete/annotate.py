# src/wordcomplete/annotate.py
"""
Annotation: turning a fragment's raw text into plain text.

Builders are keyed by the fragment's dialect. The adapter here only wires a
builder to a fragment; markup-aware builders live with the hosting server and
are registered through register_builder().
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Protocol

from . import config as CFG
from .models import AnnotatedText, AnnotatedTextFragment, CodeFragment, Document, Settings

log = logging.getLogger(__name__)


class AnnotatedTextBuilder(Protocol):
    def configure(self, settings: Settings) -> None: ...
    def feed(self, text: str) -> None: ...
    def build(self) -> AnnotatedText: ...


class PlaintextBuilder:
    """Plaintext has no markup: the plain text is the code itself."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self.settings = Settings()

    def configure(self, settings: Settings) -> None:
        self.settings = settings

    def feed(self, text: str) -> None:
        self._parts.append(text)

    def build(self) -> AnnotatedText:
        return AnnotatedText("".join(self._parts))


_BUILDERS: Dict[str, Callable[[], AnnotatedTextBuilder]] = {
    CFG.DEFAULT_DIALECT: PlaintextBuilder,
}


def register_builder(code_language_id: str, factory: Callable[[], AnnotatedTextBuilder]) -> None:
    _BUILDERS[code_language_id] = factory


def create_builder(code_language_id: str) -> AnnotatedTextBuilder:
    factory = _BUILDERS.get(code_language_id)
    if factory is None:
        log.debug("No annotation builder for %r, falling back to %s", code_language_id, CFG.DEFAULT_DIALECT)
        return PlaintextBuilder()
    return factory()


def annotate(document: Document, fragment: CodeFragment) -> AnnotatedTextFragment:
    """Build the plain-text view of ``fragment`` with the builder for its dialect."""
    builder = create_builder(fragment.code_language_id)
    builder.configure(fragment.settings)
    builder.feed(fragment.code)
    return AnnotatedTextFragment(builder.build(), fragment, document)
