# src/wordcomplete/language.py
"""
Language resolution for a fragment.

A fragment either names its language explicitly or asks for "auto", in which
case the plain text is handed to a language detector. The detector itself is
an external engine; anything implementing LanguageDetector can be plugged in.
"""

from __future__ import annotations
import contextlib
import io
import logging
from typing import Callable, Optional, Protocol, Sequence

from . import config as CFG
from .models import AnnotatedTextFragment, DetectedLanguage

log = logging.getLogger(__name__)


class LanguageDetector(Protocol):
    def clean_and_shorten(self, text: str) -> str: ...

    def detect(
        self,
        text: str,
        allow: Sequence[str],
        disallow: Sequence[str],
    ) -> Optional[DetectedLanguage]: ...


DetectorFactory = Callable[[], LanguageDetector]


def _build_quietly(factory: DetectorFactory) -> LanguageDetector:
    """
    Construct the detector with stdout swallowed. Detector engines print
    diagnostics on startup, and stdout may be the protocol channel.
    Construction errors propagate; stdout is restored either way.
    """
    sink = io.StringIO()
    try:
        with contextlib.redirect_stdout(sink):
            return factory()
    finally:
        captured = sink.getvalue()
        if captured:
            log.debug("Language detector wrote to stdout during startup: %r", captured)


class LanguageResolver:
    """
    Resolves the effective language short code of an annotated fragment.

    The detector is built once, when the resolver is constructed. Without a
    detector factory, "auto" fragments resolve to None.
    """

    def __init__(self, detector_factory: Optional[DetectorFactory] = None) -> None:
        self._detector: Optional[LanguageDetector] = None
        self._warned = False
        if detector_factory is not None:
            self._detector = _build_quietly(detector_factory)

    @property
    def detector(self) -> Optional[LanguageDetector]:
        return self._detector

    def resolve(self, annotated: AnnotatedTextFragment) -> Optional[str]:
        code = annotated.code_fragment.settings.language_short_code
        if code != CFG.AUTO_LANGUAGE:
            return code

        if self._detector is None:
            if not self._warned:
                log.warning("Language is set to %r but no language detector is configured", code)
                self._warned = True
            return None

        clean = self._detector.clean_and_shorten(annotated.annotated_text.plain_text)
        detected = self._detector.detect(clean, [], [])
        if detected is None:
            return None
        return detected.short_code_with_country_and_variant
