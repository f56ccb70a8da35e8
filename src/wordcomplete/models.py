# src/wordcomplete/models.py
"""
Data models for the word completion core.

This module defines small, focused data containers:

- Settings: the effective checking settings of a document or fragment.
- Document: an immutable snapshot of an editor document.
- CodeFragment: a span of the document written in one markup dialect.
- AnnotatedText / AnnotatedTextFragment: the plain-text view of a fragment.
- DetectedLanguage: the answer of a language detector.

These classes do not contain business logic beyond position bookkeeping; they
only structure the data so that locating, resolving and filtering stay simple
and predictable.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, Tuple

from . import config as CFG

# line breaks as the language server protocol counts them
_EOL = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Effective settings of a document or of a single code fragment.

    Attributes
    ----------
    language_short_code : str
        Natural language of the text (e.g. "en-US"), or the sentinel
        CFG.AUTO_LANGUAGE ("auto") to detect it from the text.
    dictionary : Tuple[str, ...]
        User- or project-approved words, in the order they were configured.
        Any iterable passed in is materialized into a tuple.
    """
    language_short_code: str = CFG.DEFAULT_LANGUAGE
    dictionary: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dictionary", tuple(self.dictionary))


@dataclass(frozen=True, slots=True)
class Document:
    """
    Immutable snapshot of a full document.

    Attributes
    ----------
    text : str
        The full document text.
    language_id : str
        Markup dialect identifier ("plaintext", "markdown", "latex", ...).
        Selects the fragmentizer used to split the document.
    settings : Settings
        Settings in effect for the whole document. Fragmentizers may derive
        per-fragment settings from these.
    """
    text: str
    language_id: str = CFG.DEFAULT_DIALECT
    settings: Settings = field(default_factory=Settings)
    _line_starts: List[int] = field(init=False, repr=False, compare=False)
    _line_ends: List[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        ends: List[int] = []
        for m in _EOL.finditer(self.text):
            ends.append(m.start())
            starts.append(m.end())
        ends.append(len(self.text))
        object.__setattr__(self, "_line_starts", starts)
        object.__setattr__(self, "_line_ends", ends)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_at(self, position) -> int:
        """
        Convert a line/character position into an absolute character offset.

        ``position`` is anything with ``line`` and ``character`` attributes
        (normally ``lsprotocol.types.Position``). ``character`` counts UTF-16
        code units, as LSP clients send it; the result indexes the Python
        string (code points). A character past the end of its line clamps to
        the line end; a line past the last line clamps to the end of the text.
        """
        line = max(int(position.line), 0)
        if line >= len(self._line_starts):
            return len(self.text)
        start, end = self._line_starts[line], self._line_ends[line]
        character = max(int(position.character), 0)

        units = 0
        for i in range(start, end):
            if units >= character:
                return i
            # astral code points take a surrogate pair in UTF-16
            units += 2 if ord(self.text[i]) > 0xFFFF else 1
        return end


@dataclass(frozen=True, slots=True)
class CodeFragment:
    """
    A contiguous span ``[from_pos, from_pos + len(code))`` of a document.

    Attributes
    ----------
    code_language_id : str
        Markup dialect of this span; selects the annotation builder.
    code : str
        The raw text of the span, exactly as it appears in the document.
    from_pos : int
        Absolute offset of the first character of the span.
    settings : Settings
        Settings in effect inside this span (language, dictionary).
    """
    code_language_id: str
    code: str
    from_pos: int
    settings: Settings = field(default_factory=Settings)

    @property
    def to_pos(self) -> int:
        return self.from_pos + len(self.code)

    def contains(self, offset: int) -> bool:
        return self.from_pos <= offset < self.to_pos


@dataclass(frozen=True, slots=True)
class AnnotatedText:
    """Plain-text view of a fragment, markup stripped."""
    plain_text: str


@dataclass(frozen=True, slots=True)
class AnnotatedTextFragment:
    annotated_text: AnnotatedText
    code_fragment: CodeFragment
    document: Document


@dataclass(frozen=True, slots=True)
class DetectedLanguage:
    """
    Result of a language detector.

    ``short_code_with_country_and_variant`` joins the non-empty parts with
    "-", e.g. "de", "en-US" or "ca-ES-valencia".
    """
    short_code: str
    country: str = ""
    variant: str = ""

    @property
    def short_code_with_country_and_variant(self) -> str:
        return "-".join(p for p in (self.short_code, self.country, self.variant) if p)

