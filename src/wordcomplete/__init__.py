"""
Word Completion Module

On-demand word completion for a language server that checks prose embedded
in markup or code. Given a document and a cursor position the engine finds
the fragment under the cursor, works out its natural language, reads the
partially typed word before the cursor and returns matching words from the
fragment's dictionary followed by the language's word list.

Main API:
    CompletionEngine(detector_factory=..., word_lists=...)
    CompletionEngine.create_completion_list(document, position)
    to_completion_list(candidates)

Example Usage:
    from lsprotocol.types import Position
    from wordcomplete import CompletionEngine, Document, Settings

    doc = Document("Thi here", settings=Settings("en", dictionary=("Thimble",)))
    words = CompletionEngine().create_completion_list(doc, Position(0, 3))
"""

# src/wordcomplete/__init__.py
from .engine import CompletionEngine, create_completion_list, to_completion_list  # re-export
from .models import (
    AnnotatedText,
    AnnotatedTextFragment,
    CodeFragment,
    DetectedLanguage,
    Document,
    Settings,
)

__version__ = "1.0.0"
__all__ = [
    "CompletionEngine",
    "create_completion_list",
    "to_completion_list",
    "AnnotatedText",
    "AnnotatedTextFragment",
    "CodeFragment",
    "DetectedLanguage",
    "Document",
    "Settings",
]
