from __future__ import annotations


def _is_word_char(ch: str) -> bool:
    """Letters of any script continue a word, and so does the hyphen."""
    return ch.isalpha() or ch == "-"


def scan_prefix(text: str, cursor: int) -> str:
    """
    Return the partially typed word ending at ``cursor``: the maximal run of
    letters/hyphens in ``text[:cursor]``. Empty when the cursor lies beyond
    the text or directly follows a non-word character.
    """
    if cursor < 0 or cursor > len(text):
        return ""

    for pos in range(cursor - 1, -1, -1):
        if not _is_word_char(text[pos]):
            return text[pos + 1:cursor]

    return text[:cursor]
