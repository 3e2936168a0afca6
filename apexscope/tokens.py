"""Position and text helpers shared by the classifier and comment rendering."""

import re
from typing import Sequence, TypeVar

T = TypeVar("T")

_URL_RE = re.compile(r"^(https?)://[-a-zA-Z0-9+&@#/%?=~_|!:,.;]*[-a-zA-Z0-9+&@#/%=~_|]")


def last(items: Sequence[T]) -> T:
    """Return the last element, or the only one for single-element sequences."""
    return items[-1] if len(items) > 1 else items[0]


def previous_word(text: str, index: int) -> str:
    """Return the space-delimited word that precedes `index` in `text`.

    Trailing spaces before `index` are skipped. When `index` lands inside an
    identifier, the rest of the identifier is included. Out-of-range indices and empty text
    yield an empty string.
    """
    if not text or index <= 0 or index >= len(text):
        return ""

    end = index
    while end > 0 and text[end - 1] == " ":
        end -= 1
    if end == 0:
        return ""

    if end == index:
        # cursor inside an identifier: take the rest of it
        while end < len(text) and (text[end].isalnum() or text[end] == "_"):
            end += 1

    start = end - 1
    while start > 0 and text[start - 1] != " ":
        start -= 1

    return text[start:end]


def count_chars(text: str, char: str) -> int:
    """Count occurrences of a single character."""
    if len(char) != 1:
        return 0
    return text.count(char)


def is_url(text: str) -> bool:
    if not text:
        return False
    return _URL_RE.match(text.strip()) is not None
