"""Language protocol — all language-specific keyword knowledge in one place."""

from typing import Protocol


class Language(Protocol):
    """Everything the classifier needs to know about a source language.

    Implement this to teach the heuristics a new keyword set.
    """

    name: str
    suffixes: list[str]
    ignore_dirs: set[str]
    declaration_keywords: tuple[str, ...]
    declaration_modifiers: frozenset[str]
    default_scopes: list[str]
    implicit_private_markers: dict[str, frozenset[str]]
    private_scope: str
    test_method_scope: str
