"""Line heuristics: declaration structure, access scope, and skip decisions.

Everything here works on a single physical line of text. There is no parser
behind it, only regexes and keyword tables, so results are best-effort.
"""

import re
from typing import Sequence

from apexscope.languages import Language
from apexscope.languages.apex import APEX, COLLECTION, MODIFIER, PRIMITIVE
from apexscope.models import ClassContext

_MAX_ANNOTATIONS = 100

_ANNOTATION_RE = re.compile(r"^@\w+\s*(\([\w=.*'\"/\s]+\))?")
_CLASS_RE = re.compile(r"\bclass\b")
_INTERFACE_RE = re.compile(r"\s?\binterface\s")
_ENUM_RE = re.compile(r"^(global\s+|public\s+|private\s+)?enum\b", re.IGNORECASE)


def strip_annotations(line: str) -> str:
    """Remove leading `@Name` / `@Name(args)` annotations from a line."""
    for _ in range(_MAX_ANNOTATIONS):
        if not line or not line.strip().startswith("@"):
            break
        line = _ANNOTATION_RE.sub("", line.strip(), count=1)
    return line


def is_class_or_interface(line: str) -> bool:
    # Inner classes and @isTest classes may have no access modifier, so the
    # keyword may appear anywhere.
    lowered = line.lower()
    return bool(_CLASS_RE.search(lowered) or _INTERFACE_RE.search(lowered))


def is_enum(line: str) -> bool:
    line = strip_annotations(line).strip()
    return _ENUM_RE.match(line) is not None


def _starts_with_marker(line: str, markers: frozenset[str]) -> bool:
    return any(line.startswith(marker + " ") for marker in markers)


def _starts_with_collection(line: str, collections: frozenset[str]) -> bool:
    return any(
        re.match(re.escape(collection) + r"<.+>\s", line)
        for collection in collections
    )


def get_scope(
    line: str,
    scopes: Sequence[str],
    language: Language = APEX,
) -> str | None:
    """Return the documented scope of a declaration line, or None.

    Explicit scope keywords win, in configuration order. When "private" is
    among the configured scopes, some implicitly private members are also
    recognized: static members and methods returning primitives or
    collections. Not every implicitly private line can be matched.
    """
    line = strip_annotations(line).lower().strip()
    test_method = language.test_method_scope

    for scope in scopes:
        scope = scope.lower()
        if line.startswith(scope + " "):
            return scope
        if scope == test_method and line.startswith(f"static {test_method} "):
            return scope

    private = language.private_scope
    if private not in (s.lower() for s in scopes):
        return None

    if line.startswith("static ") and f" {test_method} " not in line:
        return private

    if "(" not in line:
        return None

    markers = language.implicit_private_markers
    if _starts_with_marker(line, markers[MODIFIER] | markers[PRIMITIVE]):
        return private
    if _starts_with_collection(line, markers[COLLECTION]):
        return private

    return None


def _is_type_header(line: str, language: Language) -> bool:
    words = strip_annotations(line).lower().split()
    while words and words[0] in language.declaration_modifiers:
        words = words[1:]
    return len(words) > 1 and words[0] in language.declaration_keywords


def should_skip_line(
    line: str,
    class_context: ClassContext | None = None,
    scopes: Sequence[str] | None = None,
    language: Language = APEX,
) -> bool:
    """Decide whether a line carries no documentable declaration.

    Lines without a scope are still kept when they open an enum, class or
    interface (inner and @isTest types are implicitly private), when they
    are a default constructor of the current class, or when they are an
    interface method signature, since interface methods have no modifier.
    `scopes` defaults to the language's default scope list.
    """
    if scopes is None:
        scopes = language.default_scopes

    if get_scope(line, scopes, language) is not None:
        return False

    if _is_type_header(line, language):
        return False

    if class_context is not None:
        name = class_context.simple_name
        if name and re.search(r"\b" + re.escape(name) + r"\s*\(", line):
            return False
        if class_context.is_interface and "(" in line:
            return False

    return True
