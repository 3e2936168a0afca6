"""Walk a source file line by line and classify its declarations."""

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from apexscope.classifier import get_scope, is_class_or_interface, is_enum, should_skip_line
from apexscope.languages import Language
from apexscope.languages.apex import APEX
from apexscope.models import ClassContext, LineClassification
from apexscope.tokens import count_chars, previous_word

logger = logging.getLogger(__name__)

_TYPE_NAME_RE = re.compile(r"\b(class|interface)\s+(\w+)", re.IGNORECASE)
_ENUM_NAME_RE = re.compile(r"\benum\s+(\w+)", re.IGNORECASE)
_MEMBER_NAME_RE = re.compile(r"(\w+)\s*\(")
_PROPERTY_NAME_RE = re.compile(r"(\w+)\s*(?:[={;]|$)")
_COMMENT_PREFIXES = ("//", "/*", "*")


@dataclass
class _Frame:
    context: ClassContext
    depth: int
    opened: bool


def _enum_name(line: str) -> str:
    brace = line.find("{")
    if brace > 0:
        name = previous_word(line, brace)
        if name and name.lower() != "enum":
            return name
    m = _ENUM_NAME_RE.search(line)
    return m.group(1) if m else ""


def _classify(line: str) -> tuple[str, str]:
    """Return (kind, declared name) for a kept line."""
    if is_enum(line):
        return "enum", _enum_name(line)
    if is_class_or_interface(line):
        m = _TYPE_NAME_RE.search(line)
        if m:
            return m.group(1).lower(), m.group(2)
    m = _MEMBER_NAME_RE.search(line)
    if m:
        return "method", m.group(1)
    m = _PROPERTY_NAME_RE.search(line)
    return "property", m.group(1) if m else ""


def scan_source(
    source: str,
    scopes: Sequence[str],
    language: Language = APEX,
) -> list[LineClassification]:
    """Classify every documentable line of a source file.

    Nested class and interface bodies are tracked by brace depth so that
    constructors and interface methods are recognized against the
    innermost enclosing type. Inner types get dotted names.
    """
    results: list[LineClassification] = []
    frames: list[_Frame] = []
    depth = 0

    for line_number, raw in enumerate(source.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue

        current = frames[-1].context if frames else None
        if not should_skip_line(line, current, scopes, language):
            kind, name = _classify(line)
            scope = get_scope(line, scopes, language)
            results.append(LineClassification(line_number, line, kind, scope, name))

            if kind in ("class", "interface") and name:
                if current is not None:
                    name = f"{current.name}.{name}"
                context = ClassContext(name=name, is_interface=kind == "interface")
                frames.append(_Frame(context, depth, "{" in line))
                logger.debug("line %d: entering %s %s", line_number, kind, name)

        depth += count_chars(line, "{") - count_chars(line, "}")
        if frames and not frames[-1].opened and depth > frames[-1].depth:
            frames[-1].opened = True
        while frames and frames[-1].opened and depth <= frames[-1].depth:
            logger.debug("line %d: leaving %s", line_number, frames[-1].context.name)
            frames.pop()

    return results
