"""apexscope — line heuristics for documenting Apex source."""

from apexscope.classifier import (
    get_scope,
    is_class_or_interface,
    is_enum,
    should_skip_line,
    strip_annotations,
)
from apexscope.config import ScopeConfig, load_config
from apexscope.languages import Language
from apexscope.models import ClassContext, FileResult, LineClassification
from apexscope.scanner import scan_source
from apexscope.tokens import count_chars, is_url, previous_word

__all__ = [
    "get_scope",
    "is_class_or_interface",
    "is_enum",
    "should_skip_line",
    "strip_annotations",
    "previous_word",
    "count_chars",
    "is_url",
    "scan_source",
    "load_config",
    "ScopeConfig",
    "Language",
    "ClassContext",
    "LineClassification",
    "FileResult",
]
