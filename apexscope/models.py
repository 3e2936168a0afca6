from dataclasses import dataclass, field

from apexscope.tokens import last


@dataclass
class ClassContext:
    """The class or interface whose body the scanner is currently inside."""
    name: str
    is_interface: bool = False

    @property
    def simple_name(self) -> str:
        return last(self.name.split("."))


@dataclass
class LineClassification:
    """A source line kept for documentation, with what it declares."""
    line_number: int
    text: str
    kind: str
    scope: str | None = None
    name: str = ""


@dataclass
class FileResult:
    """All kept lines of one source file."""
    path: str
    lines: list[LineClassification] = field(default_factory=list)
    total_lines: int = 0

    def count(self, kind: str) -> int:
        return sum(1 for line in self.lines if line.kind == kind)
