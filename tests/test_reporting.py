import json

from apexscope.models import FileResult, LineClassification
from apexscope.reporting import format_json, format_text_report, format_text_summary


def _make_result(path: str = "classes/Foo.cls") -> FileResult:
    return FileResult(
        path=path,
        total_lines=20,
        lines=[
            LineClassification(1, "public class Foo {", "class", "public", "Foo"),
            LineClassification(3, "Foo() {", "method", None, "Foo"),
            LineClassification(6, "void reset() {", "method", "private", "reset"),
            LineClassification(9, "public enum Kind { A, B }", "enum", "public", "Kind"),
        ],
    )


class TestTextReport:
    def test_header_counts(self):
        report = format_text_report(_make_result())
        assert "classes/Foo.cls" in report
        assert "4 documentable of 20 lines" in report

    def test_lists_each_line(self):
        report = format_text_report(_make_result())
        assert "public class Foo {" in report
        assert "void reset() {" in report
        assert "private" in report

    def test_missing_scope_shown_as_dash(self):
        report = format_text_report(_make_result())
        line = next(l for l in report.splitlines() if "Foo() {" in l)
        assert " - " in line

    def test_long_lines_truncated(self):
        text = "public String " + "x" * 100 + ";"
        result = FileResult(
            path="A.cls",
            total_lines=1,
            lines=[LineClassification(1, text, "property", "public", "x")],
        )
        report = format_text_report(result)
        assert text not in report
        assert "..." in report

    def test_empty_file(self):
        report = format_text_report(FileResult(path="Empty.cls"))
        assert "nothing to document" in report


class TestTextSummary:
    def test_counts_per_kind(self):
        report = format_text_summary([_make_result("A.cls"), _make_result("B.cls")])
        assert "SUMMARY: 2 files" in report
        assert "A.cls" in report
        assert "B.cls" in report
        total = next(l for l in report.splitlines() if "Total" in l)
        # class, interface, enum, method, property
        assert total.split()[1:] == ["2", "0", "2", "4", "0"]

    def test_long_paths_shortened(self):
        long_path = "force-app/main/default/classes/" + "Nested/" * 10 + "Foo.cls"
        report = format_text_summary([_make_result(long_path)])
        assert long_path not in report
        assert "Foo.cls" in report


class TestJson:
    def test_valid_json(self):
        data = json.loads(format_json([_make_result()]))
        assert data[0]["path"] == "classes/Foo.cls"
        assert data[0]["total_lines"] == 20
        assert data[0]["lines"][1]["scope"] is None
        assert data[0]["lines"][2]["name"] == "reset"
