"""CLI for apexscope — thin consumer of the library."""

import argparse
import logging
import sys
from pathlib import Path

from apexscope.config import ConfigError, ScopeConfig, load_config, validate_config
from apexscope.languages import Language
from apexscope.models import FileResult
from apexscope.reporting import format_json, format_text_report, format_text_summary
from apexscope.scanner import scan_source
from apexscope.workspace import resolve_workspace_folder

logger = logging.getLogger(__name__)


def _make_language(name: str) -> Language:
    if name == "apex":
        from apexscope.languages.apex import ApexLanguage
        return ApexLanguage()
    else:
        print(f"Unknown language: {name}", file=sys.stderr)
        sys.exit(1)


def _parse_workspace(values: list[str]) -> dict[str, str]:
    """Turn NAME=PATH arguments into a folder mapping."""
    folders: dict[str, str] = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not name or not path:
            print(f"Invalid --workspace value '{value}' (expected NAME=PATH)", file=sys.stderr)
            sys.exit(1)
        folders[name] = path
    return folders


def _collect_source_files(paths: list[str], suffixes: list[str], language: Language) -> list[Path]:
    """Resolve paths to a flat list of source files with the given suffixes."""
    files: list[Path] = []
    for p in paths:
        path = Path(p)
        if path.is_file() and path.suffix in suffixes:
            files.append(path)
        elif path.is_dir():
            for suffix in suffixes:
                for f in sorted(path.rglob(f"*{suffix}")):
                    if any(part.startswith(".") or part in language.ignore_dirs
                           for part in f.relative_to(path).parts[:-1]):
                        continue
                    files.append(f)
        else:
            print(f"Warning: skipping {p} (not a source file or directory)", file=sys.stderr)
    return files


def _scan_file(path: Path, config: ScopeConfig, language: Language) -> FileResult | None:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return None
    return FileResult(
        path=str(path),
        lines=scan_source(source, config.scope, language),
        total_lines=len(source.splitlines()),
    )


def _build_config(args: argparse.Namespace) -> ScopeConfig:
    config = load_config(Path(args.config) if args.config else None)
    if args.scope:
        config.scope = [s.lower() for s in args.scope]
    if args.workspace:
        config.workspace_folders.update(_parse_workspace(args.workspace))
    validate_config(config, args.config)
    return config


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="apexscope",
        description="List the documentable declarations of Apex source files.\n\n"
                    "Paths may start with ${workspaceFolder} or ${workspaceFolder:name}.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to scan",
    )
    parser.add_argument(
        "--scope",
        action="append",
        default=None,
        help="Scope to document; repeat to add more, in precedence order "
             "(default: from config)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (default: ./apexscope.yaml if present)",
    )
    parser.add_argument(
        "--workspace",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Workspace folder for ${workspaceFolder} tokens; the first one is the root",
    )
    parser.add_argument(
        "--language",
        choices=["apex"],
        default="apex",
        help="Source language (default: apex)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="output_json",
        help="Output results as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output while scanning",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    language = _make_language(args.language)
    paths = [resolve_workspace_folder(p, config.folders) for p in args.paths]
    files = _collect_source_files(paths, config.suffixes, language)
    if not files:
        print("No source files found.", file=sys.stderr)
        sys.exit(1)

    results: list[FileResult] = []
    for path in files:
        result = _scan_file(path, config, language)
        if result is None:
            continue
        results.append(result)
        if not args.output_json:
            print(format_text_report(result))

    if args.output_json:
        print(format_json(results))
    elif len(results) > 1:
        print(format_text_summary(results))


if __name__ == "__main__":
    main()
