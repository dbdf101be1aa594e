"""CLI - Command line interface for Resume Scanner."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from .config import (
    DEFAULT_CONFIG_PATH,
    VALID_LEVELS,
    Severity,
    config_from_mapping,
    has_errors,
    load_raw_config,
    validate_config,
)
from .contracts import to_json
from .domain import score_label
from .observability import ScanObserver
from .tools import ATSScannerTool

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-scanner",
        description="Resume Scanner - rule-based ATS compatibility analysis for plain-text resumes",
    )
    parser.add_argument("path", help="Resume text file to scan (.txt or .md)")
    parser.add_argument(
        "--level",
        "-l",
        choices=VALID_LEVELS,
        help="Experience level (default: from config, else fresher)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result document as JSON",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_PATH,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--workspace",
        "-w",
        default=".",
        help="Directory relative paths are resolved against (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log scan events and show session statistics",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode (print only the score)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        raw_config = load_raw_config(args.config)
    except FileNotFoundError:
        if args.config != DEFAULT_CONFIG_PATH:
            console.print(f"⚠️ Config file not found: {args.config}", style="yellow")
        raw_config = {}
    except ValueError as e:
        console.print(f"❌ {e}", style="red")
        return 1

    # Validate configuration at startup
    issues = validate_config(raw_config)
    for issue in issues:
        icon = "❌" if issue.severity == Severity.ERROR else "⚠️"
        style = "red" if issue.severity == Severity.ERROR else "yellow"
        console.print(f"  {icon} [{issue.field}] {issue.message}", style=style, markup=False)
    if has_errors(issues):
        console.print("\n💡 Fix the errors above, then try again.", style="dim")
        return 1

    config = config_from_mapping(raw_config)
    level = args.level or config.experience_level
    as_json = args.json or config.output_format == "json"

    observer = ScanObserver(verbose=(args.verbose or config.verbose) and not args.quiet)
    tool = ATSScannerTool(
        workspace_dir=args.workspace,
        observer=observer,
        short_text_threshold=config.short_text_threshold,
    )
    result = asyncio.run(tool.run(path=args.path, experience_level=level))

    if not result.success:
        console.print(f"❌ {result.error}", style="red", markup=False)
        return 1

    score = result.data["score"]
    if as_json:
        console.print(to_json(result.data), markup=False, highlight=False, emoji=False, soft_wrap=True)
    elif args.quiet:
        console.print(f"{score} {score_label(score)}", markup=False, highlight=False)
    else:
        for warning in result.warnings:
            console.print(f"⚠️ {warning}", style="yellow", markup=False)
        console.print(Panel(Markdown(result.output), title=f"📄 {Path(args.path).name}"))

    if observer.verbose:
        print_session_stats(observer)
    return 0


def print_session_stats(observer: ScanObserver) -> None:
    stats = observer.get_session_stats()
    table = Table(title="Scan Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Scans", str(stats["scans"]))
    table.add_row("Warnings", str(stats["warnings"]))
    table.add_row("Errors", str(stats["errors"]))
    table.add_row("Average score", f"{stats['average_score']:.1f}")
    table.add_row("Total time", f"{stats['total_duration_ms']:.2f}ms")
    console.print(table)


if __name__ == "__main__":
    raise SystemExit(main())
