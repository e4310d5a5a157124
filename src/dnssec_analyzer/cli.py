"""Command line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from dnssec_analyzer.config import Settings, load_settings
from dnssec_analyzer.dns.records import parse_response
from dnssec_analyzer.errors import ScanError
from dnssec_analyzer.export.json_export import (
    assessment_to_dict,
    denial_to_dict,
    error_to_dict,
    export_json,
    result_to_dict,
)
from dnssec_analyzer.log import setup_logging
from dnssec_analyzer.models.records import RecordType
from dnssec_analyzer.scanner import Scanner
from dnssec_analyzer.views.tables import render_assessment, render_denial, render_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dnssec-analyzer",
        description="DNSSEC assessment of domains from delv diagnostics",
    )
    p.add_argument("--config", help="YAML settings file")
    p.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    sub = p.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan one or more URLs")
    scan.add_argument("urls", nargs="+", help="URLs or domains (e.g., https://www.example.com)")
    scan.add_argument("--server", help="Nameserver for delv (e.g., 8.8.8.8)")
    scan.add_argument("--workers", type=int, help="Record types to query in parallel")
    scan.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")
    scan.add_argument("--output", type=Path, help="Directory to write one JSON file per assessment")

    parse = sub.add_parser("parse", help="Parse a saved delv response")
    parse.add_argument("record_type", choices=[t.value for t in RecordType], type=str.upper)
    parse.add_argument("file", nargs="?", type=Path, help="Response file (default: stdin)")
    parse.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")

    denial = sub.add_parser("denial", help="Collect NSEC/NSEC3PARAM, tolerating a missing half")
    denial.add_argument("url")
    denial.add_argument("--server", help="Nameserver for delv")
    denial.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")

    sub.add_parser("tui", help="Start the interactive terminal UI")
    return p


def _settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    return settings.override(
        dns_server=getattr(args, "server", None),
        workers=getattr(args, "workers", None),
        log_level=args.log_level,
    )


def _cmd_scan(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    scanner = Scanner.from_settings(settings)
    failed = 0
    outputs = []

    for url in args.urls:
        try:
            assessment = scanner.scan(url)
        except ScanError as e:
            failed += 1
            event = error_to_dict(url, e, settings.origin)
            if args.as_json:
                outputs.append(event)
            else:
                console.print(f"[red]Scan for {url} failed:[/red] {e}")
            continue

        if args.output:
            path = args.output / f"{assessment.domain.replace('.', '_')}.json"
            export_json(assessment, path)
            logger.info("Wrote %s", path)

        if args.as_json:
            outputs.append(assessment_to_dict(assessment))
        else:
            console.print(render_assessment(assessment))

    if args.as_json:
        print(json.dumps(outputs, indent=2))
    return 1 if failed else 0


def _cmd_parse(args: argparse.Namespace, console: Console) -> int:
    text = args.file.read_text() if args.file else sys.stdin.read()
    try:
        result = parse_response(args.record_type, text)
    except ScanError as e:
        console.print(f"[red]Parse failed:[/red] {e}")
        return 1

    if args.as_json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        console.print(render_result(result))
    return 0


def _cmd_denial(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    scanner = Scanner.from_settings(settings)
    try:
        denial = scanner.scan_denial(args.url)
    except ScanError as e:
        console.print(f"[red]Scan for {args.url} failed:[/red] {e}")
        return 1

    if args.as_json:
        print(json.dumps(denial_to_dict(denial), indent=2))
    else:
        console.print(render_denial(denial))
    return 0


def main(argv: List[str] | None = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        settings = _settings(args)
    except (OSError, ValueError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        return 2

    setup_logging(settings.log_level)

    if args.command == "scan":
        return _cmd_scan(args, settings, console)
    if args.command == "parse":
        return _cmd_parse(args, console)
    if args.command == "denial":
        return _cmd_denial(args, settings, console)

    from dnssec_analyzer.app import AnalyzerApp

    AnalyzerApp(settings).run()
    return 0
