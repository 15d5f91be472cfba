"""Command-line entry point.

Usage:
    outliner serve --port 9876
    outliner parse page.html --mode raw-markup --tags p,div,h1
    outliner parse --url https://example.com/rules --json
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from outliner.models.parse_models import ContentMode, ParseOptions
from outliner.services.document_adapter import ParseError
from outliner.services.fetcher import FetchError, fetch_markup
from outliner.services.outline_export import to_outline_text
from outliner.services.parse_config import default_parse_options
from outliner.services.tree_builder import parse_markup
from outliner.services.url_validator import SSRFError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="outliner", description="Hierarchical HTML outline parser")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Interface to bind to")
    serve.add_argument("--port", type=int, default=8000, help="Port to bind to")

    parse = sub.add_parser("parse", help="Parse markup and print the outline")
    parse.add_argument("file", nargs="?", default="-", help="HTML file to read ('-' for stdin)")
    parse.add_argument("--url", type=str, help="Fetch markup from this URL instead of a file")
    parse.add_argument(
        "--mode",
        choices=[m.value for m in ContentMode],
        help="Content extraction mode",
    )
    parse.add_argument("--tags", type=str, help="Comma-separated eligible tags")
    parse.add_argument("--json", action="store_true", help="Print the full result as JSON")
    return parser


def _options_from_args(args: argparse.Namespace) -> ParseOptions:
    options = default_parse_options()
    if args.tags is not None:
        options = options.model_copy(
            update={"eligible_tags": {t.strip().lower() for t in args.tags.split(",") if t.strip()}}
        )
    if args.mode:
        options = options.model_copy(update={"content_mode": ContentMode(args.mode)})
    return options


def _read_markup(args: argparse.Namespace) -> str:
    if args.url:
        return asyncio.run(fetch_markup(args.url))
    if args.file == "-":
        return sys.stdin.read()
    with open(args.file, encoding="utf-8", errors="replace") as fh:
        return fh.read()


def _run_parse(args: argparse.Namespace) -> int:
    try:
        markup = _read_markup(args)
        result = parse_markup(markup, _options_from_args(args), source_url=args.url)
    except (SSRFError, FetchError, ParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        text = to_outline_text(result.items)
        if text:
            print(text)
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from outliner.main import app

    uvicorn.run(app, host=args.host, port=args.port, log_level="info")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "serve":
        return _run_serve(args)
    return _run_parse(args)


if __name__ == "__main__":
    sys.exit(main())
