# src/main.py - v2
"""CLI entry point: serve, scan, cache, history commands.

Usage:
    fraudshield serve [--host H] [--port P]
    fraudshield scan {scam,url,news} <content> [--url URL]
    fraudshield cache {stats,clear}
    fraudshield history [--limit N]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from fraudshield.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    from fraudshield.config.settings import ConfigurationError, load_settings

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    _setup_logging(settings, args.verbose)

    try:
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def cli() -> None:
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fraudshield",
        description=f"FraudShield AI v{__version__} - scam, phishing and fake-news scanner",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- serve ---
    p_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=None, help="Bind address (default: HOST setting)")
    p_serve.add_argument("--port", type=int, default=None, help="Port (default: PORT setting)")
    p_serve.set_defaults(func=_cmd_serve)

    # --- scan ---
    p_scan = subparsers.add_parser("scan", help="Scan one submission")
    p_scan.add_argument("scan_type", choices=["scam", "url", "news"], help="Scan type")
    p_scan.add_argument("content", help="Text or URL to scan")
    p_scan.add_argument("--url", default=None, help="URL accompanying the text")
    p_scan.add_argument(
        "--no-history", action="store_true",
        help="Do not append the result to the history file",
    )
    p_scan.set_defaults(func=_cmd_scan)

    # --- cache ---
    p_cache = subparsers.add_parser("cache", help="Inspect or clear the response cache")
    p_cache.add_argument("action", choices=["stats", "clear"])
    p_cache.set_defaults(func=_cmd_cache)

    # --- history ---
    p_history = subparsers.add_parser("history", help="Show recent scans")
    p_history.add_argument("--limit", type=int, default=20, help="Max records (default: 20)")
    p_history.set_defaults(func=_cmd_history)

    return parser


def _cmd_serve(args: argparse.Namespace, settings) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    from fraudshield.api.app import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("FraudShield AI server starting on %s:%d", host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
    return 0


def _cmd_scan(args: argparse.Namespace, settings) -> int:
    """Scan a single submission and print the record as JSON."""
    from fraudshield.scan.orchestrator import EmptyContentError

    async def _run() -> int:
        service = _build(settings)
        await service.startup()
        try:
            if args.no_history:
                record = await service.orchestrator.handle(args.scan_type, args.content, args.url)
            else:
                record = await service.scan(args.scan_type, text=args.content, url=args.url)
        except EmptyContentError as exc:
            logger.error("%s", exc)
            return 1
        print(json.dumps(record.to_json_dict(), indent=2))
        return 0

    return asyncio.run(_run())


def _cmd_cache(args: argparse.Namespace, settings) -> int:
    """Print cache statistics or clear the cache."""

    async def _run() -> int:
        service = _build(settings)
        await service.startup()
        if args.action == "clear":
            await service.clear_cache()
            print("Cache cleared successfully")
            return 0
        stats = service.cache_stats()
        print(f"\nResponse cache ({stats.backend}):")
        print(f"  Entries:  {stats.entries}")
        if stats.path:
            print(f"  File:     {stats.path}")
        return 0

    return asyncio.run(_run())


def _cmd_history(args: argparse.Namespace, settings) -> int:
    """Print the most recent history records."""

    async def _run() -> int:
        service = _build(settings)
        records = await service.history.list_records()
        for record in records[: max(args.limit, 0)]:
            cached = " (cached)" if record.cached else ""
            print(
                f"{record.timestamp}  {record.type:5s}  {record.verdict:10s} "
                f"{record.score:3d}{cached}  {_preview(record.user_input)}"
            )
        print(f"\n{len(records)} record(s) in {service.history.path}")
        return 0

    return asyncio.run(_run())


def _build(settings):
    from fraudshield.api.facade import build_service

    return build_service(settings)


def _preview(text: str, limit: int = 60) -> str:
    """Single-line preview of submitted content."""
    flat = " ".join(text.split())
    if len(flat) > limit:
        return flat[: limit - 3] + "..."
    return flat


def _setup_logging(settings, verbose: bool) -> None:
    """Configure logging for CLI usage (stderr keeps stdout machine-readable)."""
    from fraudshield.logging.logger import configure_from_settings

    configure_from_settings(settings, verbose=verbose, stream=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
