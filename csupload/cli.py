"""Command line interface for csupload."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler

from . import __version__
from .driver import run_bulk_upload
from .errors import ConfigError
from .models import UploadConfig, default_sample_file
from .reporting import ConsoleReporter


def _setup_logging(debug: bool, silent: bool, log_level: Optional[str]) -> str:
    """
    Configure logging.

    Default behavior is silent unless --debug or --log-level is provided.
    Returns a string describing effective mode.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    logging.disable(logging.NOTSET)

    if silent or (not debug and not log_level and not os.getenv("LOG_LEVEL")):
        logging.disable(logging.CRITICAL)
        root_logger.setLevel(logging.CRITICAL + 1)
        return "silent"

    if debug:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.INFO)
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    handler = RichHandler(
        rich_tracebacks=True,
        markup=True,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    return logging.getLevelName(level)


def _build_config(args: argparse.Namespace) -> UploadConfig:
    return UploadConfig(
        parent_id=args.parentid,
        file=args.file,
        prefix=args.name,
        count=args.count,
        url=args.url.rstrip("/"),
        username=args.username,
        password=args.password,
        concurrency=args.concurrency,
        timeout=args.timeout,
        require_auth=args.require_auth,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cs-bulk-upload",
        description="Upload one file as many documents into a Content Server folder.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--parentid",
        "-parentid",
        type=int,
        default=2000,
        help="Parent ID of new documents",
    )
    parser.add_argument(
        "--file",
        "-file",
        default=default_sample_file(),
        help="File to upload (default: %(default)s)",
    )
    parser.add_argument("--name", "-name", default="doc", help="Document name prefix")
    parser.add_argument("--count", "-count", type=int, default=5, help="Documents to upload")
    parser.add_argument("--url", "-url", default="", help="Content Server URL")
    parser.add_argument("--username", "-username", default="Admin", help="Username")
    parser.add_argument("--password", "-password", default="livelink", help="Password")
    parser.add_argument(
        "--concurrency",
        "-concurrency",
        type=int,
        default=5,
        help="Number of concurrent uploads",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--require-auth",
        action="store_true",
        help="Do not attempt uploads when authentication fails",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    parser.add_argument("--silent", action="store_true", help="Only print results")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (DEBUG/INFO/WARNING/ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cs-bulk-upload {__version__}",
    )
    return parser


def run_cli(argv: Optional[Sequence[str]] = None, reporter: Optional[ConsoleReporter] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    effective_log_mode = _setup_logging(
        debug=args.debug,
        silent=args.silent,
        log_level=args.log_level,
    )

    config = _build_config(args)
    try:
        config.validate()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    reporter = reporter or ConsoleReporter()
    if not args.silent:
        reporter.configuration(
            {
                "URL": config.url,
                "Username": config.username,
                "Password": "*" * len(config.password),
                "File": config.file,
                "Parent ID": config.parent_id,
                "Name Prefix": config.prefix,
                "Count": config.count,
                "Concurrency": config.concurrency,
                "Timeout": f"{config.timeout}s" if config.timeout else "none",
                "Require Auth": "yes" if config.require_auth else "no",
                "Logging": effective_log_mode,
            }
        )

    try:
        summary = asyncio.run(run_bulk_upload(config, reporter))
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130

    if config.require_auth and not summary.authenticated:
        print(f"ERROR: authentication failed: {summary.auth_error}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
