import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from .config import ConfigError, WorkflowConfig, read_config
from .discovery import scan
from .execution import launch
from .workflows import render_script_filter

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 2


def resolve_log_level(value: str | None) -> int:
    """Map a level name to its number; unknown or unset names fall back to INFO."""
    level = logging.getLevelName((value or "INFO").strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="open-directory",
        description="List subdirectories of the configured roots and open one with the configured binary.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Print an Alfred script filter document of subdirectories.")
    search_parser.add_argument("--query", default="", help="Optional text to narrow directory names by")

    open_parser = subparsers.add_parser("open", help="Run BINARY_TO_EXECUTE with the selected directory.")
    open_parser.add_argument("--path", required=True, help="Directory passed as the only argument")
    open_parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for the binary")
    return parser.parse_args(argv)


def search_directories(config: WorkflowConfig, query: str) -> int:
    result = scan(config.roots)
    if result.warnings:
        logger.info("%d of %d roots could not be listed", len(result.warnings), len(config.roots))
    sys.stdout.write(render_script_filter(result.candidates, query) + "\n")
    return 0


def open_directory(config: WorkflowConfig, path: str, timeout_seconds: float | None = None) -> int:
    try:
        result = launch(config.binary, path, timeout_seconds=timeout_seconds)
    except ValidationError as exc:
        print(f"open-directory failed: invalid launch arguments: {exc}", file=sys.stderr)
        return CONFIG_ERROR_EXIT_CODE
    if not result.success and result.stderr:
        print(result.stderr, file=sys.stderr)
    return result.exit_code


def main(argv=None) -> int:
    cli = parse_args(argv)
    load_dotenv(override=False)
    logging.basicConfig(
        level=resolve_log_level(os.getenv("LOG_LEVEL")),
        stream=sys.stderr,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        config = read_config()
    except ConfigError as exc:
        print(f"open-directory failed: {exc}", file=sys.stderr)
        return CONFIG_ERROR_EXIT_CODE

    if cli.command == "search":
        return search_directories(config, cli.query)
    return open_directory(config, cli.path, timeout_seconds=cli.timeout)
