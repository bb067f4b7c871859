"""Shared helpers for the console scripts."""

import argparse
import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Optional

from figma_probe.config import get_settings
from figma_probe.logger import configure_logging, get_logger
from figma_probe.services.figma_client import FigmaAPIError, FigmaClient

EXIT_OK = 0
EXIT_FAILURE = 1

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = get_logger(__name__)


class MissingArgumentError(Exception):
    """Raised when a required ID is neither passed nor configured."""


def build_parser(description: str, with_node: bool = False) -> argparse.ArgumentParser:
    """Create a parser with the file (and optionally node) ID options."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--file-id",
        default=settings.figma_file_id,
        help="Figma file key or URL (default: FIGMA_FILE_ID)",
    )
    if with_node:
        parser.add_argument(
            "--node-id",
            default=settings.figma_node_id,
            help="Node ID as 12:34, 12-34 or a URL with node-id (default: FIGMA_NODE_ID)",
        )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL)",
    )
    return parser


def non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {value}")
    return number


def require(value: Optional[str], env_name: str) -> str:
    if not value:
        raise MissingArgumentError(f"{env_name} is not set")
    return value


def run(
    task: Callable[[FigmaClient], Awaitable[int]],
    client: Optional[FigmaClient] = None,
    log_level: Optional[str] = None,
) -> int:
    """Run an async script body and map failures to an exit code."""
    try:
        configure_logging(log_level)
        return asyncio.run(task(client or FigmaClient()))
    except FigmaAPIError as e:
        logger.debug("Figma API failure body: %s", e.body)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_FAILURE
    except (MissingArgumentError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))
