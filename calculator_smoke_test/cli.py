"""CLI entry point for the calculator smoke test."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from calculator_smoke_test.calculations import verify_calculations
from calculator_smoke_test.checks import DEFAULT_CHECKS
from calculator_smoke_test.config import HarnessConfig
from calculator_smoke_test.probe import probe_page
from calculator_smoke_test.report import print_report
from calculator_smoke_test.runner import CheckRunner
from calculator_smoke_test.server import serve_directory

COMMANDS = ("calc", "calc-verify")


async def run(config: HarnessConfig, *, verify: bool = False) -> int:
    """Serve the page, run all checks and print the report.

    Returns 0 once the report is printed, whatever the check outcomes, and 1
    if the run itself fails (for example the server never starts).
    """
    log = logging.getLogger("calculator_smoke_test")

    print("🧪 instarinse® Calculator Test Suite")
    print("=" * 37)

    try:
        async with serve_directory(config) as server:
            await probe_page(server.base_url, config.page, config.probe_timeout)
            results = CheckRunner(checks=DEFAULT_CHECKS).run_all(config)
            base_url = server.base_url
    except Exception as e:
        log.error("Test suite failed: %s", e, exc_info=e)
        print(f"❌ Test suite failed: {e}")
        return 1

    print_report(results, base_url=base_url)

    if verify:
        verify_calculations()

    return 0


def build_config(
    config_json: str | None,
    root: Path | None = None,
    port: int | None = None,
    fallback_port: int | None = None,
) -> HarnessConfig:
    """Build the harness configuration; explicit options override the JSON."""
    values: dict[str, Any] = json.loads(config_json) if config_json else {}
    overrides = {"root": root, "port": port, "fallback_port": fallback_port}
    values.update({key: value for key, value in overrides.items() if value is not None})
    return HarnessConfig(**values)


def parse_commands(
    parser: argparse.ArgumentParser, tokens: Sequence[str]
) -> frozenset[str]:
    """Validate positional command tokens."""
    unknown = [token for token in tokens if token not in COMMANDS]
    if unknown:
        parser.error(f"unknown command(s): {', '.join(unknown)}")
    return frozenset(tokens)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Smoke test the instarinse® calculator page",
        epilog=(
            "commands: 'calc' verifies calculations only; "
            "'calc-verify' also verifies calculations after the tests"
        ),
    )
    parser.add_argument(
        "commands",
        nargs="*",
        metavar="command",
        help="Optional command: calc or calc-verify",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration for the harness",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory containing index.html (default: current directory)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Preferred server port (default: 8000)",
    )
    parser.add_argument(
        "--fallback-port",
        type=int,
        default=None,
        help="Port used when the preferred one is busy (default: 8001)",
    )

    args = parser.parse_args()
    commands = parse_commands(parser, args.commands)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if "calc" in commands:
        verify_calculations()
        sys.exit(0)

    try:
        config = build_config(args.config, args.root, args.port, args.fallback_port)
    except (json.JSONDecodeError, ValidationError) as e:
        parser.error(f"invalid configuration: {e}")

    exit_code = asyncio.run(run(config, verify="calc-verify" in commands))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
