"""
Dedalus MCP Server Test Suite

Validates that MCP servers work end to end: reads the server configuration
from servers.json, sends each scripted prompt through the Dedalus agent API
and checks the tools called and the final answer.

Usage:
  mcp-suite                           # Run all tests
  mcp-suite -v                        # Run with verbose output
  mcp-suite -s marketplace-crawler    # Run tests for one server
  mcp-suite -c path/to/servers.json   # Use another suite file
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from colorama import Fore, Style
from colorama import init as colorama_init

from .config import (
    ConfigError,
    PartialGlobalConfig,
    build_global_config,
    get_settings,
    load_suite_config,
)
from .testing.reporter import Reporter
from .testing.runner import MCPTestRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mcp-suite", add_help=False, allow_abbrev=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("-s", "--server", nargs="?", help="Run tests only for a specific server ID")
    parser.add_argument("-c", "--config", nargs="?", help="Path to the suite file (default: servers.json)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    # Unknown arguments are ignored rather than rejected; a flag missing its
    # value is treated as unset
    args, _unknown = build_parser().parse_known_args(argv)
    return args


def print_help() -> None:
    def bold(text: str) -> str:
        return f"{Style.BRIGHT}{text}{Style.RESET_ALL}"

    def cyan(text: str) -> str:
        return f"{Fore.CYAN}{text}{Style.RESET_ALL}"

    print(f"""
{Style.BRIGHT}{Fore.CYAN}Dedalus MCP Server Test Suite{Style.RESET_ALL}

{bold('Usage:')}
  mcp-suite [options]

{bold('Options:')}
  -v, --verbose        Enable verbose output
  -s, --server <id>    Run tests only for a specific server ID
  -c, --config <path>  Suite file to load (default: servers.json)
  -h, --help           Show this help message

{bold('Configuration:')}
  Edit {cyan('servers.json')} to configure which MCP servers to test.
  Set {cyan('DEDALUS_API_KEY')} environment variable for authentication.

{bold('Example:')}
  mcp-suite                           # Run all tests
  mcp-suite -v                        # Run with verbose output
  mcp-suite -s marketplace-crawler    # Run tests for specific server
""")


def configure_logging(verbose: bool, level_name: str) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="    [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None, runner_factory=MCPTestRunner) -> int:
    """Run the suite and return the process exit code."""

    args = parse_args(argv)
    if args.help:
        print_help()
        return 0

    settings = get_settings()
    configure_logging(args.verbose, settings.log_level)

    if not settings.dedalus_api_key:
        print(f"{Fore.RED}\nError: DEDALUS_API_KEY environment variable is not set.{Style.RESET_ALL}", file=sys.stderr)
        print(f"{Style.DIM}Set it in your .env file or export it in your shell.\n{Style.RESET_ALL}", file=sys.stderr)
        return 1

    reporter = Reporter(args.verbose)
    reporter.print_header()

    try:
        suite = load_suite_config(args.config or settings.config_path)
        global_config = build_global_config(
            file=suite.config,
            cli=PartialGlobalConfig(verbose=True) if args.verbose else None,
        )

        servers = list(suite.servers)
        if args.server:
            servers = [s for s in servers if s.id == args.server]
            if not servers:
                reporter.print_error(f'Server with ID "{args.server}" not found in configuration.')
                reporter.print_info("Available servers:")
                for server in suite.servers:
                    reporter.print_info(f"  - {server.id}: {server.name}")
                return 1

        enabled = [s for s in servers if s.enabled is not False]
        total_tests = sum(len(s.tests) for s in enabled)
        reporter.print_info(f"Found {len(enabled)} server(s) with {total_tests} test(s)")
        reporter.print_info(f"Using model: {global_config.model}")

        runner = runner_factory(global_config, reporter=reporter)
        results = asyncio.run(runner.run_suite(servers))
    except ConfigError as exc:
        reporter.print_error(str(exc))
        return 1
    except Exception as exc:  # pragma: no cover - orchestrator failure
        logger.debug("Suite aborted", exc_info=True)
        reporter.print_error(str(exc) or exc.__class__.__name__)
        return 1

    reporter.print_suite_summary(results)
    return results.exit_code


def run() -> None:
    colorama_init()
    sys.exit(main())


if __name__ == "__main__":
    run()
