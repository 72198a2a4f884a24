"""Command line client for OpenCPU JSON RPC.

Commands:
    call - Invoke a function and print its JSON output
    url  - Print the endpoint a call would be sent to

Usage:
    py-opencpu call stats rnorm '{"n": 3}' --url http://localhost:9999/ocpu
    py-opencpu call stats rnorm --config opencpu.yaml < args.json
    py-opencpu url stats rnorm
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from py_opencpu.config import RuntimeConfig
from py_opencpu.errors import ConfigurationError, ProgramError
from py_opencpu.program import RPCProgram
from py_opencpu.runtime import OpenCPURuntime
from py_opencpu.values import RawJsonProblem

logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> RuntimeConfig:
    """Resolve configuration: --config, then --url, then environment."""
    if args.config is not None:
        config = RuntimeConfig.from_yaml(args.config)
    elif args.url is not None:
        config = RuntimeConfig.from_url(args.url)
    else:
        config = RuntimeConfig.from_env()

    if args.timeout is not None:
        config = replace(config, timeout=args.timeout)
    return config


def call(args: argparse.Namespace) -> int:
    """Invoke a function and print the solution JSON."""
    runtime = OpenCPURuntime(_load_config(args))
    program = RPCProgram(runtime, args.package, args.function)

    payload = args.input if args.input is not None else sys.stdin.read()
    try:
        solution = program.compute(RawJsonProblem(payload or "{}"))
    except ProgramError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(solution.to_json())
    return 0


def show_url(args: argparse.Namespace) -> int:
    """Print the endpoint for a function."""
    runtime = OpenCPURuntime(_load_config(args))
    print(runtime.resolve(args.package, args.function))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("package", help="R package name (e.g., stats)")
    common.add_argument("function", help="Function name (e.g., rnorm)")
    common.add_argument(
        "--url",
        help="Base address of the server (default: $OPENCPU_URL or http://localhost:9999/ocpu)",
    )
    common.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    common.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: none)",
    )

    parser = argparse.ArgumentParser(
        prog="py-opencpu",
        description="Call R functions on an OpenCPU server",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and outcomes to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    call_parser = subparsers.add_parser(
        "call",
        parents=[common],
        help="Invoke a function with JSON arguments",
    )
    call_parser.add_argument(
        "input",
        nargs="?",
        help="Function arguments as JSON (default: read from stdin)",
    )

    subparsers.add_parser(
        "url",
        parents=[common],
        help="Print the endpoint a call would use",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "call":
            return call(args)
        return show_url(args)
    except (ConfigurationError, ValueError) as e:
        logger.debug("Invalid arguments", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
