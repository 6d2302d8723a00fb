"""
cli.py

Responsibility: CLI entrypoint for cmdbuild.

High-level flow:
1) Resolve a `BuildConfig` (defaults for `--root`, optionally overridden by `--config`)
2) Run the build
3) Map failures to exit codes: 1 for build failures, 2 for config/usage errors

Progress is logged to stdout; warnings and errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cmdbuild import __version__
from cmdbuild.build import build
from cmdbuild.config import BuildConfig, ConfigError, default_config, load_config
from cmdbuild.errors import BuildError

logger = logging.getLogger("cmdbuild")


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """
    Route cmdbuild log records: INFO/DEBUG to stdout, WARNING and above to stderr.
    """
    formatter = logging.Formatter("%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger.handlers[:] = [stdout_handler, stderr_handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def _resolve_config(args: argparse.Namespace) -> BuildConfig:
    root = Path(args.root)
    if args.config:
        return load_config(args.config, root)
    return default_config(root)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cmdbuild", description="Expand {{include:...}} placeholders in command templates")
    p.add_argument("--root", default=".", help="Plugin root directory (default: current directory)")
    p.add_argument("--config", default=None, help="YAML file overriding source/output directories and suffixes")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose))

    try:
        config = _resolve_config(args)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        build(config)
    except BuildError as e:
        logger.error("Build failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
