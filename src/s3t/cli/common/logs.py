"""Logging setup for the CLI.

Core modules log through the standard `logging` module; the CLI routes those
records to stderr through Rich so they do not interleave badly with prompts
and tables on stdout.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from s3t.cli.common.output import err_console


def configure_logging(verbose: bool = False) -> None:
    """Install a Rich handler on the `s3t` logger (DEBUG when verbose)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("s3t")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(
            console=err_console,
            show_path=False,
            show_time=verbose,
            markup=False,
            rich_tracebacks=verbose,
        )
    )
    logger.setLevel(level)
    logger.propagate = False
