"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from s3t.cli.common.output import out
from s3t.core.errors import S3TablesError, is_conflict, is_credential_error

_CREDENTIALS_HINT = (
    "check the active profile (--profile / S3T_PROFILE) or run 'aws configure'"
)
_CONFLICT_HINT = (
    "another request may be changing the same resource; "
    "re-run the command to continue from where it stopped"
)


def die(msg: str, code: int = 1) -> NoReturn:
    """Exit with an error message and optional exit code."""
    out.error(msg)
    raise typer.Exit(code)


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """
    Helper function to print an error message and exit with a given code.

    Keeps the original exception chained and standardizes error exits.
    """
    out.error(message)
    raise typer.Exit(code) from exc


def service_error_hint(exc: S3TablesError) -> str | None:
    """Return a follow-up hint for failures the user can act on, if any."""
    if is_credential_error(exc):
        return _CREDENTIALS_HINT
    if is_conflict(exc):
        return _CONFLICT_HINT
    return None


def exit_from_service_error(exc: S3TablesError) -> NoReturn:
    """Print a failed S3 Tables call (plus a hint where one applies) and exit 1."""
    out.error(str(exc))
    hint = service_error_hint(exc)
    if hint:
        out.hint(hint)
    raise typer.Exit(1) from exc
