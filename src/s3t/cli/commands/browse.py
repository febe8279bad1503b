"""Command for browsing S3 Tables resources interactively."""

from __future__ import annotations

import typer

from s3t.cli.common.context import app_context
from s3t.cli.common.exits import exit_from_exc, exit_from_service_error
from s3t.cli.common.output import out
from s3t.cli.tui import QuestionarySelector
from s3t.core.errors import S3TablesError
from s3t.core.lister import get_table_details, resolve_table_bucket_arn
from s3t.core.navigator import InteractiveSelector, NavigationLevel, Navigator


def _selector() -> InteractiveSelector:
    """Return the interactive picker used by `list`."""
    return QuestionarySelector()


def list_resources(
    ctx: typer.Context,
    table_bucket: str | None = typer.Argument(
        None, help="Start inside this table bucket"
    ),
    namespace: str | None = typer.Argument(None, help="Start inside this namespace"),
    table: str | None = typer.Argument(None, help="Show details of this table"),
):
    """
    Browse table buckets, namespaces and tables.

    With no arguments start at the table bucket list; each argument given
    starts one level deeper. With all three, print the table details.
    Type to filter, pick `.. (Back)` to go up, Ctrl+C to exit.
    """
    adapter = app_context(ctx).adapter

    try:
        if table_bucket is None:
            navigator = Navigator(adapter, _selector(), notify=out.warn)
            selected = navigator.run(NavigationLevel.TABLE_BUCKET)
        else:
            with out.status("Resolving table bucket..."):
                bucket_arn = resolve_table_bucket_arn(adapter, table_bucket)

            if table is not None and namespace is not None:
                with out.status("Loading table..."):
                    selected = get_table_details(adapter, bucket_arn, namespace, table)
            else:
                navigator = Navigator(adapter, _selector(), notify=out.warn)
                navigator.seed(table_bucket, bucket_arn, namespace or "")
                start = (
                    NavigationLevel.TABLE
                    if namespace is not None
                    else NavigationLevel.NAMESPACE
                )
                selected = navigator.run(start)
    except S3TablesError as exc:
        exit_from_service_error(exc)
    except ValueError as exc:
        # Picker returned a name that is not in the listing it was given.
        exit_from_exc(exc, message=f"selection error: {exc}", code=1)

    if selected is not None:
        out.table_details(selected)
