"""Command for provisioning S3 Tables resources."""

import typer

from s3t.cli.common.context import app_context
from s3t.cli.common.exits import exit_from_exc, exit_from_service_error
from s3t.cli.common.output import out
from s3t.core.errors import S3TablesError
from s3t.core.provisioner import ensure_resources
from s3t.core.validation import ValidationError, validate_all


def create(
    ctx: typer.Context,
    table_bucket: str = typer.Argument(..., help="Table bucket name"),
    namespace: str = typer.Argument(..., help="Namespace name"),
    table: str = typer.Argument(..., help="Table name"),
):
    """
    Create a table bucket, namespace and table (in that order, if missing).

    Existing resources are detected and skipped with a notification.
    """
    try:
        validate_all(table_bucket, namespace, table)
    except ValidationError as exc:
        exit_from_exc(exc, message=f"validation error: {exc}", code=2)

    adapter = app_context(ctx).adapter

    try:
        with out.status("Creating S3 Tables resources..."):
            result = ensure_resources(adapter, table_bucket, namespace, table)
    except S3TablesError as exc:
        exit_from_service_error(exc)

    out.provision_summary(result)
