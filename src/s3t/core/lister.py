"""Listing and lookup operations for S3 Tables resources.

Each `list_*` function drains every page of the corresponding listing call
through `collect_all`, so callers always receive the complete ordered result.
"""

from __future__ import annotations

from dataclasses import replace

from s3t.core.errors import ErrorKind, S3TablesError
from s3t.core.models import Namespace, Table, TableBucket
from s3t.core.pagination import collect_all
from s3t.core.ports import TablesPort


def list_table_buckets(port: TablesPort, prefix: str = "") -> list[TableBucket]:
    """Return all table buckets, optionally filtered by name prefix."""
    return collect_all(lambda token: port.list_table_buckets(prefix or None, token))


def list_namespaces(
    port: TablesPort, table_bucket_arn: str, prefix: str = ""
) -> list[Namespace]:
    """Return all namespaces in a table bucket."""
    return collect_all(
        lambda token: port.list_namespaces(table_bucket_arn, prefix or None, token)
    )


def list_tables(
    port: TablesPort, table_bucket_arn: str, namespace: str, prefix: str = ""
) -> list[Table]:
    """Return all tables in `namespace` of a table bucket."""
    return collect_all(
        lambda token: port.list_tables(
            table_bucket_arn, namespace, prefix or None, token
        )
    )


def get_table_details(
    port: TablesPort, table_bucket_arn: str, namespace: str, name: str
) -> Table:
    """Return the full record of a single table."""
    table = port.get_table(table_bucket_arn, namespace, name)
    if table.namespace != namespace:
        # Some responses omit the namespace; the requested one is authoritative.
        table = replace(table, namespace=namespace)
    return table


def resolve_table_bucket_arn(port: TablesPort, name: str) -> str:
    """
    Resolve a table bucket name to its ARN.

    The service has no get-by-name call for buckets, so all buckets matching
    `name` as a prefix are listed and scanned for an exact match.

    Raises:
        S3TablesError: With kind NOT_FOUND if no bucket has exactly this name.
    """
    for bucket in list_table_buckets(port, prefix=name):
        if bucket.name == name:
            return bucket.arn

    raise S3TablesError(
        "GetTableBucketARN",
        f"table bucket '{name}' not found",
        kind=ErrorKind.NOT_FOUND,
        suggestion="verify the table bucket name and try again",
    )
