"""Idempotent provisioning of a table bucket -> namespace -> table chain.

Levels are handled strictly parent before child. Each level is checked first
and only created when missing. The first failure aborts the run; resources
created by earlier steps are left in place, and running the same request
again picks up where the failed run stopped.
"""

from __future__ import annotations

import logging

from s3t.core.existence import namespace_exists, table_bucket_exists, table_exists
from s3t.core.models import TABLE_FORMAT_ICEBERG, ProvisionResult
from s3t.core.ports import TablesPort

logger = logging.getLogger(__name__)


def _ensure_table_bucket(
    port: TablesPort, name: str, messages: list[str]
) -> tuple[str, bool]:
    """Return (arn, created) for the table bucket, creating it if missing."""
    exists, arn = table_bucket_exists(port, name)
    if exists:
        messages.append(f"Table Bucket '{name}' already exists")
        return arn, False

    logger.info("Creating table bucket '%s'", name)
    arn = port.create_table_bucket(name)
    messages.append(f"Table Bucket '{name}' created")
    return arn, True


def _ensure_namespace(
    port: TablesPort, table_bucket_arn: str, namespace: str, messages: list[str]
) -> bool:
    """Return True if the namespace had to be created."""
    if namespace_exists(port, table_bucket_arn, namespace):
        messages.append(f"Namespace '{namespace}' already exists")
        return False

    logger.info("Creating namespace '%s'", namespace)
    port.create_namespace(table_bucket_arn, namespace)
    messages.append(f"Namespace '{namespace}' created")
    return True


def _ensure_table(
    port: TablesPort,
    table_bucket_arn: str,
    namespace: str,
    table: str,
    messages: list[str],
) -> tuple[str, bool]:
    """Return (table_arn, created) for the table, creating it if missing."""
    exists, table_arn = table_exists(port, table_bucket_arn, namespace, table)
    if exists:
        messages.append(f"Table '{table}' already exists")
        return table_arn, False

    logger.info("Creating table '%s.%s' (%s)", namespace, table, TABLE_FORMAT_ICEBERG)
    table_arn = port.create_table(
        table_bucket_arn, namespace, table, TABLE_FORMAT_ICEBERG
    )
    messages.append(f"Table '{table}' created")
    return table_arn, True


def ensure_resources(
    port: TablesPort,
    table_bucket: str,
    namespace: str,
    table: str,
) -> ProvisionResult:
    """
    Make sure a table bucket, a namespace in it and a table in that exist.

      1) check / create the table bucket
      2) check / create the namespace, addressed by the bucket ARN from 1)
      3) check / create the table (Iceberg format)

    Args:
        port: S3 Tables operations.
        table_bucket: Table bucket name.
        namespace: Namespace name.
        table: Table name.

    Returns:
        A ProvisionResult describing what existed and what was created.

    Raises:
        S3TablesError: From the first failing check or create call. Later
                       levels are never attempted and nothing is rolled back.
    """
    messages: list[str] = []

    table_bucket_arn, bucket_created = _ensure_table_bucket(
        port, table_bucket, messages
    )
    namespace_created = _ensure_namespace(port, table_bucket_arn, namespace, messages)
    table_arn, table_created = _ensure_table(
        port, table_bucket_arn, namespace, table, messages
    )

    return ProvisionResult(
        table_bucket_arn=table_bucket_arn,
        table_arn=table_arn,
        table_bucket_created=bucket_created,
        namespace_created=namespace_created,
        table_created=table_created,
        messages=tuple(messages),
    )
