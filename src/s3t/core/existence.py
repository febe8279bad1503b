"""Existence checks for the three S3 Tables resource levels.

Table buckets can only be found by listing with a name prefix and scanning
for an exact match; namespaces and tables have a direct lookup whose
not-found failure means "does not exist".
"""

from __future__ import annotations

import logging

from s3t.core.errors import S3TablesError, is_not_found
from s3t.core.ports import TablesPort

logger = logging.getLogger(__name__)


def table_bucket_exists(port: TablesPort, name: str) -> tuple[bool, str]:
    """
    Check whether a table bucket named exactly `name` exists.

    Returns:
        `(True, arn)` on an exact name match, `(False, "")` otherwise. A bucket
        that merely starts with `name` does not count.
    """
    page = port.list_table_buckets(name, None)
    for bucket in page.items:
        if bucket.name == name:
            logger.debug("Table bucket '%s' found: %s", name, bucket.arn)
            return True, bucket.arn
    logger.debug("Table bucket '%s' not found", name)
    return False, ""


def namespace_exists(port: TablesPort, table_bucket_arn: str, namespace: str) -> bool:
    """Check whether `namespace` exists in the given table bucket."""
    try:
        port.get_namespace(table_bucket_arn, namespace)
    except S3TablesError as exc:
        if is_not_found(exc):
            logger.debug("Namespace '%s' not found", namespace)
            return False
        raise
    return True


def table_exists(
    port: TablesPort, table_bucket_arn: str, namespace: str, name: str
) -> tuple[bool, str]:
    """
    Check whether table `name` exists in `namespace`.

    Returns:
        `(True, table_arn)` if it exists, `(False, "")` on a not-found failure.
    """
    try:
        table = port.get_table(table_bucket_arn, namespace, name)
    except S3TablesError as exc:
        if is_not_found(exc):
            logger.debug("Table '%s.%s' not found", namespace, name)
            return False, ""
        raise
    return True, table.arn
