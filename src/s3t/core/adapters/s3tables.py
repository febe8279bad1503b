from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from s3t.core.errors import wrap_error
from s3t.core.models import Namespace, Page, Table, TableBucket

logger = logging.getLogger(__name__)


@contextmanager
def _api_call(operation: str) -> Iterator[None]:
    """Translate botocore failures raised inside the block into S3TablesError."""
    logger.debug("Calling %s", operation)
    try:
        yield
    except (ClientError, BotoCoreError) as exc:
        raise wrap_error(operation, exc) from exc


def _first(values: list[str] | None) -> str:
    """Namespaces come back as single-element lists; unwrap the first element."""
    return values[0] if values else ""


def _optional_str(value: Any) -> str | None:
    return str(value) if value else None


def _table_from(item: dict[str, Any], namespace: str | None = None) -> Table:
    return Table(
        name=item.get("name", ""),
        arn=item.get("tableARN", ""),
        namespace=namespace or _first(item.get("namespace")),
        created_at=item.get("createdAt"),
        table_type=_optional_str(item.get("type")),
        format=_optional_str(item.get("format")),
        modified_at=item.get("modifiedAt"),
        warehouse_location=_optional_str(item.get("warehouseLocation")),
        metadata_location=_optional_str(item.get("metadataLocation")),
    )


class S3TablesAdapter:
    """Adapter around the boto3 S3 Tables client (buckets/namespaces/tables)."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def list_table_buckets(
        self, prefix: str | None, continuation_token: str | None
    ) -> Page[TableBucket]:
        """Return one page of table buckets."""
        params: dict[str, Any] = {}
        if prefix:
            params["prefix"] = prefix
        if continuation_token:
            params["continuationToken"] = continuation_token

        with _api_call("ListTableBuckets"):
            resp = self.client.list_table_buckets(**params)

        buckets = [
            TableBucket(
                name=b.get("name", ""),
                arn=b.get("arn", ""),
                created_at=b.get("createdAt"),
            )
            for b in resp.get("tableBuckets", [])
        ]
        return Page(items=buckets, next_token=resp.get("continuationToken") or None)

    def create_table_bucket(self, name: str) -> str:
        """Create a table bucket and return its ARN."""
        with _api_call("CreateTableBucket"):
            resp = self.client.create_table_bucket(name=name)
        return resp.get("arn", "")

    def get_namespace(self, table_bucket_arn: str, namespace: str) -> Namespace:
        """Look up a namespace by name."""
        with _api_call("GetNamespace"):
            resp = self.client.get_namespace(
                tableBucketARN=table_bucket_arn, namespace=namespace
            )
        return Namespace(
            name=_first(resp.get("namespace")) or namespace,
            created_at=resp.get("createdAt"),
        )

    def create_namespace(self, table_bucket_arn: str, namespace: str) -> None:
        """Create a namespace in a table bucket."""
        with _api_call("CreateNamespace"):
            self.client.create_namespace(
                tableBucketARN=table_bucket_arn, namespace=[namespace]
            )

    def get_table(self, table_bucket_arn: str, namespace: str, name: str) -> Table:
        """Look up a table and return its full record."""
        with _api_call("GetTable"):
            resp = self.client.get_table(
                tableBucketARN=table_bucket_arn, namespace=namespace, name=name
            )
        return _table_from(resp, namespace=_first(resp.get("namespace")) or namespace)

    def create_table(
        self, table_bucket_arn: str, namespace: str, name: str, fmt: str
    ) -> str:
        """Create a table and return its ARN."""
        with _api_call("CreateTable"):
            resp = self.client.create_table(
                tableBucketARN=table_bucket_arn,
                namespace=namespace,
                name=name,
                format=fmt,
            )
        return resp.get("tableARN", "")

    def list_namespaces(
        self,
        table_bucket_arn: str,
        prefix: str | None,
        continuation_token: str | None,
    ) -> Page[Namespace]:
        """Return one page of namespaces in a table bucket."""
        params: dict[str, Any] = {"tableBucketARN": table_bucket_arn}
        if prefix:
            params["prefix"] = prefix
        if continuation_token:
            params["continuationToken"] = continuation_token

        with _api_call("ListNamespaces"):
            resp = self.client.list_namespaces(**params)

        namespaces = [
            Namespace(name=_first(ns.get("namespace")), created_at=ns.get("createdAt"))
            for ns in resp.get("namespaces", [])
        ]
        return Page(items=namespaces, next_token=resp.get("continuationToken") or None)

    def list_tables(
        self,
        table_bucket_arn: str,
        namespace: str,
        prefix: str | None,
        continuation_token: str | None,
    ) -> Page[Table]:
        """Return one page of tables in a namespace."""
        params: dict[str, Any] = {
            "tableBucketARN": table_bucket_arn,
            "namespace": namespace,
        }
        if prefix:
            params["prefix"] = prefix
        if continuation_token:
            params["continuationToken"] = continuation_token

        with _api_call("ListTables"):
            resp = self.client.list_tables(**params)

        tables = [_table_from(t) for t in resp.get("tables", [])]
        return Page(items=tables, next_token=resp.get("continuationToken") or None)
