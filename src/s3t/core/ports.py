"""Interface for the S3 Tables operations used by the core domain.

Any transport satisfying `TablesPort` (the boto3 adapter, an in-memory fake)
can drive the provisioner, the lister and the navigator. Implementations
raise `S3TablesError` on failure.
"""

from __future__ import annotations

from typing import Protocol

from s3t.core.models import Namespace, Page, Table, TableBucket


class TablesPort(Protocol):
    """Interface for table bucket, namespace and table operations."""

    def list_table_buckets(
        self, prefix: str | None, continuation_token: str | None
    ) -> Page[TableBucket]:
        """Return one page of table buckets, optionally filtered by name prefix."""
        ...

    def create_table_bucket(self, name: str) -> str:
        """Create a table bucket and return its ARN."""
        ...

    def get_namespace(self, table_bucket_arn: str, namespace: str) -> Namespace:
        """Look up a namespace by name."""
        ...

    def create_namespace(self, table_bucket_arn: str, namespace: str) -> None:
        """Create a namespace in a table bucket."""
        ...

    def get_table(self, table_bucket_arn: str, namespace: str, name: str) -> Table:
        """Look up a table by name and return its full record."""
        ...

    def create_table(
        self, table_bucket_arn: str, namespace: str, name: str, fmt: str
    ) -> str:
        """Create a table and return its ARN."""
        ...

    def list_namespaces(
        self,
        table_bucket_arn: str,
        prefix: str | None,
        continuation_token: str | None,
    ) -> Page[Namespace]:
        """Return one page of namespaces in a table bucket."""
        ...

    def list_tables(
        self,
        table_bucket_arn: str,
        namespace: str,
        prefix: str | None,
        continuation_token: str | None,
    ) -> Page[Table]:
        """Return one page of tables in a namespace."""
        ...
