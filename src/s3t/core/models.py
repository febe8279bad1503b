"""Core domain models for S3 Tables.

These models represent S3 Tables resources (table buckets, namespaces and
tables) in a simple, immutable form. They are intentionally free of boto3
response shapes and UI/CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

TABLE_FORMAT_ICEBERG = "ICEBERG"


@dataclass(frozen=True)
class TableBucket:
    """
    Represents an S3 table bucket.

    Attributes:
        name: Bucket name, unique within the account and region.
        arn: Stable ARN returned by the service. Every namespace or table
             operation on this bucket is addressed by it.
        created_at: Creation timestamp, if reported.
    """

    name: str
    arn: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Namespace:
    """Represents a namespace inside a table bucket."""

    name: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Table:
    """
    Represents a table inside a namespace.

    Attributes:
        name: Table name, unique within its namespace.
        arn: Table ARN.
        namespace: Name of the parent namespace.
        created_at: Creation timestamp, if reported.
        table_type: Table type reported by the service (e.g. `customer`).
        format: Open table format, only reported by a direct lookup.
        modified_at: Last modification time, only reported by some calls.
        warehouse_location: Storage location, only reported by a direct lookup.
        metadata_location: Current metadata file, only reported by a direct lookup.
    """

    name: str
    arn: str
    namespace: str
    created_at: datetime | None = None
    table_type: str | None = None
    format: str | None = None
    modified_at: datetime | None = None
    warehouse_location: str | None = None
    metadata_location: str | None = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing call plus the continuation token for the next one."""

    items: Sequence[T]
    next_token: str | None = None


@dataclass(frozen=True)
class ProvisionResult:
    """
    Outcome of a single provisioning run.

    The three `*_created` flags are the only source of truth for what was
    created; ARNs are populated both for new and for pre-existing resources.
    """

    table_bucket_arn: str
    table_arn: str
    table_bucket_created: bool
    namespace_created: bool
    table_created: bool
    messages: tuple[str, ...] = ()

    @property
    def created_count(self) -> int:
        """Number of resources created by this run."""
        return sum(
            (self.table_bucket_created, self.namespace_created, self.table_created)
        )

    @property
    def existed_count(self) -> int:
        """Number of resources that already existed."""
        return 3 - self.created_count
