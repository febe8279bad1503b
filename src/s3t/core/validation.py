"""Name validation for S3 Tables resources.

Mirrors the service's naming constraints so obviously invalid input is
rejected before any API call is made.
"""

from __future__ import annotations

import re

_TABLE_BUCKET_RE = re.compile(r"^[0-9a-z-]+$")
_NAMESPACE_RE = re.compile(r"^[0-9a-z_]+$")
_TABLE_RE = re.compile(r"^[0-9a-z_]+$")


class ValidationError(ValueError):
    """Raised when a resource name violates the service constraints."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"invalid {field}: {message}")


def _validate(
    name: str,
    *,
    field: str,
    min_len: int,
    max_len: int,
    pattern: re.Pattern[str],
    allowed: str,
) -> None:
    if len(name) < min_len:
        unit = "character" if min_len == 1 else "characters"
        raise ValidationError(field, f"must be at least {min_len} {unit}")
    if len(name) > max_len:
        raise ValidationError(field, f"must be at most {max_len} characters")
    if not pattern.fullmatch(name):
        raise ValidationError(field, f"must contain only {allowed}")


def validate_table_bucket(name: str) -> None:
    """Table bucket: 3-63 characters, lowercase letters, numbers and hyphens."""
    _validate(
        name,
        field="table-bucket",
        min_len=3,
        max_len=63,
        pattern=_TABLE_BUCKET_RE,
        allowed="lowercase letters, numbers, and hyphens",
    )


def validate_namespace(name: str) -> None:
    """Namespace: 1-255 characters, lowercase letters, numbers and underscores."""
    _validate(
        name,
        field="namespace",
        min_len=1,
        max_len=255,
        pattern=_NAMESPACE_RE,
        allowed="lowercase letters, numbers, and underscores",
    )


def validate_table(name: str) -> None:
    """Table: 1-255 characters, lowercase letters, numbers and underscores."""
    _validate(
        name,
        field="table",
        min_len=1,
        max_len=255,
        pattern=_TABLE_RE,
        allowed="lowercase letters, numbers, and underscores",
    )


def validate_all(table_bucket: str, namespace: str, table: str) -> None:
    """Validate all three names; the first failure is raised."""
    validate_table_bucket(table_bucket)
    validate_namespace(namespace)
    validate_table(table)
