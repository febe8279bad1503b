from datetime import datetime

import pytest
from botocore.exceptions import ClientError

from s3t.core.adapters.s3tables import S3TablesAdapter
from s3t.core.errors import ErrorKind, S3TablesError

ARN = "arn:aws:s3tables:us-east-1:123456789012:bucket/demo"
WHEN = datetime(2024, 5, 1, 12, 30, 0)


class _Client:
    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    def __getattr__(self, name):
        def _call(**kwargs):
            self.calls.append((name, kwargs))
            if self.error is not None:
                raise self.error
            return self.responses.get(name, {})

        return _call


def test_list_table_buckets_maps_items_and_token():
    client = _Client(
        {
            "list_table_buckets": {
                "tableBuckets": [
                    {"name": "demo", "arn": ARN, "createdAt": WHEN},
                ],
                "continuationToken": "next-1",
            }
        }
    )

    page = S3TablesAdapter(client).list_table_buckets("de", None)

    assert client.calls == [("list_table_buckets", {"prefix": "de"})]
    assert page.next_token == "next-1"
    assert page.items[0].name == "demo"
    assert page.items[0].arn == ARN
    assert page.items[0].created_at == WHEN


def test_list_calls_pass_continuation_token_and_omit_empty_prefix():
    client = _Client({"list_namespaces": {"namespaces": []}})

    page = S3TablesAdapter(client).list_namespaces(ARN, None, "tok")

    assert client.calls == [
        ("list_namespaces", {"tableBucketARN": ARN, "continuationToken": "tok"})
    ]
    assert page.next_token is None


def test_namespaces_are_unwrapped_from_lists():
    client = _Client(
        {
            "list_namespaces": {
                "namespaces": [{"namespace": ["sales"], "createdAt": WHEN}],
                "continuationToken": "",
            },
            "list_tables": {
                "tables": [
                    {
                        "namespace": ["sales"],
                        "name": "orders",
                        "type": "customer",
                        "tableARN": f"{ARN}/table/abc",
                        "createdAt": WHEN,
                    }
                ]
            },
        }
    )
    adapter = S3TablesAdapter(client)

    namespaces = adapter.list_namespaces(ARN, None, None)
    tables = adapter.list_tables(ARN, "sales", None, None)

    assert namespaces.items[0].name == "sales"
    assert namespaces.next_token is None
    assert tables.items[0].namespace == "sales"
    assert tables.items[0].table_type == "customer"
    assert tables.items[0].arn == f"{ARN}/table/abc"


def test_create_calls_send_expected_parameters():
    client = _Client(
        {
            "create_table_bucket": {"arn": ARN},
            "create_table": {"tableARN": f"{ARN}/table/abc", "versionToken": "v1"},
        }
    )
    adapter = S3TablesAdapter(client)

    assert adapter.create_table_bucket("demo") == ARN
    adapter.create_namespace(ARN, "sales")
    assert adapter.create_table(ARN, "sales", "orders", "ICEBERG") == f"{ARN}/table/abc"

    assert client.calls == [
        ("create_table_bucket", {"name": "demo"}),
        ("create_namespace", {"tableBucketARN": ARN, "namespace": ["sales"]}),
        (
            "create_table",
            {
                "tableBucketARN": ARN,
                "namespace": "sales",
                "name": "orders",
                "format": "ICEBERG",
            },
        ),
    ]


def test_get_table_returns_full_record():
    client = _Client(
        {
            "get_table": {
                "name": "orders",
                "type": "customer",
                "tableARN": f"{ARN}/table/abc",
                "namespace": ["sales"],
                "createdAt": WHEN,
                "modifiedAt": WHEN,
                "format": "ICEBERG",
                "warehouseLocation": "s3://warehouse",
            }
        }
    )

    table = S3TablesAdapter(client).get_table(ARN, "sales", "orders")

    assert table.format == "ICEBERG"
    assert table.warehouse_location == "s3://warehouse"
    assert table.metadata_location is None
    assert table.namespace == "sales"


def test_client_errors_are_wrapped_with_operation_name():
    error = ClientError(
        {"Error": {"Code": "NotFoundException", "Message": "nope"}}, "GetNamespace"
    )
    client = _Client(error=error)

    with pytest.raises(S3TablesError) as exc:
        S3TablesAdapter(client).get_namespace(ARN, "sales")

    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.operation == "GetNamespace"
    assert exc.value.__cause__ is error
