from importlib import metadata
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from fakes import EXIT, FakeTablesPort, ScriptedSelector, select
from s3t.cli import cli
from s3t.cli.commands import browse
from s3t.cli.common import context
from s3t.core.errors import ErrorKind

runner = CliRunner()


@pytest.fixture
def port(monkeypatch) -> FakeTablesPort:
    fake = FakeTablesPort()

    def _build_context(profile, region):
        return SimpleNamespace(profile=profile, region=region, client=None, adapter=fake)

    monkeypatch.setattr(context, "build_context", _build_context)
    return fake


def _use_selector(monkeypatch, answers):
    selector = ScriptedSelector(answers)
    monkeypatch.setattr(browse, "_selector", lambda: selector)
    return selector


def test_create_rejects_invalid_names_before_calling_aws(port):
    result = runner.invoke(cli.app, ["create", "AB", "ns", "tbl"])

    assert result.exit_code == 2
    assert port.calls == []


def test_create_requires_three_arguments(port):
    result = runner.invoke(cli.app, ["create", "demo", "ns"])

    assert result.exit_code != 0


def test_create_prints_summary(port):
    result = runner.invoke(cli.app, ["create", "demo", "ns", "tbl"])

    assert result.exit_code == 0, result.output
    assert "Table Bucket 'demo' created" in result.output
    assert "Created: 3 resource(s)" in result.output

    again = runner.invoke(cli.app, ["create", "demo", "ns", "tbl"])
    assert again.exit_code == 0, again.output
    assert "Already existed: 3 resource(s)" in again.output


def test_create_exits_1_on_service_error(port):
    port.fail("create_table_bucket")

    result = runner.invoke(cli.app, ["create", "demo", "ns", "tbl"])

    assert result.exit_code == 1


def test_list_with_three_arguments_shows_details(port, monkeypatch):
    port.add_table("demo", "sales", "orders")
    selector = _use_selector(monkeypatch, [])

    result = runner.invoke(cli.app, ["list", "demo", "sales", "orders"])

    assert result.exit_code == 0, result.output
    assert "Table Details:" in result.output
    assert "orders" in result.output
    assert selector.prompts == []


def test_list_without_arguments_navigates(port, monkeypatch):
    port.add_table("demo", "sales", "orders")
    selector = _use_selector(
        monkeypatch, [select("demo"), select("sales"), select("orders")]
    )

    result = runner.invoke(cli.app, ["list"])

    assert result.exit_code == 0, result.output
    assert [p[0] for p in selector.prompts] == [
        "Select Table Bucket",
        "Select Namespace",
        "Select Table",
    ]
    assert "Table Details:" in result.output


def test_list_with_bucket_starts_at_namespace_level(port, monkeypatch):
    port.add_table("demo", "sales", "orders")
    selector = _use_selector(monkeypatch, [EXIT])

    result = runner.invoke(cli.app, ["list", "demo"])

    assert result.exit_code == 0, result.output
    assert selector.prompts[0][0] == "Select Namespace"


def test_list_unknown_bucket_exits_1(port, monkeypatch):
    _use_selector(monkeypatch, [])

    result = runner.invoke(cli.app, ["list", "missing"])

    assert result.exit_code == 1


@pytest.fixture
def no_aws(monkeypatch):
    def _fail(profile, region):
        raise AssertionError("AWS client must not be built")

    monkeypatch.setattr(context, "build_context", _fail)


def test_version_skips_aws_setup(no_aws):
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert f"s3t version {cli.VERSION}" in result.output


def test_version_comes_from_package_metadata():
    try:
        expected = metadata.version("s3t")
    except metadata.PackageNotFoundError:
        expected = "0+unknown"

    assert cli.VERSION == expected


@pytest.mark.parametrize("command", ["create", "list"])
def test_subcommand_help_works_without_aws(no_aws, command):
    result = runner.invoke(cli.app, [command, "--help"])

    assert result.exit_code == 0, result.output
    assert "Usage" in result.output


def test_invalid_names_exit_before_connecting(no_aws):
    result = runner.invoke(cli.app, ["create", "AB", "ns", "tbl"])

    assert result.exit_code == 2
    assert "validation error" in result.output


def test_context_is_built_with_global_options(monkeypatch):
    seen = []
    fake = FakeTablesPort()

    def _build_context(profile, region):
        seen.append((profile, region))
        return SimpleNamespace(adapter=fake)

    monkeypatch.setattr(context, "build_context", _build_context)

    args = ["--profile", "dev", "--region", "eu-west-1", "create", "demo", "ns", "tbl"]
    result = runner.invoke(cli.app, args)

    assert result.exit_code == 0, result.output
    assert seen == [("dev", "eu-west-1")]


@pytest.mark.parametrize(
    "kind,hint",
    [
        (ErrorKind.CREDENTIALS, "check the active profile"),
        (ErrorKind.CONFLICT, "another request may be"),
    ],
)
def test_service_errors_print_a_hint(port, kind, hint):
    port.fail("create_table_bucket", kind=kind)

    result = runner.invoke(cli.app, ["create", "demo", "ns", "tbl"])

    assert result.exit_code == 1
    assert hint in result.output


def test_other_service_errors_have_no_hint(port):
    port.fail("create_table_bucket")

    result = runner.invoke(cli.app, ["create", "demo", "ns", "tbl"])

    assert result.exit_code == 1
    assert "hint:" not in result.output


def test_selection_outside_the_listing_exits_1(port, monkeypatch):
    port.add_table("demo", "sales", "orders")
    _use_selector(monkeypatch, [select("ghost")])

    result = runner.invoke(cli.app, ["list"])

    assert result.exit_code == 1
    assert "selection error" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
