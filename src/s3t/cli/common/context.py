"""Application context management for the CLI."""

from dataclasses import dataclass
from typing import Any

import typer

from s3t.cli.common.exits import die
from s3t.core.adapters.s3tables import S3TablesAdapter
from s3t.core.auth import AuthError, get_client


@dataclass
class AppContext:
    """Application context holding the boto3 client and S3 Tables adapter."""

    profile: str | None
    region: str | None
    client: Any
    adapter: S3TablesAdapter


@dataclass
class CliSettings:
    """Global options captured by the root callback; the client is built lazily."""

    profile: str | None = None
    region: str | None = None
    app: AppContext | None = None


def build_context(profile: str | None, region: str | None) -> AppContext:
    """Build and return the application context with AWS client and adapter.

    Args:
        profile: Optional AWS profile name to use for authentication.
        region: Optional AWS region override.

    Returns:
        AppContext: Application context with configured client and adapter.
    """
    try:
        client = get_client(profile, region)
    except AuthError as exc:
        die(str(exc), code=1)
    adapter = S3TablesAdapter(client)
    return AppContext(profile=profile, region=region, client=client, adapter=adapter)


def app_context(ctx: typer.Context) -> AppContext:
    """
    Return the AppContext for this invocation, connecting on first use.

    Commands call this once they actually need AWS, so `--help` and input
    validation work without any AWS configuration.
    """
    settings: CliSettings = ctx.obj
    if settings.app is None:
        settings.app = build_context(settings.profile, settings.region)
    return settings.app
