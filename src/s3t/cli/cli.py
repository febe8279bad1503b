"""CLI application for Amazon S3 Tables."""

from importlib import metadata

import typer

from s3t.cli.commands.browse import list_resources
from s3t.cli.commands.create import create
from s3t.cli.common.context import CliSettings
from s3t.cli.common.logs import configure_logging
from s3t.cli.common.options import ProfileOpt, RegionOpt, VerboseOpt

try:
    VERSION = metadata.version("s3t")
except metadata.PackageNotFoundError:  # running from a source checkout
    VERSION = "0+unknown"

app = typer.Typer(
    help=(
        "s3t - create and browse Amazon S3 Tables resources "
        "(Table Bucket, Namespace, Table).\n\n"
        "Uses the default AWS credential chain unless --profile / --region "
        "are given."
    ),
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"s3t version {VERSION}")
        raise typer.Exit(0)


@app.callback()
def _init(
    ctx: typer.Context,
    profile: str | None = ProfileOpt,
    region: str | None = RegionOpt,
    verbose: bool = VerboseOpt,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Initialize logging and record the AWS options for the sub-command."""
    configure_logging(verbose)
    ctx.obj = CliSettings(profile=profile, region=region)


app.command("create")(create)
app.command("list")(list_resources)


if __name__ == "__main__":
    app()
