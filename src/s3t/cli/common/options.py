"""Common CLI options for the CLI."""

import typer

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    envvar="S3T_PROFILE",
    help="AWS profile name (from ~/.aws/credentials or ~/.aws/config)",
)

RegionOpt = typer.Option(
    None,
    "--region",
    "-r",
    envvar="S3T_REGION",
    help="AWS region to use for API calls",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log every API call to stderr",
)
