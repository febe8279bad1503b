"""Authentication helpers for AWS.

This module centralizes creation of the boto3 S3 Tables client. Credentials
and region are resolved through the standard AWS chain (shared config and
credentials files, environment variables, IAM roles), optionally narrowed
by an explicit profile and region.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, NoRegionError, ProfileNotFound

_SETUP_HINT = (
    "Please configure AWS credentials using:\n"
    "  - AWS CLI: aws configure\n"
    "  - Environment variables: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY\n"
    "  - IAM roles (for EC2/ECS/Lambda)"
)


class AuthError(RuntimeError):
    """Raised when the AWS configuration cannot be loaded."""


def _format_auth_error(exc: Exception, profile: str | None) -> str:
    """Return a user-friendly configuration error message."""
    if isinstance(exc, NoRegionError):
        return (
            "No AWS region configured.\n"
            "Pass --region, set AWS_REGION, or add a region to your profile."
        )
    if profile:
        return (
            f"Failed to load AWS profile '{profile}': {exc}\n\n"
            "Please ensure the profile exists in ~/.aws/credentials or ~/.aws/config"
        )
    return f"Failed to load AWS configuration: {exc}\n\n{_SETUP_HINT}"


def get_client(profile: str | None = None, region: str | None = None) -> Any:
    """
    Create and return a configured boto3 `s3tables` client.

    If a profile is provided it is resolved from ~/.aws/config and
    ~/.aws/credentials; otherwise the default chain applies. A region
    given here overrides whatever the profile or environment specify.
    """
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
        return session.client("s3tables")
    except (ProfileNotFound, NoRegionError, BotoCoreError) as exc:
        raise AuthError(_format_auth_error(exc, profile)) from exc
