"""Error taxonomy for S3 Tables operations.

Every failure coming back from the remote service is translated into a single
`S3TablesError` carrying an `ErrorKind`, so the core and the CLI never have to
inspect botocore exceptions directly.
"""

from __future__ import annotations

from enum import Enum

from botocore.exceptions import (
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)


class ErrorKind(str, Enum):
    """
    Kind of failure reported by the remote service.

    Values:
        NOT_FOUND: The resource does not exist (404).
        CONFLICT: The resource already exists or is being modified (409).
        FORBIDDEN: Access denied (403).
        BAD_REQUEST: The request was rejected as invalid (400).
        INTERNAL_SERVER: The service failed (5xx).
        CREDENTIALS: Credentials are missing or invalid.
        UNKNOWN: Anything else.
    """

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    FORBIDDEN = "FORBIDDEN"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER = "INTERNAL_SERVER"
    CREDENTIALS = "CREDENTIALS"
    UNKNOWN = "UNKNOWN"


class S3TablesError(RuntimeError):
    """Raised when an S3 Tables operation fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        suggestion: str = "",
    ) -> None:
        self.operation = operation
        self.message = message
        self.kind = kind
        self.suggestion = suggestion
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.operation}: {self.message} - {self.suggestion}"
        return f"{self.operation}: {self.message}"


# (kind, message, suggestion) per service error code.
_CODE_TABLE: dict[str, tuple[ErrorKind, str, str]] = {}


def _register(codes: tuple[str, ...], kind: ErrorKind, message: str, suggestion: str):
    for code in codes:
        _CODE_TABLE[code] = (kind, message, suggestion)


_register(
    ("NotFoundException", "NoSuchBucket", "404"),
    ErrorKind.NOT_FOUND,
    "resource not found",
    "verify the resource name and try again",
)
_register(
    ("ConflictException",),
    ErrorKind.CONFLICT,
    "resource already exists",
    "use a different name or check existing resources",
)
_register(
    ("ForbiddenException", "AccessDeniedException", "AccessDenied"),
    ErrorKind.FORBIDDEN,
    "access denied",
    "check your AWS credentials and permissions",
)
_register(
    ("BadRequestException", "ValidationException"),
    ErrorKind.BAD_REQUEST,
    "invalid request",
    "check your input parameters",
)
_register(
    ("InternalServerErrorException", "InternalServerError", "ServiceException"),
    ErrorKind.INTERNAL_SERVER,
    "AWS service error",
    "please retry the operation",
)
_register(
    (
        "UnrecognizedClientException",
        "InvalidSignatureException",
        "ExpiredTokenException",
    ),
    ErrorKind.CREDENTIALS,
    "invalid AWS credentials",
    "check your AWS credentials configuration",
)

_CREDENTIAL_HINTS = (
    "no credentials",
    "credential",
    "nocredentialproviders",
    "sharedconfigprofilenotexist",
    "failed to refresh cached credentials",
)


def _looks_like_credentials(exc: BaseException) -> bool:
    """Return True if the exception text points at a credentials problem."""
    text = str(exc).lower()
    return any(hint in text for hint in _CREDENTIAL_HINTS)


def wrap_error(operation: str, exc: BaseException) -> S3TablesError:
    """
    Convert a botocore (or any other) exception into an S3TablesError.

    Args:
        operation: API operation that failed, e.g. `CreateTable`.
        exc: The original exception.

    Returns:
        A user-friendly S3TablesError. The caller is expected to raise it
        `from exc` so the original stays attached.
    """
    if isinstance(exc, S3TablesError):
        return exc

    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {}) or {}
        code = str(error.get("Code", "") or "")
        service_message = str(error.get("Message", "") or "")

        if code in _CODE_TABLE:
            kind, message, suggestion = _CODE_TABLE[code]
            if kind is ErrorKind.BAD_REQUEST and service_message:
                message = service_message
            return S3TablesError(
                operation, message, kind=kind, suggestion=suggestion
            )

        return S3TablesError(
            operation,
            service_message or code or str(exc),
            kind=ErrorKind.UNKNOWN,
        )

    if isinstance(exc, (NoCredentialsError, PartialCredentialsError)) or (
        _looks_like_credentials(exc)
    ):
        return S3TablesError(
            operation,
            "AWS credentials not configured",
            kind=ErrorKind.CREDENTIALS,
            suggestion=(
                "configure AWS credentials using 'aws configure' "
                "or environment variables"
            ),
        )

    return S3TablesError(operation, str(exc), kind=ErrorKind.UNKNOWN)


def error_kind(exc: BaseException) -> ErrorKind:
    """Return the kind of an S3TablesError (UNKNOWN for anything else)."""
    if isinstance(exc, S3TablesError):
        return exc.kind
    return ErrorKind.UNKNOWN


def is_not_found(exc: BaseException) -> bool:
    """Return True for a not-found failure."""
    return error_kind(exc) is ErrorKind.NOT_FOUND


def is_conflict(exc: BaseException) -> bool:
    """Return True for a conflict failure."""
    return error_kind(exc) is ErrorKind.CONFLICT


def is_credential_error(exc: BaseException) -> bool:
    """Return True for missing or invalid credentials."""
    if isinstance(exc, S3TablesError):
        return exc.kind is ErrorKind.CREDENTIALS
    return isinstance(
        exc, (NoCredentialsError, PartialCredentialsError)
    ) or _looks_like_credentials(exc)
