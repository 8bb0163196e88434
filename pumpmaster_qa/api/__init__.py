# Pump Master REST API client

from .client import CLEANUP_ALL, CLEANUP_RUN, PumpMasterApi
from .errors import ApiError, AuthenticationError, NotFoundError, UnexpectedStatusError
from .expectations import expect_status, expect_success
from .models import (
    AuthSession,
    AuthUser,
    Credentials,
    ExportFormat,
    FailureResult,
    HttpResult,
    ImportSummary,
    PaginatedResult,
    PumpRecord,
    PumpStatus,
    PumpType,
    mime_type_for,
)
from .transport import HttpTransport

__all__ = [
    "PumpMasterApi",
    "CLEANUP_ALL",
    "CLEANUP_RUN",
    "HttpTransport",
    "expect_status",
    "expect_success",
    # Errors
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "UnexpectedStatusError",
    # Models
    "AuthSession",
    "AuthUser",
    "Credentials",
    "ExportFormat",
    "FailureResult",
    "HttpResult",
    "ImportSummary",
    "PaginatedResult",
    "PumpRecord",
    "PumpStatus",
    "PumpType",
    "mime_type_for",
]
