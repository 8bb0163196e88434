"""
Data shapes exchanged with the Pump Master REST API.

The backend speaks camelCase JSON; these models expose snake_case
attributes and accept either spelling on input.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class PumpType(str, enum.Enum):
    CENTRIFUGAL = "Centrifugal"
    SUBMERSIBLE = "Submersible"
    POSITIVE_DISPLACEMENT = "Positive Displacement"
    TURBINE = "Turbine"


class PumpStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"
    DECOMMISSIONED = "Decommissioned"


class ExportFormat(str, enum.Enum):
    CSV = "csv"
    JSON = "json"
    XLSX = "xlsx"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]


_MIME_TYPES = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.JSON: "application/json",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def mime_type_for(fmt: str) -> str:
    """MIME type for an import/export format, octet-stream when unknown."""
    try:
        return ExportFormat(fmt).mime_type
    except ValueError:
        return "application/octet-stream"


class ApiModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Credentials(ApiModel):
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


class AuthUser(ApiModel):
    id: int | str
    username: str
    email: str | None = None
    tenant_id: int | str | None = None

    class Config:
        extra = "allow"


class AuthSession(ApiModel):
    token: str
    user: AuthUser
    expires_in: int | str


class PumpRecord(ApiModel):
    id: int | str | None = None
    name: str
    type: str
    area: str
    latitude: float
    longitude: float
    flow_rate: str
    offset: float
    current_pressure: float
    min_pressure: float
    max_pressure: float
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    class Config:
        extra = "allow"

    def to_payload(self) -> dict[str, Any]:
        """Request body for create/update, without server-owned fields."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"id", "created_at", "updated_at"},
        )


T = TypeVar("T")


class PaginatedResult(ApiModel, Generic[T]):
    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


class ImportSummary(ApiModel):
    imported: int
    errors: list[Any] = []


@dataclass
class HttpResult:
    """Outcome of a single HTTP exchange, whatever its status."""
    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class FailureResult:
    """Structured result of a request expected to be rejected."""
    status: int
    error: Any = None
