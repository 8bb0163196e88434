"""
Scenario-level test data built on the record factories.

TestDataFactory owns a RunSequence and hands its values to PumpFactory and
UserFactory, so every record produced through one instance gets a name
unique to the current run and worker.
"""
from datetime import datetime, timezone
from typing import Any, Callable

from ..api.models import PumpStatus, PumpType
from .api import invalid_pump_payload
from .base import RunSequence
from .models import PumpFactory, UserFactory

ENVIRONMENT_CREDENTIALS = {
    "dev": {"username": "dev.user@pumpmaster.com", "password": "DevTest@123"},
    "staging": {"username": "staging.user@pumpmaster.com", "password": "StagingTest@123"},
    "prod": {"username": "prod.user@pumpmaster.com", "password": "ProdTest@123"},
}

SEARCH_TEST_PUMPS = [
    ("High Efficiency Centrifugal Pump", PumpType.CENTRIFUGAL),
    ("Submersible Water Pump", PumpType.SUBMERSIBLE),
    ("Industrial Centrifugal System", PumpType.CENTRIFUGAL),
    ("Deep Well Submersible Unit", PumpType.SUBMERSIBLE),
    ("Positive Displacement Pump", PumpType.POSITIVE_DISPLACEMENT),
]


class TestDataFactory:
    """Builds users, pumps and scenario bundles for tests."""

    __test__ = False

    def __init__(self, sequence: RunSequence | None = None):
        self.sequence = sequence or RunSequence()

    @property
    def run_tag(self) -> str:
        return self.sequence.run_tag

    def _naming(self) -> dict[str, Any]:
        return {"seq": self.sequence.next(), "run_tag": self.sequence.run_tag}

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, **overrides) -> dict[str, Any]:
        return UserFactory(**self._naming(), **overrides)

    def create_admin_user(self, **overrides) -> dict[str, Any]:
        return UserFactory(**self._naming(), admin=True, **overrides)

    def create_viewer_user(self, **overrides) -> dict[str, Any]:
        return UserFactory(**self._naming(), viewer=True, **overrides)

    def get_environment_credentials(self, environment: str = "dev") -> dict[str, Any]:
        """User carrying the fixed credentials of a deployment environment."""
        if environment not in ENVIRONMENT_CREDENTIALS:
            raise ValueError(
                f"Unknown environment {environment!r}; expected one of {sorted(ENVIRONMENT_CREDENTIALS)}"
            )
        return self.create_user(**ENVIRONMENT_CREDENTIALS[environment])

    # -------------------------------------------------------------------------
    # Pumps
    # -------------------------------------------------------------------------

    def create_pump(self, **overrides) -> dict[str, Any]:
        return PumpFactory(**self._naming(), **overrides)

    def create_pumps(self, count: int, **overrides) -> list[dict[str, Any]]:
        return [self.create_pump(**overrides) for _ in range(count)]

    def create_pumps_by_type(self, pump_type: str, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps(count, type=PumpType(pump_type).value)

    def create_pumps_by_status(self, status: str, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps(count, status=PumpStatus(status).value)

    def create_centrifugal_pumps(self, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps_by_type(PumpType.CENTRIFUGAL, count)

    def create_submersible_pumps(self, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps_by_type(PumpType.SUBMERSIBLE, count)

    def create_active_pumps(self, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps_by_status(PumpStatus.ACTIVE, count)

    def create_inactive_pumps(self, count: int = 1) -> list[dict[str, Any]]:
        return self.create_pumps_by_status(PumpStatus.INACTIVE, count)

    def create_search_test_pumps(self) -> list[dict[str, Any]]:
        """Five pumps with known names for search tests ('Centrifugal' matches two)."""
        return [
            self.create_pump(name=name, type=pump_type.value)
            for name, pump_type in SEARCH_TEST_PUMPS
        ]

    def create_filter_test_pumps(self) -> list[dict[str, Any]]:
        """3 centrifugal, 2 submersible, 4 active and 3 inactive pumps."""
        return [
            *self.create_centrifugal_pumps(3),
            *self.create_submersible_pumps(2),
            *self.create_active_pumps(4),
            *self.create_inactive_pumps(3),
        ]

    def create_invalid_pump(self) -> dict[str, Any]:
        """Every field violates validation: blanks, unknown type, non-numeric values."""
        return invalid_pump_payload()

    def create_incomplete_pump(self) -> dict[str, Any]:
        return {"area": "Test Area with missing required fields"}

    def create_large_dataset(self, count: int = 1000) -> list[dict[str, Any]]:
        return [
            self.create_pump(name=f"Performance Test Pump {self.run_tag}-{i}")
            for i in range(1, count + 1)
        ]

    def create_boundary_test_pumps(self) -> list[dict[str, Any]]:
        """Minimum values, maximum values and special characters, in that order."""
        return [
            self.create_pump(
                name="A",
                flowRate="1 GPM",
                offset=0,
                minPressure=1,
                maxPressure=2,
            ),
            self.create_pump(
                name="A" * 255,
                flowRate="99999 GPM",
                offset=100,
                currentPressure=500,
                minPressure=400,
                maxPressure=600,
            ),
            self.create_pump(
                name="Pump with Special Characters !@#$%^&*()",
                flowRate="1000.5 GPM",
                area="Area with Unicode: 测试位置",
                latitude=90.0,
                longitude=180.0,
            ),
        ]

    def create_pump_update_data(self) -> dict[str, Any]:
        stamp = int(datetime.now(timezone.utc).timestamp() * 1000)
        return {
            "name": f"Updated Pump {stamp}",
            "status": PumpStatus.MAINTENANCE.value,
            "area": "Updated area for testing purposes",
            "currentPressure": 175,
            "offset": 5,
        }

    # -------------------------------------------------------------------------
    # Scenarios
    # -------------------------------------------------------------------------

    def get_scenario_data(self, scenario: str) -> dict[str, Any]:
        """Data bundle for a named scenario; empty dict for unknown names."""
        scenarios: dict[str, Callable[[], dict[str, Any]]] = {
            "login-success": lambda: {
                "user": self.create_user(),
                "expectedUrl": "/pumps",
            },
            "login-failure": lambda: {
                "user": {"username": "invalid@test.com", "password": "wrongpassword"},
                "expectedError": "Invalid username or password",
            },
            "pump-creation": lambda: {
                "pump": self.create_pump(),
                "expectedSuccess": "Pump created successfully",
            },
            "pump-validation": lambda: {
                "pump": self.create_invalid_pump(),
                "expectedErrors": ["Name is required", "Invalid pump type"],
            },
            "search-results": lambda: {
                "pumps": self.create_search_test_pumps(),
                "searchTerm": "Centrifugal",
            },
            "filter-results": lambda: {
                "pumps": self.create_filter_test_pumps(),
                "filterType": "Centrifugal",
            },
        }
        builder = scenarios.get(scenario)
        return builder() if builder else {}

    def reset(self) -> None:
        self.sequence.reset()
