"""
Tests for PumpFactory, UserFactory and TestDataFactory.
"""
import re

import pytest

from pumpmaster_qa.api.models import PumpRecord, PumpStatus, PumpType
from pumpmaster_qa.factories import (
    PumpFactory,
    RunSequence,
    TestDataFactory,
    UserFactory,
)

PUMP_KEYS = {
    "name",
    "type",
    "area",
    "latitude",
    "longitude",
    "flowRate",
    "offset",
    "currentPressure",
    "minPressure",
    "maxPressure",
    "status",
}


@pytest.fixture
def factory():
    return TestDataFactory(RunSequence("gw1-cafebabe"))


class TestPumpFactory:
    def test_builds_complete_camel_case_record(self):
        pump = PumpFactory(seq=3, run_tag="t")
        assert set(pump) == PUMP_KEYS

    def test_values_within_ranges(self):
        for _ in range(20):
            pump = PumpFactory()
            assert pump["type"] in {t.value for t in PumpType}
            assert pump["status"] in {s.value for s in PumpStatus}
            assert abs(pump["latitude"] - 40.7128) <= 0.05 + 1e-9
            assert abs(pump["longitude"] + 74.006) <= 0.05 + 1e-9
            assert re.fullmatch(r"\d{3,4} GPM", pump["flowRate"])
            assert 500 <= int(pump["flowRate"].split()[0]) <= 5499
            assert 0 <= pump["offset"] <= 9
            assert 50 <= pump["minPressure"] < 100 <= pump["currentPressure"] < 200 <= pump["maxPressure"] < 300

    def test_name_and_area_follow_sequence(self):
        pump = PumpFactory(seq=27, run_tag="gw0-x")
        assert pump["name"] == "Test Pump gw0-x-27"
        assert pump["area"] == "Building B - Room 127"

    def test_traits(self):
        assert PumpFactory(submersible=True)["type"] == "Submersible"
        assert PumpFactory(positive_displacement=True)["type"] == "Positive Displacement"
        assert PumpFactory(decommissioned=True)["status"] == "Decommissioned"

    def test_record_validates_as_pump(self):
        record = PumpRecord.model_validate(PumpFactory())
        assert record.id is None


class TestUserFactory:
    def test_default_user(self):
        user = UserFactory(seq=4, run_tag="t")
        assert user["username"] == "testuser4@pumpmaster.com"
        assert user["email"] == user["username"]
        assert user["password"] == "Test@123"
        assert user["tenantId"] == "tenant-t-4"
        assert user["role"] == "user"

    def test_admin_and_viewer(self):
        admin = UserFactory(admin=True)
        viewer = UserFactory(viewer=True)
        assert (admin["username"], admin["role"]) == ("admin@pumpmaster.com", "admin")
        assert (viewer["username"], viewer["role"]) == ("viewer@pumpmaster.com", "viewer")
        assert admin["password"] == viewer["password"] == "Test@123"


class TestTestDataFactory:
    def test_names_unique_and_tagged(self, factory):
        names = [p["name"] for p in factory.create_pumps(5)]
        assert len(set(names)) == 5
        assert all("gw1-cafebabe" in name for name in names)

    def test_factories_sharing_a_sequence_never_collide(self):
        seq = RunSequence("shared")
        a, b = TestDataFactory(seq), TestDataFactory(seq)
        names = {a.create_pump()["name"], b.create_pump()["name"], a.create_pump()["name"]}
        assert len(names) == 3

    def test_overrides(self, factory):
        pump = factory.create_pump(name="Custom", status="Inactive")
        assert pump["name"] == "Custom"
        assert pump["status"] == "Inactive"

    def test_by_type_and_status(self, factory):
        assert {p["type"] for p in factory.create_pumps_by_type("Turbine", 3)} == {"Turbine"}
        assert {p["status"] for p in factory.create_inactive_pumps(2)} == {"Inactive"}

    def test_unknown_type_rejected(self, factory):
        with pytest.raises(ValueError):
            factory.create_pumps_by_type("Rotary")

    def test_search_set(self, factory):
        pumps = factory.create_search_test_pumps()
        assert len(pumps) == 5
        assert sum("Centrifugal" in p["name"] for p in pumps) == 2

    def test_filter_set(self, factory):
        pumps = factory.create_filter_test_pumps()
        assert len(pumps) == 12
        assert [p["type"] for p in pumps[:5]] == ["Centrifugal"] * 3 + ["Submersible"] * 2
        assert [p["status"] for p in pumps[5:]] == ["Active"] * 4 + ["Inactive"] * 3

    def test_invalid_and_incomplete(self, factory):
        invalid = factory.create_invalid_pump()
        assert invalid["name"] == ""
        assert invalid["type"] == "InvalidType"
        assert factory.create_incomplete_pump() == {"area": "Test Area with missing required fields"}

    def test_large_dataset(self, factory):
        pumps = factory.create_large_dataset(25)
        assert len(pumps) == 25
        assert pumps[0]["name"] == "Performance Test Pump gw1-cafebabe-1"
        assert pumps[-1]["name"] == "Performance Test Pump gw1-cafebabe-25"

    def test_boundary_pumps(self, factory):
        minimum, maximum, special = factory.create_boundary_test_pumps()
        assert minimum["name"] == "A"
        assert len(maximum["name"]) == 255
        assert "测试位置" in special["area"]
        assert (special["latitude"], special["longitude"]) == (90.0, 180.0)

    def test_update_data(self, factory):
        data = factory.create_pump_update_data()
        assert data["name"].startswith("Updated Pump ")
        assert data["status"] == "Maintenance"
        assert data["currentPressure"] == 175

    def test_users(self, factory):
        assert factory.create_user()["role"] == "user"
        assert factory.create_admin_user()["role"] == "admin"
        assert factory.create_viewer_user()["role"] == "viewer"

    @pytest.mark.parametrize(
        "env,username",
        [
            ("dev", "dev.user@pumpmaster.com"),
            ("staging", "staging.user@pumpmaster.com"),
            ("prod", "prod.user@pumpmaster.com"),
        ],
    )
    def test_environment_credentials(self, factory, env, username):
        assert factory.get_environment_credentials(env)["username"] == username

    def test_unknown_environment(self, factory):
        with pytest.raises(ValueError, match="qa"):
            factory.get_environment_credentials("qa")

    @pytest.mark.parametrize(
        "scenario,key",
        [
            ("login-success", "user"),
            ("login-failure", "expectedError"),
            ("pump-creation", "pump"),
            ("pump-validation", "expectedErrors"),
            ("search-results", "searchTerm"),
            ("filter-results", "filterType"),
        ],
    )
    def test_scenarios(self, factory, scenario, key):
        assert key in factory.get_scenario_data(scenario)

    def test_unknown_scenario_is_empty(self, factory):
        assert factory.get_scenario_data("nope") == {}

    def test_reset_restarts_sequence(self, factory):
        first = factory.create_pump()["name"]
        factory.reset()
        assert factory.create_pump()["name"] == first
