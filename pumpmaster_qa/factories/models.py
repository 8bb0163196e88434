"""
Record factories for pumps and users.

These build plain dicts with the backend's camelCase keys, ready to send
as request bodies or compare against responses. Uniqueness comes from the
`seq` and `run_tag` parameters, which TestDataFactory fills from its
injected RunSequence.
"""
import factory
from faker import Faker

from ..api.models import PumpStatus, PumpType
from .base import generate_run_tag

fake = Faker()

ORIGIN_LATITUDE = 40.7128
ORIGIN_LONGITUDE = -74.006
COORDINATE_JITTER = 0.05


def _jitter(origin: float) -> float:
    return round(origin + fake.random.uniform(-COORDINATE_JITTER, COORDINATE_JITTER), 6)


class PumpFactory(factory.DictFactory):
    """Factory for pump request bodies."""

    name = factory.LazyAttribute(lambda o: f"Test Pump {o.run_tag}-{o.seq}")
    type = factory.Faker("random_element", elements=[t.value for t in PumpType])
    area = factory.LazyAttribute(
        lambda o: f"Building {chr(65 + o.seq % 26)} - Room {100 + o.seq}"
    )
    latitude = factory.LazyFunction(lambda: _jitter(ORIGIN_LATITUDE))
    longitude = factory.LazyFunction(lambda: _jitter(ORIGIN_LONGITUDE))
    flowRate = factory.LazyFunction(lambda: f"{fake.random_int(min=500, max=5499)} GPM")
    offset = factory.Faker("random_int", min=0, max=9)
    currentPressure = factory.Faker("random_int", min=100, max=199)
    minPressure = factory.Faker("random_int", min=50, max=99)
    maxPressure = factory.Faker("random_int", min=200, max=299)
    status = factory.Faker("random_element", elements=[s.value for s in PumpStatus])

    class Params:
        """Parameters for naming and for pumps of a specific type or status."""

        seq = factory.Faker("random_int", min=1, max=99999)
        run_tag = factory.LazyFunction(generate_run_tag)

        centrifugal = factory.Trait(type=PumpType.CENTRIFUGAL.value)
        submersible = factory.Trait(type=PumpType.SUBMERSIBLE.value)
        positive_displacement = factory.Trait(type=PumpType.POSITIVE_DISPLACEMENT.value)
        turbine = factory.Trait(type=PumpType.TURBINE.value)
        active = factory.Trait(status=PumpStatus.ACTIVE.value)
        inactive = factory.Trait(status=PumpStatus.INACTIVE.value)
        maintenance = factory.Trait(status=PumpStatus.MAINTENANCE.value)
        decommissioned = factory.Trait(status=PumpStatus.DECOMMISSIONED.value)


class UserFactory(factory.DictFactory):
    """Factory for login users."""

    username = factory.LazyAttribute(lambda o: f"testuser{o.seq}@pumpmaster.com")
    password = "Test@123"
    email = factory.SelfAttribute("username")
    tenantId = factory.LazyAttribute(lambda o: f"tenant-{o.run_tag}-{o.seq}")
    role = "user"

    class Params:
        seq = factory.Faker("random_int", min=1, max=99999)
        run_tag = factory.LazyFunction(generate_run_tag)

        admin = factory.Trait(
            username="admin@pumpmaster.com",
            role="admin",
        )
        viewer = factory.Trait(
            username="viewer@pumpmaster.com",
            role="viewer",
        )
