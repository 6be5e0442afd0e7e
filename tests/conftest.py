from datetime import datetime, timezone

import pytest

from core.database import create_schema, open_in_memory
from services import commands
from services.patient_service import PatientRepository
from services.platform_service import DesktopCapabilities

FROZEN_NOW = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


def frozen_clock():
    return FROZEN_NOW


@pytest.fixture
def engine():
    engine = open_in_memory()
    assert create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    return PatientRepository(engine, clock=frozen_clock, operator_name="Front Desk")


@pytest.fixture
def installed_repository(repository):
    """Install the test repository behind the command surface."""
    commands.set_repository(repository)
    commands.set_capabilities(DesktopCapabilities())
    yield repository
    commands.set_repository(None)
    commands.set_capabilities(None)


@pytest.fixture
def make_patient():
    from models.patient import Patient

    def _make(record_number="PT002026000001", name="John Doe", **overrides):
        fields = {
            "record_number": record_number,
            "name": name,
            "age": 45,
            "address": "123 Main St, Springfield",
            "phone_number": "+1-555-0123",
            "initial_diagnosis": "Hypertension",
        }
        fields.update(overrides)
        return Patient(**fields)

    return _make
