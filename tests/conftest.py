import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from showroom import create_app
from showroom.models.strategy import CarrierStrategy, EngineStrategy, TowingStrategy
from showroom.models.vehicle import MotorBike

EXPECTED_DEMO_OUTPUT = [
    "Adding feature: Small MotorBike with Good and Driver, Sound System",
    "Adding feature: Medium Light Motor Vehicle with 2 people max, and bag, WiFi",
    "Adding feature: Extra Large Heavy Motor Vehicle with 20 people max, Assist Camera",
    "Technician updated about Small MotorBike with Good and Driver",
    "Technician updated about Medium Light Motor Vehicle with 2 people max, and bag",
    "Technician updated about Extra Large Heavy Motor Vehicle with 20 people max",
]


@pytest.fixture
def motorbike():
    """A fresh motorbike per test so observer lists never leak between tests."""
    return MotorBike(
        carrier=CarrierStrategy.GOOD_AND_DRIVER,
        engine=EngineStrategy.SMALL,
        towing=TowingStrategy.CAN_TOW,
    )


@pytest.fixture
def app():
    app = create_app()
    app.config.update(TESTING=True)
    yield app


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
