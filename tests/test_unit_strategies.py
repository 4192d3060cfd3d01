import pytest

from showroom.exceptions import UnknownStrategyError
from showroom.models.strategy import CarrierStrategy, EngineStrategy, TowingStrategy


def test_descriptions():
    assert [c.description() for c in CarrierStrategy] == [
        "Good and Driver", "2 people max, and bag", "20 people max",
    ]
    assert [e.description() for e in EngineStrategy] == ["Small", "Medium", "Extra Large"]
    assert [t.description() for t in TowingStrategy] == ["Can Tow", "Cannot Tow"]


def test_family_specific_accessors():
    assert CarrierStrategy.MAX_20_PEOPLE.get_carrier_description() == "20 people max"
    assert EngineStrategy.MEDIUM.get_engine_description() == "Medium"
    assert TowingStrategy.CANNOT_TOW.get_towing_description() == "Cannot Tow"


def test_from_name_accepts_member_names_and_descriptions():
    assert EngineStrategy.from_name("EXTRA_LARGE") is EngineStrategy.EXTRA_LARGE
    assert EngineStrategy.from_name("extra-large") is EngineStrategy.EXTRA_LARGE
    assert EngineStrategy.from_name("Extra Large") is EngineStrategy.EXTRA_LARGE
    assert CarrierStrategy.from_name("2 people max, and bag") is CarrierStrategy.MAX_2_PEOPLE
    assert TowingStrategy.from_name(TowingStrategy.CAN_TOW) is TowingStrategy.CAN_TOW


def test_from_name_rejects_unknown_and_cross_family_names():
    with pytest.raises(UnknownStrategyError):
        EngineStrategy.from_name("Huge")
    with pytest.raises(UnknownStrategyError):
        # a towing name is not an engine
        EngineStrategy.from_name("CAN_TOW")


@pytest.mark.parametrize("name", [5, None, 1.5, ["SMALL"]])
def test_from_name_rejects_non_string_names(name):
    with pytest.raises(UnknownStrategyError):
        EngineStrategy.from_name(name)
