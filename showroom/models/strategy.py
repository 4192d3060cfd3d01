from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownStrategyError


class _DescribedStrategy(str, Enum):
    """
    Base for the strategy families. Each member *is* its description text,
    so members are immutable, stateless and safe to share between vehicles.
    """

    def description(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str):
        """
        Resolve a member by member name ("EXTRA_LARGE", "extra-large") or by
        its description ("Extra Large"). Raise UnknownStrategyError otherwise.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnknownStrategyError(f"Error: unknown {cls.__name__} {name!r}")
        raw = name.strip()
        key = raw.upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        for member in cls:
            if member.value.lower() == raw.lower():
                return member
        raise UnknownStrategyError(f"Error: unknown {cls.__name__} '{name}'")


class CarrierStrategy(_DescribedStrategy):
    """Passenger/cargo capacity of a vehicle."""
    GOOD_AND_DRIVER = "Good and Driver"
    MAX_2_PEOPLE = "2 people max, and bag"
    MAX_20_PEOPLE = "20 people max"

    def get_carrier_description(self) -> str:
        return self.description()


class EngineStrategy(_DescribedStrategy):
    """Engine size category."""
    SMALL = "Small"
    MEDIUM = "Medium"
    EXTRA_LARGE = "Extra Large"

    def get_engine_description(self) -> str:
        return self.description()


class TowingStrategy(_DescribedStrategy):
    """Whether a vehicle can tow. Stored on vehicles but not rendered."""
    CAN_TOW = "Can Tow"
    CANNOT_TOW = "Cannot Tow"

    def get_towing_description(self) -> str:
        return self.description()
