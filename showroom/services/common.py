"""Shared service helpers and factories."""

from typing import Dict, Optional, Type

from showroom.exceptions import InvalidVehicleConfigError, UnknownVehicleKindError
from showroom.models.strategy import CarrierStrategy, EngineStrategy, TowingStrategy
from showroom.models.technician import Technician
from showroom.models.vehicle import VehicleBase, MotorBike, LightMotorVehicle, HeavyMotorVehicle
from showroom.utils.constants import VehicleKind

VEHICLE_KINDS: Dict[str, Type[VehicleBase]] = {
    VehicleKind.MOTORBIKE: MotorBike,
    VehicleKind.LIGHT: LightMotorVehicle,
    VehicleKind.HEAVY: HeavyMotorVehicle,
}


def norm_kind(value: Optional[str]) -> str:
    """Normalize vehicle kind to lowercase; return '' for None or non-strings."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: dict) -> VehicleBase:
    """
    Map a fleet entry to a rich vehicle object.
    Missing strategies are passed through as None so the vehicle itself
    reports them as an invalid configuration.
    """
    kind = norm_kind(d.get("kind"))
    cls = VEHICLE_KINDS.get(kind)
    if cls is None:
        raise UnknownVehicleKindError(f"Error: unknown vehicle kind '{d.get('kind')}'")

    def _resolve(family, key):
        name = d.get(key)
        return family.from_name(name) if name is not None else None

    return cls(
        carrier=_resolve(CarrierStrategy, "carrier"),
        engine=_resolve(EngineStrategy, "engine"),
        towing=_resolve(TowingStrategy, "towing"),
    )


def technician_from_dict(d: dict) -> Technician:
    """Map a fleet entry's technician rate to a Technician (rate defaults to 0)."""
    raw = d.get("technician_rate")
    if raw is None:
        return Technician(hourly_rate=0.0)
    rate = to_float_safe(raw)
    if rate is None:
        raise InvalidVehicleConfigError(f"Error: invalid technician rate {raw!r}")
    return Technician(hourly_rate=rate)
