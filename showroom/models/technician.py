from dataclasses import dataclass
from typing import Protocol

from ..utils.constants import TECHNICIAN_UPDATE_PREFIX


class VehicleObserver(Protocol):
    """What a vehicle needs from something attached via add_observer()."""

    def update(self, vehicle) -> None:
        ...


@dataclass(eq=False)
class Technician:
    """
    Observer that reports every vehicle update it receives.
    `hourly_rate` is carried for the record; no behaviour depends on it.
    """
    hourly_rate: float

    def update(self, vehicle) -> None:
        print(TECHNICIAN_UPDATE_PREFIX + vehicle.get_description())
