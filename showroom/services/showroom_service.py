from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Type

from showroom.models.feature import VehicleFeature, feature_for
from showroom.models.technician import Technician
from showroom.models.vehicle import VehicleBase
from showroom.services.common import vehicle_from_dict, technician_from_dict

log = logging.getLogger(__name__)


@dataclass
class ShowroomEntry:
    """One vehicle on the floor with its technician and its showcased feature."""
    vehicle: VehicleBase
    technician: Technician
    feature_cls: Type[VehicleFeature]


class ShowroomService:
    """Builds the fleet and drives the one-pass demonstration."""

    @staticmethod
    def build_fleet(entries: Iterable[dict]) -> List[ShowroomEntry]:
        """
        Build vehicles and technicians from fleet dicts, in the given order.
        Any bad entry raises before a single line is printed.
        """
        fleet = []
        for d in entries:
            fleet.append(ShowroomEntry(
                vehicle=vehicle_from_dict(d),
                technician=technician_from_dict(d),
                feature_cls=feature_for(d.get("feature")),
            ))
        log.debug("Built fleet of %d vehicles", len(fleet))
        return fleet

    @staticmethod
    def run(fleet: List[ShowroomEntry]) -> None:
        """Attach technicians, show one feature per vehicle, then notify."""
        # 1. Each technician watches its own vehicle
        for entry in fleet:
            entry.vehicle.add_observer(entry.technician)

        # 2. Features are printed, not kept on the vehicle
        for entry in fleet:
            entry.vehicle.add_feature(entry.feature_cls(entry.vehicle))

        # 3. One line per attached technician
        for entry in fleet:
            entry.vehicle.notify_observers()

    @staticmethod
    def run_fleet(entries: Iterable[dict]) -> None:
        """Build the fleet from config entries and run the demo once."""
        ShowroomService.run(ShowroomService.build_fleet(entries))
