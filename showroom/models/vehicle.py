from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, List, TYPE_CHECKING

from ..exceptions import InvalidVehicleConfigError
from ..utils.constants import ADDING_FEATURE_PREFIX, KindLabel
from .strategy import CarrierStrategy, EngineStrategy, TowingStrategy

if TYPE_CHECKING:
    from .feature import VehicleFeature
    from .technician import VehicleObserver

log = logging.getLogger(__name__)


@dataclass(eq=False)
class VehicleBase:
    """
    Base vehicle model, composed of one carrier, one engine and one towing
    strategy. Subclasses only change the kind label used in the description.

    The strategies are set once here and never reassigned; `observers` only
    ever grows by append.
    """
    carrier: CarrierStrategy
    engine: EngineStrategy
    towing: TowingStrategy  # stored, not part of the description
    observers: List["VehicleObserver"] = field(default_factory=list, repr=False)

    kind_label: ClassVar[str] = "Vehicle"

    def __post_init__(self) -> None:
        for attr, family in (
            ("carrier", CarrierStrategy),
            ("engine", EngineStrategy),
            ("towing", TowingStrategy),
        ):
            value = getattr(self, attr)
            if value is None:
                raise InvalidVehicleConfigError(
                    f"Error: {type(self).__name__} is missing its {attr} strategy"
                )
            if not isinstance(value, family):
                raise InvalidVehicleConfigError(
                    f"Error: {type(self).__name__}.{attr} must be a {family.__name__}, "
                    f"got {value!r}"
                )

    def get_description(self) -> str:
        return f"{self.engine.description()} {self.kind_label} with {self.carrier.description()}"

    def towing_description(self) -> str:
        return self.towing.description()

    # ---------- observers ----------
    def add_observer(self, observer: "VehicleObserver") -> None:
        """Attach an observer. Duplicates are allowed and notified twice."""
        self.observers.append(observer)
        log.debug("Attached %r to %s", observer, self.kind_label)

    def notify_observers(self) -> None:
        """Call update(self) on every observer, in attachment order."""
        # snapshot: observers attached during this pass wait for the next one
        for observer in list(self.observers):
            observer.update(self)

    # ---------- features ----------
    def add_feature(self, feature: "VehicleFeature") -> str:
        """
        Print the decorated description of `feature`.

        The feature is not stored on the vehicle: get_description() is the
        same before and after this call.
        """
        line = ADDING_FEATURE_PREFIX + feature.get_description()
        print(line)
        return line


class MotorBike(VehicleBase):
    kind_label = KindLabel.MOTORBIKE


class LightMotorVehicle(VehicleBase):
    kind_label = KindLabel.LIGHT


class HeavyMotorVehicle(VehicleBase):
    kind_label = KindLabel.HEAVY
