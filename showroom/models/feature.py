from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Protocol, Type

from ..exceptions import UnknownFeatureError
from ..utils.constants import FeatureName, FeatureSuffix


class Describable(Protocol):
    """Anything a feature can wrap: a vehicle or another feature."""

    def get_description(self) -> str:
        ...


@dataclass(frozen=True)
class VehicleFeature:
    """
    Optional add-on wrapped around a vehicle (or around another feature).
    The description is computed on each call from the wrapped object, so a
    chain of features appends its suffixes in wrapping order.
    """
    wrapped: Describable

    suffix: ClassVar[str] = ""

    def get_description(self) -> str:
        return self.wrapped.get_description() + self.suffix


class SoundSystemFeature(VehicleFeature):
    suffix = FeatureSuffix.SOUND_SYSTEM


class WiFiFeature(VehicleFeature):
    suffix = FeatureSuffix.WIFI


class AssistCameraFeature(VehicleFeature):
    suffix = FeatureSuffix.ASSIST_CAMERA


FEATURES: Dict[str, Type[VehicleFeature]] = {
    FeatureName.SOUND_SYSTEM: SoundSystemFeature,
    FeatureName.WIFI: WiFiFeature,
    FeatureName.ASSIST_CAMERA: AssistCameraFeature,
}


def feature_for(name: str) -> Type[VehicleFeature]:
    """Look up a feature class by its config name ("wifi", "Assist Camera", ...)."""
    if not isinstance(name, str):
        raise UnknownFeatureError(f"Error: unknown feature {name!r}")
    key = name.strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return FEATURES[key]
    except KeyError:
        raise UnknownFeatureError(f"Error: unknown feature '{name}'") from None
