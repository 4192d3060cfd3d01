# showroom/utils/constants.py

"""
Global constants for vehicle kinds, feature suffixes and the default fleet.
These constants are imported by both models and services.
"""


class VehicleKind:
    MOTORBIKE = "motorbike"
    LIGHT = "light"
    HEAVY = "heavy"


class KindLabel:
    MOTORBIKE = "MotorBike"
    LIGHT = "Light Motor Vehicle"
    HEAVY = "Heavy Motor Vehicle"


class FeatureName:
    SOUND_SYSTEM = "sound_system"
    WIFI = "wifi"
    ASSIST_CAMERA = "assist_camera"


class FeatureSuffix:
    SOUND_SYSTEM = ", Sound System"
    WIFI = ", WiFi"
    ASSIST_CAMERA = ", Assist Camera"


# --- Console lines ---
ADDING_FEATURE_PREFIX = "Adding feature: "
TECHNICIAN_UPDATE_PREFIX = "Technician updated about "

# --- Default demo fleet (one technician and one feature per vehicle) ---
DEFAULT_FLEET = [
    {
        "kind": VehicleKind.MOTORBIKE,
        "carrier": "GOOD_AND_DRIVER",
        "engine": "SMALL",
        "towing": "CAN_TOW",
        "technician_rate": 100,
        "feature": FeatureName.SOUND_SYSTEM,
    },
    {
        "kind": VehicleKind.LIGHT,
        "carrier": "MAX_2_PEOPLE",
        "engine": "MEDIUM",
        "towing": "CAN_TOW",
        "technician_rate": 120,
        "feature": FeatureName.WIFI,
    },
    {
        "kind": VehicleKind.HEAVY,
        "carrier": "MAX_20_PEOPLE",
        "engine": "EXTRA_LARGE",
        "towing": "CANNOT_TOW",
        "technician_rate": 140,
        "feature": FeatureName.ASSIST_CAMERA,
    },
]
