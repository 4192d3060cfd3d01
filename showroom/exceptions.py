"""
Custom exception classes for the vehicle showroom.

These exceptions are raised while a vehicle or a fleet entry is being built,
never later at description time, so a bad configuration fails early.
"""


class InvalidVehicleConfigError(Exception):
    """Raised when a vehicle is built without one of its three strategies."""

    def __init__(self, message: str = "Error: invalid vehicle configuration") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownStrategyError(Exception):
    """Raised when a carrier/engine/towing name does not match any strategy."""

    def __init__(self, message: str = "Error: unknown strategy") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownVehicleKindError(Exception):
    """Raised when a fleet entry names a vehicle kind that does not exist."""

    def __init__(self, message: str = "Error: unknown vehicle kind") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownFeatureError(Exception):
    """Raised when a fleet entry names an optional feature that does not exist."""

    def __init__(self, message: str = "Error: unknown feature") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
