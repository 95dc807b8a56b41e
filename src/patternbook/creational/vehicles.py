"""
Vehicle Factory and Prototype Registry
======================================

Two ways of handing out vehicles by kind.

    create_vehicle(kind)        builds a fresh object from its class
    VehicleRegistry.get_vehicle copies a pre-configured prototype

Both take the closed VehicleKind enum (or its string value) and reject
anything else with ValidationError.

Example:
    registry = VehicleRegistry()
    car = registry.get_vehicle("car")
    assert car is not registry.get_vehicle("car")
"""

import copy
import logging
from enum import Enum
from typing import Dict, Optional, Type, Union

from patternbook.errors import ValidationError, parse_choice


logger = logging.getLogger(__name__)


class VehicleKind(str, Enum):
    """Vehicles the factory and registry know about."""

    CAR = "car"
    BIKE = "bike"


class Vehicle:
    """Base vehicle; subclasses describe how they are driven."""

    def __init__(self, color: str = "White") -> None:
        self.color = color

    def drive(self) -> str:
        raise NotImplementedError

    def clone(self) -> "Vehicle":
        """Return an independent copy of this vehicle."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.color})"


class Car(Vehicle):
    def drive(self) -> str:
        return "Driving a Car"


class Bike(Vehicle):
    def drive(self) -> str:
        return "Riding a Bike"


VEHICLES: Dict[VehicleKind, Type[Vehicle]] = {
    VehicleKind.CAR: Car,
    VehicleKind.BIKE: Bike,
}


def create_vehicle(kind: Union[VehicleKind, str]) -> Vehicle:
    """
    Build a new vehicle of the given kind.

    Raises:
        ValidationError: If kind is not a known vehicle type.
    """
    return VEHICLES[parse_choice(VehicleKind, kind, "vehicle type")]()


class VehicleRegistry:
    """
    Prototype registry.

    Holds one configured prototype per kind and hands out copies.
    Each registry is an ordinary object; create one and pass it to the
    code that needs it.
    """

    def __init__(self, prototypes: Optional[Dict[VehicleKind, Vehicle]] = None) -> None:
        if prototypes is None:
            prototypes = {kind: cls() for kind, cls in VEHICLES.items()}
        self._prototypes: Dict[VehicleKind, Vehicle] = dict(prototypes)

    def register(self, kind: Union[VehicleKind, str], prototype: Vehicle) -> None:
        """Replace the prototype for a kind."""
        kind = parse_choice(VehicleKind, kind, "vehicle type")
        self._prototypes[kind] = prototype
        logger.debug(f"Registered prototype for {kind.value}: {prototype!r}")

    def get_vehicle(self, kind: Union[VehicleKind, str]) -> Vehicle:
        """
        Get a copy of the prototype for a kind.

        Raises:
            ValidationError: If kind is unknown or has no prototype.
        """
        kind = parse_choice(VehicleKind, kind, "vehicle type")
        prototype = self._prototypes.get(kind)
        if prototype is None:
            raise ValidationError(
                f"No prototype registered for {kind.value}"
            )
        return prototype.clone()


def main_factory(settings=None) -> None:
    print(create_vehicle("car").drive())


def main_prototype(settings=None) -> None:
    registry = VehicleRegistry()
    v1 = registry.get_vehicle("car")
    v2 = registry.get_vehicle("car")

    print(v1.drive())
    print(v2.drive())
    print(f"Different Objects? {v1 is not v2}")


if __name__ == "__main__":
    main_factory()
    main_prototype()
