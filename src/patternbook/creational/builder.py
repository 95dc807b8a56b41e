"""
Builder
=======

Fluent, step-by-step construction of an immutable vehicle.
"""

from dataclasses import dataclass
from typing import Optional

from patternbook.errors import ValidationError


@dataclass(frozen=True, slots=True)
class CustomVehicle:
    """
    Vehicle assembled by VehicleBuilder.

    Attributes:
        wheels: Number of wheels
        color: Paint colour
        engine: Engine description
    """

    wheels: int
    color: Optional[str]
    engine: Optional[str]

    def __repr__(self) -> str:
        return f"Vehicle(wheels={self.wheels}, color={self.color}, engine={self.engine})"


class VehicleBuilder:
    """
    Collects vehicle parts one call at a time.

    Example:
        car = VehicleBuilder().set_wheels(4).set_color("Red").set_engine("V8").build()
    """

    def __init__(self) -> None:
        self._wheels = 0
        self._color: Optional[str] = None
        self._engine: Optional[str] = None

    def set_wheels(self, wheels: int) -> "VehicleBuilder":
        if wheels < 0:
            raise ValidationError(f"wheels cannot be negative: {wheels}")
        self._wheels = wheels
        return self

    def set_color(self, color: str) -> "VehicleBuilder":
        self._color = color
        return self

    def set_engine(self, engine: str) -> "VehicleBuilder":
        self._engine = engine
        return self

    def build(self) -> CustomVehicle:
        return CustomVehicle(wheels=self._wheels, color=self._color, engine=self._engine)


def main(settings=None) -> None:
    car = (
        VehicleBuilder()
        .set_wheels(4)
        .set_color("Red")
        .set_engine("V8")
        .build()
    )
    print(car)


if __name__ == "__main__":
    main()
