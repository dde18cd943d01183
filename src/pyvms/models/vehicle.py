"""Vehicle record models.

Three variants share the common :class:`Vehicle` fields and are told
apart by the ``type`` discriminant persisted with every record.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import Field, field_validator

from pyvms._ids import new_vehicle_id
from pyvms.models._base import VmsBaseModel
from pyvms.normalize import or_default, safe_bool, safe_float, safe_int, safe_str


class VehicleType(enum.StrEnum):
    """Persisted ``type`` labels."""

    CAR = "Car"
    TRUCK = "Truck"
    MOTORCYCLE = "Motorcycle"


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class Vehicle(VmsBaseModel):
    """Fields common to every vehicle.

    Not instantiated directly; use :class:`Car`, :class:`Truck` or
    :class:`Motorcycle`.
    """

    VEHICLE_TYPE: ClassVar[VehicleType]

    id: str = Field(default_factory=new_vehicle_id, frozen=True, title="ID")
    """Inventory id. Assigned once, never changed."""
    make: str = Field(default="", title="Make")
    model: str = Field(default="", title="Model")
    year: int = Field(default=0, title="Year")
    color: str = Field(default="", title="Color")
    price: float = Field(default=0.0, title="Price")
    """Asking price. Non-negative by convention, not enforced."""

    @property
    def vehicle_type(self) -> VehicleType:
        return self.VEHICLE_TYPE

    def describe(self) -> str:
        """Return a one-line human readable summary."""
        return f"{self.id}: {self.make} {self.model} ({self.year}) - ${self.price:.2f}{self._details()}"

    def _details(self) -> str:
        return ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        text = safe_str(value)
        if text is None or not text.strip():
            return new_vehicle_id()
        return text

    @field_validator("make", "model", "color", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return or_default(safe_str(value), "")

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return or_default(safe_int(value), 0)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_float(cls, value: Any) -> float:
        return or_default(safe_float(value), 0.0)


class Car(Vehicle):
    """A passenger car."""

    VEHICLE_TYPE: ClassVar[VehicleType] = VehicleType.CAR

    type: Literal["Car"] = Field(default="Car", frozen=True)
    num_doors: int = Field(default=0, title="Number of doors")
    transmission_type: str = Field(default="", title="Transmission type")
    engine_size: float = Field(default=0.0, title="Engine size (L)")
    """Engine displacement in litres."""

    def _details(self) -> str:
        return f", {self.num_doors} doors, {self.transmission_type} transmission, {self.engine_size:.1f}L engine"

    @field_validator("num_doors", mode="before")
    @classmethod
    def _coerce_car_int(cls, value: Any) -> int:
        return or_default(safe_int(value), 0)

    @field_validator("transmission_type", mode="before")
    @classmethod
    def _coerce_car_text(cls, value: Any) -> str:
        return or_default(safe_str(value), "")

    @field_validator("engine_size", mode="before")
    @classmethod
    def _coerce_car_float(cls, value: Any) -> float:
        return or_default(safe_float(value), 0.0)


class Truck(Vehicle):
    """A truck."""

    VEHICLE_TYPE: ClassVar[VehicleType] = VehicleType.TRUCK

    type: Literal["Truck"] = Field(default="Truck", frozen=True)
    cargo_capacity: float = Field(default=0.0, title="Cargo capacity")
    drive_type: str = Field(default="", title="Drive type")
    has_tow_package: bool = Field(default=False, title="Has tow package")

    def _details(self) -> str:
        return (
            f", {self.cargo_capacity:.1f} cargo capacity, {self.drive_type} drive, "
            f"Tow package: {yes_no(self.has_tow_package)}"
        )

    @field_validator("cargo_capacity", mode="before")
    @classmethod
    def _coerce_truck_float(cls, value: Any) -> float:
        return or_default(safe_float(value), 0.0)

    @field_validator("drive_type", mode="before")
    @classmethod
    def _coerce_truck_text(cls, value: Any) -> str:
        return or_default(safe_str(value), "")

    @field_validator("has_tow_package", mode="before")
    @classmethod
    def _coerce_truck_bool(cls, value: Any) -> bool:
        return or_default(safe_bool(value), False)


class Motorcycle(Vehicle):
    """A motorcycle."""

    VEHICLE_TYPE: ClassVar[VehicleType] = VehicleType.MOTORCYCLE

    type: Literal["Motorcycle"] = Field(default="Motorcycle", frozen=True)
    bike_type: str = Field(default="", title="Bike type")
    engine_cc: int = Field(default=0, alias="engineCC", title="Engine CC")
    """Engine displacement in cubic centimetres."""
    has_fairing: bool = Field(default=False, title="Has fairing")

    def _details(self) -> str:
        return f", {self.bike_type}, {self.engine_cc}cc engine, Fairing: {yes_no(self.has_fairing)}"

    @field_validator("bike_type", mode="before")
    @classmethod
    def _coerce_bike_text(cls, value: Any) -> str:
        return or_default(safe_str(value), "")

    @field_validator("engine_cc", mode="before")
    @classmethod
    def _coerce_bike_int(cls, value: Any) -> int:
        return or_default(safe_int(value), 0)

    @field_validator("has_fairing", mode="before")
    @classmethod
    def _coerce_bike_bool(cls, value: Any) -> bool:
        return or_default(safe_bool(value), False)


AnyVehicle = Annotated[Car | Truck | Motorcycle, Field(discriminator="type")]
"""Any concrete vehicle, discriminated by ``type``."""

VEHICLE_CLASSES: dict[VehicleType, type[Car] | type[Truck] | type[Motorcycle]] = {
    VehicleType.CAR: Car,
    VehicleType.TRUCK: Truck,
    VehicleType.MOTORCYCLE: Motorcycle,
}

# Fields shared by every variant, in persisted order.
COMMON_FIELDS: tuple[str, ...] = ("id", "make", "model", "year", "color", "price")


def variant_fields(cls: type[Vehicle]) -> tuple[str, ...]:
    """Return the variant-specific field names of *cls*, in persisted order."""
    return tuple(name for name in cls.model_fields if name not in COMMON_FIELDS and name != "type")
