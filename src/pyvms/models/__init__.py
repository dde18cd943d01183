"""Data models for inventory records."""

from pyvms.models._base import VmsBaseModel
from pyvms.models.vehicle import (
    COMMON_FIELDS,
    VEHICLE_CLASSES,
    AnyVehicle,
    Car,
    Motorcycle,
    Truck,
    Vehicle,
    VehicleType,
    variant_fields,
    yes_no,
)

__all__ = [
    "COMMON_FIELDS",
    "VEHICLE_CLASSES",
    "AnyVehicle",
    "Car",
    "Motorcycle",
    "Truck",
    "Vehicle",
    "VehicleType",
    "VmsBaseModel",
    "variant_fields",
    "yes_no",
]
