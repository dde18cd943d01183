"""pyvms - Console vehicle inventory manager with a JSON file store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvms")
except PackageNotFoundError:
    __version__ = "0+local"
from pyvms.codec import decode_vehicles, encode_vehicles
from pyvms.config import VmsConfig
from pyvms.exceptions import (
    VmsCodecError,
    VmsConfigError,
    VmsDocumentError,
    VmsError,
    VmsRecordError,
    VmsStorageError,
)
from pyvms.models import (
    AnyVehicle,
    Car,
    Motorcycle,
    Truck,
    Vehicle,
    VehicleType,
)
from pyvms.store import VehicleStore

__all__ = [
    "__version__",
    "AnyVehicle",
    "Car",
    "Motorcycle",
    "Truck",
    "Vehicle",
    "VehicleStore",
    "VehicleType",
    "VmsCodecError",
    "VmsConfig",
    "VmsConfigError",
    "VmsDocumentError",
    "VmsError",
    "VmsRecordError",
    "VmsStorageError",
    "decode_vehicles",
    "encode_vehicles",
]
