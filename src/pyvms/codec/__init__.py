"""Inventory document codec.

Hand-written, dependency-free conversion between vehicles and the JSON
array text stored in the data file.
"""

from pyvms.codec.reader import decode_vehicle, decode_vehicles, vehicle_from_fields
from pyvms.codec.writer import encode_value, encode_vehicle, encode_vehicles, escape_string

__all__ = [
    "decode_vehicle",
    "decode_vehicles",
    "encode_value",
    "encode_vehicle",
    "encode_vehicles",
    "escape_string",
    "vehicle_from_fields",
]
