"""Serialize vehicles to the inventory document."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

from pyvms.models.vehicle import COMMON_FIELDS, Vehicle, variant_fields

_ESCAPE_TABLE = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\b": "\\b",
        "\f": "\\f",
    }
)


def escape_string(value: str) -> str:
    """Escape backslashes, quotes and the common control characters.

    Everything else, including non-ASCII text, is written as is.
    """
    return value.translate(_ESCAPE_TABLE)


def encode_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value) if math.isfinite(value) else "null"
    return f'"{escape_string(str(value))}"'


def persisted_items(vehicle: Vehicle) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs in the fixed document order.

    Common fields first, then ``type``, then the variant fields.
    """
    fields = type(vehicle).model_fields
    for name in (*COMMON_FIELDS, "type", *variant_fields(type(vehicle))):
        yield fields[name].alias or name, getattr(vehicle, name)


def encode_vehicle(vehicle: Vehicle) -> str:
    body = ",".join(f'"{escape_string(key)}":{encode_value(value)}' for key, value in persisted_items(vehicle))
    return "{" + body + "}"


def encode_vehicles(vehicles: Iterable[Vehicle]) -> str:
    """Return the compact JSON array text for *vehicles*.

    An empty iterable encodes as ``[]``.
    """
    return "[" + ",".join(encode_vehicle(vehicle) for vehicle in vehicles) + "]"
