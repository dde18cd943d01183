"""Parse the inventory document back into vehicles."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pyvms.codec._scanner import parse_object, split_document
from pyvms.exceptions import VmsDocumentError, VmsRecordError
from pyvms.models.vehicle import VEHICLE_CLASSES, AnyVehicle, VehicleType

_logger = logging.getLogger(__name__)


def vehicle_from_fields(fields: Mapping[str, Any]) -> AnyVehicle:
    """Build the variant named by ``fields["type"]``.

    Missing or mistyped fields fall back to their defaults and a missing
    id is generated.

    Raises
    ------
    VmsRecordError
        If ``type`` is missing or not one of the known labels.
    """
    label = fields.get("type")
    if label is None:
        raise VmsRecordError("vehicle entry has no type")
    try:
        vehicle_type = VehicleType(label)
    except ValueError:
        raise VmsRecordError(f"unknown vehicle type {label!r}") from None

    try:
        return VEHICLE_CLASSES[vehicle_type].model_validate(dict(fields))
    except ValidationError as err:
        raise VmsRecordError(f"invalid {vehicle_type} entry: {err}") from err


def decode_vehicle(entry: str) -> AnyVehicle:
    """Decode a single ``{...}`` entry. Raises :class:`VmsRecordError`."""
    return vehicle_from_fields(parse_object(entry))


def decode_vehicles(text: str) -> list[AnyVehicle]:
    """Decode an inventory document.

    A document that is not an array yields an empty list.  Entries that
    cannot be decoded are logged and skipped; the remaining entries are
    still returned in document order.
    """
    try:
        entries = split_document(text)
    except VmsDocumentError as err:
        _logger.error("Ignoring inventory document: %s", err)
        return []

    vehicles: list[AnyVehicle] = []
    for index, entry in enumerate(entries):
        try:
            vehicles.append(decode_vehicle(entry))
        except VmsRecordError as err:
            _logger.warning("Skipping inventory entry %d: %s", index, err)
    _logger.debug("Decoded %d of %d inventory entries", len(vehicles), len(entries))
    return vehicles
