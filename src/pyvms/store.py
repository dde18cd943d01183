"""File-backed vehicle inventory.

The store keeps every vehicle in an ordered in-memory list and rewrites
the whole data file after each mutation.  Records handed in or out are
copies, so callers edit a vehicle and then pass it back to :meth:`update`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyvms._constants import DEFAULT_DATA_FILE, EMPTY_DOCUMENT
from pyvms.codec import decode_vehicles, encode_vehicles
from pyvms.exceptions import VmsStorageError
from pyvms.models.vehicle import Vehicle
from pyvms.storage import DataFile

_logger = logging.getLogger(__name__)


class VehicleStore:
    """Ordered, single-writer inventory persisted as a JSON array.

    Ids are expected to be unique but this is not guaranteed by the id
    generator.  :meth:`add` with an id that is already stored replaces
    that record instead of inserting a second one.

    Failed writes never raise: the mutation is rolled back in memory, the
    error is logged and the operation returns ``False``.
    """

    def __init__(self, path: str | Path = DEFAULT_DATA_FILE, *, load: bool = True) -> None:
        self._file = DataFile(path)
        self._vehicles: list[Vehicle] = []
        try:
            self._file.ensure_exists()
        except VmsStorageError as err:
            _logger.error("Data file unavailable: %s", err)
        if load:
            self.reload()

    @property
    def path(self) -> Path:
        return self._file.path

    def __len__(self) -> int:
        return len(self._vehicles)

    def reload(self) -> bool:
        """Replace the in-memory list with the contents of the data file.

        Returns ``False`` (keeping the current list) when the file cannot
        be read.  A blank file is re-initialised to ``[]``.
        """
        try:
            text = self._file.read_text()
        except VmsStorageError as err:
            _logger.error("Failed to load inventory: %s", err)
            return False

        if not text.strip():
            _logger.info("Data file %s is empty, initialising with an empty array", self.path)
            try:
                self._file.write_text(EMPTY_DOCUMENT)
            except VmsStorageError as err:
                _logger.error("Failed to initialise inventory: %s", err)
            self._vehicles = []
            return True

        self._vehicles = list(decode_vehicles(text))
        _logger.info("Loaded %d vehicles from %s", len(self._vehicles), self.path)
        return True

    def _index_of(self, vehicle_id: str) -> int | None:
        for index, vehicle in enumerate(self._vehicles):
            if vehicle.id == vehicle_id:
                return index
        return None

    def _persist(self) -> bool:
        try:
            self._file.write_text(encode_vehicles(self._vehicles))
        except VmsStorageError as err:
            _logger.error("Failed to save inventory: %s", err)
            return False
        _logger.debug("Saved %d vehicles to %s", len(self._vehicles), self.path)
        return True

    def _replace(self, index: int, vehicle: Vehicle) -> bool:
        previous = self._vehicles[index]
        if previous.vehicle_type != vehicle.vehicle_type:
            _logger.warning(
                "Vehicle %s is a %s and cannot become a %s",
                vehicle.id,
                previous.vehicle_type,
                vehicle.vehicle_type,
            )
            return False
        self._vehicles[index] = vehicle.model_copy(deep=True)
        if not self._persist():
            self._vehicles[index] = previous
            return False
        return True

    def add(self, vehicle: Vehicle) -> bool:
        """Append *vehicle* and persist the inventory.

        A vehicle whose id is already stored replaces the stored record
        in place (same variant only).
        """
        index = self._index_of(vehicle.id)
        if index is not None:
            _logger.warning("Vehicle id %s already exists, replacing the stored record", vehicle.id)
            return self._replace(index, vehicle)

        self._vehicles.append(vehicle.model_copy(deep=True))
        if not self._persist():
            self._vehicles.pop()
            return False
        return True

    def find_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Return a copy of the vehicle with *vehicle_id*, or ``None``."""
        index = self._index_of(vehicle_id)
        if index is None:
            return None
        return self._vehicles[index].model_copy(deep=True)

    def update(self, vehicle: Vehicle) -> bool:
        """Replace the stored vehicle with the same id and persist.

        Returns ``False`` if no vehicle has that id or the variant differs.
        """
        index = self._index_of(vehicle.id)
        if index is None:
            _logger.info("Cannot update vehicle %s: not found", vehicle.id)
            return False
        return self._replace(index, vehicle)

    def delete(self, vehicle_id: str) -> bool:
        """Remove the vehicle with *vehicle_id* and persist."""
        index = self._index_of(vehicle_id)
        if index is None:
            _logger.info("Cannot delete vehicle %s: not found", vehicle_id)
            return False
        removed = self._vehicles.pop(index)
        if not self._persist():
            self._vehicles.insert(index, removed)
            return False
        return True

    def list_all(self) -> list[Vehicle]:
        """Return copies of every vehicle in insertion order."""
        return [vehicle.model_copy(deep=True) for vehicle in self._vehicles]

    def save_all(self) -> bool:
        """Rewrite the data file from memory."""
        return self._persist()
