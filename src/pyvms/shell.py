"""Interactive console shell for the inventory.

The shell reads answers line by line from the input handle it is given and
writes everything to the given output handle, so it can be driven from a
terminal or from in-memory streams alike.  End of input behaves like
choosing *Exit*.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any, TextIO

from pyvms.models.vehicle import COMMON_FIELDS, VEHICLE_CLASSES, Vehicle, VehicleType, variant_fields, yes_no
from pyvms.store import VehicleStore
from pyvms.table import format_vehicles, group_by_type

_logger = logging.getLogger(__name__)

_CLEAR_SCREEN = "\033[H\033[2J"
_YES_ANSWERS = frozenset({"yes", "y"})

MAIN_MENU: tuple[str, ...] = ("Add vehicle", "View vehicles", "Update vehicle", "Delete vehicle", "Exit")


def parse_answer(raw: str, kind: type) -> Any:
    """Convert a typed answer to the field's type.

    Raises :class:`ValueError` for numbers that do not parse or are not
    finite.
    """
    if kind is bool:
        return raw.strip().lower() in _YES_ANSWERS
    if kind is int:
        return int(raw)
    if kind is float:
        value = float(raw)
        if not math.isfinite(value):
            raise ValueError(f"not a finite number: {raw!r}")
        return value
    return raw


def editable_fields(cls: type[Vehicle]) -> list[tuple[str, str, type]]:
    """Return ``(name, label, kind)`` for every field a user may edit."""
    fields = cls.model_fields
    result: list[tuple[str, str, type]] = []
    for name in (*COMMON_FIELDS[1:], *variant_fields(cls)):
        info = fields[name]
        kind = info.annotation if isinstance(info.annotation, type) else str
        result.append((name, info.title or name, kind))
    return result


def _format_current(value: Any) -> str:
    if isinstance(value, bool):
        return yes_no(value)
    return str(value)


class Shell:
    """Numbered-menu front end over a :class:`VehicleStore`."""

    def __init__(
        self,
        store: VehicleStore,
        stdin: TextIO,
        stdout: TextIO,
        *,
        clear_screen: bool = True,
        pause: bool = True,
    ) -> None:
        self._store = store
        self._stdin = stdin
        self._stdout = stdout
        self._clear_screen = clear_screen
        self._pause_enabled = pause

    # ------------------------------------------------------------------
    # I/O primitives
    # ------------------------------------------------------------------

    def _write(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def _read(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _clear(self) -> None:
        if self._clear_screen:
            self._stdout.write(_CLEAR_SCREEN)

    def _heading(self, title: str) -> None:
        self._write()
        self._write(title)
        self._write("-" * len(title))

    def _pause(self) -> None:
        if self._pause_enabled:
            self._read("Press Enter to continue...")

    def choose(self, title: str, options: Sequence[str]) -> int | None:
        """Show a numbered menu and return the chosen index.

        ``0`` cancels and returns ``None``; anything else that is not a
        listed number re-prompts.
        """
        while True:
            self._heading(title)
            for number, option in enumerate(options, start=1):
                self._write(f"{number}. {option}")
            answer = self._read(f"\nEnter your choice (1-{len(options)}) or 0 to cancel: ")
            try:
                choice = int(answer)
            except ValueError:
                self._write("Please enter a valid number.")
                continue
            if choice == 0:
                return None
            if 1 <= choice <= len(options):
                return choice - 1
            self._write("Invalid choice. Please try again.")

    def _prompt_value(self, label: str, kind: type) -> Any:
        suffix = " (yes/no)" if kind is bool else ""
        while True:
            raw = self._read(f"{label}{suffix}: ")
            try:
                return parse_answer(raw, kind)
            except ValueError:
                self._write(f"Invalid {kind.__name__} value. Please try again.")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run the menu loop until *Exit* or end of input. Returns an exit code."""
        self._clear()
        self._write("Welcome to the Vehicle Management System")
        actions = (self.add_vehicle, self.view_vehicles, self.update_vehicle, self.delete_vehicle)

        while True:
            try:
                choice = self.choose("VEHICLE MANAGEMENT SYSTEM - MENU", MAIN_MENU)
                if choice is None:
                    continue
                if choice == len(actions):
                    break
                actions[choice]()
            except EOFError:
                break
            except Exception as err:  # noqa: BLE001
                _logger.debug("Menu action failed", exc_info=True)
                self._write(f"An error occurred: {err}")

        if not self._store.save_all():
            self._write("Warning: the inventory could not be saved.")
        self._write("Thank you for using the Vehicle Management System. Goodbye!")
        return 0

    def _show(self, vehicles: Sequence[Vehicle], vehicle_type: VehicleType | None = None) -> None:
        self._write(format_vehicles(vehicles, vehicle_type))

    def add_vehicle(self) -> None:
        self._clear()
        self._heading("ADD NEW VEHICLE")
        types = list(VehicleType)
        choice = self.choose("Select vehicle type:", [*map(str, types), "Cancel"])
        if choice is None or choice == len(types):
            self._write("Vehicle addition cancelled.")
            return

        cls = VEHICLE_CLASSES[types[choice]]
        values = {name: self._prompt_value(label, kind) for name, label, kind in editable_fields(cls)}
        vehicle = cls(**values)

        if self._store.add(vehicle):
            self._write("Vehicle added successfully!")
            self._show([vehicle], vehicle.vehicle_type)
        else:
            self._write("Failed to add vehicle.")
        self._pause()

    def view_vehicles(self) -> None:
        self._heading("ALL VEHICLES")
        vehicles = self._store.list_all()
        if not vehicles:
            self._write("No vehicles found.")
            self._pause()
            return

        for vehicle_type, group in group_by_type(vehicles).items():
            if not group:
                continue
            plural = f"{vehicle_type}s"
            self._heading(plural.upper())
            self._show(group, vehicle_type)
            self._write(f"Total {plural.lower()}: {len(group)}")

        self._write(f"\nTotal vehicles: {len(vehicles)}")
        self._pause()

    def _pick_vehicle(self, action: str) -> str | None:
        vehicles = self._store.list_all()
        if not vehicles:
            self._write(f"No vehicles found to {action}.")
            self._pause()
            return None

        self._heading(f"SELECT VEHICLE TO {action.upper()}")
        self._show(vehicles)
        options = [f"{v.id} - {v.make} {v.model} ({v.year})" for v in vehicles]
        choice = self.choose(f"Select a vehicle to {action}:", [*options, "Cancel"])
        if choice is None or choice == len(options):
            self._write(f"{action.capitalize()} cancelled.")
            return None
        return vehicles[choice].id

    def update_vehicle(self) -> None:
        vehicle_id = self._pick_vehicle("update")
        if vehicle_id is not None:
            self.update_vehicle_by_id(vehicle_id)

    def update_vehicle_by_id(self, vehicle_id: str) -> None:
        vehicle = self._store.find_by_id(vehicle_id)
        if vehicle is None:
            self._write(f"Vehicle not found with ID: {vehicle_id}")
            return

        self._write(f"\nUPDATE VEHICLE: {vehicle_id}")
        self._write(f"Current details: {vehicle.describe()}")
        self._write("Enter new details (press Enter to keep current value):")

        for name, label, kind in editable_fields(type(vehicle)):
            raw = self._read(f"{label} [{_format_current(getattr(vehicle, name))}]: ")
            if not raw:
                continue
            try:
                setattr(vehicle, name, parse_answer(raw, kind))
            except ValueError:
                self._write("Invalid format. Keeping current value.")

        if self._store.update(vehicle):
            self._write("Vehicle updated successfully!")
            self._write(vehicle.describe())
        else:
            self._write("Failed to update vehicle.")

    def delete_vehicle(self) -> None:
        vehicle_id = self._pick_vehicle("delete")
        if vehicle_id is not None:
            self.delete_vehicle_by_id(vehicle_id)

    def delete_vehicle_by_id(self, vehicle_id: str) -> None:
        vehicle = self._store.find_by_id(vehicle_id)
        if vehicle is None:
            self._write(f"Vehicle not found with ID: {vehicle_id}")
            self._pause()
            return

        self._write(f"\nDELETE VEHICLE: {vehicle_id}")
        self._show([vehicle], vehicle.vehicle_type)
        choice = self.choose(
            "Are you sure you want to delete this vehicle?",
            ("Yes, delete this vehicle", "No, cancel deletion"),
        )
        if choice == 0:
            if self._store.delete(vehicle_id):
                self._write("Vehicle deleted successfully!")
            else:
                self._write("Failed to delete vehicle.")
        else:
            self._write("Delete operation cancelled.")
        self._pause()
