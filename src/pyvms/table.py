"""ASCII table rendering for vehicle listings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from pyvms.models.vehicle import Car, Motorcycle, Truck, Vehicle, VehicleType, yes_no

NO_DATA = "No data to display"

COMMON_HEADERS: tuple[str, ...] = ("ID", "Type", "Make", "Model", "Year", "Color", "Price")

_VARIANT_HEADERS: dict[VehicleType | None, tuple[str, ...]] = {
    VehicleType.CAR: ("Doors", "Transmission", "Engine"),
    VehicleType.TRUCK: ("Cargo Cap.", "Drive Type", "Tow Pkg"),
    VehicleType.MOTORCYCLE: ("Bike Type", "Engine", "Fairing"),
    None: ("Spec 1", "Spec 2", "Spec 3"),
}


def _car_cells(car: Car) -> list[str]:
    return [str(car.num_doors), car.transmission_type, f"{car.engine_size:.1f}L"]


def _truck_cells(truck: Truck) -> list[str]:
    return [f"{truck.cargo_capacity:.1f}", truck.drive_type, yes_no(truck.has_tow_package)]


def _motorcycle_cells(motorcycle: Motorcycle) -> list[str]:
    return [motorcycle.bike_type, f"{motorcycle.engine_cc}cc", yes_no(motorcycle.has_fairing)]


_VARIANT_CELLS: dict[VehicleType, Callable[..., list[str]]] = {
    VehicleType.CAR: _car_cells,
    VehicleType.TRUCK: _truck_cells,
    VehicleType.MOTORCYCLE: _motorcycle_cells,
}


def table_headers(vehicle_type: VehicleType | None = None) -> list[str]:
    """Column headers for one variant, or generic ones for mixed listings."""
    return [*COMMON_HEADERS, *_VARIANT_HEADERS[vehicle_type]]


def vehicle_row(vehicle: Vehicle) -> list[str]:
    cells = [
        vehicle.id,
        str(vehicle.vehicle_type),
        vehicle.make,
        vehicle.model,
        str(vehicle.year),
        vehicle.color,
        f"${vehicle.price:.2f}",
    ]
    return cells + _VARIANT_CELLS[vehicle.vehicle_type](vehicle)


def group_by_type(vehicles: Iterable[Vehicle]) -> dict[VehicleType, list[Vehicle]]:
    """Bucket *vehicles* per variant, keeping label order and input order."""
    groups: dict[VehicleType, list[Vehicle]] = {vehicle_type: [] for vehicle_type in VehicleType}
    for vehicle in vehicles:
        groups[vehicle.vehicle_type].append(vehicle)
    return groups


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render *rows* under *headers* as a bordered table.

    Short rows are padded with empty cells; cells beyond the header count
    are dropped.
    """
    if not rows:
        return NO_DATA

    widths = [len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row[: len(widths)]):
            widths[index] = max(widths[index], len(cell))

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    separator = "|" + "|".join("-" * (width + 2) for width in widths) + "|"

    def _line(cells: Sequence[str]) -> str:
        padded = [cells[index] if index < len(cells) else "" for index in range(len(widths))]
        return "|" + "|".join(f" {cell:<{width}} " for cell, width in zip(padded, widths, strict=True)) + "|"

    lines = [border, _line(headers), separator]
    lines.extend(_line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def format_vehicles(vehicles: Sequence[Vehicle], vehicle_type: VehicleType | None = None) -> str:
    return format_table(table_headers(vehicle_type), [vehicle_row(vehicle) for vehicle in vehicles])
