"""Tests for the vehicle record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyvms.models.vehicle import (
    VEHICLE_CLASSES,
    Car,
    Motorcycle,
    Truck,
    VehicleType,
    variant_fields,
    yes_no,
)

# ------------------------------------------------------------------
# Defaults and coercion
# ------------------------------------------------------------------


class TestDefaults:
    def test_missing_fields_use_zero_values(self) -> None:
        car = Car.model_validate({"type": "Car", "make": "X"})
        assert car.make == "X"
        assert car.model == ""
        assert car.year == 0
        assert car.color == ""
        assert car.price == 0.0
        assert car.num_doors == 0
        assert car.transmission_type == ""
        assert car.engine_size == 0.0

    def test_generated_id_is_eight_hex_characters(self) -> None:
        car = Car()
        assert len(car.id) == 8
        int(car.id, 16)

    def test_generated_ids_differ(self) -> None:
        assert Car().id != Car().id

    def test_null_values_use_defaults(self) -> None:
        truck = Truck.model_validate({"id": None, "make": None, "hasTowPackage": None})
        assert len(truck.id) == 8
        assert truck.make == ""
        assert truck.has_tow_package is False

    def test_blank_or_non_string_id_is_replaced(self) -> None:
        assert Car(id="   ").id.strip() != ""
        numeric = Car.model_validate({"id": 123})
        assert numeric.id != "123"
        assert len(numeric.id) == 8

    def test_caller_supplied_id_is_kept(self) -> None:
        assert Car(id="abc12345").id == "abc12345"


class TestCoercion:
    def test_mistyped_fields_fall_back(self) -> None:
        truck = Truck.model_validate(
            {
                "year": "abc",
                "price": True,
                "cargoCapacity": "12.5",
                "hasTowPackage": "TRUE",
                "driveType": 4,
            }
        )
        assert truck.year == 0
        assert truck.price == 0.0
        assert truck.cargo_capacity == 12.5
        assert truck.has_tow_package is True
        assert truck.drive_type == ""

    def test_int_fields_truncate_floats(self) -> None:
        assert Motorcycle.model_validate({"engineCC": 649.9}).engine_cc == 649

    def test_int_fields_parse_integer_strings_only(self) -> None:
        assert Car.model_validate({"year": "2022"}).year == 2022
        assert Car.model_validate({"year": "20.5"}).year == 0

    def test_float_fields_accept_ints(self) -> None:
        car = Car.model_validate({"price": 24000, "engineSize": 2})
        assert car.price == 24000.0
        assert isinstance(car.price, float)
        assert car.engine_size == 2.0

    def test_bool_fields_reject_numbers(self) -> None:
        assert Motorcycle.model_validate({"hasFairing": 1}).has_fairing is False
        assert Motorcycle.model_validate({"hasFairing": "nope"}).has_fairing is False

    def test_non_finite_floats_fall_back(self) -> None:
        car = Car.model_validate({"price": float("inf"), "engineSize": "-Infinity"})
        assert car.price == 0.0
        assert car.engine_size == 0.0
        car.price = float("nan")
        assert car.price == 0.0


# ------------------------------------------------------------------
# Mutability
# ------------------------------------------------------------------


class TestMutability:
    def test_id_cannot_be_reassigned(self) -> None:
        car = Car(id="abc12345")
        with pytest.raises(ValidationError):
            car.id = "other"
        assert car.id == "abc12345"

    def test_type_cannot_be_changed(self) -> None:
        car = Car()
        with pytest.raises(ValidationError):
            car.type = "Truck"  # type: ignore[assignment]

    def test_other_fields_are_mutable(self) -> None:
        car = Car()
        car.make = "Honda"
        car.year = 2020
        car.price = "12.5"  # type: ignore[assignment]
        assert car.make == "Honda"
        assert car.year == 2020
        assert car.price == 12.5


# ------------------------------------------------------------------
# Keys and metadata
# ------------------------------------------------------------------


class TestKeys:
    def test_camel_case_keys(self) -> None:
        bike = Motorcycle.model_validate({"bikeType": "Sport", "engineCC": 600, "hasFairing": True})
        assert bike.bike_type == "Sport"
        assert bike.engine_cc == 600
        assert bike.has_fairing is True

    def test_snake_case_names_accepted(self) -> None:
        assert Car(num_doors=4).num_doors == 4
        assert Motorcycle(engine_cc=125).engine_cc == 125

    def test_dump_key_order(self) -> None:
        keys = list(Car(id="c1").model_dump(by_alias=True))
        assert keys == [
            "id",
            "make",
            "model",
            "year",
            "color",
            "price",
            "type",
            "numDoors",
            "transmissionType",
            "engineSize",
        ]

    def test_variant_fields(self) -> None:
        assert variant_fields(Car) == ("num_doors", "transmission_type", "engine_size")
        assert variant_fields(Truck) == ("cargo_capacity", "drive_type", "has_tow_package")
        assert variant_fields(Motorcycle) == ("bike_type", "engine_cc", "has_fairing")

    def test_vehicle_type_matches_class(self) -> None:
        for vehicle_type, cls in VEHICLE_CLASSES.items():
            vehicle = cls()
            assert vehicle.vehicle_type == vehicle_type
            assert vehicle.type == str(vehicle_type)

    def test_vehicle_type_labels(self) -> None:
        assert [str(t) for t in VehicleType] == ["Car", "Truck", "Motorcycle"]


# ------------------------------------------------------------------
# describe()
# ------------------------------------------------------------------


class TestDescribe:
    def test_car(self) -> None:
        car = Car(
            id="abc12345",
            make="Toyota",
            model="Corolla",
            year=2022,
            color="Blue",
            price=24000.0,
            num_doors=4,
            transmission_type="Automatic",
            engine_size=1.8,
        )
        assert car.describe() == (
            "abc12345: Toyota Corolla (2022) - $24000.00, 4 doors, Automatic transmission, 1.8L engine"
        )

    def test_truck(self) -> None:
        truck = Truck(
            id="t1",
            make="Ford",
            model="F-150",
            year=2020,
            price=35000.5,
            cargo_capacity=1200,
            drive_type="4WD",
            has_tow_package=True,
        )
        assert truck.describe() == (
            "t1: Ford F-150 (2020) - $35000.50, 1200.0 cargo capacity, 4WD drive, Tow package: Yes"
        )

    def test_motorcycle(self) -> None:
        bike = Motorcycle(id="m1", make="Honda", model="CBR", year=2021, price=9999.99, bike_type="Sport", engine_cc=600)
        assert bike.describe() == "m1: Honda CBR (2021) - $9999.99, Sport, 600cc engine, Fairing: No"


def test_yes_no() -> None:
    assert yes_no(True) == "Yes"
    assert yes_no(False) == "No"
