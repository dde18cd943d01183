"""Command line entry point.

Usage
-----
    pyvms                       # interactive menu
    pyvms list                  # print every vehicle and exit
    pyvms list --type truck
    pyvms --data-file inventory.json --log-level INFO
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pyvms import __version__
from pyvms._constants import LOG_FORMAT
from pyvms.config import VmsConfig
from pyvms.exceptions import VmsConfigError
from pyvms.models.vehicle import VehicleType
from pyvms.shell import Shell
from pyvms.store import VehicleStore
from pyvms.table import format_vehicles, group_by_type

_TYPE_CHOICES = {vehicle_type.lower(): vehicle_type for vehicle_type in VehicleType}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyvms", description="Manage a vehicle inventory.")
    parser.add_argument("command", nargs="?", default="shell", choices=("shell", "list"), help="What to run")
    parser.add_argument("--data-file", default=None, help="Inventory file (env: VMS_DATA_FILE)")
    parser.add_argument("--log-level", default=None, help="Logging level (env: VMS_LOG_LEVEL)")
    parser.add_argument("--no-clear", action="store_true", help="Never clear the terminal")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for Enter after each action")
    parser.add_argument("--type", choices=sorted(_TYPE_CHOICES), default=None, help="Only list this vehicle type")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _list_vehicles(store: VehicleStore, type_filter: str | None) -> int:
    vehicles = store.list_all()
    if not vehicles:
        print("No vehicles found.")
        return 0

    wanted = _TYPE_CHOICES.get(type_filter) if type_filter else None
    for vehicle_type, group in group_by_type(vehicles).items():
        if not group or (wanted is not None and vehicle_type != wanted):
            continue
        print(f"\n{vehicle_type.upper()}S")
        print(format_vehicles(group, vehicle_type))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = VmsConfig.from_env(
            data_file=args.data_file,
            log_level=args.log_level,
            clear_screen=False if args.no_clear else None,
            pause_after_action=False if args.no_pause else None,
        )
    except VmsConfigError as err:
        parser.error(str(err))

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    store = VehicleStore(config.data_file)
    if args.command == "list":
        return _list_vehicles(store, args.type)

    shell = Shell(
        store,
        sys.stdin,
        sys.stdout,
        clear_screen=config.clear_screen,
        pause=config.pause_after_action,
    )
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
