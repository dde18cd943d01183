"""Vehicle identifier generation."""

from __future__ import annotations

import secrets

from pyvms._constants import ID_LENGTH


def new_vehicle_id() -> str:
    """Return a short random hex token for a new vehicle.

    Eight hex characters give about four billion values. That keeps
    collisions negligible for an inventory of a few thousand vehicles,
    but they are not impossible. The store treats an insert with a known
    id as an update.
    """
    return secrets.token_hex(ID_LENGTH // 2)
