"""Base model for persisted pyvms records.

Every record model inherits from :class:`VmsBaseModel` which provides:

* ``alias_generator=to_camel`` so snake_case fields are persisted under
  the camelCase keys the data file uses.
* A ``model_validator(mode="before")`` that drops ``null`` values so the
  field default is used.
* ``validate_assignment`` so in-place edits go through the same field
  validators as loading does.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class VmsBaseModel(BaseModel):
    """Base for records stored in the inventory file.

    Handles:
    * camelCase keys ↔ snake_case fields via ``alias_generator=to_camel``
    * ``None`` values → dropped so the field default is used instead
    * Unknown keys → ignored
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        validate_assignment=True,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        """Return *values* without ``None`` entries."""
        return {key: value for key, value in values.items() if value is not None}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return VmsBaseModel._clean_dict(values)
