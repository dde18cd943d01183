"""Custom exception hierarchy for pyvms."""

from __future__ import annotations

from pathlib import Path


class VmsError(Exception):
    """Base exception for all pyvms errors."""


class VmsConfigError(VmsError):
    """Invalid configuration value."""


class VmsStorageError(VmsError):
    """Data file could not be created, read or written."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class VmsCodecError(VmsError):
    """Base for document decoding failures."""


class VmsDocumentError(VmsCodecError):
    """The whole document does not have the shape of a JSON array.

    The reader catches this and treats the document as an empty
    collection.
    """


class VmsRecordError(VmsCodecError):
    """A single array entry could not be turned into a vehicle.

    Raised for entries without a ``type``, with an unknown ``type`` or
    that are not objects at all.  The reader skips the entry and keeps
    going with the rest of the array.
    """
