"""Internal constants shared across the library."""

from pathlib import Path

DEFAULT_DATA_FILE = Path("data") / "vehicles.json"
EMPTY_DOCUMENT = "[]"
FILE_ENCODING = "utf-8"

# Length of generated vehicle ids (hex characters).
ID_LENGTH = 8

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
