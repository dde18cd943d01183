"""Application configuration for pyvms."""

from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any

from pyvms._constants import DEFAULT_DATA_FILE, DEFAULT_LOG_LEVEL
from pyvms.exceptions import VmsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise VmsConfigError(f"unknown log level: {value!r}")
    return level


@dataclasses.dataclass(frozen=True)
class VmsConfig:
    """Application configuration.

    Parameters
    ----------
    data_file : Path
        JSON document holding the inventory. Created with ``[]`` content
        (and any missing parent directories) when absent.
    log_level : str
        Name of the root logging level used by the command line.
    clear_screen : bool
        Clear the terminal before each top-level menu action.
    pause_after_action : bool
        Wait for Enter after showing the result of an action.
    """

    data_file: Path = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    clear_screen: bool = True
    pause_after_action: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_file", Path(self.data_file))
        object.__setattr__(self, "log_level", _normalize_log_level(self.log_level))

    @classmethod
    def from_env(cls, **overrides: Any) -> VmsConfig:
        """Create configuration from environment variables.

        Reads ``VMS_DATA_FILE``, ``VMS_LOG_LEVEL``, ``VMS_CLEAR_SCREEN``
        and ``VMS_PAUSE``. Explicit keyword arguments (other than
        ``None``) override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        VmsConfig
            Populated configuration.

        Raises
        ------
        VmsConfigError
            If the resulting log level is not a known logging level.
        """
        env = os.environ
        overrides = {key: value for key, value in overrides.items() if value is not None}

        config_kwargs: dict[str, Any] = {}
        data_file = env.get("VMS_DATA_FILE")
        if data_file:
            config_kwargs["data_file"] = Path(data_file)

        log_level = env.get("VMS_LOG_LEVEL")
        if log_level:
            config_kwargs["log_level"] = log_level

        if "clear_screen" not in overrides:
            config_kwargs["clear_screen"] = _env_bool(env.get("VMS_CLEAR_SCREEN"), True)

        if "pause_after_action" not in overrides:
            config_kwargs["pause_after_action"] = _env_bool(env.get("VMS_PAUSE"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
