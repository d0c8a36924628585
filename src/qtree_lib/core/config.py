# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for qtree.

This module defines dataclasses representing all configurable aspects of qtree,
including environment variables, the names of the legacy configuration keys,
presentation settings, exit codes, and global defaults.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by qtree."""

    # Enables qtree debug mode.
    debug_mode: str = "QTREE_DEBUG"
    # Path to the qtree configuration file.
    config_file: str = "QTREE_CONFIG"


@dataclass
class LegacyKeys:
    """Names of the deprecated flat queue configuration properties."""

    # Prefix shared by all per-queue properties.
    queue_prefix: str = "mapred.queue"
    # Comma-separated list of legacy queue names.
    queue_names: str = "mapred.queue.names"
    # Global flag enabling ACL enforcement.
    acls_enabled: str = "mapred.acls.enabled"
    # Per-queue property holding the run state of the queue.
    state: str = "state"
    # ACL used when no per-queue ACL is configured.
    default_acl: str = "*"
    # File that replaces the deprecated configuration.
    queue_conf_file: str = "mapred-queues.xml"


@dataclass
class QueuesPresenterSettings:
    """Settings for QueuesPresenter."""

    # Maximal width of the queues panel.
    max_width: int | None = None
    # Minimal width of the queues panel.
    min_width: int | None = 80
    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for the queue information.
    main_text_style: str = "white"
    # Style used for notes below the table.
    notes_style: str = "grey50"

    # Mark used to denote queues.
    main_mark = "●"

    # Style used for the mark if the queue is available.
    available_mark_style: str = "bright_green"
    # Style used for the mark if the queue is not available.
    unavailable_mark_style: str = "bright_red"


@dataclass
class StateColors:
    """Color scheme for QueueState display."""

    # Style used for running queues.
    running: str = "bright_blue"
    # Style used for stopped queues.
    stopped: str = "bright_red"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by qtree.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of qtree commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for qtree."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    legacy_keys: LegacyKeys = field(default_factory=LegacyKeys)
    queues_presenter: QueuesPresenterSettings = field(
        default_factory=QueuesPresenterSettings
    )
    state_colors: StateColors = field(default_factory=StateColors)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read qtree config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables().config_file))
            else None,
            # 2. Current working directory
            Path.cwd() / "qtree_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "qtree"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for qtree.
CFG = Config.load()
