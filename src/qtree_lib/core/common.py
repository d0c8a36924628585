# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the qtree library.

This module provides helpers for YAML I/O, splitting comma-separated
configuration values, looking up the groups of a user, and sizing rich panels.
"""

import grp
import pwd
from functools import lru_cache

import yaml
from rich.console import Console

from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def split_comma_list(string: str | None) -> list[str]:
    """
    Split a comma-separated string into its items.

    Surrounding whitespace is stripped from every item and empty items are dropped.

    Args:
        string (str | None): The string to split. If None or empty,
                             an empty list is returned.

    Returns:
        list[str]: The non-empty items in their original order.
    """
    if not string:
        return []

    return [item.strip() for item in string.split(",") if item.strip()]


def get_user_groups(user: str) -> list[str]:
    """
    Return the names of all Unix groups the user belongs to.

    The primary group comes first, followed by supplementary groups.
    An unknown user belongs to no groups.

    Args:
        user (str): Name of the user.

    Returns:
        list[str]: Names of the groups of the user.
    """
    try:
        primary = grp.getgrgid(pwd.getpwnam(user).pw_gid).gr_name
    except KeyError:
        logger.debug(f"Could not get the primary group of user '{user}'.")
        return []

    groups = [primary]
    for group in grp.getgrall():
        if user in group.gr_mem and group.gr_name not in groups:
            groups.append(group.gr_name)

    return groups


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
):
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width after applying scaling and bounds.
    """

    term_width = console.size.width
    panel_width = term_width // factor
    if min_width is not None:
        panel_width = max(panel_width, min_width)
    if max_width is not None:
        panel_width = min(panel_width, max_width)

    return panel_width
