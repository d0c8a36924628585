# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from typing import Self

import yaml

from qtree_lib.core.common import load_yaml_loader, split_comma_list
from qtree_lib.core.error import QTreeError
from qtree_lib.core.logger import get_logger

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


class Configuration:
    """
    Flat, string-keyed snapshot of configuration properties.

    Values are always stored as strings. Lookups of unset keys
    return the provided default instead of failing.
    """

    def __init__(self, properties: Mapping[str, str] | None = None):
        """
        Initialize the configuration.

        Args:
            properties (Mapping[str, str] | None): Initial properties. Copied.
        """
        self._properties: dict[str, str] = dict(properties or {})

    @classmethod
    def fromDict(cls, data: Mapping[str, object]) -> Self:
        """
        Create a configuration from a mapping of arbitrary scalar values.

        Booleans are stored as `true`/`false`, lists as their comma-joined items,
        other values are converted using `str`. Keys mapped to None are skipped.

        Args:
            data (Mapping[str, object]): Mapping of property names to values.

        Returns:
            Configuration: The constructed configuration.

        Raises:
            QTreeError: If a value is a nested mapping.
        """
        properties = {}
        for key, value in data.items():
            if value is None:
                continue
            properties[str(key)] = Configuration._toStr(str(key), value)

        return cls(properties)

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load a configuration from a Hadoop-style XML site file or a flat YAML file.

        Args:
            file (Path): Path to a `.xml`, `.yaml`, or `.yml` file.

        Returns:
            Configuration: The loaded configuration.

        Raises:
            QTreeError: If the file does not exist, has an unsupported suffix,
                or cannot be parsed.
        """
        if not file.is_file():
            raise QTreeError(f"Configuration file '{file}' does not exist.")

        match file.suffix.lower():
            case ".xml":
                return cls.fromXml(file)
            case ".yaml" | ".yml":
                return cls.fromYaml(file)
            case _:
                raise QTreeError(
                    f"Unsupported configuration file format '{file.suffix}' of '{file}'."
                )

    @classmethod
    def fromXml(cls, file: Path) -> Self:
        """
        Load a configuration from a Hadoop-style XML site file.

        The file is expected to contain a `<configuration>` root element with
        `<property>` children, each holding a `<name>` and a `<value>` element.
        Properties without a name are ignored, properties without a value
        are set to an empty string. Later properties override earlier ones.

        Args:
            file (Path): Path to the XML file.

        Returns:
            Configuration: The loaded configuration.

        Raises:
            QTreeError: If the file cannot be read or parsed.
        """
        logger.debug(f"Loading configuration from XML file '{file}'.")
        try:
            root = ET.parse(file).getroot()
        except (ET.ParseError, OSError) as e:
            raise QTreeError(f"Could not parse the configuration file '{file}': {e}.") from e

        if root.tag != "configuration":
            raise QTreeError(
                f"Invalid configuration file '{file}': expected root element 'configuration', found '{root.tag}'."
            )

        properties = {}
        for prop in root.iter("property"):
            name = (prop.findtext("name") or "").strip()
            if not name:
                logger.debug(f"Ignoring property without a name in '{file}'.")
                continue
            properties[name] = (prop.findtext("value") or "").strip()

        return cls(properties)

    @classmethod
    def fromYaml(cls, file: Path) -> Self:
        """
        Load a configuration from a YAML file containing a flat mapping.

        Args:
            file (Path): Path to the YAML file.

        Returns:
            Configuration: The loaded configuration.

        Raises:
            QTreeError: If the file cannot be read or parsed, or if it does
                not contain a mapping.
        """
        logger.debug(f"Loading configuration from YAML file '{file}'.")
        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise QTreeError(f"Could not parse the configuration file '{file}': {e}.") from e
        except OSError as e:
            raise QTreeError(f"Could not read the configuration file '{file}': {e}.") from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise QTreeError(
                f"Invalid configuration file '{file}': expected a mapping of properties."
            )

        return cls.fromDict(data)

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Get the value of a property.

        Args:
            key (str): Name of the property.
            default (str | None): Value returned if the property is not set.

        Returns:
            str | None: Value of the property or the default.
        """
        return self._properties.get(key, default)

    def getStrings(self, key: str) -> list[str] | None:
        """
        Get the value of a property as a list of comma-separated strings.

        Items are stripped of surrounding whitespace and empty items are dropped.

        Args:
            key (str): Name of the property.

        Returns:
            list[str] | None: The items, or None if the property is not set.
        """
        value = self.get(key)
        if value is None:
            return None

        return split_comma_list(value)

    def getBoolean(self, key: str, default: bool) -> bool:
        """
        Get the value of a property as a boolean.

        Args:
            key (str): Name of the property.
            default (bool): Value returned if the property is not set
                or is neither `true` nor `false`.

        Returns:
            bool: The parsed value or the default.
        """
        value = self.get(key)
        if value is None:
            return default

        match value.strip().lower():
            case "true":
                return True
            case "false":
                return False
            case _:
                logger.debug(
                    f"Property '{key}' has a non-boolean value '{value}'. Using default '{default}'."
                )
                return default

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    @staticmethod
    def _toStr(key: str, value: object) -> str:
        if isinstance(value, Mapping):
            raise QTreeError(
                f"Property '{key}' has a nested mapping as its value. Properties must be flat."
            )
        if isinstance(value, (list, tuple)):
            return ",".join(Configuration._toStr(key, item) for item in value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
