"""Multimap configuration."""

import os
from enum import Enum
from typing import Optional, Union

import yaml

from multimaps.exceptions import ConfigurationException
from multimaps.logging import get_logger

_logger = get_logger("config")

CONFIG_ROOT_KEY = "multimap"


class ValueCollectionType(Enum):
    """Shape of the collection held under each key."""
    LIST = "LIST"
    SET = "SET"

    @classmethod
    def parse(cls, value: Union[str, "ValueCollectionType"]) -> "ValueCollectionType":
        """Parse a collection type from its name, ignoring case.

        Raises:
            ConfigurationException: If the name is not a known type.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ConfigurationException(
            f"Unknown value_collection_type: {value!r}. "
            f"Expected one of: {', '.join(t.value for t in cls)}"
        )


class MultiMapConfig:
    """Configuration for building a multimap.

    Attributes:
        name: Optional name of the map, used in logs and repr.
        value_collection_type: Whether each key holds a list or a set.

    Example:
        From code::

            config = MultiMapConfig(name="tags", value_collection_type="SET")

        From a YAML file::

            # multimap.yml
            multimap:
              name: tags
              value_collection_type: set

            config = MultiMapConfig.from_yaml("multimap.yml")
    """

    def __init__(
        self,
        name: Optional[str] = None,
        value_collection_type: Union[str, ValueCollectionType] = ValueCollectionType.LIST,
    ):
        self._name = self._validate_name(name)
        self._value_collection_type = ValueCollectionType.parse(value_collection_type)

    @staticmethod
    def _validate_name(name: Optional[str]) -> Optional[str]:
        if name is not None:
            if not isinstance(name, str):
                raise ConfigurationException("name must be a string")
            if not name.strip():
                raise ConfigurationException("name cannot be empty")
        return name

    @property
    def name(self) -> Optional[str]:
        """Get the map name."""
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = self._validate_name(value)

    @property
    def value_collection_type(self) -> ValueCollectionType:
        """Get the per-key collection type."""
        return self._value_collection_type

    @value_collection_type.setter
    def value_collection_type(self, value: Union[str, ValueCollectionType]) -> None:
        self._value_collection_type = ValueCollectionType.parse(value)

    @classmethod
    def from_dict(cls, data: dict) -> "MultiMapConfig":
        """Create MultiMapConfig from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        return cls(
            name=data.get("name"),
            value_collection_type=data.get("value_collection_type", ValueCollectionType.LIST),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "MultiMapConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            MultiMapConfig instance.

        Raises:
            ConfigurationException: If the file cannot be read or parsed.
        """
        if not os.path.exists(yaml_path):
            raise ConfigurationException(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)
        except (IOError, UnicodeDecodeError) as e:
            raise ConfigurationException(f"Failed to read configuration file: {e}", cause=e)

        _logger.debug("Loaded multimap configuration from %s", yaml_path)
        return cls._from_yaml_data(data)

    @classmethod
    def from_yaml_string(cls, yaml_content: str) -> "MultiMapConfig":
        """Load configuration from a YAML string.

        Raises:
            ConfigurationException: If the YAML cannot be parsed.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)

        return cls._from_yaml_data(data)

    @classmethod
    def _from_yaml_data(cls, data) -> "MultiMapConfig":
        if data is None:
            data = {}

        if isinstance(data, dict) and CONFIG_ROOT_KEY in data:
            data = data[CONFIG_ROOT_KEY] or {}

        return cls.from_dict(data)

    def __repr__(self) -> str:
        return (
            f"MultiMapConfig(name={self._name!r}, "
            f"value_collection_type={self._value_collection_type.value})"
        )
