"""Multimaps: key to collection maps backed by lists or sets."""

from multimaps.base import BaseMultiMap
from multimaps.array_map import ArrayMap
from multimaps.set_map import SetMap
from multimaps.config import MultiMapConfig, ValueCollectionType
from multimaps.factory import create_multi_map
from multimaps.exceptions import (
    MultiMapException,
    IllegalArgumentException,
    ConfigurationException,
)
from multimaps.logging import (
    configure_logging,
    get_logger,
    set_level,
)

__all__ = [
    # Maps
    "BaseMultiMap",
    "ArrayMap",
    "SetMap",
    # Configuration
    "MultiMapConfig",
    "ValueCollectionType",
    "create_multi_map",
    # Exceptions
    "MultiMapException",
    "IllegalArgumentException",
    "ConfigurationException",
    # Logging
    "configure_logging",
    "get_logger",
    "set_level",
]

__version__ = "0.1.0"
