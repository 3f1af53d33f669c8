"""Construction of multimaps from configuration."""

from typing import Optional, Union

from multimaps.array_map import ArrayMap
from multimaps.base import BaseMultiMap
from multimaps.config import MultiMapConfig, ValueCollectionType
from multimaps.exceptions import ConfigurationException, IllegalArgumentException
from multimaps.logging import get_logger
from multimaps.set_map import SetMap

_logger = get_logger("factory")

_MAP_TYPES = {
    ValueCollectionType.LIST: ArrayMap,
    ValueCollectionType.SET: SetMap,
}


def create_multi_map(
    config: Optional[MultiMapConfig] = None,
    *,
    value_collection_type: Optional[Union[str, ValueCollectionType]] = None,
    name: Optional[str] = None,
) -> BaseMultiMap:
    """Create an empty multimap.

    Keyword arguments override the matching settings of ``config``.
    Without a config the map holds lists.

    Args:
        config: Optional configuration to build from.
        value_collection_type: ``LIST`` for an :class:`ArrayMap`, ``SET``
            for a :class:`SetMap`. Names are accepted in any case.
        name: Optional name for the map.

    Returns:
        A new, empty ArrayMap or SetMap.

    Raises:
        IllegalArgumentException: If ``config`` is not a MultiMapConfig or
            the collection type is unknown.

    Example:
        >>> tags = create_multi_map(value_collection_type="set", name="tags")
        >>> tags.add("article1", "python")
    """
    if config is None:
        config = MultiMapConfig()
    elif not isinstance(config, MultiMapConfig):
        raise IllegalArgumentException(
            f"config must be a MultiMapConfig, got {type(config).__name__}"
        )

    collection_type = config.value_collection_type
    if value_collection_type is not None:
        try:
            collection_type = ValueCollectionType.parse(value_collection_type)
        except ConfigurationException as e:
            raise IllegalArgumentException(str(e), cause=e)

    if name is None:
        name = config.name

    map_class = _MAP_TYPES[collection_type]
    _logger.debug("Creating %s: name=%s", map_class.__name__, name)
    return map_class(name=name)
