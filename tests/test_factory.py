"""Unit tests for multimaps.factory module."""

import pytest

from multimaps.array_map import ArrayMap
from multimaps.config import MultiMapConfig, ValueCollectionType
from multimaps.exceptions import IllegalArgumentException
from multimaps.factory import create_multi_map
from multimaps.set_map import SetMap


class TestCreateMultiMap:
    """Tests for create_multi_map."""

    def test_default_is_array_map(self):
        mm = create_multi_map()
        assert isinstance(mm, ArrayMap)
        assert mm.size == 0
        assert mm.name is None

    def test_from_config_list(self):
        config = MultiMapConfig(name="tags", value_collection_type=ValueCollectionType.LIST)
        mm = create_multi_map(config)
        assert isinstance(mm, ArrayMap)
        assert mm.name == "tags"

    def test_from_config_set(self):
        mm = create_multi_map(MultiMapConfig(value_collection_type="set"))
        assert isinstance(mm, SetMap)

    def test_keyword_overrides_config(self):
        config = MultiMapConfig(name="tags", value_collection_type="list")
        mm = create_multi_map(config, value_collection_type="SET", name="roles")
        assert isinstance(mm, SetMap)
        assert mm.name == "roles"

    def test_keyword_enum(self):
        mm = create_multi_map(value_collection_type=ValueCollectionType.SET)
        assert isinstance(mm, SetMap)

    def test_unknown_type(self):
        with pytest.raises(IllegalArgumentException) as exc_info:
            create_multi_map(value_collection_type="bag")
        assert exc_info.value.cause is not None

    def test_invalid_config(self):
        with pytest.raises(IllegalArgumentException):
            create_multi_map({"value_collection_type": "set"})

    def test_new_map_each_call(self):
        config = MultiMapConfig(value_collection_type="set")
        assert create_multi_map(config) is not create_multi_map(config)
