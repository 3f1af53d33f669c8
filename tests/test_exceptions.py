"""Unit tests for multimaps.exceptions module."""

from multimaps.exceptions import (
    ConfigurationException,
    IllegalArgumentException,
    MultiMapException,
)


class TestMultiMapException:
    """Tests for MultiMapException base class."""

    def test_create_with_message(self):
        ex = MultiMapException("test message")
        assert str(ex) == "test message"
        assert ex.cause is None

    def test_create_with_message_and_cause(self):
        cause = ValueError("original error")
        ex = MultiMapException("wrapper message", cause=cause)
        assert str(ex) == "wrapper message"
        assert ex.cause is cause

    def test_create_empty(self):
        ex = MultiMapException()
        assert str(ex) == ""
        assert ex.cause is None

    def test_inheritance(self):
        assert isinstance(MultiMapException("test"), Exception)


class TestIllegalArgumentException:
    """Tests for IllegalArgumentException."""

    def test_inheritance(self):
        assert isinstance(IllegalArgumentException("invalid"), MultiMapException)

    def test_with_cause(self):
        cause = TypeError("wrong type")
        ex = IllegalArgumentException("invalid", cause=cause)
        assert ex.cause is cause


class TestConfigurationException:
    """Tests for ConfigurationException."""

    def test_inheritance(self):
        assert isinstance(ConfigurationException("bad config"), MultiMapException)

    def test_message(self):
        ex = ConfigurationException("Unknown value_collection_type")
        assert "Unknown value_collection_type" in str(ex)
