"""Multimap library exceptions.

Map operations never raise for missing keys or values: absent keys read as
empty collections and ``pop``/``shift`` return an absent marker. The
exceptions below cover the library entry points around the maps
(configuration loading and map construction). All of them inherit from
:class:`MultiMapException`.

Example:
    Handling configuration errors::

        from multimaps.config import MultiMapConfig
        from multimaps.exceptions import ConfigurationException

        try:
            config = MultiMapConfig.from_yaml("multimap.yml")
        except ConfigurationException as e:
            print(f"Bad configuration: {e}")
"""


class MultiMapException(Exception):
    """Base class for all multimap library exceptions.

    Args:
        message: The error message describing the exception.
        cause: The underlying exception that caused this error, if any.

    Attributes:
        cause: The underlying cause of this exception, if any.
    """

    def __init__(self, message: str = "", cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class IllegalArgumentException(MultiMapException):
    """Raised when an illegal or inappropriate argument is passed.

    Example:
        - Asking the factory for an unknown value collection type
        - Passing something that is not a config to the factory
    """
    pass


class ConfigurationException(MultiMapException):
    """Raised when there is a configuration error.

    Example:
        - Missing or unreadable YAML file
        - Malformed YAML
        - Empty map name or unknown collection type in the config
    """
    pass
