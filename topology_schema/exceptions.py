"""Exception hierarchy for topology-schema.

All package errors inherit from TopologySchemaError so callers can handle
every failure raised by the generator, the config layer and the CLI with a
single ``except`` clause.
"""

from __future__ import annotations

INVALID_EXCHANGE_TYPE_MESSAGE = 'type must be "direct", "topic", "fanout" or "x-lvc"'


class TopologySchemaError(Exception):
    """Base exception for all topology-schema errors."""

    pass


class InvalidExchangeTypeError(TopologySchemaError):
    """Raised when an exchange type tag is not one of the supported types.

    Examples
    --------
    Example usage::

        raise InvalidExchangeTypeError("headers")
    """

    def __init__(self, value: object = None) -> None:
        """Initialize invalid exchange type error.

        Args
        ----
            value: The rejected exchange type value
        """
        super().__init__(INVALID_EXCHANGE_TYPE_MESSAGE)
        self.value = value


class ConfigurationError(TopologySchemaError):
    """Raised when configuration is invalid or cannot be read.

    Examples
    --------
    Example usage::

        raise ConfigurationError("output", "indent must be >= 0")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the configuration section or file at fault
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


__all__ = [
    "INVALID_EXCHANGE_TYPE_MESSAGE",
    "ConfigurationError",
    "InvalidExchangeTypeError",
    "TopologySchemaError",
]
