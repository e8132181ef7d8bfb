"""Tests for the topology-schema exception hierarchy."""

import pytest

from topology_schema import generate_exchange_schema
from topology_schema.exceptions import (
    ConfigurationError,
    InvalidExchangeTypeError,
    TopologySchemaError,
)


def test_invalid_exchange_type_message():
    """Test the message lists the supported types."""
    error = InvalidExchangeTypeError("headers")
    assert str(error) == 'type must be "direct", "topic", "fanout" or "x-lvc"'
    assert error.value == "headers"


def test_configuration_error_message():
    """Test the component and reason are kept."""
    error = ConfigurationError("output", "indent must be >= 0")
    assert str(error) == "Configuration error in 'output': indent must be >= 0"
    assert error.component == "output"
    assert error.reason == "indent must be >= 0"


@pytest.mark.parametrize("error_type", [InvalidExchangeTypeError, ConfigurationError])
def test_hierarchy(error_type):
    """Test package errors share a common base."""
    assert issubclass(error_type, TopologySchemaError)


def test_catch_with_base_class():
    """Test generator errors can be handled through the base class."""
    with pytest.raises(TopologySchemaError):
        generate_exchange_schema("headers")
