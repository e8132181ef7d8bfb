"""topology-schema: JSON Schemas for RabbitMQ topology exchange entries.

Examples
--------
>>> from topology_schema import generate_exchange_schema
>>> schema = generate_exchange_schema("direct")
>>> schema["properties"]["bindings"]["items"][0]["required"]
['destination', 'routingPattern']
"""

from topology_schema.exceptions import (
    ConfigurationError,
    InvalidExchangeTypeError,
    TopologySchemaError,
)
from topology_schema.exchange_types import ExchangeType, parse_exchange_type
from topology_schema.generator import (
    generate_all_exchange_schemas,
    generate_binding_schema,
    generate_exchange_schema,
    render_schema,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ExchangeType",
    "InvalidExchangeTypeError",
    "TopologySchemaError",
    "__version__",
    "generate_all_exchange_schemas",
    "generate_binding_schema",
    "generate_exchange_schema",
    "parse_exchange_type",
    "render_schema",
]
