"""JSON Schema generation for RabbitMQ topology exchange entries.

Each exchange type gets its own draft-04 schema describing a topology entry
of that type together with the shape of its bindings. Documents are plain
dicts built fresh on every call, so callers may mutate what they receive.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, Literal

import yaml

from topology_schema.exchange_types import (
    ROUTING_PATTERN_RULES,
    ExchangeType,
    parse_exchange_type,
)
from topology_schema.logging import get_logger

logger = get_logger(__name__)

JSON_SCHEMA_DRAFT_04 = "http://json-schema.org/draft-04/schema#"
EXCHANGE_NAME_PATTERN = r"^[0-9A-Za-z_.:-]*$"
# Binding destinations are described by a separately registered schema
TOPOLOGY_SCHEMA_REF = "topology"

OutputFormat = Literal["dict", "json", "yaml"]


def capitalize(value: str) -> str:
    """Upper-case the first character of ``value`` and leave the rest as is.

    >>> capitalize("x-lvc")
    'X-lvc'
    """
    return value[:1].upper() + value[1:]


def generate_exchange_schema(exchange_type: str | ExchangeType) -> dict[str, Any]:
    """Generate the JSON Schema for an exchange entry of the given type.

    Parameters
    ----------
    exchange_type : str | ExchangeType
        One of ``direct``, ``fanout``, ``topic`` or ``x-lvc``

    Returns
    -------
    dict[str, Any]
        Draft-04 schema with id ``<type>Exchange``

    Raises
    ------
    InvalidExchangeTypeError
        If ``exchange_type`` is not a supported type tag

    Examples
    --------
    >>> schema = generate_exchange_schema("topic")
    >>> schema["id"]
    'topicExchange'
    >>> schema["required"]
    ['exchange', 'type', 'bindings']
    """
    type_ = parse_exchange_type(exchange_type)
    name = type_.value
    logger.debug("Generating exchange schema for {exchange_type}", exchange_type=name)

    return {
        "$schema": JSON_SCHEMA_DRAFT_04,
        "id": f"{name}Exchange",
        "type": "object",
        "title": f"RabbitMQ {capitalize(name)} Exchange",
        "description": f"A RabbitMQ {name} exchange",
        "properties": {
            "exchange": {
                "description": "Exchange name, unique identifier",
                "type": "string",
                "pattern": EXCHANGE_NAME_PATTERN,
            },
            "type": {
                "description": "Exchange type, eg. direct, fanout, topic or x-lvc",
                "type": "string",
                "pattern": f"^{name}$",
            },
            "options": {
                "description": "Exchange options",
                "type": "object",
            },
            "bindings": {
                "description": "Exchange bindings (destinations)",
                "type": "array",
                "minItems": 1,
                "items": [generate_binding_schema(type_)],
            },
        },
        "required": ["exchange", "type", "bindings"],
    }


def generate_binding_schema(exchange_type: str | ExchangeType) -> dict[str, Any]:
    """Generate the JSON Schema for a binding of an exchange of the given type.

    The caller is expected to have validated ``exchange_type`` already; plain
    strings equal to an enum value work too since ExchangeType is a StrEnum.
    Direct, x-lvc and topic bindings require a ``routingPattern``, fanout
    bindings do not.
    """
    name = str(exchange_type)
    schema: dict[str, Any] = {
        "$schema": JSON_SCHEMA_DRAFT_04,
        "title": f"RabbitMQ {capitalize(name)} Exchange Binding",
        "description": f"A RabbitMQ {name} exchange binding",
        "type": "object",
        "properties": {
            "destination": {"$ref": TOPOLOGY_SCHEMA_REF},
            "args": {
                "description": "Binding args",
                "type": "object",
            },
        },
        "required": ["destination"],
    }

    rule = ROUTING_PATTERN_RULES.get(exchange_type)
    if rule is not None:
        schema["properties"]["routingPattern"] = {
            "description": rule.description,
            "type": "string",
            "pattern": rule.pattern,
        }
        if rule.required:
            schema["required"].append("routingPattern")

    return schema


def generate_all_exchange_schemas(
    exchange_types: Iterable[str | ExchangeType] | None = None,
) -> dict[str, dict[str, Any]]:
    """Generate schemas for several exchange types, keyed by schema id.

    Every type is validated before any schema is built. Defaults to all
    supported types in declaration order.
    """
    if exchange_types is None:
        exchange_types = ExchangeType
    types = [parse_exchange_type(t) for t in exchange_types]
    schemas = {}
    for type_ in types:
        schema = generate_exchange_schema(type_)
        schemas[schema["id"]] = schema
    return schemas


def render_schema(
    schema: dict[str, Any], format: OutputFormat = "json", indent: int = 2
) -> dict[str, Any] | str:
    """Format a schema as dict, JSON or YAML.

    Key order is preserved in both text formats.

    Raises
    ------
    ValueError
        If format is not one of: dict, json, yaml
    """
    if format == "dict":
        return schema
    if format == "json":
        return json.dumps(schema, indent=indent)
    if format == "yaml":
        yaml_str: str = yaml.safe_dump(
            schema, sort_keys=False, default_flow_style=False, indent=indent
        )
        return yaml_str
    raise ValueError(f"Invalid format: {format}. Must be one of: dict, json, yaml")


def schema_filename(schema: dict[str, Any], format: Literal["json", "yaml"]) -> str:
    """Return the file name a schema is exported under, e.g. ``topicExchange.json``."""
    return f"{schema['id']}.{format}"


__all__ = [
    "EXCHANGE_NAME_PATTERN",
    "JSON_SCHEMA_DRAFT_04",
    "TOPOLOGY_SCHEMA_REF",
    "OutputFormat",
    "capitalize",
    "generate_all_exchange_schemas",
    "generate_binding_schema",
    "generate_exchange_schema",
    "render_schema",
    "schema_filename",
]
