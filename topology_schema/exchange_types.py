"""Supported exchange types and their binding routing rules.

The ``ExchangeType`` enum is the single list of valid type tags. The
``ROUTING_PATTERN_RULES`` table maps every member to the routing pattern its
bindings must declare, or to ``None`` when bindings carry no routing pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from topology_schema.exceptions import InvalidExchangeTypeError

# Literal routing keys: dot-separated tokens, no empty segments or wildcards
# ex: foo, foo.bar, foo.bar.qux
LITERAL_ROUTING_KEY_PATTERN = r"^[a-zA-Z0-9_:-]+(\.[a-zA-Z0-9_:-]+)*$"

# Topic routing patterns: tokens or "*" per segment, "#" allowed as a segment
# ex: foo, foo.bar, *, *.*, #, foo.*, foo.#, *.foo, *.#, foo.*.#
TOPIC_ROUTING_PATTERN = (
    r"^((([a-zA-Z0-9_:-]+|\*)\.)*([a-zA-Z0-9_:-]+|[*#])(\.([a-zA-Z0-9_:-]+|\*))*)$"
)


class ExchangeType(StrEnum):
    """Exchange types a topology entry may declare."""

    DIRECT = "direct"
    FANOUT = "fanout"
    TOPIC = "topic"
    X_LVC = "x-lvc"


@dataclass(frozen=True, slots=True)
class RoutingPatternRule:
    """Routing pattern a binding must carry for a given exchange type."""

    pattern: str
    description: str
    required: bool = True


_LITERAL_ROUTING_KEY = RoutingPatternRule(
    pattern=LITERAL_ROUTING_KEY_PATTERN,
    description="Direct binding routing key",
)

ROUTING_PATTERN_RULES: MappingProxyType[ExchangeType, RoutingPatternRule | None] = (
    MappingProxyType({
        ExchangeType.DIRECT: _LITERAL_ROUTING_KEY,
        # fanout exchanges deliver to every binding, no routing key involved
        ExchangeType.FANOUT: None,
        ExchangeType.TOPIC: RoutingPatternRule(
            pattern=TOPIC_ROUTING_PATTERN,
            description="Topic binding routing pattern",
        ),
        ExchangeType.X_LVC: _LITERAL_ROUTING_KEY,
    })
)


def parse_exchange_type(value: object) -> ExchangeType:
    """Convert a type tag to an ExchangeType.

    Matching is exact: no case folding and no whitespace trimming.

    Parameters
    ----------
    value : object
        A type tag such as ``"topic"`` or an ExchangeType member

    Returns
    -------
    ExchangeType
        The matching enum member

    Raises
    ------
    InvalidExchangeTypeError
        If ``value`` is not one of the supported type tags

    Examples
    --------
    >>> parse_exchange_type("x-lvc")
    <ExchangeType.X_LVC: 'x-lvc'>
    """
    if isinstance(value, ExchangeType):
        return value
    if not isinstance(value, str):
        raise InvalidExchangeTypeError(value)
    try:
        return ExchangeType(value)
    except ValueError:
        raise InvalidExchangeTypeError(value) from None


__all__ = [
    "LITERAL_ROUTING_KEY_PATTERN",
    "ROUTING_PATTERN_RULES",
    "TOPIC_ROUTING_PATTERN",
    "ExchangeType",
    "RoutingPatternRule",
    "parse_exchange_type",
]
