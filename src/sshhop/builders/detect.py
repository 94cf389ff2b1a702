"""Builder lookup by dialect name."""

from sshhop.builders.base import ChainBuilder
from sshhop.builders.flat import FlatRelayBuilder
from sshhop.builders.nested import NestedProxyBuilder

DIALECTS = ("flat", "nested")


def get_builder(dialect: str) -> ChainBuilder:
    """
    Get a chain builder instance by dialect.

    Args:
        dialect: One of "flat", "nested"

    Raises:
        ValueError: for an unknown dialect
    """
    if dialect == "flat":
        return FlatRelayBuilder()
    if dialect == "nested":
        return NestedProxyBuilder()
    raise ValueError(f"Unknown dialect: {dialect}. Use one of: {', '.join(DIALECTS)}")
