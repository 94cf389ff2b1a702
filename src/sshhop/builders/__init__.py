"""Chain builders for the flat-relay and nested-proxy dialects."""

from sshhop.builders.base import ChainBuilder, Plan
from sshhop.builders.detect import DIALECTS, get_builder
from sshhop.builders.flat import FlatRelayBuilder
from sshhop.builders.nested import NestedProxyBuilder

__all__ = [
    "DIALECTS",
    "ChainBuilder",
    "FlatRelayBuilder",
    "NestedProxyBuilder",
    "Plan",
    "get_builder",
]
