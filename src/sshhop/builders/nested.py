"""Nested-proxy dialect: every hop is reached through a ProxyCommand."""

import logging

from sshhop.command import nested_command
from sshhop.config import SSHHopConfig
from sshhop.types import Direct, HopChain, Nested, NestedPlan, ProxyExpression, depth

logger = logging.getLogger(__name__)


class NestedProxyBuilder:
    """
    Wraps each hop in the proxy expression of the hops before it.

    hops[0] is assumed reachable from the caller and is dialed directly. Each
    following hop except the last is reached through the expression built so
    far, and asks for a raw stream to '%h:%p', which ssh fills in with the next
    layer's target. The last hop dials the destination through the whole
    expression, so N hops give N-1 levels of nesting.
    """

    name = "nested"
    allow_single_destination = True

    def build(self, chain: HopChain) -> NestedPlan:
        proxy: ProxyExpression | None = None
        for hop in chain.hops[:-1]:
            proxy = Direct(hop=hop) if proxy is None else Nested(proxy=proxy, hop=hop)

        logger.debug("Nested %d proxy level(s) under %s", depth(proxy), chain.final_hop)
        return NestedPlan(
            proxy=proxy,
            final_hop=chain.final_hop,
            destination_host=chain.destination_host,
            destination_port=chain.destination_port,
        )

    def command(self, plan: NestedPlan, config: SSHHopConfig) -> list[str]:
        return nested_command(plan, config)
