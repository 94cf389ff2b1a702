"""Flat-relay dialect: earlier hops become one comma-joined -J list."""

from sshhop.command import flat_command
from sshhop.config import SSHHopConfig
from sshhop.types import HopChain, RelaySpec


class FlatRelayBuilder:
    """Defers multi-hop relaying to ssh's native -J support."""

    name = "flat"
    allow_single_destination = False

    def build(self, chain: HopChain) -> RelaySpec:
        return RelaySpec(
            intermediate=chain.hops[:-1],
            final_hop=chain.final_hop,
            destination_host=chain.destination_host,
            destination_port=chain.destination_port,
        )

    def command(self, plan: RelaySpec, config: SSHHopConfig) -> list[str]:
        return flat_command(plan, config)
