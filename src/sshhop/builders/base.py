"""ChainBuilder protocol shared by both dialects."""

from typing import Protocol

from sshhop.config import SSHHopConfig
from sshhop.types import HopChain, NestedPlan, RelaySpec

Plan = RelaySpec | NestedPlan


class ChainBuilder(Protocol):
    """Protocol for turning a resolved HopChain into a relay invocation."""

    name: str
    allow_single_destination: bool

    def build(self, chain: HopChain) -> Plan:
        """
        Combine the chain's hops into a dialect-specific plan.

        The last hop always dials the destination directly; the dialects
        differ only in how the earlier hops are combined.
        """
        ...

    def command(self, plan: Plan, config: SSHHopConfig) -> list[str]:
        """Materialize a plan into the relay program's argument vector."""
        ...
