"""Core type definitions for sshhop."""

from dataclasses import dataclass

DEFAULT_PORT = 22


def format_host_port(host: str, port: int) -> str:
    """Join host and port, bracketing IPv6 literals."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@dataclass(frozen=True)
class Address:
    """One endpoint in a hop chain."""

    host: str
    port: int = DEFAULT_PORT
    user: str | None = None

    def ssh_args(self) -> list[str]:
        """Login and port options for dialing this address directly."""
        args = []
        if self.user:
            args += ["-l", self.user]
        if self.port != DEFAULT_PORT:
            args += ["-p", str(self.port)]
        return args

    def __str__(self) -> str:
        prefix = f"{self.user}@" if self.user else ""
        if self.port == DEFAULT_PORT:
            host = f"[{self.host}]" if ":" in self.host else self.host
            return f"{prefix}{host}"
        return f"{prefix}{format_host_port(self.host, self.port)}"


@dataclass(frozen=True)
class HopChain:
    """Everything resolved from the command line for one invocation."""

    hops: tuple[Address, ...]
    destination_host: str
    destination_port: int
    debug: bool = False

    @property
    def destination(self) -> str:
        return format_host_port(self.destination_host, self.destination_port)

    @property
    def final_hop(self) -> Address:
        return self.hops[-1]


@dataclass(frozen=True)
class RelaySpec:
    """Flat-relay plan: one relay list, final hop dials the destination."""

    intermediate: tuple[Address, ...]
    final_hop: Address
    destination_host: str
    destination_port: int


@dataclass(frozen=True)
class Direct:
    """Hop reached without a proxy."""

    hop: Address


@dataclass(frozen=True)
class Nested:
    """Hop reached by first establishing the connection described by `proxy`."""

    proxy: "Direct | Nested"
    hop: Address


ProxyExpression = Direct | Nested


def depth(expr: ProxyExpression | None) -> int:
    """Number of nesting levels in a proxy expression."""
    levels = 0
    while expr is not None:
        levels += 1
        expr = expr.proxy if isinstance(expr, Nested) else None
    return levels


@dataclass(frozen=True)
class NestedPlan:
    """Nested-proxy plan: final hop dials the destination through `proxy`."""

    proxy: ProxyExpression | None
    final_hop: Address
    destination_host: str
    destination_port: int
