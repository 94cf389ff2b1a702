"""Parsing of [user@]host[:port] hop tokens."""

from sshhop.errors import MalformedAddress
from sshhop.types import DEFAULT_PORT, Address

MAX_PORT = 65535


def parse_port(text: str, raw: str) -> int:
    """Parse a port number, rejecting anything but 1..65535 in ASCII digits."""
    if not (text.isascii() and text.isdigit()):
        raise MalformedAddress(f"Invalid port '{text}' in '{raw}'")
    port = int(text)
    if not 0 < port <= MAX_PORT:
        raise MalformedAddress(f"Port out of range in '{raw}'", f"1-{MAX_PORT}")
    return port


def _split_host_port(rest: str, raw: str, default_port: int) -> tuple[str, int]:
    # [v6addr] or [v6addr]:port
    if rest.startswith("[") and "]" in rest:
        host, _, tail = rest[1:].partition("]")
        if not tail:
            return host, default_port
        if not tail.startswith(":"):
            raise MalformedAddress(f"Unexpected text after ']' in '{raw}'")
        return host, parse_port(tail[1:], raw)

    if ":" not in rest:
        return rest, default_port
    host, port_text = rest.rsplit(":", 1)
    return host, parse_port(port_text, raw)


def check_host(host: str, raw: str) -> None:
    """Reject empty hosts and hosts ssh would read as an option."""
    if not host.strip():
        raise MalformedAddress(f"Host is missing in '{raw}'")
    if host.startswith("-"):
        raise MalformedAddress(f"Host may not start with '-' in '{raw}'")


def split_host_port(raw: str, default_port: int = DEFAULT_PORT) -> tuple[str, int]:
    """Split 'host[:port]' into host and port. Used for destination tokens."""
    host, port = _split_host_port(raw, raw, default_port)
    check_host(host, raw)
    return host, port


def parse_address(raw: str) -> Address:
    """
    Parse a hop token into an Address.

    Only the first '@' separates the user. A further '@' or any ',' is
    rejected: ssh would read it as a different user or as several relays. The port is split off at the last ':'.

    Raises:
        MalformedAddress: empty user or host, an extra '@', a ',' or an invalid port
    """
    if "," in raw:
        raise MalformedAddress(f"',' is not allowed in '{raw}'", "use one -J per hop")

    user = None
    rest = raw
    if "@" in raw:
        user, rest = raw.split("@", 1)
        if not user:
            raise MalformedAddress(f"User is empty in '{raw}'")

    host, port = _split_host_port(rest, raw, DEFAULT_PORT)
    check_host(host, raw)
    if "@" in host:
        raise MalformedAddress(f"Extra '@' in '{raw}'", "only one user@ prefix is allowed")

    return Address(host=host, port=port, user=user)
