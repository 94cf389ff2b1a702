"""Resolution of raw command-line tokens into a HopChain."""

import logging
from typing import Sequence

from sshhop.address import check_host, parse_address, parse_port, split_host_port
from sshhop.errors import (
    MissingDestination,
    MissingHopArgument,
    NoHopsProvided,
    UnexpectedArgument,
)
from sshhop.types import Address, HopChain

logger = logging.getLogger(__name__)

DEBUG_FLAG = "--debug"
HOP_FLAGS = ("-J", "--jump")

USAGE = "[--debug] -J <hop> [-J <hop> ...] <destHost> <destPort>"


def _attached_hop(arg: str) -> str | None:
    """Return the value of '-Jhop' or '--jump=hop', None for anything else."""
    if arg.startswith("--jump="):
        return arg[len("--jump="):]
    if arg.startswith("-J") and len(arg) > 2:
        return arg[2:]
    return None


def resolve(args: Sequence[str], allow_single_destination: bool = False) -> HopChain:
    """
    Resolve command-line tokens into a hop chain.

    Args:
        args: tokens after the program name, e.g. ["-J", "gw1", "10.0.0.5", "22"]
        allow_single_destination: accept one trailing 'host[:port]' token,
            port defaulting to 22, for manual invocation

    Returns:
        HopChain with hops in the order given on the command line

    Raises:
        UsageError subclass describing the first problem found
    """
    debug = False
    hops: list[Address] = []
    positional: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == DEBUG_FLAG:
            debug = True
        elif arg in HOP_FLAGS:
            if i + 1 >= len(args):
                raise MissingHopArgument(f"{arg} requires a hop argument")
            i += 1
            hops.append(parse_address(args[i]))
        else:
            value = _attached_hop(arg)
            if value is None:
                positional.append(arg)
            else:
                hops.append(parse_address(value))
        i += 1

    if not hops:
        raise NoHopsProvided("At least one -J hop is required")

    if len(positional) > 2:
        raise UnexpectedArgument(f"Unexpected argument '{positional[2]}'")

    if len(positional) == 2:
        host, port_text = positional
        check_host(host, host)
        port = parse_port(port_text, port_text)
    elif len(positional) == 1 and allow_single_destination:
        host, port = split_host_port(positional[0])
    else:
        raise MissingDestination("Destination host and port are required")

    chain = HopChain(
        hops=tuple(hops),
        destination_host=host,
        destination_port=port,
        debug=debug,
    )
    logger.debug(
        "Resolved %d hop(s): %s -> %s",
        len(chain.hops),
        ", ".join(str(h) for h in chain.hops),
        chain.destination,
    )
    return chain
