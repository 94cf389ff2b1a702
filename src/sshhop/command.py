"""Materialization of chain plans into ssh invocations."""

import logging
import shlex
import shutil
import subprocess

from sshhop.config import SSHHopConfig
from sshhop.errors import ExternalProgramFailed, ExternalProgramNotFound
from sshhop.types import (
    Nested,
    NestedPlan,
    ProxyExpression,
    RelaySpec,
    format_host_port,
)

logger = logging.getLogger(__name__)

# Filled in by ssh with the target of the layer that uses the ProxyCommand
PLACEHOLDER = "%h:%p"


def _literal(value: str) -> str:
    """Escape ssh's percent tokens so the value reaches the command untouched."""
    return value.replace("%", "%%")


def proxy_command(expr: ProxyExpression, config: SSHHopConfig) -> str:
    """
    Render a proxy expression as ProxyCommand text.

    The result is a shell command line (ssh runs ProxyCommand through the
    user's shell) in which only the '%h:%p' placeholder is left for ssh to
    expand. An embedded inner command is escaped once more, so each ssh
    process in the chain expands exactly its own layer.
    """
    parts = [_literal(arg) for arg in [config.program, *config.option_args()]]
    if isinstance(expr, Nested):
        inner = proxy_command(expr.proxy, config)
        parts += ["-o", "ProxyCommand=" + _literal(inner)]
    parts += [_literal(arg) for arg in expr.hop.ssh_args()]
    parts += ["-W", PLACEHOLDER, _literal(expr.hop.host)]
    return " ".join(shlex.quote(part) for part in parts)


def flat_command(spec: RelaySpec, config: SSHHopConfig) -> list[str]:
    """Build 'ssh [-J relay,...] [-l user] [-p port] -W dest:port final-hop'."""
    argv = [config.program, *config.option_args()]
    if spec.intermediate:
        argv += ["-J", ",".join(str(hop) for hop in spec.intermediate)]
    argv += spec.final_hop.ssh_args()
    argv += ["-W", format_host_port(spec.destination_host, spec.destination_port)]
    argv.append(spec.final_hop.host)
    return argv


def nested_command(plan: NestedPlan, config: SSHHopConfig) -> list[str]:
    """Build 'ssh [-o ProxyCommand=...] [-l user] [-p port] -W dest:port final-hop'."""
    argv = [config.program, *config.option_args()]
    if plan.proxy is not None:
        argv += ["-o", "ProxyCommand=" + proxy_command(plan.proxy, config)]
    argv += plan.final_hop.ssh_args()
    argv += ["-W", format_host_port(plan.destination_host, plan.destination_port)]
    argv.append(plan.final_hop.host)
    return argv


def preview(argv: list[str]) -> str:
    """Shell-pasteable rendering of an argument vector."""
    return shlex.join(argv)


def run_command(argv: list[str]) -> int:
    """
    Run the relay program and wait for it.

    stdin and stdout are inherited, so when sshhop itself runs as a
    ProxyCommand the relayed byte stream passes straight through.

    Raises:
        ExternalProgramNotFound: argv[0] is not on PATH
        ExternalProgramFailed: the program exited non-zero
    """
    program = argv[0]
    executable = shutil.which(program)
    if executable is None:
        raise ExternalProgramNotFound(program)

    logger.debug("Running: %s", preview(argv))
    result = subprocess.run([executable, *argv[1:]])

    exit_code = result.returncode
    if exit_code < 0:
        # Killed by signal -N
        exit_code = 128 - exit_code
    if exit_code != 0:
        raise ExternalProgramFailed(program, exit_code)
    return exit_code
