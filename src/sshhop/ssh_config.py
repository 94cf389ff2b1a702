"""SSH config parsing utilities."""

from dataclasses import dataclass
from pathlib import Path

from sshhop.errors import ConfigError
from sshhop.types import DEFAULT_PORT


@dataclass
class SSHHost:
    """Parsed SSH host configuration."""

    name: str
    hostname: str
    user: str | None = None
    port: int = DEFAULT_PORT
    proxy_jump: str | None = None


def parse_ssh_config(path: Path | None = None) -> list[SSHHost]:
    """Parse an ssh_config file (default ~/.ssh/config) and return its concrete hosts.

    Raises:
        ConfigError: the file cannot be read or parsed
    """
    from paramiko.config import SSHConfig
    from paramiko.ssh_exception import ConfigParseError

    config_path = path or Path.home() / ".ssh" / "config"

    if not config_path.exists():
        return []

    try:
        config = SSHConfig.from_path(str(config_path))
    except (OSError, ConfigParseError) as e:
        raise ConfigError(f"Cannot parse {config_path}", str(e)) from e

    hosts = []
    seen_hosts: set[str] = set()

    for pattern in sorted(config.get_hostnames()):
        if "*" in pattern or "?" in pattern or pattern.startswith("!"):
            continue
        if pattern in seen_hosts:
            continue
        seen_hosts.add(pattern)

        host_config = config.lookup(pattern)

        port = DEFAULT_PORT
        if "port" in host_config:
            try:
                port = int(host_config["port"])
            except ValueError:
                pass

        hosts.append(
            SSHHost(
                name=pattern,
                hostname=host_config.get("hostname", pattern),
                user=host_config.get("user"),
                port=port,
                proxy_jump=host_config.get("proxyjump"),
            )
        )

    return hosts
