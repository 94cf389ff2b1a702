"""Configuration models for sshhop."""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from sshhop.errors import ConfigError

CONFIG_ENV = "SSHHOP_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/sshhop/config.yaml")


class SSHHopConfig(BaseModel):
    """Main sshhop configuration."""

    program: str = "ssh"
    dialect: Literal["flat", "nested"] = "flat"  # Used by 'sshhop run'
    options: dict[str, str] = {}  # Passed as -o Key=Value at every hop

    @field_validator("program")
    @classmethod
    def validate_program(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("program must not be empty")
        return v

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: dict[str, str]) -> dict[str, str]:
        for key in v:
            if not key or "=" in key or " " in key:
                raise ValueError(f"Invalid ssh option name: {key!r}")
        return v

    def option_args(self) -> list[str]:
        """Render options as ssh -o arguments."""
        args = []
        for key, value in self.options.items():
            args += ["-o", f"{key}={value}"]
        return args


def config_path() -> Path:
    """Location of the config file: $SSHHOP_CONFIG or ~/.config/sshhop/config.yaml."""
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()


def load_config(path: Path | None = None) -> SSHHopConfig:
    """Load configuration from YAML file. A missing file yields the defaults."""
    path = path or config_path()
    if not path.exists():
        return SSHHopConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read {path}", str(e)) from e

    try:
        return SSHHopConfig(**(data or {}))
    except (TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid configuration in {path}", str(e)) from e


def get_config_template() -> str:
    """Get the default configuration template."""
    return """# sshhop configuration

# Relay program invoked at every hop. Must understand -J, -W, -o, -l and -p.
program: ssh

# Dialect used by 'sshhop run':
#   flat   - one 'ssh -J hop1,hop2 -W dest:port last-hop' invocation
#   nested - one ssh per hop, each reached through the previous one's ProxyCommand
dialect: flat

# Extra ssh options added as '-o Key=Value' to every invocation in the chain.
options: {}
#  BatchMode: "yes"
#  ConnectTimeout: "10"
"""
