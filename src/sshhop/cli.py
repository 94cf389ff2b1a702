"""sshhop CLI."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sshhop.builders import get_builder
from sshhop.command import preview, run_command
from sshhop.config import config_path, get_config_template, load_config
from sshhop.errors import ExternalProgramFailed, HopError, UsageError
from sshhop.resolver import USAGE, resolve
from sshhop.ssh_config import parse_ssh_config

app = typer.Typer(
    help="sshhop - chain ssh jump hosts for a single ProxyCommand",
    add_completion=False,
)
console = Console()
# stdout carries the relayed stream when running as a ProxyCommand
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

# Hop flags and --debug are left to the resolver
PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


def setup_logging(verbose: bool = False):
    """Configure logging with rich handler on stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )
    logging.getLogger("paramiko").setLevel(logging.WARNING)


def print_error(error: HopError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)


def relay(dialect: str | None, args: list[str], config_file: Path | None, verbose: bool) -> None:
    """Resolve the hop chain, then preview or run the relay program."""
    setup_logging(verbose)

    try:
        config = load_config(config_file)
        builder = get_builder(dialect or config.dialect)
        chain = resolve(args, allow_single_destination=builder.allow_single_destination)
        argv = builder.command(builder.build(chain), config)
    except UsageError as e:
        print_error(e)
        err_console.print(f"Usage: sshhop {dialect or 'run'} {escape(USAGE)}", soft_wrap=True)
        raise typer.Exit(e.exit_code)
    except HopError as e:
        print_error(e)
        raise typer.Exit(e.exit_code)

    if chain.debug:
        typer.echo(preview(argv))
        raise typer.Exit(0)

    try:
        run_command(argv)
    except ExternalProgramFailed as e:
        logger.debug("%s", e)
        raise typer.Exit(e.exit_code)
    except HopError as e:
        print_error(e)
        raise typer.Exit(e.exit_code)
    except KeyboardInterrupt:
        raise typer.Exit(130)


@app.command(context_settings=PASSTHROUGH)
def flat(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(None, "--config", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr"),
):
    """Relay through all hops but the last with one 'ssh -J' list.

    Usage: sshhop flat [--debug] -J <hop> [-J <hop> ...] <destHost> <destPort>
    """
    relay("flat", ctx.args, config_file, verbose)


@app.command(context_settings=PASSTHROUGH)
def nested(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(None, "--config", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr"),
):
    """Reach every hop through a nested ProxyCommand.

    Usage: sshhop nested [--debug] -J <hop> [-J <hop> ...] <destHost> [<destPort>]
    """
    relay("nested", ctx.args, config_file, verbose)


@app.command(context_settings=PASSTHROUGH)
def run(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(None, "--config", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr"),
):
    """Relay using the dialect set in the config file."""
    relay(None, ctx.args, config_file, verbose)


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite without asking"),
):
    """Write a config template."""
    path = config_path()

    if path.exists() and not force:
        console.print(f"[yellow]Warning:[/yellow] {path} already exists.")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit(0)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(get_config_template())

    console.print(f"[green]Wrote config template.[/green]")
    console.print(f"  Config: {path}")


@app.command()
def hosts(
    ssh_config: Path | None = typer.Option(None, "--ssh-config", help="ssh_config file (default: ~/.ssh/config)"),
):
    """List hosts from ssh_config that can be used as hops."""
    try:
        entries = parse_ssh_config(ssh_config)
    except HopError as e:
        print_error(e)
        raise typer.Exit(e.exit_code)

    if not entries:
        console.print("No hosts found.")
        return

    table = Table()
    table.add_column("Host")
    table.add_column("HostName")
    table.add_column("User")
    table.add_column("Port")
    table.add_column("ProxyJump")

    for entry in entries:
        table.add_row(
            entry.name,
            entry.hostname,
            entry.user or "",
            str(entry.port),
            entry.proxy_jump or "",
        )
    console.print(table)
    console.print("\nUse any Host as a hop, e.g. sshhop flat -J <host> %h %p")


if __name__ == "__main__":
    app()
