"""macshift CLI."""

import socket
import subprocess
import sys

import click
import rich_click
from rich.markup import escape
from rich.table import Table

from . import __version__
from .controllers.interfaces import AF_LINK
from .core.application import Application
from .core.paramtypes import InterfaceNameType
from .models.actions import InvalidAddress
from .models.requests import CurrentRequest, RandomRequest, Request, SetRequest


# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
rich_click.rich_click.USE_MARKDOWN = False
rich_click.rich_click.STYLE_ERRORS_SUGGESTION = "dim italic"
rich_click.rich_click.MAX_WIDTH = 100


def _execute(app: Application, request: Request) -> None:
    """Run a request and translate failures into process exit codes."""

    try:
        resolution = app.selection.run(request)
    except subprocess.CalledProcessError as e:
        raise SystemExit(f"Failed to set MAC address: {e}") from e
    except OSError as e:
        raise SystemExit(f"Failed to get MAC and interface info: {e}") from e

    if isinstance(resolution.action, InvalidAddress):
        sys.exit(1)


def _family_name(family: int) -> str:
    if family == AF_LINK:
        return "link"
    try:
        return socket.AddressFamily(family).name
    except ValueError:
        return str(family)


@click.group(
    cls=rich_click.RichGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="macshift")
@click.option("-c", "--current", is_flag=True, help="Print current MAC address.")
@click.option("-r", "--random", "random_mac", is_flag=True, help="Generate a random MAC address.")
@click.option(
    "--sudo/--no-sudo",
    default=True,
    show_default=True,
    envvar="MACSHIFT_SUDO",
    help="Run link commands through sudo.",
)
@click.option(
    "--ip-command",
    default="ip",
    show_default=True,
    envvar="MACSHIFT_IP",
    help="iproute2 binary used to change the link.",
)
@click.option("--dry-run", is_flag=True, help="Print link commands instead of running them.")
@click.option("--debug", is_flag=True, envvar="MACSHIFT_DEBUG", help="Echo every executed command.")
@click.pass_context
def cli(
    ctx: click.Context,
    current: bool,
    random_mac: bool,
    sudo: bool,
    ip_command: str,
    dry_run: bool,
    debug: bool,
):
    """A simple MAC address utility."""

    app = Application.current()
    app.debug = debug
    app.link.configure(sudo=sudo, ip_command=ip_command, dry_run=dry_run)
    ctx.obj = {"app": app}

    # -c wins over -r, and both win over any subcommand
    if current:
        _execute(app, CurrentRequest())
    elif random_mac:
        _execute(app, RandomRequest())
    elif ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    else:
        return
    ctx.exit(0)


@cli.command("set")
@click.option("-a", "--address", default=None, help="New MAC address to use.")
@click.option("-i", "--interface", default=None, type=InterfaceNameType(), help="Interface to use (name).")
@click.option("-r", "--random", "random_mac", is_flag=True, help="Use a random MAC address.")
@click.pass_obj
def set_address(obj, address: str | None, interface: str | None, random_mac: bool):
    """Set MAC address."""

    app: Application = obj["app"]
    _execute(app, SetRequest(address=address, interface=interface, random=random_mac))


@cli.command("interfaces")
@click.pass_obj
def list_interfaces(obj):
    """List interface table entries."""

    app: Application = obj["app"]
    try:
        records = app.interfaces.records()
    except OSError as e:
        raise SystemExit(f"Failed to get interface info: {e}") from e

    if not records:
        app.console.print("[yellow]No interfaces found.[/yellow]")
        return

    table = Table(title="Interfaces", show_header=True)
    table.add_column("Interface", style="cyan")
    table.add_column("Family")
    table.add_column("MAC address", style="green")
    for record in records:
        table.add_row(escape(record.name), _family_name(record.family), str(record.address or ""))
    app.console.print(table)


def main() -> None:
    cli()
