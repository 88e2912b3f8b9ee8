"""Link controller for changing an interface's hardware address."""

import shutil
import subprocess
from typing import TYPE_CHECKING

from rich.markup import escape

from ..core.controller import BaseController


if TYPE_CHECKING:
    from ..core.application import Application
    from ..core.mac import MacAddress


def need(bin_name: str) -> str:
    p = shutil.which(bin_name)
    if not p:
        raise SystemExit(f"Required binary not found in PATH: {bin_name}")
    return p


class LinkController(BaseController["Application"]):
    """Controller for privileged link mutation through iproute2.

    The change is a three step sequence: bring the interface down, set the
    address, bring it back up. Each step is a separate command.
    """

    def __init__(self, app: "Application") -> None:
        super().__init__(app)
        self.sudo: bool = True
        self.ip_command: str = "ip"
        self.dry_run: bool = False

    def configure(
        self,
        sudo: bool | None = None,
        ip_command: str | None = None,
        dry_run: bool | None = None,
    ) -> None:
        """Configure how mutation commands are run."""

        if sudo is not None:
            self.sudo = sudo
        if ip_command:
            self.ip_command = ip_command
        if dry_run is not None:
            self.dry_run = dry_run

    def _link_cmd(self, interface: str, *args: str) -> list[str]:
        cmd = [self.ip_command, "link", "set", interface, *args]
        if self.sudo:
            cmd.insert(0, "sudo")
        return cmd

    def _run(self, cmd: list[str]) -> None:
        """Run a command and raise on failure."""

        if self.dry_run:
            self.console.print(escape(" ".join(cmd)), highlight=False)
            return
        self.debug(f"$ {' '.join(cmd)}")
        subprocess.run(cmd, check=True)  # noqa: S603

    def set_address(
        self,
        interface: str,
        address: "MacAddress",
        previous: "MacAddress | None" = None,
    ) -> None:
        """Set the hardware address of an interface.

        If setting the address or bringing the link back up fails, try to put
        the interface back up with ``previous`` before re-raising.
        """

        if not self.dry_run:
            if self.sudo:
                need("sudo")
            need(self.ip_command)

        self._run(self._link_cmd(interface, "down"))
        try:
            self._run(self._link_cmd(interface, "address", str(address)))
            self._run(self._link_cmd(interface, "up"))
        except (subprocess.CalledProcessError, OSError):
            self._restore(interface, previous)
            raise

    def _restore(self, interface: str, previous: "MacAddress | None") -> None:
        """Best-effort rollback after a failed address change."""

        steps = []
        if previous is not None:
            steps.append(self._link_cmd(interface, "address", str(previous)))
        steps.append(self._link_cmd(interface, "up"))

        for cmd in steps:
            try:
                self._run(cmd)
            except (subprocess.CalledProcessError, OSError) as e:
                self.console.print(
                    f"[red]Rollback step failed ({escape(' '.join(cmd))}): {escape(str(e))}[/red]",
                    highlight=False,
                )
