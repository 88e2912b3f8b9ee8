"""Selection controller: decides which address goes to which interface."""

from typing import TYPE_CHECKING, assert_never

from rich.markup import escape

from ..core.controller import BaseController
from ..core.errors import FatalInvariantViolation, MacParseError
from ..core.mac import MacAddress
from ..models.actions import (
    FIRST_VALID_INTERFACE,
    INTERFACE_ALONE,
    NOTHING_TO_SET,
    RANDOM_OVERRIDES_ADDRESS,
    Advisory,
    ApplyExplicit,
    ApplyRandom,
    InvalidAddress,
    Resolution,
    ShowCurrent,
    ShowCurrentNotFound,
    ShowRandom,
)
from ..models.requests import CurrentRequest, RandomRequest, Request, SetRequest


if TYPE_CHECKING:
    from ..core.application import Application


class SelectionController(BaseController["Application"]):
    """Controller resolving a request into exactly one action.

    Resolution reads the interface table but never changes it; ``run`` then
    performs the resolved action, invoking the link controller at most once.
    """

    def resolve(self, request: Request) -> Resolution:
        """Resolve a request into an action and its advisories."""

        match request:
            case CurrentRequest():
                found = self.app.interfaces.lookup()
                if found is None:
                    return Resolution(action=ShowCurrentNotFound())
                name, address = found
                return Resolution(action=ShowCurrent(interface=name, address=address))
            case RandomRequest():
                return Resolution(action=ShowRandom(address=MacAddress.random()))
            case SetRequest():
                return self._resolve_set(request)
            case _:
                assert_never(request)

    def _resolve_set(self, request: SetRequest) -> Resolution:
        advisories: list[str] = []
        apply: type[ApplyExplicit] | type[ApplyRandom]

        if request.interface is not None and request.address is None and not request.random:
            return Resolution(action=Advisory(message=INTERFACE_ALONE))

        if request.random:
            if request.address is not None:
                advisories.append(RANDOM_OVERRIDES_ADDRESS)
            address = MacAddress.random()
            apply = ApplyRandom
        elif request.address is not None:
            try:
                address = MacAddress.parse(request.address)
            except MacParseError as e:
                return Resolution(action=InvalidAddress(text=request.address, reason=e.kind))
            apply = ApplyExplicit
        else:
            return Resolution(action=Advisory(message=NOTHING_TO_SET))

        interfaces = self.app.interfaces
        if request.interface is not None:
            records = interfaces.records()
            if not interfaces.exists(request.interface, records):
                return Resolution(
                    action=Advisory(message=f"Interface doesn't exist: '{request.interface}'"),
                    advisories=advisories,
                )
            current = interfaces.lookup(request.interface, records)
            return Resolution(
                action=apply(
                    interface=request.interface,
                    address=address,
                    previous=current[1] if current else None,
                ),
                advisories=advisories,
            )

        advisories.append(FIRST_VALID_INTERFACE)
        found = interfaces.lookup()
        if found is None:
            raise FatalInvariantViolation("No interface with a hardware address was found", advisories)
        name, previous = found
        return Resolution(action=apply(interface=name, address=address, previous=previous), advisories=advisories)

    def _advise(self, advisories: list[str]) -> None:
        for message in advisories:
            self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def run(self, request: Request) -> Resolution:
        """Resolve a request, report it and apply the address if one was chosen."""

        try:
            resolution = self.resolve(request)
        except FatalInvariantViolation as e:
            self._advise(e.advisories)
            raise
        self._advise(resolution.advisories)

        action = resolution.action
        match action:
            case ShowCurrent():
                self.console.print(
                    f"Your current MAC address ({escape(action.interface)}): [bold green]{action.address}[/bold green]"
                )
            case ShowCurrentNotFound():
                self.console.print("[bold red]No MAC address found :([/bold red]")
            case ShowRandom():
                self.console.print(f"Random MAC address: [bold green]{action.address}[/bold green]")
            case ApplyExplicit() | ApplyRandom():
                self.app.link.set_address(action.interface, action.address, previous=action.previous)
                self.console.print(
                    f"Set MAC address ({escape(action.interface)}) to [bold green]{action.address}[/bold green]"
                )
            case Advisory():
                self.console.print(f"[red]{escape(action.message)}[/red]")
            case InvalidAddress():
                self.console.print(
                    f"Not a valid MAC address: [bold red]'{escape(action.text)}'[/bold red] ({action.reason})"
                )
            case _:
                assert_never(action)

        return resolution
