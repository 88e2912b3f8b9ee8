"""Application singleton with dependency injection for controllers."""

from typing import Any, Self

from rich.console import Console

from ..controllers.interfaces import InterfaceController
from ..controllers.link import LinkController
from ..controllers.selection import SelectionController


class Application:
    """Main application."""

    _instance: Self | None = None

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(emoji=False)
        self._controllers: dict[str, Any] = {}
        self._debug: bool = False

    @classmethod
    def current(cls) -> Self:
        """Get current application instance."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance."""

        cls._instance = None

    @property
    def console(self) -> "Console":
        """Get rich console for displaying messages."""

        return self._console

    @property
    def debug(self) -> bool:
        """Get debug mode flag."""

        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        """Set debug mode flag."""

        self._debug = value

    @property
    def interfaces(self) -> InterfaceController:
        """Get interface controller."""

        if "interfaces" not in self._controllers:
            self._controllers["interfaces"] = InterfaceController(self)
        return self._controllers["interfaces"]

    @property
    def link(self) -> LinkController:
        """Get link controller."""

        if "link" not in self._controllers:
            self._controllers["link"] = LinkController(self)
        return self._controllers["link"]

    @property
    def selection(self) -> SelectionController:
        """Get selection controller."""

        if "selection" not in self._controllers:
            self._controllers["selection"] = SelectionController(self)
        return self._controllers["selection"]
