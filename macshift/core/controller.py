"""Base controller class for business logic."""

from typing import TYPE_CHECKING, Generic, TypeVar

from rich.markup import escape


if TYPE_CHECKING:
    from .application import Application


AppT = TypeVar("AppT", bound="Application")


class BaseController(Generic[AppT]):  # noqa: UP046
    """Base class for controllers."""

    def __init__(self, app: AppT) -> None:
        self._app = app

    @property
    def app(self) -> AppT:
        return self._app

    @property
    def console(self):
        return self._app.console

    def debug(self, message: str) -> None:
        """Print a diagnostic line when the application runs in debug mode."""

        if self._app.debug:
            self._app.console.print(f"[dim]{escape(message)}[/dim]", highlight=False)
