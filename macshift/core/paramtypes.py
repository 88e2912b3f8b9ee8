"""Custom Click paramtypes with shell completion support."""

import click
from click.shell_completion import CompletionItem


class InterfaceNameType(click.ParamType):
    """Interface name; existence is checked when the request is resolved."""

    name = "interface"

    def shell_complete(self, ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
        """Provide shell completion for interface names."""

        try:
            from .application import Application

            records = Application.current().interfaces.records()
        except OSError:
            return []

        names = dict.fromkeys(record.name for record in records)
        return [CompletionItem(name) for name in names if name.startswith(incomplete)]
