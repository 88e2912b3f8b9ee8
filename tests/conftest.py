import io
import socket
from collections import namedtuple

import pytest
from rich.console import Console

from macshift.controllers import interfaces
from macshift.controllers.interfaces import AF_LINK
from macshift.core.application import Application


Entry = namedtuple("Entry", ["family", "address"])


def link(address: str | None) -> Entry:
    return Entry(AF_LINK, address)


def inet(address: str) -> Entry:
    return Entry(socket.AF_INET, address)


def inet6(address: str) -> Entry:
    return Entry(socket.AF_INET6, address)


class FakeMessage(dict):
    """Netlink message: header fields as items, NLA attributes via get_attr."""

    def __init__(self, attrs: dict, **fields) -> None:
        super().__init__(fields)
        self.attrs = attrs

    def get_attr(self, name: str):
        return self.attrs.get(name)


def link_msg(index: int, name: str, address: str | None = None) -> FakeMessage:
    attrs = {"IFLA_IFNAME": name}
    if address is not None:
        attrs["IFLA_ADDRESS"] = address
    return FakeMessage(attrs, index=index, family=socket.AF_UNSPEC)


def addr_msg(index: int, family: int, address: str, label: str | None = None) -> FakeMessage:
    attrs = {"IFA_ADDRESS": address}
    if label is not None:
        attrs["IFA_LABEL"] = label
    return FakeMessage(attrs, index=index, family=family)


class FakeIPRoute:
    def __init__(self, links: list[FakeMessage], addrs: list[FakeMessage]) -> None:
        self.links = links
        self.addrs = addrs

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def get_links(self):
        return iter(self.links)

    def get_addr(self):
        return iter(self.addrs)


def _dumps(table: dict[str, list[Entry]]) -> tuple[list[FakeMessage], list[FakeMessage]]:
    """Build link and address dumps the way the kernel orders them."""

    links = []
    addrs = []
    for index, (name, entries) in enumerate(table.items(), start=1):
        hw = next((e.address for e in entries if e.family == AF_LINK), None)
        links.append(link_msg(index, name, hw))
        for entry in entries:
            if entry.family == socket.AF_INET:
                addrs.append(addr_msg(index, entry.family, entry.address, label=name))
            elif entry.family == socket.AF_INET6:
                addrs.append(addr_msg(index, entry.family, entry.address))
    addrs.sort(key=lambda msg: msg["family"] != socket.AF_INET)
    return links, addrs


@pytest.fixture
def netlink(monkeypatch):
    """Serve fixed link and address dumps instead of querying the kernel."""

    def install(links: list[FakeMessage], addrs: list[FakeMessage] | None = None) -> None:
        monkeypatch.setattr(interfaces, "IPRoute", lambda: FakeIPRoute(links, addrs or []))

    return install


@pytest.fixture
def iface_table(monkeypatch):
    """Replace the OS interface table with a mapping of name to entries."""

    table: dict[str, list[Entry]] = {}
    monkeypatch.setattr(interfaces, "IPRoute", lambda: FakeIPRoute(*_dumps(table)))
    return table


@pytest.fixture
def app():
    Application.reset()
    application = Application(console=Console(file=io.StringIO(), width=200, emoji=False))
    Application._instance = application
    yield application
    Application.reset()


@pytest.fixture
def output(app):
    return lambda: app.console.file.getvalue()


@pytest.fixture
def applied(app, monkeypatch):
    """Record link changes instead of running any command."""

    calls = []

    def set_address(interface, address, previous=None):
        calls.append((interface, address, previous))

    monkeypatch.setattr(app.link, "set_address", set_address)
    return calls
