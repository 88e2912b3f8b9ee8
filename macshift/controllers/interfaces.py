"""Interface controller for querying the OS network interface table."""

import socket
from typing import TYPE_CHECKING

from pyroute2 import IPRoute
from pyroute2.netlink.exceptions import NetlinkError

from ..core.controller import BaseController
from ..core.errors import MacParseError
from ..core.mac import MacAddress
from ..models.actions import InterfaceRecord


if TYPE_CHECKING:
    from ..core.application import Application


AF_LINK = socket.AF_PACKET


def _link_address(text: str | None) -> MacAddress | None:
    """Parse a link-layer payload, ``None`` unless it is a 6-octet address."""

    if not text:
        return None
    try:
        return MacAddress.parse(text)
    except MacParseError:
        return None


class InterfaceController(BaseController["Application"]):
    """Controller for interface enumeration and lookup.

    Every query takes a fresh snapshot of the interface table. Entries are
    kept in the order the kernel dumps them, the same order getifaddrs(3)
    reports: one link-layer entry per interface, then the IP addresses.
    """

    def records(self) -> list[InterfaceRecord]:
        """List all interface address entries, one per address family."""

        try:
            with IPRoute() as ipr:
                links = list(ipr.get_links())
                addrs = list(ipr.get_addr())
        except NetlinkError as e:
            raise OSError(e.code, f"netlink: {e}") from e

        names: dict[int, str] = {}
        records = []
        for msg in links:
            name = msg.get_attr("IFLA_IFNAME")
            names[msg["index"]] = name
            address = _link_address(msg.get_attr("IFLA_ADDRESS"))
            records.append(InterfaceRecord(name=name, family=AF_LINK, address=address))

        for msg in addrs:
            name = msg.get_attr("IFA_LABEL") or names.get(msg["index"])
            if name is None:
                continue
            records.append(InterfaceRecord(name=name, family=int(msg["family"])))
        return records

    def exists(self, name: str, records: list[InterfaceRecord] | None = None) -> bool:
        """Check if an interface exists (given the name)."""

        if records is None:
            records = self.records()
        return any(record.name == name for record in records)

    def lookup(
        self,
        name: str | None = None,
        records: list[InterfaceRecord] | None = None,
    ) -> tuple[str, MacAddress] | None:
        """Get an interface name and its hardware address.

        With a name, return that interface's link-layer address even when it
        is all zero. Without one, return the first interface whose address is
        not all zero. Pass ``records`` to reuse an earlier snapshot.
        """

        if records is None:
            records = self.records()
        for record in records:
            if record.address is None:
                continue
            if name is not None:
                if record.name == name:
                    return record.name, record.address
            elif not record.address.is_zero:
                return record.name, record.address
        return None
