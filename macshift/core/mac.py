"""MAC address value type."""

import random
import re
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidDigitError, InvalidLengthError


Octet = Annotated[int, Field(ge=0, le=255)]

MAC_LENGTH = 6

_SEPARATORS = re.compile(r"[:-]")
_OCTET = re.compile(r"[0-9A-Fa-f]{1,2}")


def _set_locally_administered(mac_bytes: bytearray) -> None:
    """Set the locally administered bit and unset the multicast bit."""

    mac_bytes[0] &= 0xFE  # Unset multicast bit
    mac_bytes[0] |= 0x02  # Set locally administered bit


class MacAddress(BaseModel):
    """Six octets of a hardware address, octet 0 first."""

    model_config = ConfigDict(frozen=True)

    octets: tuple[Octet, Octet, Octet, Octet, Octet, Octet]

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``AA:BB:CC:DD:EE:FF`` (or ``-`` separated) text.

        Raises ``InvalidLengthError`` unless there are exactly six fields and
        ``InvalidDigitError`` for the first field that is not a hex octet.
        """

        octets: list[int] = []
        for field in _SEPARATORS.split(text):
            if len(octets) == MAC_LENGTH:
                raise InvalidLengthError(text)
            if not _OCTET.fullmatch(field):
                raise InvalidDigitError(text)
            octets.append(int(field, 16))

        if len(octets) != MAC_LENGTH:
            raise InvalidLengthError(text)

        return cls(octets=tuple(octets))

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        if len(data) != MAC_LENGTH:
            raise InvalidLengthError(data.hex(":"))
        return cls(octets=tuple(data))

    @classmethod
    def random(cls) -> Self:
        """Generate a random unicast, locally administered address."""

        mac_bytes = bytearray(random.getrandbits(8) for _ in range(MAC_LENGTH))
        _set_locally_administered(mac_bytes)
        return cls.from_bytes(bytes(mac_bytes))

    @property
    def is_multicast(self) -> bool:
        return bool(self.octets[0] & 0x01)

    @property
    def is_locally_administered(self) -> bool:
        return bool(self.octets[0] & 0x02)

    @property
    def is_zero(self) -> bool:
        return not any(self.octets)

    def format(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)

    def __str__(self) -> str:
        return self.format()
