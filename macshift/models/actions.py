"""Interface table entries and the outcomes of request resolution."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.mac import MacAddress


INTERFACE_ALONE = "You can't just pass an interface, use -r for a random address or use -a to specify an address"
NOTHING_TO_SET = "Nothing to set, use -r for a random address or use -a to specify an address"
RANDOM_OVERRIDES_ADDRESS = "Using a random MAC address even though the '--address' flag was specified"
FIRST_VALID_INTERFACE = "No interface provided, using the first valid interface"


class InterfaceRecord(BaseModel):
    """One entry of the OS interface address table."""

    model_config = ConfigDict(frozen=True)

    name: str
    """Interface name."""

    family: int
    """Address family of the entry."""

    address: MacAddress | None = None
    """Hardware address, only for link-layer entries."""


class ShowCurrent(BaseModel):
    kind: Literal["show_current"] = "show_current"
    interface: str
    address: MacAddress


class ShowCurrentNotFound(BaseModel):
    kind: Literal["show_current_not_found"] = "show_current_not_found"


class ShowRandom(BaseModel):
    kind: Literal["show_random"] = "show_random"
    address: MacAddress


class ApplyExplicit(BaseModel):
    kind: Literal["apply_explicit"] = "apply_explicit"
    interface: str
    address: MacAddress
    previous: MacAddress | None = None


class ApplyRandom(BaseModel):
    kind: Literal["apply_random"] = "apply_random"
    interface: str
    address: MacAddress
    previous: MacAddress | None = None


class Advisory(BaseModel):
    """Terminal notice; nothing is applied."""

    kind: Literal["advisory"] = "advisory"
    message: str


class InvalidAddress(BaseModel):
    """The requested address did not parse."""

    kind: Literal["invalid_address"] = "invalid_address"
    text: str
    reason: str


ResolvedAction = ShowCurrent | ShowCurrentNotFound | ShowRandom | ApplyExplicit | ApplyRandom | Advisory | InvalidAddress


class Resolution(BaseModel):
    """A resolved action plus the non-terminal advisories emitted on the way."""

    action: ResolvedAction = Field(discriminator="kind")
    advisories: list[str] = Field(default_factory=list)

    @property
    def applies(self) -> bool:
        return isinstance(self.action, ApplyExplicit | ApplyRandom)
