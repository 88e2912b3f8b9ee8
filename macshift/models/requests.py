"""What the operator asked for on the command line."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class CurrentRequest(BaseModel):
    """Show the address of the first interface with a real hardware address."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["current"] = "current"


class RandomRequest(BaseModel):
    """Print a random address without applying it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["random"] = "random"


class SetRequest(BaseModel):
    """Apply an explicit or random address to an interface."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["set"] = "set"

    address: str | None = None
    """Address text as typed; parsed during resolution."""

    interface: str | None = None
    """Target interface; the first valid one when omitted."""

    random: bool = False
    """Use a random address, overriding ``address``."""


Request = CurrentRequest | RandomRequest | SetRequest
