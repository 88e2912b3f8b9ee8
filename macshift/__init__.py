"""macshift - inspect, randomize or set the MAC address of a network interface."""

__version__ = "0.1.0"

from .core.application import Application
from .core.controller import BaseController
from .core.errors import FatalInvariantViolation, InvalidDigitError, InvalidLengthError, MacParseError
from .core.mac import MacAddress


__all__ = [
    "__version__",
    "Application",
    "BaseController",
    "FatalInvariantViolation",
    "InvalidDigitError",
    "InvalidLengthError",
    "MacAddress",
    "MacParseError",
]
