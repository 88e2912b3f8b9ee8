"""macshift core framework."""

from .application import Application
from .controller import BaseController
from .mac import MacAddress


__all__ = [
    "Application",
    "BaseController",
    "MacAddress",
]
