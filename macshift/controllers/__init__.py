"""macshift controllers."""

from .interfaces import InterfaceController
from .link import LinkController
from .selection import SelectionController


__all__ = [
    "InterfaceController",
    "LinkController",
    "SelectionController",
]
