"""macshift models.

This package contains:
- requests: What the operator asked for (current, random, set)
- actions: Interface table entries and resolved actions
"""

from .actions import (
    Advisory,
    ApplyExplicit,
    ApplyRandom,
    InterfaceRecord,
    InvalidAddress,
    Resolution,
    ResolvedAction,
    ShowCurrent,
    ShowCurrentNotFound,
    ShowRandom,
)
from .requests import CurrentRequest, RandomRequest, Request, SetRequest


__all__ = [
    # Requests
    "CurrentRequest",
    "RandomRequest",
    "Request",
    "SetRequest",
    # Actions
    "Advisory",
    "ApplyExplicit",
    "ApplyRandom",
    "InterfaceRecord",
    "InvalidAddress",
    "Resolution",
    "ResolvedAction",
    "ShowCurrent",
    "ShowCurrentNotFound",
    "ShowRandom",
]
