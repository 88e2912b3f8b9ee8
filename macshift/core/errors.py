"""Exceptions raised by the macshift core."""


class MacParseError(ValueError):
    """Text could not be parsed as a MAC address."""

    kind: str = "invalid address"

    def __init__(self, text: str) -> None:
        super().__init__(f"{self.kind}: {text!r}")
        self.text = text


class InvalidDigitError(MacParseError):
    """A field is not a 1-2 digit hexadecimal octet."""

    kind = "invalid digit"


class InvalidLengthError(MacParseError):
    """The address does not have exactly six fields."""

    kind = "invalid length"


class FatalInvariantViolation(RuntimeError):
    """The host has no usable interface where one is required."""

    def __init__(self, message: str, advisories: list[str] | None = None) -> None:
        super().__init__(message)
        self.advisories = advisories or []
