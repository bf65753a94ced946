"""Exceptions and warnings raised by the FBP engine."""

from __future__ import annotations


class UnknownFuelType(ValueError):
    """Raised when a fuel type code is not one of the 17 FBP fuel types.

    Attributes:
        codes: The offending codes, in order of first appearance.
    """

    def __init__(self, codes: list[str]):
        self.codes = codes
        super().__init__(f"Unknown FBP fuel type(s): {', '.join(repr(c) for c in codes)}")


class DomainWarning(RuntimeWarning):
    """Degenerate numeric input that yields a defined limiting value."""
