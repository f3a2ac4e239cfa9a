"""Exception types raised by the statistics functions."""

from __future__ import annotations


class StatsError(ValueError):
    """Base class for every error the package raises."""

    default_message = "Statistics error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyInputError(StatsError):
    """The input holds no values."""

    default_message = "Input must not be empty."


class NaNError(StatsError):
    """A value is not a number."""

    default_message = "Not a number."


class NegativeError(StatsError):
    """The input holds a negative value where none is allowed."""

    default_message = "Must not contain negative values."


class ZeroError(StatsError):
    """The input holds a zero where none is allowed."""

    default_message = "Must not contain zero values."


class BoundsError(StatsError):
    """An argument lies outside of its permitted range."""

    default_message = "Input is outside of range."


class SizeError(StatsError):
    """Two inputs that must be the same length are not."""

    default_message = "Must be the same length."


class InfValueError(StatsError):
    """A result is infinite."""

    default_message = "Value is infinite."


class YCoordError(StatsError):
    """A Y coordinate is negative where it must not be."""

    default_message = "Y Value must be greater than zero."