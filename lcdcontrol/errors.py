"""Exceptions raised by the display driver."""

from __future__ import annotations

import enum
from typing import Any


class Port(enum.Enum):
    """The pin or interface an I/O error occurred on."""

    D0 = enum.auto()
    D1 = enum.auto()
    D2 = enum.auto()
    D3 = enum.auto()
    D4 = enum.auto()
    D5 = enum.auto()
    D6 = enum.auto()
    D7 = enum.auto()
    RS = enum.auto()
    EN = enum.auto()
    I2C = enum.auto()


class DisplayError(Exception):
    """Base class for all display errors."""


class IoError(DisplayError):
    """An I/O operation on a pin or bus failed."""

    def __init__(self, port: Port, error: Any) -> None:
        super().__init__(f"error on {port.name}: {error!r}")
        self.port = port
        self.error = error
        if isinstance(error, BaseException):
            self.__cause__ = error


class PositionError(DisplayError):
    """Coordinates do not fit on the display."""

    def __init__(self, position: tuple[int, int], size: tuple[int, int]) -> None:
        super().__init__(
            f"coordinates out of bounds: ({position[0]};{position[1]}) "
            f"not fitting in a {size[0]}x{size[1]} display"
        )
        self.position = position
        self.size = size


class InitError(DisplayError):
    """Setting up the display failed; carries the options back for a retry."""

    def __init__(self, options: Any, error: DisplayError) -> None:
        super().__init__(str(error))
        self.options = options
        self.error = error
        self.__cause__ = error