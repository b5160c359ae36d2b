"""Mapping of display coordinates to DDRAM addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .modes import DisplaySize


def scrollable_margin(width: int, height: int, line_width: int) -> int:
    """Return the number of off-screen columns each line can scroll into."""
    margin = line_width - width * ((height + 1) // 2)
    if margin < 0:
        raise ValueError(
            f"a {width}x{height} display does not fit in lines of {line_width} columns"
        )
    return margin


class DisplayMemoryMap(ABC):
    """How characters on a display are laid out in the controller's memory."""

    @abstractmethod
    def address_for_xy(self, x: int, y: int) -> Optional[int]:
        """Return the address of a character, respecting the scrollable margin."""

    @abstractmethod
    def columns_in_line(self, y: int) -> int:
        """Return the columns of a line, including the scrollable margin."""

    @abstractmethod
    def display_size(self) -> DisplaySize:
        """Return the size of the physical display."""


@dataclass(frozen=True)
class StandardMemoryMap(DisplayMemoryMap):
    """The common memory layout of two- to four-line displays."""

    width: int
    height: int
    line_width: int = 40

    def __post_init__(self) -> None:
        if not 2 <= self.height <= 4:
            raise ValueError(
                "1 and 5+ line displays are not covered by StandardMemoryMap"
            )
        scrollable_margin(self.width, self.height, self.line_width)

    def address_for_xy(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or y >= self.height or x >= self.columns_in_line(y):
            return None
        address = x
        if y & 1:
            address += 0x40
        if y & 2:
            address += self.width
        return address

    def columns_in_line(self, y: int) -> int:
        # On three- and four-line displays only rows 3 and 4 can scroll.
        if self.height >= 3 and not y & 2:
            return self.width
        return self.width + scrollable_margin(self.width, self.height, self.line_width)

    def display_size(self) -> DisplaySize:
        return DisplaySize(self.width, self.height)


@dataclass(frozen=True)
class Contiguous1RMemoryMap(DisplayMemoryMap):
    """Single-row displays that use one contiguous line of memory."""

    width: int
    line_width: int = 0x50

    def address_for_xy(self, x: int, y: int) -> Optional[int]:
        if y != 0 or x < 0 or x >= self.columns_in_line(y):
            return None
        return x

    def columns_in_line(self, y: int) -> int:
        return self.line_width

    def display_size(self) -> DisplaySize:
        return DisplaySize(self.width, 1)


MEMORY_MAP_1601_SPLIT = StandardMemoryMap(8, 2)
MEMORY_MAP_1601_CONTIGUOUS = Contiguous1RMemoryMap(16)
MEMORY_MAP_1602 = StandardMemoryMap(16, 2)
MEMORY_MAP_1604 = StandardMemoryMap(16, 4)
MEMORY_MAP_2002 = StandardMemoryMap(20, 4)
MEMORY_MAP_2004 = StandardMemoryMap(20, 4)
MEMORY_MAP_4002 = StandardMemoryMap(40, 2)