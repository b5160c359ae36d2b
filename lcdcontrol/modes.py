"""Display, entry and size settings for the HD44780 controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Direction for shifting the cursor or the display."""

    LEFT = enum.auto()
    RIGHT = enum.auto()


class Display(enum.Enum):
    """Whether the characters on the display are shown."""

    ON = enum.auto()
    OFF = enum.auto()


class Cursor(enum.Enum):
    """Whether the cursor is visible."""

    VISIBLE = enum.auto()
    INVISIBLE = enum.auto()


class CursorBlink(enum.Enum):
    """Whether the cursor blinks."""

    ON = enum.auto()
    OFF = enum.auto()


class CursorMode(enum.Enum):
    """Whether the cursor moves forward or backward on write."""

    INCREMENT = enum.auto()
    DECREMENT = enum.auto()


class ShiftMode(enum.Enum):
    """Whether the display shifts on write."""

    ENABLED = enum.auto()
    DISABLED = enum.auto()

    @classmethod
    def from_bool(cls, enabled: bool) -> ShiftMode:
        return cls.ENABLED if enabled else cls.DISABLED


@dataclass
class DisplayMode:
    """Display on/off, cursor visibility and cursor blink settings."""

    cursor_visibility: Cursor = Cursor.VISIBLE
    cursor_blink: CursorBlink = CursorBlink.ON
    display: Display = Display.ON

    def as_byte(self) -> int:
        """Return the display-control command byte."""
        byte = 0b0000_1000
        if self.cursor_blink is CursorBlink.ON:
            byte |= 0b0000_0001
        if self.cursor_visibility is Cursor.VISIBLE:
            byte |= 0b0000_0010
        if self.display is Display.ON:
            byte |= 0b0000_0100
        return byte


@dataclass
class EntryMode:
    """Cursor direction and display shift applied on each write."""

    cursor_mode: CursorMode = CursorMode.INCREMENT
    shift_mode: ShiftMode = ShiftMode.DISABLED

    def as_byte(self) -> int:
        """Return the entry-mode command byte."""
        byte = 0b0000_0100
        if self.cursor_mode is CursorMode.INCREMENT:
            byte |= 0b0000_0010
        if self.shift_mode is ShiftMode.ENABLED:
            byte |= 0b0000_0001
        return byte


@dataclass(frozen=True)
class DisplaySize:
    """Physical size of a display in columns and lines."""

    columns: int = 20
    lines: int = 4

    def __post_init__(self) -> None:
        for name, value in (("columns", self.columns), ("lines", self.lines)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must fit in a byte, got {value}")

    def get(self) -> tuple[int, int]:
        """Return ``(columns, lines)``."""
        return (self.columns, self.lines)