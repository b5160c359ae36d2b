"""Blocking driver for HD44780 character displays."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from .bus import DataBus
from .charset import Charset, CharsetUniversal
from .errors import DisplayError, InitError, PositionError
from .memory_map import DisplayMemoryMap
from .modes import (
    Cursor,
    CursorBlink,
    CursorMode,
    Direction,
    Display,
    DisplayMode,
    DisplaySize,
    EntryMode,
    ShiftMode,
)

_CLEAR = 0b0000_0001
_RETURN_HOME = 0b0000_0010
_SET_DDRAM_ADDRESS = 0b1000_0000
_SHIFT_CURSOR = 0b0001_0000
_SHIFT_DISPLAY = 0b0001_1000
_SHIFT_RIGHT = 0b0000_0100
_COMMAND_US = 100


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} does not fit in a byte")


def _shift_bits(direction: Direction) -> int:
    return _SHIFT_RIGHT if direction is Direction.RIGHT else 0


class _DriverBase:
    """State and command encoding shared by the blocking and async drivers."""

    def __init__(
        self,
        bus: DataBus,
        memory_map: DisplayMemoryMap,
        charset: Optional[Charset] = None,
        entry_mode: Optional[EntryMode] = None,
        display_mode: Optional[DisplayMode] = None,
    ) -> None:
        self._bus = bus
        self._memory_map = memory_map
        self._charset = charset if charset is not None else CharsetUniversal.EMPTY_FALLBACK
        self._entry_mode = entry_mode if entry_mode is not None else EntryMode()
        self._display_mode = display_mode if display_mode is not None else DisplayMode()

    @property
    def memory_map(self) -> DisplayMemoryMap:
        """The memory map used to place characters on the display."""
        return self._memory_map

    @property
    def entry_mode(self) -> EntryMode:
        """A copy of the current entry mode."""
        return replace(self._entry_mode)

    @property
    def display_mode(self) -> DisplayMode:
        """A copy of the current display mode."""
        return replace(self._display_mode)

    def _char_code(self, ch: str) -> int:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        code = self._charset.code_from_utf8(ch)
        if code is None:
            raise ValueError(f"{ch!r} has no glyph in the display's character set")
        return code

    @staticmethod
    def _position_command(position: int) -> int:
        _check_byte(position)
        return _SET_DDRAM_ADDRESS | (position & 0b0111_1111)

    def _xy_command(self, position: tuple[int, int]) -> int:
        x, y = position
        address = self._memory_map.address_for_xy(x, y)
        if address is None:
            raise PositionError((x, y), self._memory_map.display_size().get())
        return _SET_DDRAM_ADDRESS | address

    @staticmethod
    def _shift_cursor_command(direction: Direction) -> int:
        bits = _shift_bits(direction)
        return _SHIFT_CURSOR | bits | bits

    @staticmethod
    def _shift_display_command(direction: Direction) -> int:
        return _SHIFT_DISPLAY | _shift_bits(direction)


class HD44780(_DriverBase):
    """An HD44780 display driven with blocking delays."""

    @classmethod
    def new(cls, options: Any, delay: Any) -> HD44780:
        """Set up the display described by ``options``.

        On failure an :class:`InitError` carrying ``options`` is raised so the
        caller can retry.
        """
        bus = options.create_bus()
        try:
            options.initialize(bus, delay)
        except DisplayError as exc:
            raise InitError(options, exc) from exc
        return cls(bus, options.memory_map, options.charset, replace(options.entry_mode), DisplayMode())

    def destroy(self) -> DataBus:
        """Give back the bus the display was driven over."""
        return self._bus

    def display_size(self) -> DisplaySize:
        """Return the size of the physical display."""
        return self._memory_map.display_size()

    def _write_command(self, cmd: int, delay: Any) -> None:
        self._bus.write(cmd, False, delay)
        delay.delay_us(_COMMAND_US)

    def reset(self, delay: Any) -> None:
        """Unshift the display and move the cursor to position 0."""
        self._write_command(_RETURN_HOME, delay)

    def set_display_mode(self, display_mode: DisplayMode, delay: Any) -> None:
        """Set display, cursor visibility and cursor blink in one command."""
        self._display_mode = replace(display_mode)
        self._write_command(self._display_mode.as_byte(), delay)

    def clear(self, delay: Any) -> None:
        """Clear the entire display."""
        self._write_command(_CLEAR, delay)

    def set_autoscroll(self, enabled: bool, delay: Any) -> None:
        """Scroll the display automatically when a character is written."""
        self._entry_mode.shift_mode = ShiftMode.from_bool(enabled)
        self._write_command(self._entry_mode.as_byte(), delay)

    def set_cursor_visibility(self, visibility: Cursor, delay: Any) -> None:
        """Set whether the cursor is visible."""
        self._display_mode.cursor_visibility = visibility
        self._write_command(self._display_mode.as_byte(), delay)

    def set_display(self, display: Display, delay: Any) -> None:
        """Set whether the characters on the display are shown."""
        self._display_mode.display = display
        self._write_command(self._display_mode.as_byte(), delay)

    def set_cursor_blink(self, blink: CursorBlink, delay: Any) -> None:
        """Set whether the cursor blinks."""
        self._display_mode.cursor_blink = blink
        self._write_command(self._display_mode.as_byte(), delay)

    def set_cursor_mode(self, mode: CursorMode, delay: Any) -> None:
        """Set which way the cursor moves when a character is written."""
        self._entry_mode.cursor_mode = mode
        self._write_command(self._entry_mode.as_byte(), delay)

    def set_cursor_pos(self, position: int, delay: Any) -> None:
        """Move the cursor to a raw DDRAM address (lower seven bits)."""
        self._write_command(self._position_command(position), delay)

    def set_cursor_xy(self, position: tuple[int, int], delay: Any) -> None:
        """Move the cursor to column ``x`` of line ``y``."""
        self._write_command(self._xy_command(position), delay)

    def shift_cursor(self, direction: Direction, delay: Any) -> None:
        """Shift just the cursor left or right."""
        self._write_command(self._shift_cursor_command(direction), delay)

    def shift_display(self, direction: Direction, delay: Any) -> None:
        """Shift the entire display left or right."""
        self._write_command(self._shift_display_command(direction), delay)

    def write_char(self, ch: str, delay: Any) -> None:
        """Write one character, mapped through the display's charset."""
        self.write_byte(self._char_code(ch), delay)

    def write_str(self, text: str, delay: Any) -> None:
        """Write every character of ``text``."""
        for ch in text:
            self.write_char(ch, delay)

    def write_bytes(self, data: bytes, delay: Any) -> None:
        """Write raw character codes."""
        for byte in data:
            self.write_byte(byte, delay)

    def write_byte(self, data: int, delay: Any) -> None:
        """Write one raw character code."""
        _check_byte(data)
        self._bus.write(data, True, delay)
        delay.delay_us(_COMMAND_US)