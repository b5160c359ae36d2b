"""Asynchronous driver for HD44780 character displays."""

from __future__ import annotations

import inspect
from dataclasses import replace
from typing import Any

from .bus import DataBus
from .driver import _COMMAND_US, _CLEAR, _RETURN_HOME, _DriverBase, _check_byte
from .errors import DisplayError, InitError
from .modes import (
    Cursor,
    CursorBlink,
    CursorMode,
    Direction,
    Display,
    DisplayMode,
    DisplaySize,
    ShiftMode,
)


async def _settle(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class AsyncHD44780(_DriverBase):
    """An HD44780 display driven with asynchronous delays."""

    @classmethod
    async def new(cls, options: Any, delay: Any) -> AsyncHD44780:
        """Set up the display described by ``options``.

        On failure an :class:`InitError` carrying ``options`` is raised so the
        caller can retry.
        """
        bus = options.create_bus()
        try:
            await options.initialize_async(bus, delay)
        except DisplayError as exc:
            raise InitError(options, exc) from exc
        return cls(bus, options.memory_map, options.charset, replace(options.entry_mode), DisplayMode())

    def destroy(self) -> DataBus:
        """Give back the bus the display was driven over."""
        return self._bus

    def display_size(self) -> DisplaySize:
        """Return the size of the physical display."""
        return self._memory_map.display_size()

    async def _write_command(self, cmd: int, delay: Any) -> None:
        await self._bus.write_async(cmd, False, delay)
        await _settle(delay.delay_us(_COMMAND_US))

    async def reset(self, delay: Any) -> None:
        """Unshift the display and move the cursor to position 0."""
        await self._write_command(_RETURN_HOME, delay)

    async def set_display_mode(self, display_mode: DisplayMode, delay: Any) -> None:
        """Set display, cursor visibility and cursor blink in one command."""
        self._display_mode = replace(display_mode)
        await self._write_command(self._display_mode.as_byte(), delay)

    async def clear(self, delay: Any) -> None:
        """Clear the entire display."""
        await self._write_command(_CLEAR, delay)

    async def set_autoscroll(self, enabled: bool, delay: Any) -> None:
        """Scroll the display automatically when a character is written."""
        self._entry_mode.shift_mode = ShiftMode.from_bool(enabled)
        await self._write_command(self._entry_mode.as_byte(), delay)

    async def set_cursor_visibility(self, visibility: Cursor, delay: Any) -> None:
        """Set whether the cursor is visible."""
        self._display_mode.cursor_visibility = visibility
        await self._write_command(self._display_mode.as_byte(), delay)

    async def set_display(self, display: Display, delay: Any) -> None:
        """Set whether the characters on the display are shown."""
        self._display_mode.display = display
        await self._write_command(self._display_mode.as_byte(), delay)

    async def set_cursor_blink(self, blink: CursorBlink, delay: Any) -> None:
        """Set whether the cursor blinks."""
        self._display_mode.cursor_blink = blink
        await self._write_command(self._display_mode.as_byte(), delay)

    async def set_cursor_mode(self, mode: CursorMode, delay: Any) -> None:
        """Set which way the cursor moves when a character is written."""
        self._entry_mode.cursor_mode = mode
        await self._write_command(self._entry_mode.as_byte(), delay)

    async def set_cursor_pos(self, position: int, delay: Any) -> None:
        """Move the cursor to a raw DDRAM address (lower seven bits)."""
        await self._write_command(self._position_command(position), delay)

    async def set_cursor_xy(self, position: tuple[int, int], delay: Any) -> None:
        """Move the cursor to column ``x`` of line ``y``."""
        await self._write_command(self._xy_command(position), delay)

    async def shift_cursor(self, direction: Direction, delay: Any) -> None:
        """Shift just the cursor left or right."""
        await self._write_command(self._shift_cursor_command(direction), delay)

    async def shift_display(self, direction: Direction, delay: Any) -> None:
        """Shift the entire display left or right."""
        await self._write_command(self._shift_display_command(direction), delay)

    async def write_char(self, ch: str, delay: Any) -> None:
        """Write one character, mapped through the display's charset."""
        await self.write_byte(self._char_code(ch), delay)

    async def write_str(self, text: str, delay: Any) -> None:
        """Write every character of ``text``."""
        for ch in text:
            await self.write_char(ch, delay)

    async def write_bytes(self, data: bytes, delay: Any) -> None:
        """Write raw character codes."""
        for byte in data:
            await self.write_byte(byte, delay)

    async def write_byte(self, data: int, delay: Any) -> None:
        """Write one raw character code."""
        _check_byte(data)
        await self._bus.write_async(data, True, delay)
        await _settle(delay.delay_us(_COMMAND_US))