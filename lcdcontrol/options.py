"""Display options and the controller start-up sequences."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .bus import DataBus, EightBitBus, EightBitBusPins, FourBitBus, FourBitBusPins, I2CBus
from .charset import Charset, CharsetUniversal
from .memory_map import DisplayMemoryMap
from .modes import EntryMode

_WAKE_UP_MS = 15
_COMMAND_US = 100


def _sequence_8bit(entry_mode: EntryMode) -> list[tuple[int, str, int]]:
    return [
        (0b0011_0000, "ms", 5),  # initialise in 8-bit mode
        (0b0011_1000, "us", _COMMAND_US),  # 8-bit operation, 5x7 characters
        (0b0000_1110, "us", _COMMAND_US),
        (0b0000_0001, "us", _COMMAND_US),  # clear display
        (0b0000_0111, "us", _COMMAND_US),
        (entry_mode.as_byte(), "us", _COMMAND_US),
    ]


def _sequence_4bit(entry_mode: EntryMode) -> list[tuple[int, str, int]]:
    return [
        (0x33, "ms", 5),  # initialise in 4-bit mode
        (0x32, "us", _COMMAND_US),
        (0x28, "us", _COMMAND_US),  # 4-bit operation, 5x7 characters
        (0x0E, "us", _COMMAND_US),
        (0x01, "us", _COMMAND_US),  # clear display
        (entry_mode.as_byte(), "us", _COMMAND_US),
        (0x80, "us", _COMMAND_US),  # cursor to the start of the first line
    ]


def _wait(delay: Any, unit: str, amount: int) -> Any:
    return delay.delay_ms(amount) if unit == "ms" else delay.delay_us(amount)


async def _settle(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


def _run(bus: DataBus, steps: list[tuple[int, str, int]], delay: Any) -> None:
    delay.delay_ms(_WAKE_UP_MS)
    for byte, unit, amount in steps:
        bus.write(byte, False, delay)
        _wait(delay, unit, amount)


async def _run_async(bus: DataBus, steps: list[tuple[int, str, int]], delay: Any) -> None:
    await _settle(delay.delay_ms(_WAKE_UP_MS))
    for byte, unit, amount in steps:
        await bus.write_async(byte, False, delay)
        await _settle(_wait(delay, unit, amount))


def init_8bit(bus: DataBus, entry_mode: EntryMode, delay: Any) -> None:
    """Run the 8-bit start-up procedure from the HD44780 datasheet."""
    _run(bus, _sequence_8bit(entry_mode), delay)


def init_4bit(bus: DataBus, entry_mode: EntryMode, delay: Any) -> None:
    """Run the 4-bit start-up procedure."""
    _run(bus, _sequence_4bit(entry_mode), delay)


async def init_8bit_async(bus: DataBus, entry_mode: EntryMode, delay: Any) -> None:
    """Run the 8-bit start-up procedure with an asynchronous delay."""
    await _run_async(bus, _sequence_8bit(entry_mode), delay)


async def init_4bit_async(bus: DataBus, entry_mode: EntryMode, delay: Any) -> None:
    """Run the 4-bit start-up procedure with an asynchronous delay."""
    await _run_async(bus, _sequence_4bit(entry_mode), delay)


def _default_charset() -> Charset:
    return CharsetUniversal.EMPTY_FALLBACK


@dataclass(frozen=True)
class _OptionsBase:
    memory_map: DisplayMemoryMap
    charset: Charset = field(default_factory=_default_charset)
    entry_mode: EntryMode = field(default_factory=EntryMode)


@dataclass(frozen=True)
class DisplayOptions8Bit(_OptionsBase):
    """Options for a display wired with eight data lines."""

    pins: Optional[EightBitBusPins] = None

    def with_memory_map(self, memory_map: DisplayMemoryMap) -> DisplayOptions8Bit:
        """Return a copy using ``memory_map``."""
        return replace(self, memory_map=memory_map)

    def with_charset(self, charset: Charset) -> DisplayOptions8Bit:
        """Return a copy using ``charset``."""
        return replace(self, charset=charset)

    def with_entry_mode(self, entry_mode: EntryMode) -> DisplayOptions8Bit:
        """Return a copy using ``entry_mode``."""
        return replace(self, entry_mode=entry_mode)

    def with_pins(self, pins: EightBitBusPins) -> DisplayOptions8Bit:
        """Return a copy using ``pins`` for RS, EN and D0..D7."""
        return replace(self, pins=pins)

    def create_bus(self) -> EightBitBus:
        """Build the bus these options describe."""
        if self.pins is None:
            raise ValueError("the pins of the eight-bit bus are not specified")
        return EightBitBus(self.pins)

    def initialize(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus``."""
        init_8bit(bus, self.entry_mode, delay)

    async def initialize_async(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus`` with an asynchronous delay."""
        await init_8bit_async(bus, self.entry_mode, delay)


@dataclass(frozen=True)
class DisplayOptions4Bit(_OptionsBase):
    """Options for a display wired with four data lines."""

    pins: Optional[FourBitBusPins] = None

    def with_memory_map(self, memory_map: DisplayMemoryMap) -> DisplayOptions4Bit:
        """Return a copy using ``memory_map``."""
        return replace(self, memory_map=memory_map)

    def with_charset(self, charset: Charset) -> DisplayOptions4Bit:
        """Return a copy using ``charset``."""
        return replace(self, charset=charset)

    def with_entry_mode(self, entry_mode: EntryMode) -> DisplayOptions4Bit:
        """Return a copy using ``entry_mode``."""
        return replace(self, entry_mode=entry_mode)

    def with_pins(self, pins: FourBitBusPins) -> DisplayOptions4Bit:
        """Return a copy using ``pins`` for RS, EN and D4..D7."""
        return replace(self, pins=pins)

    def create_bus(self) -> FourBitBus:
        """Build the bus these options describe."""
        if self.pins is None:
            raise ValueError("the pins of the four-bit bus are not specified")
        return FourBitBus(self.pins)

    def initialize(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus``."""
        init_4bit(bus, self.entry_mode, delay)

    async def initialize_async(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus`` with an asynchronous delay."""
        await init_4bit_async(bus, self.entry_mode, delay)


@dataclass(frozen=True)
class DisplayOptionsI2C(_OptionsBase):
    """Options for a display behind an I2C port expander."""

    i2c_bus: Any = None
    address: int = 0

    def with_memory_map(self, memory_map: DisplayMemoryMap) -> DisplayOptionsI2C:
        """Return a copy using ``memory_map``."""
        return replace(self, memory_map=memory_map)

    def with_charset(self, charset: Charset) -> DisplayOptionsI2C:
        """Return a copy using ``charset``."""
        return replace(self, charset=charset)

    def with_entry_mode(self, entry_mode: EntryMode) -> DisplayOptionsI2C:
        """Return a copy using ``entry_mode``."""
        return replace(self, entry_mode=entry_mode)

    def with_i2c_bus(self, i2c_bus: Any, address: int) -> DisplayOptionsI2C:
        """Return a copy using ``i2c_bus`` at ``address``; the entry mode is reset."""
        if not 0 <= address <= 0xFF:
            raise ValueError(f"address {address} does not fit in a byte")
        return replace(self, i2c_bus=i2c_bus, address=address, entry_mode=EntryMode())

    def create_bus(self) -> I2CBus:
        """Build the bus these options describe."""
        if self.i2c_bus is None:
            raise ValueError("the I2C bus is not specified")
        return I2CBus(self.i2c_bus, self.address)

    def initialize(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus``."""
        init_4bit(bus, self.entry_mode, delay)

    async def initialize_async(self, bus: DataBus, delay: Any) -> None:
        """Bring the display up over ``bus`` with an asynchronous delay."""
        await init_4bit_async(bus, self.entry_mode, delay)