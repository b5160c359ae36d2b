"""Data buses that carry bytes from the host to the HD44780 controller."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterator, Union

from .errors import IoError, Port

_BACKLIGHT = 0b0000_1000
_ENABLE = 0b0000_0100
_REGISTER_SELECT = 0b0000_0001

_ENABLE_PULSE_MS = 2


@dataclass(frozen=True)
class _Delay:
    ms: int


@dataclass(frozen=True)
class _Action:
    port: Port
    call: Callable[[], Any]


_Step = Union[_Delay, _Action]


def _pin(pin: Any, level: bool, port: Port) -> _Action:
    return _Action(port, pin.set_high if level else pin.set_low)


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"{byte} does not fit in a byte")


def _run(steps: Iterator[_Step], delay: Any) -> None:
    for step in steps:
        if isinstance(step, _Delay):
            delay.delay_ms(step.ms)
            continue
        try:
            step.call()
        except Exception as exc:
            raise IoError(step.port, exc) from exc


async def _run_async(steps: Iterator[_Step], delay: Any) -> None:
    for step in steps:
        if isinstance(step, _Delay):
            pending = delay.delay_ms(step.ms)
            if inspect.isawaitable(pending):
                await pending
            continue
        try:
            result = step.call()
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            raise IoError(step.port, exc) from exc


class DataBus(ABC):
    """A way of sending command and data bytes to the controller."""

    @abstractmethod
    def write(self, byte: int, data: bool, delay: Any) -> None:
        """Send ``byte``; ``data`` selects the data register over the command one."""

    @abstractmethod
    async def write_async(self, byte: int, data: bool, delay: Any) -> None:
        """Send ``byte`` using an asynchronous delay."""


@dataclass
class EightBitBusPins:
    """Output pins of an eight-bit parallel connection."""

    rs: Any
    en: Any
    d0: Any
    d1: Any
    d2: Any
    d3: Any
    d4: Any
    d5: Any
    d6: Any
    d7: Any


@dataclass
class EightBitBus(DataBus):
    """Parallel bus driving all eight data lines."""

    pins: EightBitBusPins

    def _steps(self, byte: int, data: bool) -> Iterator[_Step]:
        pins = self.pins
        data_lines = (
            (pins.d0, Port.D0),
            (pins.d1, Port.D1),
            (pins.d2, Port.D2),
            (pins.d3, Port.D3),
            (pins.d4, Port.D4),
            (pins.d5, Port.D5),
            (pins.d6, Port.D6),
            (pins.d7, Port.D7),
        )
        yield _pin(pins.rs, data, Port.RS)
        for bit, (pin, port) in enumerate(data_lines):
            yield _pin(pin, bool(byte >> bit & 1), port)
        yield _pin(pins.en, True, Port.EN)
        yield _Delay(_ENABLE_PULSE_MS)
        yield _pin(pins.en, False, Port.EN)
        if data:
            yield _pin(pins.rs, False, Port.RS)

    def write(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        _run(self._steps(byte, data), delay)

    async def write_async(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        await _run_async(self._steps(byte, data), delay)


@dataclass
class FourBitBusPins:
    """Output pins of a four-bit parallel connection."""

    rs: Any
    en: Any
    d4: Any
    d5: Any
    d6: Any
    d7: Any


@dataclass
class FourBitBus(DataBus):
    """Parallel bus sending each byte as two nibbles on D4..D7."""

    pins: FourBitBusPins

    def _nibble(self, nibble: int) -> Iterator[_Step]:
        pins = self.pins
        data_lines = (
            (pins.d4, Port.D4),
            (pins.d5, Port.D5),
            (pins.d6, Port.D6),
            (pins.d7, Port.D7),
        )
        for bit, (pin, port) in enumerate(data_lines):
            yield _pin(pin, bool(nibble >> bit & 1), port)
        yield _pin(pins.en, True, Port.EN)
        yield _Delay(_ENABLE_PULSE_MS)
        yield _pin(pins.en, False, Port.EN)

    def _steps(self, byte: int, data: bool) -> Iterator[_Step]:
        yield _pin(self.pins.rs, data, Port.RS)
        yield from self._nibble(byte >> 4)
        yield from self._nibble(byte & 0x0F)
        if data:
            yield _pin(self.pins.rs, False, Port.RS)

    def write(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        _run(self._steps(byte, data), delay)

    async def write_async(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        await _run_async(self._steps(byte, data), delay)


@dataclass
class I2CBus(DataBus):
    """I2C port expander driving the display in four-bit mode.

    ``i2c_bus`` needs a ``write(address, payload)`` method; for
    :meth:`write_async` it may return an awaitable.
    """

    i2c_bus: Any
    address: int

    def _steps(self, byte: int, data: bool) -> Iterator[_Step]:
        rs = _REGISTER_SELECT if data else 0
        for nibble in (byte & 0xF0, (byte & 0x0F) << 4):
            value = nibble | rs | _BACKLIGHT
            yield _Action(
                Port.I2C, partial(self.i2c_bus.write, self.address, bytes([value, value | _ENABLE]))
            )
            yield _Delay(_ENABLE_PULSE_MS)
            yield _Action(Port.I2C, partial(self.i2c_bus.write, self.address, bytes([value])))

    def write(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        _run(self._steps(byte, data), delay)

    async def write_async(self, byte: int, data: bool, delay: Any) -> None:
        _check_byte(byte)
        await _run_async(self._steps(byte, data), delay)