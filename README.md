# lcdcontrol

A driver for HD44780-compatible character LCDs. It supports three ways of connecting the display:

- an 8-bit parallel bus (`lcdcontrol.bus.EightBitBus`, pins RS, EN, D0–D7)
- a 4-bit parallel bus (`lcdcontrol.bus.FourBitBus`, pins RS, EN, D4–D7)
- an I2C backpack based on a port expander (`lcdcontrol.bus.I2CBus`)

The package does not touch hardware itself. You supply the pin objects, the I2C bus object and a
delay object, so it works with whatever GPIO or I2C library your board uses:

- a pin object needs `set_high()` and `set_low()`;
- an I2C bus object needs `write(address, payload)`, where `payload` is a `bytes` object;
- a delay object needs `delay_ms(n)` and `delay_us(n)`.

With the async API the delay methods and the I2C `write` (and pin methods) may return awaitables;
they are awaited when they do. Plain return values are accepted as well.

## Installation

```
pip install lcdcontrol
```

## Quick start (I2C)

```python
from lcdcontrol.charset import CharsetA00, question_fallback
from lcdcontrol.driver import HD44780
from lcdcontrol.errors import InitError
from lcdcontrol.memory_map import StandardMemoryMap
from lcdcontrol.modes import Cursor, CursorBlink, Direction, Display, DisplayMode
from lcdcontrol.options import DisplayOptionsI2C

options = (
    DisplayOptionsI2C(StandardMemoryMap(16, 2))
    .with_i2c_bus(my_i2c, 0x27)
    .with_charset(question_fallback(CharsetA00()))
)

while True:
    try:
        lcd = HD44780.new(options, delay)
        break
    except InitError as exc:
        options = exc.options  # retry with the same settings
        delay.delay_ms(500)

lcd.set_display_mode(
    DisplayMode(cursor_visibility=Cursor.INVISIBLE, cursor_blink=CursorBlink.OFF, display=Display.ON),
    delay,
)
lcd.clear(delay)
lcd.reset(delay)
lcd.write_str("Hello, world!", delay)
lcd.set_cursor_xy((0, 1), delay)
lcd.write_str("ハロー、ワールト゛！", delay)
lcd.shift_display(Direction.LEFT, delay)
```

`HD44780.new` builds the bus from the options and runs the controller's start-up sequence. If a
pin or I2C write fails during start-up it raises `InitError`; its `options` attribute holds the
options passed in and its `error` attribute the underlying error. `with_i2c_bus` resets the entry
mode to its default, so call `with_entry_mode` after it if you need a different one.

## Parallel buses

```python
from lcdcontrol.bus import FourBitBusPins
from lcdcontrol.options import DisplayOptions4Bit

options = DisplayOptions4Bit(StandardMemoryMap(16, 2)).with_pins(
    FourBitBusPins(rs=rs, en=en, d4=d4, d5=d5, d6=d6, d7=d7)
)
lcd = HD44780.new(options, delay)
```

`DisplayOptions8Bit` with `EightBitBusPins` works the same way. Creating a display from options
whose pins or I2C bus were never set raises `ValueError`.

## Driver methods

`HD44780` offers `clear`, `reset`, `set_display_mode`, `set_display`, `set_cursor_visibility`,
`set_cursor_blink`, `set_cursor_mode`, `set_autoscroll`, `set_cursor_pos` (raw address, lower seven
bits), `set_cursor_xy`, `shift_cursor`, `shift_display`, `write_char`, `write_str`, `write_byte`,
`write_bytes`, `display_size` and `destroy` (which returns the bus). The current settings are
readable through the `memory_map`, `entry_mode` and `display_mode` properties.

## Async

`lcdcontrol.aio.AsyncHD44780` has the same methods as `HD44780`; all that talk to the display are
coroutines:

```python
from lcdcontrol.aio import AsyncHD44780

lcd = await AsyncHD44780.new(options, async_delay)
await lcd.write_str("Hello", async_delay)
```

## Character sets

HD44780 modules ship with one of two character ROMs (`lcdcontrol.charset`):

- `CharsetA00`: Japanese, with katakana
- `CharsetA02`: European, with Latin-1 and Cyrillic

`CharsetUniversal` covers only the symbols both ROMs share, and is the default. Wrap a charset
with `empty_fallback` or `question_fallback` to show a blank or `?` for anything the ROM cannot
display; each charset class also has ready-made `EMPTY_FALLBACK` and `QUESTION_FALLBACK`
attributes. With an unwrapped charset, `write_char` and `write_str` raise `ValueError` for a
character that has no glyph.

## Memory maps

`StandardMemoryMap(width, height)` covers the usual 2- to 4-line layouts, for example 16x2, 20x4
and 40x2; `Contiguous1RMemoryMap(width)` covers single-line displays with contiguous memory.
`lcdcontrol.memory_map` also provides ready-made maps such as `MEMORY_MAP_1602`,
`MEMORY_MAP_2004` and `MEMORY_MAP_4002`.

`set_cursor_xy` raises `PositionError` for coordinates outside the display. A failing pin or I2C
write raises `IoError`, whose `port` attribute names the `Port` that failed. All of these derive
from `DisplayError` in `lcdcontrol.errors`.

## What it does not do

The driver only writes to the display. It does not read the busy flag or display memory back
(it waits fixed delays instead), and it has no support for defining custom characters.