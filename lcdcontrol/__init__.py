"""Driver for HD44780-compatible character LCDs over parallel and I2C buses."""

__version__ = "0.1.0"

__all__ = ["aio", "bus", "charset", "driver", "errors", "memory_map", "modes", "options"]