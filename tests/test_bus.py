import pytest

from lcdcontrol.bus import (
    DataBus,
    EightBitBus,
    EightBitBusPins,
    FourBitBus,
    FourBitBusPins,
    I2CBus,
)
from lcdcontrol.errors import IoError, Port


class FakePin:
    def __init__(self, name, log, fail=False):
        self.name = name
        self.log = log
        self.fail = fail

    def _record(self, level):
        if self.fail:
            raise RuntimeError(f"{self.name} broken")
        self.log.append((self.name, level))

    def set_high(self):
        self._record(True)

    def set_low(self):
        self._record(False)


class FakeDelay:
    def __init__(self):
        self.calls = []

    def delay_ms(self, ms):
        self.calls.append(ms)

    def delay_us(self, us):
        self.calls.append(us / 1000)


class FakeAsyncDelay:
    def __init__(self):
        self.calls = []

    async def delay_ms(self, ms):
        self.calls.append(ms)

    async def delay_us(self, us):
        self.calls.append(us / 1000)


class FakeI2C:
    def __init__(self, fail=False):
        self.writes = []
        self.fail = fail

    def write(self, address, payload):
        if self.fail:
            raise OSError("nack")
        self.writes.append((address, bytes(payload)))


class FakeAsyncI2C(FakeI2C):
    async def write(self, address, payload):
        super().write(address, payload)


def eight_bit_bus(log, failing=()):
    names = ["rs", "en", "d0", "d1", "d2", "d3", "d4", "d5", "d6", "d7"]
    pins = {name: FakePin(name, log, name in failing) for name in names}
    return EightBitBus(EightBitBusPins(**pins))


def four_bit_bus(log, failing=()):
    names = ["rs", "en", "d4", "d5", "d6", "d7"]
    pins = {name: FakePin(name, log, name in failing) for name in names}
    return FourBitBus(FourBitBusPins(**pins))


def levels(log, name):
    return [level for pin, level in log if pin == name]


@pytest.mark.parametrize("byte", [0x00, 0xA5, 0xFF, 0x3C])
def test_eight_bit_data_lines_carry_byte(byte):
    log = []
    eight_bit_bus(log).write(byte, True, FakeDelay())
    rebuilt = sum(int(levels(log, f"d{bit}")[0]) << bit for bit in range(8))
    assert rebuilt == byte


def test_eight_bit_data_write_sequence():
    log = []
    delay = FakeDelay()
    eight_bit_bus(log).write(0x41, True, delay)
    assert log[0] == ("rs", True)
    assert log[-1] == ("rs", False)
    assert levels(log, "en") == [True, False]
    assert delay.calls == [2]


def test_eight_bit_command_leaves_rs_low():
    log = []
    eight_bit_bus(log).write(0x01, False, FakeDelay())
    assert log[0] == ("rs", False)
    assert log[-1] == ("en", False)
    assert levels(log, "rs") == [False]


def test_eight_bit_pin_error_reports_port():
    log = []
    bus = eight_bit_bus(log, failing={"d3"})
    with pytest.raises(IoError) as info:
        bus.write(0xFF, True, FakeDelay())
    assert info.value.port is Port.D3
    assert isinstance(info.value.__cause__, RuntimeError)
    assert levels(log, "d4") == []


@pytest.mark.parametrize("byte", [0x00, 0x5A, 0xF0, 0x0F, 0xFF])
def test_four_bit_sends_upper_then_lower_nibble(byte):
    log = []
    delay = FakeDelay()
    four_bit_bus(log).write(byte, True, delay)
    upper = sum(int(levels(log, f"d{bit + 4}")[0]) << bit for bit in range(4))
    lower = sum(int(levels(log, f"d{bit + 4}")[1]) << bit for bit in range(4))
    assert (upper << 4) | lower == byte
    assert levels(log, "en") == [True, False, True, False]
    assert delay.calls == [2, 2]


def test_four_bit_rs_handling():
    log = []
    four_bit_bus(log).write(0x28, False, FakeDelay())
    assert levels(log, "rs") == [False]
    log.clear()
    four_bit_bus(log).write(0x28, True, FakeDelay())
    assert levels(log, "rs") == [True, False]


def test_four_bit_enable_error_reports_port():
    bus = four_bit_bus([], failing={"en"})
    with pytest.raises(IoError) as info:
        bus.write(0x33, False, FakeDelay())
    assert info.value.port is Port.EN


def test_i2c_wire_bytes():
    i2c = FakeI2C()
    I2CBus(i2c, 0x27).write(0x41, True, FakeDelay())
    assert i2c.writes == [
        (0x27, bytes([0x49, 0x4D])),
        (0x27, bytes([0x49])),
        (0x27, bytes([0x19, 0x1D])),
        (0x27, bytes([0x19])),
    ]


@pytest.mark.parametrize("byte", [0x00, 0x33, 0x80, 0xFF])
@pytest.mark.parametrize("data", [True, False])
def test_i2c_nibbles_reassemble(byte, data):
    i2c = FakeI2C()
    delay = FakeDelay()
    I2CBus(i2c, 0x3F).write(byte, data, delay)
    payloads = [payload for _, payload in i2c.writes]
    assert all(address == 0x3F for address, _ in i2c.writes)
    assert len(payloads) == 4
    first, second = payloads[0][0], payloads[2][0]
    assert payloads[0] == bytes([first, first | 0x04])
    assert payloads[1] == bytes([first])
    assert (first & 0xF0) | (second >> 4) == byte
    for value in (first, second):
        assert value & 0x08
        assert bool(value & 0x01) == data
    assert delay.calls == [2, 2]


def test_i2c_error_reports_port():
    with pytest.raises(IoError) as info:
        I2CBus(FakeI2C(fail=True), 0x27).write(0x01, False, FakeDelay())
    assert info.value.port is Port.I2C
    assert isinstance(info.value.error, OSError)


@pytest.mark.parametrize("byte", [-1, 256])
def test_byte_out_of_range(byte):
    with pytest.raises(ValueError):
        I2CBus(FakeI2C(), 0x27).write(byte, True, FakeDelay())


def test_data_bus_is_abstract():
    with pytest.raises(TypeError):
        DataBus()


@pytest.mark.asyncio
async def test_eight_bit_async_matches_sync():
    sync_log, async_log = [], []
    eight_bit_bus(sync_log).write(0x9C, True, FakeDelay())
    delay = FakeAsyncDelay()
    await eight_bit_bus(async_log).write_async(0x9C, True, delay)
    assert async_log == sync_log
    assert delay.calls == [2]


@pytest.mark.asyncio
async def test_four_bit_async_matches_sync():
    sync_log, async_log = [], []
    four_bit_bus(sync_log).write(0x6E, False, FakeDelay())
    await four_bit_bus(async_log).write_async(0x6E, False, FakeAsyncDelay())
    assert async_log == sync_log


@pytest.mark.asyncio
async def test_i2c_async_matches_sync():
    sync_i2c = FakeI2C()
    async_i2c = FakeAsyncI2C()
    I2CBus(sync_i2c, 0x27).write(0xD2, True, FakeDelay())
    await I2CBus(async_i2c, 0x27).write_async(0xD2, True, FakeAsyncDelay())
    assert async_i2c.writes == sync_i2c.writes


@pytest.mark.asyncio
async def test_i2c_async_error_reports_port():
    with pytest.raises(IoError) as info:
        await I2CBus(FakeAsyncI2C(fail=True), 0x27).write_async(0x01, False, FakeAsyncDelay())
    assert info.value.port is Port.I2C