"""
Tests for the I2C register access.

Run:  python3 -m pytest tests/test_i2c.py -v
"""

import pytest

from mpu6050_dmp import registers
from mpu6050_dmp.errors import MPU6050Error, TransportError


class TestWords:

    def test_read_word_is_signed_big_endian(self, bus, i2c):
        bus.regs[0x3B:0x3D] = b"\xff\xfe"
        assert i2c.read_word(0x3B) == -2
        assert i2c.read_unsigned_word(0x3B) == 0xFFFE

    def test_write_word_masks_to_16_bits(self, bus, i2c):
        i2c.write_word(0x13, -3)
        assert bus.writes[-1] == (0x13, [0xFF, 0xFD])
        i2c.write_word(0x13, 0x12345)
        assert bus.writes[-1] == (0x13, [0x23, 0x45])

    def test_block_limit(self, i2c):
        with pytest.raises(ValueError):
            i2c.read_bytes(0x74, 33)
        with pytest.raises(ValueError):
            i2c.write_bytes(0x6F, [0] * 33)


class TestFields:

    def test_read_field(self, bus, i2c):
        bus.regs[registers.RA_WHO_AM_I] = 0x68
        assert i2c.read_field(registers.WHO_AM_I) == 0x34

    def test_write_field_keeps_other_bits(self, bus, i2c):
        bus.regs[registers.RA_GYRO_CONFIG] = 0xE7
        i2c.write_field(registers.GCONFIG_FS_SEL, 2)
        assert bus.regs[registers.RA_GYRO_CONFIG] == 0xF7
        assert i2c.read_field(registers.GCONFIG_FS_SEL) == 2

    def test_write_field_accepts_bool(self, bus, i2c):
        i2c.write_field(registers.PWR1_SLEEP, True)
        assert bus.regs[registers.RA_PWR_MGMT_1] == 0x40
        i2c.write_field(registers.PWR1_SLEEP, False)
        assert bus.regs[registers.RA_PWR_MGMT_1] == 0x00

    def test_value_wider_than_field_is_masked(self, bus, i2c):
        i2c.write_field(registers.CFG_DLPF, 0xFF)
        assert bus.regs[registers.RA_CONFIG] == 0x07


class TestTransportErrors:

    def test_bus_error_is_wrapped(self, bus, i2c):
        bus.fail = True
        with pytest.raises(TransportError) as excinfo:
            i2c.read_byte(0x75)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert isinstance(excinfo.value, MPU6050Error)

    @pytest.mark.parametrize("call", [
        lambda i2c: i2c.write_byte(0x6B, 0),
        lambda i2c: i2c.read_word(0x3B),
        lambda i2c: i2c.write_bytes(0x6D, [0, 0]),
        lambda i2c: i2c.write_field(registers.PWR1_SLEEP, 1),
    ])
    def test_every_access_raises(self, bus, i2c, call):
        bus.fail = True
        with pytest.raises(TransportError):
            call(i2c)
