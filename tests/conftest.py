import struct

import pytest

from mpu6050_dmp import registers
from mpu6050_dmp.i2c import I2C

DMP_MEMORY_SIZE = 12 * 256


class FakeBus(object):
    """In-memory stand-in for smbus2.SMBus

    Register file of 256 bytes, DMP memory banks behind BANK_SEL / MEM_START_ADDR / MEM_R_W,
    a FIFO with optionally scripted counts and self clearing reset bits.
    """

    def __init__(self, who_am_i=0x68):
        self.regs = bytearray(256)
        self.regs[registers.RA_WHO_AM_I] = who_am_i
        self.mem = bytearray(DMP_MEMORY_SIZE)
        self.corrupt_mem = set()    # DMP memory addresses read back wrong
        self.fifo = bytearray()
        self.fifo_after_reset = b""
        self.fifo_counts = []       # consumed one per count read, the last one repeats
        self.fifo_reads = []        # lengths of the FIFO block reads
        self.plant = None           # callable(register) -> int16 output or None
        self.writes = []            # (register, [bytes])
        self.fifo_resets = 0
        self.dmp_resets = 0
        self.device_resets = 0
        self.fail = False
        self.closed = False

    def _check(self):
        if self.fail:
            raise OSError(121, "Remote I/O error")

    def _mem_address(self):
        return self.regs[registers.RA_BANK_SEL] * 256 + self.regs[registers.RA_MEM_START_ADDR]

    def _fifo_count(self):
        if self.fifo_counts:
            count = self.fifo_counts[0]
            if len(self.fifo_counts) > 1:
                self.fifo_counts.pop(0)
            return count
        return len(self.fifo)

    def _store(self, register, value):
        if register == registers.RA_USER_CTRL:
            if value & 0x04:
                self.fifo_resets += 1
                self.fifo = bytearray(self.fifo_after_reset)
            if value & 0x08:
                self.dmp_resets += 1
            value &= ~0x0F  # reset bits clear themselves
        elif register == registers.RA_PWR_MGMT_1 and value & 0x80:
            self.device_resets += 1
            value &= 0x7F
        self.regs[register] = value

    def read_byte_data(self, address, register):
        self._check()
        return self.regs[register]

    def write_byte_data(self, address, register, value):
        self._check()
        self.writes.append((register, [value]))
        self._store(register, value)

    def read_i2c_block_data(self, address, register, length):
        self._check()
        if register == registers.RA_FIFO_COUNTH:
            return list(struct.pack(">H", self._fifo_count()))
        if register == registers.RA_FIFO_R_W:
            self.fifo_reads.append(length)
            data = bytes(self.fifo[:length]).ljust(length, b"\x00")
            del self.fifo[:length]
            return list(data)
        if register == registers.RA_MEM_R_W:
            start = self._mem_address()
            data = list(self.mem[start:start + length])
            for i in range(length):
                if start + i in self.corrupt_mem:
                    data[i] ^= 0xFF
            return data
        if self.plant is not None:
            value = self.plant(register)
            if value is not None:
                value = max(-32768, min(32767, int(value)))
                return list(struct.pack(">h", value))
        return list(self.regs[register:register + length])

    def write_i2c_block_data(self, address, register, data):
        self._check()
        self.writes.append((register, list(data)))
        if register == registers.RA_MEM_R_W:
            start = self._mem_address()
            self.mem[start:start + len(data)] = bytes(data)
            return
        for i, value in enumerate(data):
            self._store(register + i, value)

    def set_word(self, register, value):
        self.regs[register:register + 2] = struct.pack(">H", value & 0xFFFF)

    def get_word(self, register):
        return struct.unpack(">h", bytes(self.regs[register:register + 2]))[0]

    def close(self):
        self.closed = True


class FakeClock(object):
    """Monotonic clock advancing by a fixed step on every call"""

    def __init__(self, step=0.001):
        self.now = 0.0
        self.step = step

    def __call__(self):
        t = self.now
        self.now += self.step
        return t


def make_packet(quaternion=(1 << 30, 0, 0, 0), accel=(0, 0, 8192), gyro=(0, 0, 0)):
    return struct.pack(">4i3h3h", *(tuple(quaternion) + tuple(accel) + tuple(gyro)))


@pytest.fixture
def bus():
    return FakeBus()


@pytest.fixture
def i2c(bus):
    return I2C(bus, 0x68)
