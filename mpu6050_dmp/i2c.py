"""I2C register access for the MPU-6050
Wraps the read / write functionalities of smbus2 for one device address
"""

from .errors import TransportError


class I2C(object):
    """I2C helper class
    Byte, word, bit-field and block access to the registers of one device on an SMBus.

    Any object exposing the smbus2.SMBus methods read_byte_data, write_byte_data,
    read_i2c_block_data and write_i2c_block_data can be used as bus.
    """

    # SMBus block transfers are limited to 32 bytes
    BLOCK_MAX = 32

    def __init__(self, bus, address):
        self.bus = bus
        self.address = address

    def _transfer(self, method, *args):
        try:
            return method(self.address, *args)
        except OSError as e:
            raise TransportError("I2C transfer with device 0x%0.2x failed: %s" % (self.address, e)) from e

    def read_byte(self, register):
        """Read a single byte from a register

        :param register: byte -- the register to read from
        :return: byte -- the byte read from register
        """
        return self._transfer(self.bus.read_byte_data, register)

    def write_byte(self, register, value):
        """Write a single byte to a register

        :param register: byte -- the register to write to
        :param value: byte -- the byte to write
        :return:
        """
        self._transfer(self.bus.write_byte_data, register, value & 0xFF)

    def read_word(self, register):
        """Reads two bytes starting at register.

        :param  register -- the register to start reading from.
        :return: word -- signed 16 bit value, high byte first
        """
        high, low = self.read_bytes(register, 2)
        value = (high << 8) + low

        if value >= 0x8000:
            return value - 65536
        else:
            return value

    def read_unsigned_word(self, register):
        high, low = self.read_bytes(register, 2)
        return (high << 8) + low

    def write_word(self, register, value):
        """Write 2 bytes starting at register

        :param register: byte -- the register to start writing at
        :param value: word -- signed or unsigned 16 bit value, written high byte first
        :return:
        """
        value &= 0xFFFF
        self.write_bytes(register, [value >> 8, value & 0xFF])

    def read_bytes(self, register, length):
        """Reads a block of bytes starting at register

        :param register: byte -- the register to read from. FIFO_R_W and MEM_R_W do not auto increment.
        :param length: int -- number of bytes to read, at most BLOCK_MAX
        :return: list -- array of bytes read
        """
        if length > self.BLOCK_MAX:
            raise ValueError("Block read of {} bytes > {}".format(length, self.BLOCK_MAX))
        return list(self._transfer(self.bus.read_i2c_block_data, register, length))

    def write_bytes(self, register, data):
        """Writes a block of bytes starting at register

        :param register: byte -- the register to write to
        :param data: list -- the array of bytes to write, at most BLOCK_MAX
        :return:
        """
        if len(data) > self.BLOCK_MAX:
            raise ValueError("Block write of {} bytes > {}".format(len(data), self.BLOCK_MAX))
        self._transfer(self.bus.write_i2c_block_data, register, list(data))

    def read_bits(self, register, bit, length):
        """Read a run of bits from a register

        :param register: byte -- the register to read from
        :param bit: int -- most significant bit of the run (0-7)
        :param length: int -- number of bits
        :return: int -- the bits, right aligned
        """
        shift = bit - length + 1
        mask = ((1 << length) - 1) << shift
        return (self.read_byte(register) & mask) >> shift

    def write_bits(self, register, bit, length, value):
        """Read-modify-write a run of bits in a register

        :param register: byte -- the register to write to
        :param bit: int -- most significant bit of the run (0-7)
        :param length: int -- number of bits
        :param value: int -- right aligned value to write
        :return:
        """
        shift = bit - length + 1
        mask = ((1 << length) - 1) << shift
        b = self.read_byte(register)
        b = (b & ~mask) | ((value << shift) & mask)
        self.write_byte(register, b)

    def read_field(self, field):
        """Read a RegisterField

        :param field: RegisterField
        :return: int
        """
        return self.read_bits(field.register, field.bit, field.length)

    def write_field(self, field, value):
        """Write a RegisterField, leaving the rest of the register untouched

        :param field: RegisterField
        :param value: int -- bool is accepted for single bit fields
        :return:
        """
        self.write_bits(field.register, field.bit, field.length, int(value))
