"""DMP FIFO access
The DMP pushes one packet per sample into the MPU FIFO. Packets are read back
over I2C, always the most recent one, dropping any backlog.
"""

import logging
import time

from . import registers
from .errors import AcquisitionTimeout
from .motion import PACKET_SIZE

logger = logging.getLogger(__name__)


class FIFO(object):
    """FIFO Class
    Reads whole, fresh DMP packets out of the FIFO.

    Not thread safe: the backlog accounting assumes nobody else reads the FIFO
    between calls, serialize access to the device.
    """

    MAX_FIFO = 1024
    # SMBus block read limit, bytes dropped per transfer when draining
    FIFO_BUFFER_LENGTH = 32

    # Past this backlog a reset and a fresh packet is quicker than draining
    OVERFLOW_THRESHOLD = 200
    # Seconds allowed for one acquisition
    TIMEOUT = 11.0

    def __init__(self, i2c, packet_size=PACKET_SIZE, overflow_threshold=None, timeout=None,
                 clock=time.monotonic):
        """
        :param i2c: I2C -- device register access
        :param packet_size: int -- DMP packet length in bytes
        :param overflow_threshold: int -- backlog (bytes) above which the FIFO is reset
        :param timeout: float -- deadline of get_current_packet in seconds
        :param clock: callable -- monotonic clock in seconds
        """
        self.i2c = i2c
        self.packet_size = packet_size
        self.overflow_threshold = self.OVERFLOW_THRESHOLD if overflow_threshold is None else overflow_threshold
        self.timeout = self.TIMEOUT if timeout is None else timeout
        self.clock = clock

    def get_count(self):
        """Number of bytes waiting in the FIFO

        :return: int -- 0 - 1024
        """
        return self.i2c.read_unsigned_word(registers.RA_FIFO_COUNTH)

    def get_bytes(self, length):
        """Read bytes out of the FIFO

        :param length: int -- number of bytes, at most FIFO_BUFFER_LENGTH
        :return: bytes
        """
        if length < 1:
            return b""
        return bytes(self.i2c.read_bytes(registers.RA_FIFO_R_W, length))

    def reset(self):
        """Reset the FIFO, dropping everything in it"""
        logger.debug("Reset FIFO")
        self.i2c.write_field(registers.USERCTRL_FIFO_RESET, 1)

    def get_enabled(self):
        return self.i2c.read_field(registers.USERCTRL_FIFO_EN) == 1

    def set_enabled(self, enable):
        self.i2c.write_field(registers.USERCTRL_FIFO_EN, enable)

    def get_overflow_status(self):
        """FIFO overflow interrupt flag. Reading INT_STATUS clears it."""
        return self.i2c.read_field(registers.INT_STATUS_FIFO_OFLOW) == 1

    def packet_available(self):
        return self.get_count() >= self.packet_size

    def _expired(self, start):
        return (self.clock() - start) > self.timeout

    def _drain(self, start):
        """Drop whole packets until at most one is left or the deadline passes

        :param start: float -- clock value when the acquisition started
        :return: int -- last FIFO count read
        """
        length = self.packet_size
        count = self.get_count()
        # the MPU may still be writing, re-read every time
        while count > length and not self._expired(start):
            count -= length  # keep the last packet
            logger.debug("Dropping %d bytes from FIFO", count)
            while count:
                remove = min(count, self.FIFO_BUFFER_LENGTH)
                self.get_bytes(remove)
                count -= remove
            count = self.get_count()
        return count

    def get_current_packet(self):
        """Get the most recent DMP packet, overflow proof.

        :return: bytes or None -- one packet, or None if the FIFO is empty
        :raise AcquisitionTimeout: the FIFO did not hold exactly one packet before the deadline
        """
        length = self.packet_size
        start = self.clock()

        waited = False
        while True:
            count = self.get_count()
            if count > length:
                if count > self.overflow_threshold:
                    # draining would take longer than waiting for the next packet
                    logger.debug("FIFO backlog %d > %d, resetting", count, self.overflow_threshold)
                    self.reset()
                    waited = True
                    count = self.get_count()
                    while not count and not self._expired(start):
                        count = self.get_count()
                else:
                    count = self._drain(start)

            if not count and not waited:
                # called too early
                return None
            if self._expired(start):
                raise AcquisitionTimeout("No complete DMP packet after {}s (FIFO count: {})".format(
                    self.timeout, count))
            if count == length:
                break

        return self.get_bytes(length)
