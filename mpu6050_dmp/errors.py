"""Exceptions raised by the MPU-6050 driver"""


class MPU6050Error(Exception):
    """Base class for all driver errors"""


class TransportError(MPU6050Error, IOError):
    """An I2C transfer with the device failed.
    Raised from the underlying bus error, never retried by the driver."""


class AcquisitionTimeout(MPU6050Error):
    """The FIFO did not settle on a single packet before the deadline"""


class MalformedPacket(MPU6050Error, ValueError):
    """A DMP packet buffer is shorter than the FIFO packet size"""


class FirmwareError(MPU6050Error):
    """DMP firmware could not be written or did not read back identical"""
