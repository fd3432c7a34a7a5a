"""DMP FIFO packet decoding

Default MotionApps v6.12 28-byte FIFO packet:

    [QUAT W][QUAT X][QUAT Y][QUAT Z][ACC X][ACC Y][ACC Z][GYRO X][GYRO Y][GYRO Z]
      0-3     4-7     8-11   12-15   16-17  18-19  20-21  22-23   24-25   26-27

Quaternion components are signed 32 bit, sensor values signed 16 bit, all big-endian.
"""

import struct

from .errors import MalformedPacket
from .utils_3d import Quaternion

PACKET_SIZE = 28

_QUATERNION = struct.Struct(">4i")
_TRIPLE = struct.Struct(">3h")
ACCEL_OFFSET = 16
GYRO_OFFSET = 22


class Accel(object):
    """Raw accelerometer values (LSB)"""

    def __init__(self, x=0, y=0, z=0):
        self.x = x
        self.y = y
        self.z = z

    def __str__(self):
        return "x: " + str(self.x) + " y: " + str(self.y) + " z: " + str(self.z)

    def as_dict(self):
        return {"x": self.x, "y": self.y, "z": self.z}


class Gyro(Accel):
    """Raw gyroscope values (LSB)"""


class MotionData(object):
    """Accelerometer and gyroscope values of one sample"""

    def __init__(self, accel, gyro, quaternion=None):
        self.accel = accel
        self.gyro = gyro
        self.quaternion = quaternion

    def as_dict(self):
        data = {"accel": self.accel.as_dict(), "gyro": self.gyro.as_dict()}
        if self.quaternion is not None:
            q = self.quaternion
            data["quat"] = {"w": q.w, "x": q.x, "y": q.y, "z": q.z}
        return data


def _check(packet):
    if len(packet) < PACKET_SIZE:
        raise MalformedPacket("DMP packet is {} bytes, expected {}".format(len(packet), PACKET_SIZE))
    return bytes(packet)


def get_quaternion(packet):
    """Raw Q30 quaternion from a DMP packet

    :param packet: bytes -- at least PACKET_SIZE bytes
    :return: Quaternion
    """
    return Quaternion(*_QUATERNION.unpack_from(_check(packet), 0))


def get_accel(packet):
    """Raw accelerometer values from a DMP packet (+1g = 8192)

    :param packet: bytes
    :return: Accel
    """
    return Accel(*_TRIPLE.unpack_from(_check(packet), ACCEL_OFFSET))


def get_gyro(packet):
    """Raw gyroscope values from a DMP packet

    :param packet: bytes
    :return: Gyro
    """
    return Gyro(*_TRIPLE.unpack_from(_check(packet), GYRO_OFFSET))


def decode(packet):
    """Decode a whole DMP packet

    :param packet: bytes -- at least PACKET_SIZE bytes, anything past it is ignored
    :return: MotionData -- with the raw quaternion
    """
    packet = _check(packet)
    return MotionData(get_accel(packet), get_gyro(packet), get_quaternion(packet))
