"""Accelerometer and gyroscope offset calibration

PI control loop on the offset registers: every sample the raw output of each axis is
read back and the offset register is corrected until the output reads 0
(1g on the accelerometer Z axis). The sensor must lie flat and still.
"""

import logging
import math
import struct
import time
from dataclasses import dataclass
from typing import List, Tuple

from . import registers

logger = logging.getLogger(__name__)

# raw accelerometer reading of 1g at +/-2g full scale
ACCEL_1G = 16384

_INT16 = struct.Struct(">h")
_UINT16 = struct.Struct(">H")


@dataclass(frozen=True)
class RegisterGroup:
    """Sensor outputs and the offset registers that correct them"""
    name: str
    read_address: int      # X axis output, 2 bytes per axis
    offset_address: int    # X axis offset register
    offset_stride: int     # bytes between axis offset registers
    scale: int             # (P + I) / scale is the offset register value
    is_accel: bool


ACCEL_GROUP = RegisterGroup("accelerometer", registers.RA_ACCEL_XOUT_H, registers.RA_XA_OFFS_H, 2, 8, True)
ACCEL_GROUP_6500 = RegisterGroup("accelerometer", registers.RA_ACCEL_XOUT_H, registers.RA_XA_OFFS_H_6500, 3, 8, True)
GYRO_GROUP = RegisterGroup("gyro", registers.RA_GYRO_XOUT_H, registers.RA_XG_OFFS_USRH, 2, 4, False)


class AxisState(object):
    """Controller state of one axis, lives for one calibration run"""

    def __init__(self, index, offset_register, read_register, low_bit, integral):
        self.index = index
        self.offset_register = offset_register
        self.read_register = read_register
        self.low_bit = low_bit  # accel offset bit 0 is not part of the offset, write it back untouched
        self.integral = integral
        self.offset = 0


@dataclass
class CalibrationResult:
    """Outcome of one calibration run"""
    group: str
    offsets: Tuple[int, int, int]   # last offsets written (x, y, z)
    passes: int                     # outer passes run
    samples: int                    # PI iterations run
    error: int                      # last sum of absolute axis errors (raw LSB)
    errors: List[int]               # error at the end of every pass

    def summary(self):
        return "%s offsets: %7d %7d %7d  (%d passes, %d samples, error %d)" % (
            self.group, self.offsets[0], self.offsets[1], self.offsets[2], self.passes, self.samples, self.error)


def map_range(x, in_min, in_max, out_min, out_max):
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def damped_gains(kp, ki, loops):
    """Scale the PI gains by the number of passes requested.

    :return: (float, float) -- kP, kI
    """
    x = (100 - map_range(loops, 1, 5, 20, 0)) * 0.01
    return kp * x, ki * x


def _to_int16(value):
    return _INT16.unpack(_UINT16.pack(value & 0xFFFF))[0]


class OffsetCalibrator(object):
    """Closed loop offset calibration of one group of 3 axes.

    Never fails on non convergence: the run ends after the pass budget and the
    caller can check CalibrationResult.error.
    """

    SAMPLES_PER_PASS = 100
    SAMPLE_PERIOD = 0.001  # integral time step, the loop runs at about 1kHz
    DIVERGED_ERROR = 1000  # error sum still above this after a full pass restarts the pass
    SETTLED_ERROR = 100
    SETTLED_SCALED_ERROR = 5
    SETTLED_SAMPLES = 10
    GAIN_DECAY = 0.75
    MAX_RESTARTS = 10

    def __init__(self, i2c, max_restarts=None, sample_delay=0.001, sleep=time.sleep):
        """
        :param i2c: I2C -- device register access
        :param max_restarts: int -- restarts of a diverging pass allowed before moving on
        :param sample_delay: float -- pause after each sample (s)
        :param sleep: callable -- sleep function
        """
        self.i2c = i2c
        self.max_restarts = self.MAX_RESTARTS if max_restarts is None else max_restarts
        self.sample_delay = sample_delay
        self.sleep = sleep

    def _encode(self, axis, group, value):
        offset = int(math.floor(value / group.scale + 0.5))
        if group.is_accel:
            offset = (offset & ~1) | axis.low_bit
        return offset

    def _write(self, axis, offset):
        self.i2c.write_word(axis.offset_register, offset)
        axis.offset = _to_int16(offset)

    def _init_axes(self, group):
        axes = []
        for i in range(3):
            offset_register = group.offset_address + i * group.offset_stride
            offset = self.i2c.read_word(offset_register)
            low_bit = offset & 1 if group.is_accel else 0
            axis = AxisState(i, offset_register, group.read_address + i * 2, low_bit, float(offset * group.scale))
            axis.offset = offset
            axes.append(axis)
        return axes

    def run(self, group, kp, ki, loops):
        """Calibrate the offsets of a group

        :param group: RegisterGroup
        :param kp: float -- proportional gain
        :param ki: float -- integral gain
        :param loops: int -- number of passes of up to 100 samples
        :return: CalibrationResult
        """
        axes = self._init_axes(group)
        logger.debug("Calibrating %s, starting offsets: %s", group.name, [a.offset for a in axes])

        samples = 0
        e_sum = 0
        errors = []
        for p in range(loops):
            e_sample = 0
            restarts = 0
            c = 0
            while c < self.SAMPLES_PER_PASS:
                e_sum = 0
                for axis in axes:
                    reading = self.i2c.read_word(axis.read_register)
                    if group.is_accel and axis.index == 2:
                        reading -= ACCEL_1G  # remove gravity
                    error = -reading
                    e_sum += abs(reading)
                    p_term = kp * error
                    axis.integral += error * self.SAMPLE_PERIOD * ki
                    self._write(axis, self._encode(axis, group, p_term + axis.integral))
                samples += 1

                if c == self.SAMPLES_PER_PASS - 1 and e_sum > self.DIVERGED_ERROR and restarts < self.max_restarts:
                    # error is still too large to continue
                    restarts += 1
                    logger.debug("Pass %d diverging (error %d), restarting", p, e_sum)
                    c = 0
                    continue
                if e_sum * (0.05 if group.is_accel else 1) < self.SETTLED_SCALED_ERROR:
                    e_sample += 1
                if e_sum < self.SETTLED_ERROR and c > self.SETTLED_SAMPLES and e_sample >= self.SETTLED_SAMPLES:
                    break
                self.sleep(self.sample_delay)
                c += 1

            kp *= self.GAIN_DECAY
            ki *= self.GAIN_DECAY
            for axis in axes:
                self._write(axis, self._encode(axis, group, axis.integral))
            errors.append(e_sum)
            logger.debug("Pass %d error: %d offsets: %s", p, e_sum, [a.offset for a in axes])

        # drop whatever the DMP computed with the old offsets
        self.i2c.write_field(registers.USERCTRL_FIFO_RESET, 1)
        self.i2c.write_field(registers.USERCTRL_DMP_RESET, 1)

        result = CalibrationResult(group.name, tuple(a.offset for a in axes), len(errors), samples, e_sum, errors)
        logger.info("%s", result.summary())
        return result
