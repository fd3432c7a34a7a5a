"""Python driver for the InvenSense MPU-6050 Gyroscope / Accelerometer and its Digital Motion Processor
Original inspiration:
Jrowberg https://github.com/jrowberg/i2cdevlib/tree/master/Arduino/MPU6050 (MotionApps v6.12)
InvenSense https://invensense.com
Released under the MIT License
"""

import json
import logging
import struct
import time
from collections import namedtuple

import smbus2

from . import motion
from . import registers
from . import utils_3d
from .calibration import ACCEL_GROUP, ACCEL_GROUP_6500, GYRO_GROUP, OffsetCalibrator, damped_gains
from .dmp_firmware import DMP_CODE, DMP_CODE_START_ADDR
from .errors import FirmwareError
from .fifo import FIFO
from .i2c import I2C

logger = logging.getLogger(__name__)

# ACCEL_XOUT_H to GYRO_ZOUT_L: accel x, y, z, temperature, gyro x, y, z
_MOTION_REGISTERS = struct.Struct(">7h")


SensorOffsets = namedtuple("SensorOffsets", ["accel_x", "accel_y", "accel_z", "gyro_x", "gyro_y", "gyro_z"])


class MPU6050(object):
    """Main MPU6050 Class
    Including support for Accelerometer and Gyro readout, Digital Low Pass Filter (DLPF),
    offset calibration and Digital Motion Processor (DMP) fused orientation"""

    GRAVITY_MS2 = 9.80665
    DEFAULT_ADDRESS = 0x68

    # Clock Select
    CLK_SEL_0 = 0
    CLK_SEL_XGYRO = 1
    CLK_SEL_YGYRO = 2
    CLK_SEL_ZGYRO = 3
    CLK_SEL_EXT_32K = 4
    CLK_SEL_EXT_19K = 5
    CLK_SEL_KEEP_RESET = 7

    class X(object):
        """Registers of the X axis (Accelerometer or Gyro)"""
        ACCEL_OUT = 0x3B
        GYRO_OUT = 0x43
        ACCEL_OFFS = 0x06
        ACCEL_OFFS_6500 = 0x77
        GYRO_OFFS = 0x13

    class Y(object):
        """Registers of the Y axis (Accelerometer or Gyro)"""
        ACCEL_OUT = 0x3D
        GYRO_OUT = 0x45
        ACCEL_OFFS = 0x08
        ACCEL_OFFS_6500 = 0x7A
        GYRO_OFFS = 0x15

    class Z(object):
        """Registers of the Z axis (Accelerometer or Gyro)"""
        ACCEL_OUT = 0x3F
        GYRO_OUT = 0x47
        ACCEL_OFFS = 0x0A
        ACCEL_OFFS_6500 = 0x7D
        GYRO_OFFS = 0x17

    class TemperatureClass(object):
        """Temperature sensor Class"""

        CELSIUS = 0
        KELVIN = 1
        FAHRENHEIT = 2

        def __init__(self, mpu):
            self.mpu = mpu
            self.i2c = self.mpu.i2c
            self._unit = self.CELSIUS

        def get_value(self, unit=None):
            """Get temperature from internal sensor in the specified unit
            (default to set unit or degrees Celsius if not set)

            :param unit: int -- 0: Celsius, 1: Kelvin, 2: Fahrenheit. Default: Celsius or unit set with set_unit()
            :return: float -- temperature in specified unit
            """
            if unit is None:
                unit = self._unit
            raw_temp = self.i2c.read_word(registers.RA_TEMP_OUT_H)
            # MPU-6050 Register Map and Descriptions revision 4.2, page 30
            actual_temp = (raw_temp / 340.0) + 36.53
            if unit == self.KELVIN:
                return actual_temp + 273.15
            elif unit == self.FAHRENHEIT:
                return actual_temp * 1.8 + 32
            return actual_temp

        def set_unit(self, unit=CELSIUS):
            self._unit = unit

        @property
        def value(self):
            return self.get_value()

    class GyroClass(object):
        """Gyroscope Class"""

        GYRO_RANGE_250DEG = 0
        GYRO_RANGE_500DEG = 1
        GYRO_RANGE_1000DEG = 2
        GYRO_RANGE_2000DEG = 3
        RANGES = {
            GYRO_RANGE_250DEG: (250, 131.0),
            GYRO_RANGE_500DEG: (500, 65.5),
            GYRO_RANGE_1000DEG: (1000, 32.8),
            GYRO_RANGE_2000DEG: (2000, 16.4),
        }

        def __init__(self, mpu):
            self.mpu = mpu
            self.i2c = self.mpu.i2c
            self._range_raw = self.GYRO_RANGE_250DEG

        class Axis(object):
            def __init__(self, gyro, axis, name):
                self._name = name
                self.gyro = gyro
                self.i2c = gyro.i2c
                self.axis = axis

            def get_value(self, raw=False):
                """Get Gyroscope Axis value, either raw or in deg/sec (dps)

                :param raw: bool -- raw values are returned if True
                :return: float -- Gyro Axis value
                """
                val = self.i2c.read_word(self.axis.GYRO_OUT)
                if raw:
                    return val
                return val / self.gyro.scale_modifier

            def get_offset(self):
                return self.i2c.read_word(self.axis.GYRO_OFFS)

            def set_offset(self, offset):
                self.i2c.write_word(self.axis.GYRO_OFFS, offset)

            @property
            def value(self):
                return self.get_value()

            @property
            def offset(self):
                return self.get_offset()

            @property
            def name(self):
                return self._name

        def get_range(self, raw=False):
            """Get Gyro Full Scale Range (FSR)

            :param raw: bool -- FS_SEL value is returned if True, deg/sec otherwise
            :return: int
            """
            self._range_raw = self.i2c.read_field(registers.GCONFIG_FS_SEL)
            if raw:
                return self._range_raw
            return self.RANGES[self._range_raw][0]

        def set_range(self, value):
            """Sets the range of the gyroscope

            :param value: int -- one of GYRO_RANGE_250DEG, GYRO_RANGE_500DEG, GYRO_RANGE_1000DEG or GYRO_RANGE_2000DEG
            :return:
            """
            if value not in self.RANGES:
                raise ValueError("Set range: not within the possible values")
            self.i2c.write_field(registers.GCONFIG_FS_SEL, value)
            self._range_raw = value

        @property
        def scale_modifier(self):
            return self.RANGES[self._range_raw][1]

        @property
        def x(self):
            return self.Axis(self, self.mpu.X, "Gyro X")

        @property
        def y(self):
            return self.Axis(self, self.mpu.Y, "Gyro Y")

        @property
        def z(self):
            return self.Axis(self, self.mpu.Z, "Gyro Z")

        @property
        def axes(self):
            return self.x, self.y, self.z

        @property
        def values(self):
            return {"x": self.x.value, "y": self.y.value, "z": self.z.value}

        @property
        def offsets(self):
            return {"x": self.x.offset, "y": self.y.offset, "z": self.z.offset}

    class AccelerometerClass(object):
        """Accelerometer Class"""

        ACCEL_RANGE_2G = 0
        ACCEL_RANGE_4G = 1
        ACCEL_RANGE_8G = 2
        ACCEL_RANGE_16G = 3
        RANGES = {
            ACCEL_RANGE_2G: (2, 16384.0),
            ACCEL_RANGE_4G: (4, 8192.0),
            ACCEL_RANGE_8G: (8, 4096.0),
            ACCEL_RANGE_16G: (16, 2048.0),
        }

        def __init__(self, mpu):
            self.mpu = mpu
            self.i2c = self.mpu.i2c
            self._range_raw = self.ACCEL_RANGE_2G

        class Axis(object):
            def __init__(self, accel, axis, name):
                self._name = name
                self.accel = accel
                self.mpu = accel.mpu
                self.i2c = accel.i2c
                self.axis = axis

            def get_value(self, raw=False):
                """Accelerometer Axis value, raw or in m/s^2

                :param raw: bool -- raw values are returned if True
                :return: float -- Accelerometer axis value
                """
                val = self.i2c.read_word(self.axis.ACCEL_OUT)
                if raw:
                    return val
                return val / self.accel.scale_modifier * self.mpu.GRAVITY_MS2

            def _offset_register(self):
                return self.axis.ACCEL_OFFS_6500 if self.mpu.is_mpu6500() else self.axis.ACCEL_OFFS

            def get_offset(self):
                """Get Accelerometer axis offset

                :return: int -- Accelerometer axis offset used for calibration
                """
                return self.i2c.read_word(self._offset_register())

            def set_offset(self, offset):
                """Set Accelerometer axis offset

                :param offset: int -- Accelerometer axis offset to use for calibration
                :return:
                """
                self.i2c.write_word(self._offset_register(), offset)

            @property
            def value(self):
                return self.get_value()

            @property
            def offset(self):
                return self.get_offset()

            @property
            def name(self):
                return self._name

        def get_range(self, raw=False):
            """Get Accelerometer Full Scale Range (FSR)

            :param raw: bool -- AFS_SEL value is returned if True, g otherwise
            :return: int
            """
            self._range_raw = self.i2c.read_field(registers.ACONFIG_AFS_SEL)
            if raw:
                return self._range_raw
            return self.RANGES[self._range_raw][0]

        def set_range(self, value):
            """Sets the range of the accelerometer

            :param value: int -- one of ACCEL_RANGE_2G, ACCEL_RANGE_4G, ACCEL_RANGE_8G or ACCEL_RANGE_16G
            :return:
            """
            if value not in self.RANGES:
                raise ValueError("Not within permissible values")
            self.i2c.write_field(registers.ACONFIG_AFS_SEL, value)
            self._range_raw = value

        @property
        def scale_modifier(self):
            return self.RANGES[self._range_raw][1]

        @property
        def x(self):
            return self.Axis(self, self.mpu.X, "Accelerometer X")

        @property
        def y(self):
            return self.Axis(self, self.mpu.Y, "Accelerometer Y")

        @property
        def z(self):
            return self.Axis(self, self.mpu.Z, "Accelerometer Z")

        @property
        def axes(self):
            return self.x, self.y, self.z

        @property
        def values(self):
            return {"x": self.x.value, "y": self.y.value, "z": self.z.value}

        @property
        def offsets(self):
            return {"x": self.x.offset, "y": self.y.offset, "z": self.z.offset}

    class DLPFClass(object):
        # Digital Low Pass Filter DLPF, accelerometer bandwidth in Hz
        DLPF_CFG_260 = 0
        DLPF_CFG_184 = 1
        DLPF_CFG_94 = 2
        DLPF_CFG_44 = 3
        DLPF_CFG_21 = 4
        DLPF_CFG_10 = 5
        DLPF_CFG_5 = 6
        FREQUENCIES = (260, 184, 94, 44, 21, 10, 5)

        def __init__(self, mpu):
            self.mpu = mpu
            self.i2c = self.mpu.i2c

        def get(self):
            return self.i2c.read_field(registers.CFG_DLPF)

        def set(self, value):
            if not 0 <= value < len(self.FREQUENCIES):
                raise ValueError("DLPF mode {} not in 0-{}".format(value, len(self.FREQUENCIES) - 1))
            self.i2c.write_field(registers.CFG_DLPF, value)

        def get_frequency(self):
            return self.FREQUENCIES[self.get()]

    class DMPClass(object):
        """Digital Motion Processor Class
        Loads the MotionApps firmware and outputs the fused rotation quaternion,
        raw accelerometer and calibrated gyro data through the FIFO."""

        DMP_MEMORY_BANK_SIZE = 256
        DMP_MEMORY_CHUNK_SIZE = 16

        def __init__(self, mpu, fifo):
            self.mpu = mpu
            self.i2c = mpu.i2c
            self._fifo = fifo
            self._loaded = False

        @property
        def fifo(self):
            return self._fifo

        @property
        def loaded(self):
            return self._loaded

        @property
        def packet_size(self):
            return self._fifo.packet_size

        def load_firmware(self, firmware=DMP_CODE, start_address=DMP_CODE_START_ADDR):
            """Write the firmware to the DMP memory banks, verifying every chunk

            :param firmware: bytes -- firmware image
            :param start_address: int -- DMP program start address
            :return:
            """
            if not firmware:
                raise FirmwareError("firmware buffer empty")

            logger.debug("Writing DMP code to MPU memory banks (%d bytes)", len(firmware))
            for i in range(0, len(firmware), self.DMP_MEMORY_CHUNK_SIZE):
                chunk = firmware[i:i + self.DMP_MEMORY_CHUNK_SIZE]
                self._write_mem(i, chunk)
                self._mem_compare(i, chunk, self._read_mem(i, len(chunk)))

            # Set program start address.
            self.i2c.write_word(registers.RA_DMP_CFG_1, start_address)
            self._loaded = True
            logger.debug("DMP code written and verified")

        def _select(self, mem_addr, length):
            bank = mem_addr >> 8
            address = mem_addr & 0xFF
            # Check bank boundaries.
            if address + length > self.DMP_MEMORY_BANK_SIZE:
                raise FirmwareError("0x%0.4x: %d bytes go beyond bank memory" % (mem_addr, length))
            # BANK_SEL is followed by MEM_START_ADDR, both are set in one write
            self.i2c.write_bytes(registers.RA_BANK_SEL, [bank, address])

        def _write_mem(self, mem_addr, data):
            """Write to the DMP memory, within one bank

            :param mem_addr: int -- bank << 8 | start address
            :param data: bytes
            :return:
            """
            self._select(mem_addr, len(data))
            self.i2c.write_bytes(registers.RA_MEM_R_W, data)

        def _read_mem(self, mem_addr, length):
            self._select(mem_addr, length)
            return bytes(self.i2c.read_bytes(registers.RA_MEM_R_W, length))

        @staticmethod
        def _mem_compare(mem_addr, data_in, data_out):
            if bytes(data_in) != bytes(data_out):
                raise FirmwareError(
                    "DMP memory at 0x%0.4x does not match\r\n" % mem_addr
                    + str(["0x%0.2x" % x for x in data_in]) + "\r\n" + str(["0x%0.2x" % x for x in data_out]))

        def init(self):
            """Reset the MPU, load the firmware and set the DMP up. The DMP is left disabled."""
            i2c = self.i2c
            logger.debug("Resetting MPU6050...")
            self.mpu.reset()
            # FIFO, I2C master and signal path reset
            i2c.write_field(registers.USERCTRL_SIG_RESET, 0b111)
            time.sleep(0.1)

            i2c.write_byte(registers.RA_PWR_MGMT_1, self.mpu.CLK_SEL_XGYRO)
            i2c.write_byte(registers.RA_INT_ENABLE, 0x00)  # no interrupt
            i2c.write_byte(registers.RA_FIFO_EN, 0x00)  # the DMP fills the FIFO, not the sensors
            self.mpu.accelerometer.set_range(self.mpu.accelerometer.ACCEL_RANGE_2G)
            i2c.write_byte(registers.RA_INT_PIN_CFG, 0x80)  # active low, cleared on status read
            self.mpu.set_rate(4)  # 1kHz / (1 + 4) = 200Hz
            self.mpu.DLPF.set(self.mpu.DLPF.DLPF_CFG_184)

            self.load_firmware()

            self.mpu.gyro.set_range(self.mpu.gyro.GYRO_RANGE_2000DEG)
            i2c.write_byte(registers.RA_USER_CTRL, 0xC0)  # DMP and FIFO enabled
            i2c.write_byte(registers.RA_INT_ENABLE, 0x02)  # RAW_DMP_INT_EN
            self._fifo.reset()
            self.set_state(False)

        def set_state(self, enable):
            logger.debug("%s DMP", "Enable" if enable else "Disable")
            self.i2c.write_field(registers.USERCTRL_DMP_EN, enable)

        def get_state(self):
            return self.i2c.read_field(registers.USERCTRL_DMP_EN) == 1

        def reset(self):
            self.i2c.write_field(registers.USERCTRL_DMP_RESET, 1)

        def set_int_enabled(self, enable):
            self.i2c.write_field(registers.INT_ENABLE_DMP, enable)

        def get_current_packet(self):
            """Most recent DMP packet, None if none is ready yet

            :return: bytes or None
            """
            return self._fifo.get_current_packet()

        def get_data(self, raw=False):
            """Read and decode the most recent DMP packet

            :param raw: bool -- raw values if True, otherwise deg/s, m/s^2 and a unit quaternion
            :return: MotionData or None
            """
            packet = self.get_current_packet()
            if packet is None:
                return None
            data = motion.decode(packet)
            if not raw:
                gyro_scale_modifier = self.mpu.gyro.scale_modifier
                g = data.gyro
                data.gyro = motion.Gyro(g.x / gyro_scale_modifier, g.y / gyro_scale_modifier, g.z / gyro_scale_modifier)
                a = data.accel
                k = self.mpu.GRAVITY_MS2 / utils_3d.ACCEL_1G
                data.accel = motion.Accel(a.x * k, a.y * k, a.z * k)
                data.quaternion = data.quaternion.get_scaled(utils_3d.QUAT_SCALE_Q30)
            return data

    def __init__(self, bus=1, address=DEFAULT_ADDRESS, smbus=None, **fifo_options):
        """Constructor: create an instance of the MPU6050

        :param bus: int -- I2C bus number, used when smbus is not given
        :param address: int -- I2C address of the device
        :param smbus: smbus2.SMBus -- already opened bus
        :param fifo_options: overflow_threshold, timeout, clock -- see FIFO
        """
        self.address = address
        self._own_bus = smbus is None
        self.bus = smbus2.SMBus(bus) if smbus is None else smbus
        self._i2c = I2C(self.bus, address)
        self._device_id = None

        self._DLPF = self.DLPFClass(self)
        self._gyro = self.GyroClass(self)
        self._accelerometer = self.AccelerometerClass(self)
        self._temperature = self.TemperatureClass(self)
        self._fifo = FIFO(self._i2c, **fifo_options)
        self._DMP = self.DMPClass(self, self._fifo)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Release the bus if it was opened here"""
        if self._own_bus:
            self.bus.close()

    @property
    def i2c(self):
        return self._i2c

    @property
    def gyro(self):
        """Gyro Object
        :return: GyroClass instance
        """
        return self._gyro

    @property
    def accelerometer(self):
        """Accelerometer Object
        :return: AccelerometerClass instance
        """
        return self._accelerometer

    @property
    def temperature(self):
        return self._temperature

    @property
    def DLPF(self):
        return self._DLPF

    @property
    def DMP(self):
        return self._DMP

    @property
    def fifo(self):
        return self._fifo

    # Device

    def initialize(self):
        """Power on with the gyroscope clock, +/- 250 deg/s and +/- 2g"""
        self.set_clock_source(self.CLK_SEL_ZGYRO)
        self.gyro.set_range(self.gyro.GYRO_RANGE_250DEG)
        self.accelerometer.set_range(self.accelerometer.ACCEL_RANGE_2G)
        self.set_sleep_mode(False)
        time.sleep(0.1)

    def get_device_id(self):
        """WHO_AM_I (6 bits), 0x34 for a MPU-6050"""
        self._device_id = self.i2c.read_field(registers.WHO_AM_I)
        return self._device_id

    def test_connection(self):
        return self.get_device_id() == registers.DEVICE_ID_MPU6050

    def is_mpu6500(self):
        """MPU-6500 / MPU-9250 keep the accelerometer offsets at different registers"""
        if self._device_id is None:
            self.get_device_id()
        return self._device_id >= registers.DEVICE_ID_MPU6500_MIN

    def reset(self):
        logger.debug("Reseting MPU")
        self.i2c.write_field(registers.PWR1_DEVICE_RESET, 1)
        time.sleep(0.1)

    def set_sleep_mode(self, enable):
        self.i2c.write_field(registers.PWR1_SLEEP, enable)

    def get_sleep_mode(self):
        return self.i2c.read_field(registers.PWR1_SLEEP) == 1

    def set_clock_source(self, source):
        self.i2c.write_field(registers.PWR1_CLKSEL, source)

    def get_clock_source(self):
        return self.i2c.read_field(registers.PWR1_CLKSEL)

    def set_rate(self, divider):
        """Sample rate = gyroscope output rate / (1 + divider)

        :param divider: int -- SMPLRT_DIV (0-255)
        """
        self.i2c.write_byte(registers.RA_SMPLRT_DIV, divider)

    def get_rate(self):
        return self.i2c.read_byte(registers.RA_SMPLRT_DIV)

    def get_temperature(self):
        """Die temperature in degrees Celsius"""
        return self.temperature.get_value(self.temperature.CELSIUS)

    def get_int_status(self):
        return self.i2c.read_byte(registers.RA_INT_STATUS)

    def set_int_latched(self, enable):
        self.i2c.write_field(registers.INTCFG_LATCH_INT_EN, enable)

    def get_motion_data(self):
        """Accelerometer and gyroscope output registers, read in one burst

        :return: MotionData -- raw values
        """
        data = self.i2c.read_bytes(registers.RA_ACCEL_XOUT_H, 14)
        values = _MOTION_REGISTERS.unpack(bytes(data))
        # values[3] is the temperature
        return motion.MotionData(motion.Accel(*values[0:3]), motion.Gyro(*values[4:7]))

    # Offsets

    def set_sensor_offsets(self, accel_x, accel_y, accel_z, gyro_x, gyro_y, gyro_z):
        for axis, offset in zip(self.accelerometer.axes + self.gyro.axes,
                                (accel_x, accel_y, accel_z, gyro_x, gyro_y, gyro_z)):
            axis.set_offset(offset)

    def get_active_offsets(self):
        """Offsets currently used by the device

        :return: SensorOffsets
        """
        return SensorOffsets(*[axis.offset for axis in self.accelerometer.axes + self.gyro.axes])

    def calibrate_accel(self, loops=6):
        """Null the accelerometer offsets, the sensor must lie flat (Z up) and still.
        Calibrates from 0 in about 6-7 loops of up to 100 readings.

        :param loops: int -- number of passes
        :return: CalibrationResult
        """
        kp, ki = damped_gains(0.3, 20, loops)
        group = ACCEL_GROUP_6500 if self.is_mpu6500() else ACCEL_GROUP
        return OffsetCalibrator(self.i2c).run(group, kp, ki, loops)

    def calibrate_gyro(self, loops=6):
        """Null the gyroscope offsets, the sensor must be still.

        :param loops: int -- number of passes
        :return: CalibrationResult
        """
        kp, ki = damped_gains(0.3, 90, loops)
        return OffsetCalibrator(self.i2c).run(GYRO_GROUP, kp, ki, loops)

    # DMP

    def dmp_initialize(self):
        self.DMP.init()

    def set_dmp_enabled(self, enable):
        self.DMP.set_state(enable)

    def get_dmp_enabled(self):
        return self.DMP.get_state()

    def reset_dmp(self):
        self.DMP.reset()

    def reset_fifo(self):
        self.fifo.reset()

    def dmp_get_current_fifo_packet(self):
        return self.fifo.get_current_packet()

    @staticmethod
    def dmp_get_quaternion(packet):
        return motion.get_quaternion(packet)

    @staticmethod
    def dmp_get_accel(packet):
        return motion.get_accel(packet)

    @staticmethod
    def dmp_get_gyro(packet):
        return motion.get_gyro(packet)

    @staticmethod
    def dmp_get_motion_data(packet):
        return motion.decode(packet)

    @staticmethod
    def dmp_get_gravity(packet):
        """Gravity vector (unit scaled) of a DMP packet"""
        return utils_3d.get_gravity(motion.get_quaternion(packet).get_fixed_point())

    @staticmethod
    def dmp_get_euler(q):
        return utils_3d.get_euler(q)

    @staticmethod
    def dmp_get_yaw_pitch_roll(q, gravity):
        return utils_3d.get_yaw_pitch_roll(q, gravity)

    @staticmethod
    def dmp_get_linear_accel(accel, gravity):
        return utils_3d.get_linear_accel(accel, gravity)

    def set_debug(self, enable):
        logging.getLogger(__package__).setLevel(logging.DEBUG if enable else logging.NOTSET)

    def run_DMP(self, count=None):
        """Print decoded DMP packets as JSON

        :param count: int -- number of packets, forever if None
        """
        n = 0
        while count is None or n < count:
            packet = self.dmp_get_current_fifo_packet()
            if packet is None:
                time.sleep(0.005)  # need to run faster than the FIFO
                continue
            n += 1
            q = self.dmp_get_quaternion(packet)
            unit_q = q.get_scaled(utils_3d.QUAT_SCALE_Q30)
            gravity = self.dmp_get_gravity(packet)
            accel = self.dmp_get_accel(packet)
            rpy = self.dmp_get_yaw_pitch_roll(unit_q, gravity).in_degrees()
            linear = self.dmp_get_linear_accel(accel, gravity)
            data = self.dmp_get_motion_data(packet).as_dict()
            data["ypr"] = {"yaw": rpy.yaw, "pitch": rpy.pitch, "roll": rpy.roll}
            data["linear_accel"] = {"x": linear.x, "y": linear.y, "z": linear.z}
            print(json.dumps(data, indent=4, sort_keys=True))


def main():
    logging.basicConfig(level=logging.INFO)
    with MPU6050(bus=1, address=MPU6050.DEFAULT_ADDRESS) as mpu:
        mpu.initialize()
        print("connected: " + str(mpu.test_connection()) + " id: " + hex(mpu.get_device_id()))
        print("temperature: %.2f" % mpu.temperature.value)

        mpu.dmp_initialize()
        mpu.calibrate_accel()
        mpu.calibrate_gyro()
        offsets = mpu.get_active_offsets()
        print("           X Accel  Y Accel  Z Accel   X Gyro   Y Gyro   Z Gyro")
        print("OFFSETS    %7d  %7d  %7d  %7d  %7d  %7d" % offsets)

        mpu.set_dmp_enabled(True)
        mpu.run_DMP()


if __name__ == "__main__":
    main()
