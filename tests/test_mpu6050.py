"""
Tests for the MPU6050 device session: configuration registers, offsets,
firmware upload and the DMP packet helpers.

Run:  python3 -m pytest tests/test_mpu6050.py -v
"""

import logging
import math
import time

import pytest

from conftest import FakeBus, FakeClock, make_packet
from mpu6050_dmp import mpu6050 as mpu6050_module
from mpu6050_dmp import registers
from mpu6050_dmp.dmp_firmware import DMP_CODE, DMP_CODE_SIZE
from mpu6050_dmp.errors import FirmwareError
from mpu6050_dmp.mpu6050 import MPU6050, SensorOffsets


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda s: None)


@pytest.fixture
def mpu(bus, no_sleep):
    return MPU6050(smbus=bus, clock=FakeClock())


class TestDevice:

    def test_connection(self, mpu):
        assert mpu.get_device_id() == 0x34
        assert mpu.test_connection()
        assert not mpu.is_mpu6500()

    def test_mpu6500_is_detected(self, no_sleep):
        mpu = MPU6050(smbus=FakeBus(who_am_i=0x70))
        assert mpu.get_device_id() == 0x38
        assert not mpu.test_connection()
        assert mpu.is_mpu6500()

    def test_initialize(self, bus, mpu):
        bus.regs[registers.RA_PWR_MGMT_1] = 0x40  # asleep after power up
        mpu.initialize()
        assert not mpu.get_sleep_mode()
        assert mpu.get_clock_source() == MPU6050.CLK_SEL_ZGYRO
        assert mpu.gyro.get_range() == 250
        assert mpu.accelerometer.get_range() == 2

    def test_reset(self, bus, mpu):
        mpu.reset()
        assert bus.device_resets == 1

    def test_rate_and_dlpf(self, mpu):
        mpu.set_rate(9)
        assert mpu.get_rate() == 9
        mpu.DLPF.set(mpu.DLPF.DLPF_CFG_44)
        assert mpu.DLPF.get() == 3
        assert mpu.DLPF.get_frequency() == 44
        with pytest.raises(ValueError):
            mpu.DLPF.set(7)

    def test_ranges(self, bus, mpu):
        mpu.gyro.set_range(mpu.gyro.GYRO_RANGE_1000DEG)
        assert mpu.gyro.get_range(raw=True) == 2
        assert mpu.gyro.scale_modifier == 32.8
        mpu.accelerometer.set_range(mpu.accelerometer.ACCEL_RANGE_16G)
        assert bus.regs[registers.RA_ACCEL_CONFIG] == 0x18
        assert mpu.accelerometer.get_range() == 16
        with pytest.raises(ValueError):
            mpu.gyro.set_range(4)
        with pytest.raises(ValueError):
            mpu.accelerometer.set_range(-1)

    def test_temperature(self, bus, mpu):
        bus.set_word(registers.RA_TEMP_OUT_H, -340)
        assert mpu.get_temperature() == pytest.approx(35.53)
        assert mpu.temperature.get_value(mpu.temperature.KELVIN) == pytest.approx(35.53 + 273.15)
        mpu.temperature.set_unit(mpu.temperature.FAHRENHEIT)
        assert mpu.temperature.value == pytest.approx(35.53 * 1.8 + 32)

    def test_sensor_values(self, bus, mpu):
        bus.set_word(0x3B, 16384)
        bus.set_word(0x47, -131)
        assert mpu.accelerometer.x.get_value(raw=True) == 16384
        assert mpu.accelerometer.x.value == pytest.approx(MPU6050.GRAVITY_MS2)
        assert mpu.gyro.z.value == pytest.approx(-1.0)
        assert mpu.gyro.values == {"x": 0.0, "y": 0.0, "z": pytest.approx(-1.0)}

    def test_motion_data_burst(self, bus, mpu):
        for register, value in zip(range(0x3B, 0x49, 2), (1, -2, 16384, 999, 4, -5, 6)):
            bus.set_word(register, value)
        data = mpu.get_motion_data()
        assert data.accel.as_dict() == {"x": 1, "y": -2, "z": 16384}
        assert data.gyro.as_dict() == {"x": 4, "y": -5, "z": 6}

    def test_motion_data_extremes(self, bus, mpu):
        for register, value in zip(range(0x3B, 0x49, 2), (-32768, 32767, -1, 0, 0x7FFF, -0x8000, 1)):
            bus.set_word(register, value)
        data = mpu.get_motion_data()
        assert data.accel.as_dict() == {"x": -32768, "y": 32767, "z": -1}
        assert data.gyro.as_dict() == {"x": 32767, "y": -32768, "z": 1}

    def test_interrupts(self, bus, mpu):
        mpu.set_int_latched(True)
        assert bus.regs[registers.RA_INT_PIN_CFG] == 0x20
        mpu.DMP.set_int_enabled(True)
        assert bus.regs[registers.RA_INT_ENABLE] == 0x02
        bus.regs[registers.RA_INT_STATUS] = 0x12
        assert mpu.get_int_status() == 0x12


class TestOffsets:

    def test_round_trip(self, bus, mpu):
        mpu.set_sensor_offsets(-1000, 20, 1501, 7, -8, 9)
        assert mpu.get_active_offsets() == SensorOffsets(-1000, 20, 1501, 7, -8, 9)
        assert bus.get_word(0x06) == -1000
        assert bus.get_word(0x0A) == 1501
        assert bus.get_word(0x17) == 9

    def test_mpu6500_accel_offset_registers(self, no_sleep):
        bus = FakeBus(who_am_i=0x70)
        mpu = MPU6050(smbus=bus)
        mpu.set_sensor_offsets(1, 2, 3, 4, 5, 6)
        assert [bus.get_word(r) for r in (0x77, 0x7A, 0x7D)] == [1, 2, 3]
        assert mpu.accelerometer.offsets == {"x": 1, "y": 2, "z": 3}
        assert mpu.gyro.offsets == {"x": 4, "y": 5, "z": 6}

    def test_calibrate_gyro(self, bus, mpu):
        bias = (-120, 45, 300)

        def plant(register):
            if 0x43 <= register < 0x49 and register % 2:
                i = (register - 0x43) // 2
                return bias[i] + 4 * bus.get_word(0x13 + 2 * i)
            return None

        bus.plant = plant
        result = mpu.calibrate_gyro(loops=2)
        assert result.passes == 2
        assert mpu.get_active_offsets()[3:] == result.offsets
        assert all(abs(plant(r)) < 16 for r in (0x43, 0x45, 0x47))
        assert bus.fifo_resets == 1 and bus.dmp_resets == 1


class TestFirmware:

    def test_upload_is_verified(self, bus, mpu):
        mpu.DMP.load_firmware()
        assert bytes(bus.mem[:DMP_CODE_SIZE]) == DMP_CODE
        assert bus.regs[registers.RA_DMP_CFG_1:registers.RA_DMP_CFG_1 + 2] == b"\x04\x00"
        assert mpu.DMP.loaded
        chunks = [data for register, data in bus.writes if register == registers.RA_MEM_R_W]
        assert len(chunks) == math.ceil(DMP_CODE_SIZE / 16.0)
        assert max(len(c) for c in chunks) == 16

    def test_mismatch_raises(self, bus, mpu):
        bus.corrupt_mem.add(0x0213)
        with pytest.raises(FirmwareError):
            mpu.DMP.load_firmware()
        assert not mpu.DMP.loaded

    def test_chunk_across_bank_boundary_is_refused(self, mpu):
        with pytest.raises(FirmwareError):
            mpu.DMP._write_mem(0x01F8, b"\x00" * 16)

    def test_empty_image(self, mpu):
        with pytest.raises(FirmwareError):
            mpu.DMP.load_firmware(b"")

    def test_dmp_initialize(self, bus, mpu):
        mpu.dmp_initialize()
        assert bus.device_resets == 1
        assert bus.fifo_resets == 2
        assert bytes(bus.mem[:DMP_CODE_SIZE]) == DMP_CODE
        assert mpu.gyro.get_range() == 2000
        assert mpu.get_rate() == 4
        assert mpu.DLPF.get() == mpu.DLPF.DLPF_CFG_184
        assert bus.regs[registers.RA_INT_ENABLE] == 0x02
        assert bus.regs[registers.RA_USER_CTRL] == 0x40
        assert not mpu.get_dmp_enabled()

        mpu.set_dmp_enabled(True)
        assert mpu.get_dmp_enabled()
        mpu.reset_dmp()
        assert bus.dmp_resets == 1


class TestDMPPackets:

    def test_packet_helpers(self, bus, mpu):
        bus.fifo = bytearray(make_packet(accel=(0, 0, 8192), gyro=(16, -16, 0)))
        packet = mpu.dmp_get_current_fifo_packet()

        q = mpu.dmp_get_quaternion(packet)
        assert q.w == 1 << 30
        gravity = mpu.dmp_get_gravity(packet)
        assert (gravity.x, gravity.y, gravity.z) == pytest.approx((0, 0, 1))
        accel = mpu.dmp_get_accel(packet)
        linear = mpu.dmp_get_linear_accel(accel, gravity)
        assert (linear.x, linear.y, linear.z) == pytest.approx((0, 0, 0))

        unit_q = q.get_scaled(2 ** 30)
        rpy = mpu.dmp_get_yaw_pitch_roll(unit_q, gravity)
        assert (rpy.roll, rpy.pitch, rpy.yaw) == pytest.approx((0, 0, 0))
        assert mpu.dmp_get_euler(unit_q).theta == pytest.approx(0)
        assert mpu.dmp_get_gyro(packet).x == 16
        assert mpu.dmp_get_motion_data(packet).gyro.y == -16

    def test_no_packet_yet(self, mpu):
        assert mpu.dmp_get_current_fifo_packet() is None
        assert mpu.DMP.get_data() is None

    def test_get_data_scaled(self, bus, mpu):
        mpu.gyro.set_range(mpu.gyro.GYRO_RANGE_2000DEG)
        bus.fifo = bytearray(make_packet(quaternion=(1 << 30, 0, 0, 0), accel=(0, 0, 8192), gyro=(164, 0, 0)))
        data = mpu.DMP.get_data()
        assert data.gyro.x == pytest.approx(10.0)
        assert data.accel.z == pytest.approx(MPU6050.GRAVITY_MS2)
        assert data.quaternion.w == pytest.approx(1.0)

    def test_fifo_options_are_passed(self, bus, no_sleep):
        mpu = MPU6050(smbus=bus, overflow_threshold=50, timeout=1.0)
        assert mpu.fifo.overflow_threshold == 50
        assert mpu.fifo.timeout == 1.0
        assert mpu.DMP.packet_size == 28

    def test_run_dmp_prints_json(self, bus, mpu, capsys):
        bus.fifo = bytearray(make_packet())
        mpu.run_DMP(count=1)
        out = capsys.readouterr().out
        assert '"ypr"' in out
        assert '"quat"' in out


class TestSession:

    def test_injected_bus_is_not_closed(self, bus, no_sleep):
        with MPU6050(smbus=bus):
            pass
        assert not bus.closed

    def test_own_bus_is_closed(self, monkeypatch, no_sleep):
        opened = []

        def open_bus(number):
            opened.append(number)
            return FakeBus()

        monkeypatch.setattr(mpu6050_module.smbus2, "SMBus", open_bus)
        with MPU6050(bus=3) as mpu:
            assert opened == [3]
        assert mpu.bus.closed

    def test_set_debug(self, mpu):
        package_logger = logging.getLogger("mpu6050_dmp")
        try:
            mpu.set_debug(True)
            assert package_logger.level == logging.DEBUG
            mpu.set_debug(False)
            assert package_logger.level == logging.NOTSET
        finally:
            package_logger.setLevel(logging.NOTSET)
