"""
Tests for DMP packet decoding.

Run:  python3 -m pytest tests/test_motion.py -v
"""

import pytest

from conftest import make_packet
from mpu6050_dmp import motion
from mpu6050_dmp.errors import MalformedPacket


class TestDecode:

    def test_fields_at_their_offsets(self):
        packet = make_packet(quaternion=(1 << 30, -(1 << 29), 12345, -1),
                             accel=(100, -200, 8192), gyro=(1, -1, 32767))
        data = motion.decode(packet)

        q = data.quaternion
        assert (q.w, q.x, q.y, q.z) == (1 << 30, -(1 << 29), 12345, -1)
        assert (data.accel.x, data.accel.y, data.accel.z) == (100, -200, 8192)
        assert (data.gyro.x, data.gyro.y, data.gyro.z) == (1, -1, 32767)

    def test_sign_extension(self):
        packet = make_packet(quaternion=(-2147483648, 0, 0, 0), accel=(-32768, 0, 0))
        assert motion.get_quaternion(packet).w == -2147483648
        assert motion.get_accel(packet).x == -32768

    def test_individual_getters_match_decode(self):
        packet = make_packet(accel=(5, 6, 7), gyro=(8, 9, 10))
        assert motion.get_accel(packet).as_dict() == {"x": 5, "y": 6, "z": 7}
        assert motion.get_gyro(packet).as_dict() == {"x": 8, "y": 9, "z": 10}

    def test_trailing_bytes_are_ignored(self):
        packet = make_packet(gyro=(3, 2, 1))
        assert motion.decode(packet + b"\xff" * 4).as_dict() == motion.decode(packet).as_dict()

    def test_bytearray_accepted(self):
        assert motion.decode(bytearray(make_packet())).accel.z == 8192

    @pytest.mark.parametrize("length", [0, 16, 27])
    def test_short_buffer_is_malformed(self, length):
        with pytest.raises(MalformedPacket):
            motion.decode(make_packet()[:length])

    def test_short_buffer_on_single_getter(self):
        with pytest.raises(ValueError):
            motion.get_gyro(b"\x00" * 20)

    def test_as_dict(self):
        data = motion.decode(make_packet())
        d = data.as_dict()
        assert d["quat"] == {"w": 1 << 30, "x": 0, "y": 0, "z": 0}
        assert d["accel"]["z"] == 8192
        assert "quat" not in motion.MotionData(motion.Accel(), motion.Gyro()).as_dict()
