"""
Tests for the quaternion / vector helpers and the orientation math.

Run:  python3 -m pytest tests/test_utils_3d.py -v
"""

import math

import pytest

from mpu6050_dmp import utils_3d
from mpu6050_dmp.utils_3d import Quaternion, Vector


def _unit(w, x, y, z):
    return Quaternion(w, x, y, z).get_normalized()


class TestQuaternion:

    def test_fixed_point_reduction(self):
        q = Quaternion(1 << 30, -(1 << 30), 1 << 29, 0).get_fixed_point()
        assert (q.w, q.x, q.y, q.z) == (16384, -16384, 8192, 0)

    def test_scaled(self):
        q = Quaternion(16384, 0, -8192, 0).get_scaled()
        assert (q.w, q.x, q.y, q.z) == (1.0, 0.0, -0.5, 0.0)

    def test_product_with_conjugate_is_identity(self):
        q = _unit(0.9, 0.1, 0.3, -0.2)
        p = q.get_product(q.conjugate)
        assert (p.w, p.x, p.y, p.z) == pytest.approx((1, 0, 0, 0), abs=1e-12)

    def test_normalized(self):
        assert _unit(2, 0, 0, 0).magnitude == pytest.approx(1.0)


class TestGravity:

    def test_level_sensor(self):
        q = Quaternion(1 << 30, 0, 0, 0).get_fixed_point()
        g = utils_3d.get_gravity(q)
        assert (g.x, g.y, g.z) == pytest.approx((0, 0, 1))

    @pytest.mark.parametrize("q", [(0.9, 0.1, 0.3, -0.2), (0.1, 0.7, -0.7, 0.1), (0, 0, 1, 0)])
    def test_unit_norm(self, q):
        u = _unit(*q)
        fixed = Quaternion(u.w * 16384, u.x * 16384, u.y * 16384, u.z * 16384)
        assert utils_3d.get_gravity(fixed).magnitude == pytest.approx(1.0)

    def test_unit_scale(self):
        u = _unit(0.9, 0.1, 0.3, -0.2)
        assert utils_3d.get_gravity(u, scale=1.0).magnitude == pytest.approx(1.0)


class TestAngles:

    def test_zero_tilt(self):
        q = Quaternion(1.0, 0.0, 0.0, 0.0)
        rpy = utils_3d.get_yaw_pitch_roll(q, Vector(0.0, 0.0, 1.0))
        assert (rpy.roll, rpy.pitch, rpy.yaw) == pytest.approx((0, 0, 0))

    def test_inverted_pitch_is_reflected(self):
        q = Quaternion(1.0, 0.0, 0.0, 0.0)
        g = Vector(0.5, 0.0, -math.sqrt(3) / 2)
        assert utils_3d.get_yaw_pitch_roll(q, g).pitch == pytest.approx(math.pi - math.pi / 6)

        g = Vector(-0.5, 0.0, -math.sqrt(3) / 2)
        assert utils_3d.get_yaw_pitch_roll(q, g).pitch == pytest.approx(-math.pi + math.pi / 6)

    def test_roll_from_gravity(self):
        q = Quaternion(1.0, 0.0, 0.0, 0.0)
        rpy = utils_3d.get_yaw_pitch_roll(q, Vector(0.0, 1.0, 0.0))
        assert rpy.roll == pytest.approx(math.pi / 2)
        assert rpy.in_degrees().roll == pytest.approx(90)

    def test_euler_identity(self):
        e = utils_3d.get_euler(Quaternion(1.0, 0.0, 0.0, 0.0))
        assert (e.psi, e.theta, e.phi) == pytest.approx((0, 0, 0))

    def test_euler_quarter_turn_about_z(self):
        c = math.cos(math.pi / 4)
        e = utils_3d.get_euler(Quaternion(c, 0.0, 0.0, c))
        assert (e.psi, e.theta, e.phi) == pytest.approx((-math.pi / 2, 0, 0))

    def test_euler_at_gimbal_lock_does_not_raise(self):
        # 2wy slightly above 1 from rounding
        e = utils_3d.get_euler(Quaternion(0.70711, 0.0, 0.70711, 0.0))
        assert e.theta == pytest.approx(-math.pi / 2)


class TestLinearAccel:

    def test_gravity_removed(self):
        a = utils_3d.get_linear_accel(Vector(0, 0, 8192), Vector(0.0, 0.0, 1.0))
        assert (a.x, a.y, a.z) == pytest.approx((0, 0, 0))

    def test_motion_kept(self):
        a = utils_3d.get_linear_accel(Vector(100, -50, 8192 + 20), Vector(0.0, 0.0, 1.0))
        assert (a.x, a.y, a.z) == pytest.approx((100, -50, 20))

    def test_in_world_frame(self):
        c = math.cos(math.pi / 4)
        # quarter turn about Z: sensor X is world Y
        a = utils_3d.get_linear_accel_in_world(Vector(100.0, 0.0, 0.0), Quaternion(c, 0.0, 0.0, c))
        assert (a.x, a.y, a.z) == pytest.approx((0, 100, 0), abs=1e-9)
