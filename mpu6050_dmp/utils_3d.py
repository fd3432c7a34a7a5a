"""3D helpers: quaternion and vector types, and the orientation math
applied to DMP quaternions (gravity, Euler angles, yaw / pitch / roll, linear acceleration)
"""

import math

# DMP quaternions reduced to 16 bits are Q14: 1.0 == 16384
QUAT_SCALE = 16384.0
# DMP quaternions as read from the FIFO packet are Q30: 1.0 == 2^30
QUAT_SCALE_Q30 = 1073741824.0
# +1g in the DMP FIFO packet accelerometer data (sensitivity is 2g)
ACCEL_1G = 8192


class Quaternion:
    def __init__(self, w=1, x=0, y=0, z=0):
        self.w = w
        self.x = x
        self.y = y
        self.z = z

    def __str__(self):
        return "w: " + str(self.w) + " x: " + str(self.x) + " y: " + str(self.y) + " z: " + str(self.z)

    def __repr__(self):
        return "Quaternion(%r, %r, %r, %r)" % (self.w, self.x, self.y, self.z)

    def get_product(self, q):
        """Multiply a Quaternion by another
        :param q: Quaternion -- quaternion to multiply by
        :return: Quaternion
        """
        # Quaternion multiplication is defined by:
        #     (Q1 * Q2).w = (w1w2 - x1x2 - y1y2 - z1z2)
        #     (Q1 * Q2).x = (w1x2 + x1w2 + y1z2 - z1y2)
        #     (Q1 * Q2).y = (w1y2 - x1z2 + y1w2 + z1x2)
        #     (Q1 * Q2).z = (w1z2 + x1y2 - y1x2 + z1w2
        return Quaternion(
            self.w * q.w - self.x * q.x - self.y * q.y - self.z * q.z,  # new w
            self.w * q.x + self.x * q.w + self.y * q.z - self.z * q.y,  # new x
            self.w * q.y - self.x * q.z + self.y * q.w + self.z * q.x,  # new y
            self.w * q.z + self.x * q.y - self.y * q.x + self.z * q.w  # new z
        )

    def get_conjugate(self):
        """Get the conjugate of this Quaternion
        :return: Quaternion
        """
        return Quaternion(self.w, -1.0 * self.x, -1.0 * self.y, -1.0 * self.z)

    def get_magnitude(self):
        """Get magnitude of this quaternion
        :return: float
        """
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self):
        """Normalize this Quaternion (i.e. divide by magnitude)
        :return:
        """
        m = self.get_magnitude()
        self.w /= m
        self.x /= m
        self.y /= m
        self.z /= m

    def get_normalized(self):
        """Get normalized version of this Quaternion
        :return: Quaternion
        """
        r = Quaternion(self.w, self.x, self.y, self.z)
        r.normalize()
        return r

    def get_fixed_point(self):
        """Reduce a raw Q30 DMP quaternion to the Q14 fixed point format (top 16 bits)
        :return: Quaternion -- integer components, 16384 == 1.0
        """
        return Quaternion(self.w >> 16, self.x >> 16, self.y >> 16, self.z >> 16)

    def get_scaled(self, scale=QUAT_SCALE):
        """Divide every component by the fixed point scale
        :param scale: float -- value representing 1.0
        :return: Quaternion -- float components
        """
        return Quaternion(self.w / scale, self.x / scale, self.y / scale, self.z / scale)

    @property
    def conjugate(self):
        """Conjugate of this Quaternion
        :return:
        """
        return self.get_conjugate()

    @property
    def magnitude(self):
        """Magnitude of this Quaternion
        :return:
        """
        return self.get_magnitude()

    @property
    def normalized(self):
        """Normalized version of this Quaternion
        :return:
        """
        return self.get_normalized()


class Vector:
    def __init__(self, x, y, z):
        """Create a 3D Vector
        :param x: float
        :param y: float
        :param z: float
        """
        self.x = x
        self.y = y
        self.z = z

    def __str__(self):
        return "x: " + str(self.x) + " y: " + str(self.y) + " z: " + str(self.z)

    def __repr__(self):
        return "Vector(%r, %r, %r)" % (self.x, self.y, self.z)

    def get_magnitude(self):
        """Get the magnitude of this Vector
        :return: float
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def rotate(self, q):
        """Rotate Vector using a Quaternion
         P_out = q * P_in * conj(q)
         - P_out is the output vector
         - q is the orientation quaternion
         - P_in is the input vector (a*aReal)
         - conj(q) is the conjugate of the orientation quaternion (q=[w,x,y,z], q*=[w,-x,-y,-z])
        :param q: Quaternion
        :return:
        """
        p = Quaternion(0, self.x, self.y, self.z)

        p = q.get_product(p)
        p = p.get_product(q.conjugate)
        # p is now [0, x', y', z']
        self.x = p.x
        self.y = p.y
        self.z = p.z

    def get_rotated(self, q):
        """Get rotated version of this Vector
        :param q: Quaternion
        :return: Vector
        """
        r = Vector(self.x, self.y, self.z)
        r.rotate(q)
        return r

    @property
    def magnitude(self):
        """Get magnitude of this Vector
        :return: float
        """
        return self.get_magnitude()


class Euler:
    """Euler angles (radians)"""

    def __init__(self, psi, theta, phi):
        self.psi = psi
        self.theta = theta
        self.phi = phi

    def __str__(self):
        return "psi: " + str(self.psi) + " theta: " + str(self.theta) + " phi: " + str(self.phi)


class RPY:
    """Roll, pitch, yaw (radians)"""

    def __init__(self, roll, pitch, yaw):
        self.roll = roll
        self.pitch = pitch
        self.yaw = yaw

    def __str__(self):
        return "roll: " + str(self.roll) + " pitch: " + str(self.pitch) + " yaw: " + str(self.yaw)

    def in_degrees(self):
        return RPY(math.degrees(self.roll), math.degrees(self.pitch), math.degrees(self.yaw))


def get_gravity(q, scale=QUAT_SCALE):
    """Gravity direction in the sensor frame from a fixed point quaternion.
    Rotates the world Z axis by q; each fixed point factor is divided by scale
    so a quaternion of magnitude scale gives a unit vector.

    :param q: Quaternion -- fixed point components (Q14 by default)
    :param scale: float -- fixed point value of 1.0
    :return: Vector -- unit scaled
    """
    s2 = scale * scale
    return Vector(
        2 * (q.x * q.z - q.w * q.y) / s2,
        2 * (q.w * q.x + q.y * q.z) / s2,
        (q.w * q.w - q.x * q.x - q.y * q.y + q.z * q.z) / s2
    )


def get_euler(q):
    """Euler angles from a unit quaternion

    :param q: Quaternion -- unit scaled
    :return: Euler
    """
    psi = math.atan2(2 * q.x * q.y - 2 * q.w * q.z, 2 * q.w * q.w + 2 * q.x * q.x - 1)
    # rounding can push the sine just past 1 near theta = +/-90deg
    theta = -math.asin(max(-1.0, min(1.0, 2 * q.x * q.z + 2 * q.w * q.y)))
    phi = math.atan2(2 * q.y * q.z - 2 * q.w * q.x, 2 * q.w * q.w + 2 * q.z * q.z - 1)
    return Euler(psi, theta, phi)


def get_yaw_pitch_roll(q, gravity):
    """Yaw from the quaternion, pitch and roll from the gravity vector.
    Not corrected near gimbal lock.

    :param q: Quaternion -- unit scaled
    :param gravity: Vector -- as returned by get_gravity
    :return: RPY
    """
    # yaw: (about Z axis)
    yaw = math.atan2(2 * q.x * q.y - 2 * q.w * q.z, 2 * q.w * q.w + 2 * q.x * q.x - 1)
    # pitch: (nose up/down, about Y axis)
    pitch = math.atan2(gravity.x, math.sqrt(gravity.y * gravity.y + gravity.z * gravity.z))
    # roll: (tilt left/right, about X axis)
    roll = math.atan2(gravity.y, gravity.z)

    if gravity.z < 0:
        # upside down
        if pitch > 0:
            pitch = math.pi - pitch
        else:
            pitch = -math.pi - pitch

    return RPY(roll, pitch, yaw)


def get_linear_accel(accel, gravity):
    """Remove the gravity component from raw DMP accelerometer data

    :param accel: Vector or Accel -- raw LSB (+1g = 8192)
    :param gravity: Vector -- unit scaled
    :return: Vector -- raw LSB
    """
    return Vector(
        accel.x - gravity.x * ACCEL_1G,
        accel.y - gravity.y * ACCEL_1G,
        accel.z - gravity.z * ACCEL_1G
    )


def get_linear_accel_in_world(accel_real, q):
    """Rotate linear acceleration from the sensor frame to the world frame

    :param accel_real: Vector -- as returned by get_linear_accel
    :param q: Quaternion -- unit scaled
    :return: Vector
    """
    return Vector(accel_real.x, accel_real.y, accel_real.z).get_rotated(q)
