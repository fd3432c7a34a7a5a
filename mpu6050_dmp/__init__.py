from .calibration import CalibrationResult, OffsetCalibrator
from .errors import AcquisitionTimeout, FirmwareError, MalformedPacket, MPU6050Error, TransportError
from .fifo import FIFO
from .motion import PACKET_SIZE, Accel, Gyro, MotionData
from .mpu6050 import MPU6050, SensorOffsets
from .utils_3d import RPY, Euler, Quaternion, Vector

__version__ = "1.0.0"
