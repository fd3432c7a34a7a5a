"""MPU-6050 register map
Register addresses and the bit fields packed inside them, see
"MPU-6000/MPU-6050 Register Map and Descriptions" revision 4.2
"""

from collections import namedtuple


class RegisterField(namedtuple("RegisterField", ["register", "bit", "length"])):
    """A run of bits inside one 8-bit register.

    :param register: int -- register address
    :param bit: int -- position of the most significant bit of the field (0-7)
    :param length: int -- number of bits in the field
    """
    __slots__ = ()


# Offsets
RA_XA_OFFS_H = 0x06  # [15:1] XA_OFFS, [0] reserved
RA_YA_OFFS_H = 0x08
RA_ZA_OFFS_H = 0x0A
RA_XG_OFFS_USRH = 0x13
RA_YG_OFFS_USRH = 0x15
RA_ZG_OFFS_USRH = 0x17

# MPU-6500 keeps the accelerometer offsets elsewhere, 3 bytes apart
RA_XA_OFFS_H_6500 = 0x77

# Config
RA_SMPLRT_DIV = 0x19
RA_CONFIG = 0x1A
RA_GYRO_CONFIG = 0x1B
RA_ACCEL_CONFIG = 0x1C
RA_FIFO_EN = 0x23
RA_INT_PIN_CFG = 0x37
RA_INT_ENABLE = 0x38
RA_INT_STATUS = 0x3A

# Sensor output
RA_ACCEL_XOUT_H = 0x3B
RA_TEMP_OUT_H = 0x41
RA_GYRO_XOUT_H = 0x43

# Control
RA_USER_CTRL = 0x6A
RA_PWR_MGMT_1 = 0x6B

# DMP memory
RA_BANK_SEL = 0x6D
RA_MEM_START_ADDR = 0x6E
RA_MEM_R_W = 0x6F
RA_DMP_CFG_1 = 0x70

# FIFO
RA_FIFO_COUNTH = 0x72
RA_FIFO_R_W = 0x74

RA_WHO_AM_I = 0x75

# Fields
WHO_AM_I = RegisterField(RA_WHO_AM_I, 6, 6)

PWR1_DEVICE_RESET = RegisterField(RA_PWR_MGMT_1, 7, 1)
PWR1_SLEEP = RegisterField(RA_PWR_MGMT_1, 6, 1)
PWR1_CYCLE = RegisterField(RA_PWR_MGMT_1, 5, 1)
PWR1_CLKSEL = RegisterField(RA_PWR_MGMT_1, 2, 3)

CFG_DLPF = RegisterField(RA_CONFIG, 2, 3)
GCONFIG_FS_SEL = RegisterField(RA_GYRO_CONFIG, 4, 2)
ACONFIG_AFS_SEL = RegisterField(RA_ACCEL_CONFIG, 4, 2)

INTCFG_LATCH_INT_EN = RegisterField(RA_INT_PIN_CFG, 5, 1)
INT_ENABLE_DMP = RegisterField(RA_INT_ENABLE, 1, 1)
INT_STATUS_FIFO_OFLOW = RegisterField(RA_INT_STATUS, 4, 1)

USERCTRL_DMP_EN = RegisterField(RA_USER_CTRL, 7, 1)
USERCTRL_FIFO_EN = RegisterField(RA_USER_CTRL, 6, 1)
USERCTRL_DMP_RESET = RegisterField(RA_USER_CTRL, 3, 1)
USERCTRL_FIFO_RESET = RegisterField(RA_USER_CTRL, 2, 1)
USERCTRL_SIG_RESET = RegisterField(RA_USER_CTRL, 2, 3)  # FIFO, I2C master and signal path reset

DEVICE_ID_MPU6050 = 0x34
DEVICE_ID_MPU6500_MIN = 0x38
