"""Constants for sensor selection."""

SENSOR_IDS_ENV = "BYD_HASS_SENSOR_IDS"

ENTRY_SEPARATOR = ","
FLAG_SEPARATOR = ":"
UNPUBLISHED_FLAG = "0"

# (sensor id, publish)
DEFAULT_MONITORED_SENSORS = (
    (1, True),  # PowerStatus
    (2, True),  # Speed
    (3, True),  # Mileage
    (4, True),  # GearPosition
    (5, True),  # EngineRPM
    (6, True),  # BrakePedalDepth
    (7, True),  # AcceleratorPedalDepth
    (8, True),  # FrontMotorRPM
    (9, True),  # RearMotorRPM
    (10, True),  # EnginePower
    (11, True),  # FrontMotorTorque
    (12, False),  # ChargeGunState, internal only
)

# Other ids known to the catalog and previously monitored: 13-22, 25-59, 61-101,
# 104-109, 1001-1004, 1006-1009, 1101 and 2001-2007. Enable them through
# BYD_HASS_SENSOR_IDS rather than by editing the table above.

# Ids read by the ABRP adapter. They may be poll-only but must be polled.
ABRP_SENSOR_IDS = (
    33,  # BatteryPercentage
    2,  # Speed
    3,  # Mileage
    10,  # EnginePower
    12,  # ChargeGunState
    15,  # AvgBatteryTemp
    17,  # MaxBatteryVoltage
    25,  # CabinTemperature
    26,  # OutsideTemperature
    29,  # BatteryCapacity
    53,  # LeftFrontTirePressure
    54,  # RightFrontTirePressure
    55,  # LeftRearTirePressure
    56,  # RightRearTirePressure
    77,  # ACStatus
    78,  # FanSpeedLevel
)
