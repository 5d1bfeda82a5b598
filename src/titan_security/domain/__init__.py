"""Titan Security Domain Models"""

from .enums import (
    # Modes
    HouseMode,
    ArmingPolicy,

    # Sensors
    SensorCategory,

    # Alarms
    Severity,
    Recipient,

    # Polling
    PollOutcome,
)

from .models import (
    Sensor,
    AlarmRequest,
    SensorStatus,
    PollResult,
    ModeChangeResult,
    SystemReport,
)

__all__ = [
    # Enums
    'HouseMode',
    'ArmingPolicy',
    'SensorCategory',
    'Severity',
    'Recipient',
    'PollOutcome',

    # Models
    'Sensor',
    'AlarmRequest',
    'SensorStatus',
    'PollResult',
    'ModeChangeResult',
    'SystemReport',
]
