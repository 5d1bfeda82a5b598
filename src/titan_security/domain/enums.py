"""
Titan Security Core Enums

This module defines all core enumerations used throughout the system.
Values double as the text written to the console and the alarm log, so
they are frozen.
"""

from enum import Enum


# =============================================================================
# House Mode & Arming
# =============================================================================

class HouseMode(str, Enum):
    """Operating mode of the house."""
    DAY = "Day"
    NIGHT = "Night"
    AWAY = "Away"


class ArmingPolicy(str, Enum):
    """How the armed flag follows mode changes.

    CLEARING is the current behaviour. LATCHING reproduces the v1.0 hub,
    which armed on Away but never disarmed again, and is kept so older
    alarm logs can be replayed.
    """
    CLEARING = "clearing"   # Day/Night -> disarmed
    LATCHING = "latching"   # Day/Night leave armed untouched


# =============================================================================
# Sensors
# =============================================================================

class SensorCategory(str, Enum):
    """Sensor category, the only discriminator used by the rule table."""
    DOOR = "Door"
    MOTION = "Motion"
    HEAT = "Heat"
    UNKNOWN = "Unknown"     # Unrecognized category, warned about, never evaluated

    @classmethod
    def parse(cls, value) -> "SensorCategory":
        """Map any input onto a category, falling back to UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# =============================================================================
# Alarm Requests
# =============================================================================

class Severity(str, Enum):
    """Alarm severity.

    LOW is never produced by the current rules but every sink must
    accept it.
    """
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    def __str__(self) -> str:
        return self.value

    @property
    def is_loud(self) -> bool:
        """High and Critical alarms sound the siren."""
        return self in (Severity.HIGH, Severity.CRITICAL)


class Recipient(str, Enum):
    """Who an alarm notification is sent to."""
    POLICE = "Police"
    FIRE_DEPT = "FireDept"
    USER_PHONE = "UserPhone"
    UNRECOGNIZED = "Unrecognized"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Poll Outcomes
# =============================================================================

class PollOutcome(str, Enum):
    """Per-sensor result of a polling cycle."""
    SECURE = "secure"           # Door closed or system disarmed
    NO_MOTION = "no_motion"
    NORMAL = "normal"           # Heat at or below threshold
    ALARM = "alarm"             # Alarm request produced and dispatched
    WARNING = "warning"         # Unknown category, skipped
