"""
Titan Security Core Models

Data models for sensors, alarm requests and poll results.
Uses Pydantic for validation and serialization.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import (
    HouseMode,
    SensorCategory,
    Severity,
    Recipient,
    PollOutcome,
)


# =============================================================================
# Sensor Model
# =============================================================================

class Sensor(BaseModel):
    """Single sensor record.

    Records are frozen: the registry swaps in an updated copy when a
    reading changes, so anything holding a Sensor holds a read-only view.

    reading is 0/1 for Door and Motion, whole degrees Celsius for Heat.
    location is descriptive only.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    category: SensorCategory
    location: str = ""
    reading: int = 0

    @field_validator('category', mode='before')
    @classmethod
    def coerce_category(cls, v) -> SensorCategory:
        return SensorCategory.parse(v)

    def with_reading(self, value: int) -> "Sensor":
        """Return a validated copy carrying a new reading.

        Raises:
            ValidationError: value is not a whole number.
        """
        return Sensor.model_validate({**self.model_dump(), "reading": value})


# =============================================================================
# Alarm Request
# =============================================================================

class AlarmRequest(BaseModel):
    """Alarm produced by a rule and consumed immediately by the dispatcher."""
    model_config = ConfigDict(frozen=True)

    severity: Severity
    recipient: Recipient

    @property
    def message(self) -> str:
        return f"ALARM: {self.severity.value} sent to {self.recipient.value}"


# =============================================================================
# Poll Results
# =============================================================================

class SensorStatus(BaseModel):
    """Outcome for one sensor in one polling cycle."""
    index: int
    sensor_name: str
    outcome: PollOutcome
    line: str
    request: Optional[AlarmRequest] = None


class PollResult(BaseModel):
    """Everything a single poll_all() call observed."""
    mode: HouseMode
    armed: bool
    statuses: list[SensorStatus] = Field(default_factory=list)

    @property
    def alarms(self) -> list[AlarmRequest]:
        """Alarm requests fired during the poll, in registry order."""
        return [s.request for s in self.statuses if s.request is not None]

    @property
    def warnings(self) -> list[SensorStatus]:
        return [s for s in self.statuses if s.outcome == PollOutcome.WARNING]


# =============================================================================
# Mode Change & Report
# =============================================================================

class ModeChangeResult(BaseModel):
    """Result of a mode change attempt."""
    success: bool
    requested: str
    from_mode: HouseMode
    to_mode: HouseMode
    armed: bool
    reason: str = ""


class SystemReport(BaseModel):
    """Summary printed by the hub's report."""
    sensors_online: int
    armed: bool
    mode: HouseMode
