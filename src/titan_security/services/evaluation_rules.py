"""
Titan Security Evaluation Rules

Pure mapping from (sensor, system state) to an optional AlarmRequest.

Rule table (category is the only discriminator):
    Door    reading == 1 and armed      -> (High, Police)
    Motion  reading == 1 and mode Away  -> (Medium, UserPhone)
    Heat    reading > 50                -> (Critical, FireDept)
    Unknown never evaluated, the orchestrator warns instead

Motion keys on the Away mode, not on the armed flag: Night motion never
fires, and neither does Day motion under the latching policy.
"""

from typing import Callable, Dict, Optional

from ..domain.enums import HouseMode, Recipient, SensorCategory, Severity
from ..domain.models import AlarmRequest, Sensor
from .system_state import SystemState


HEAT_ALARM_THRESHOLD_C = 50

DOOR_ALARM = AlarmRequest(severity=Severity.HIGH, recipient=Recipient.POLICE)
MOTION_ALARM = AlarmRequest(severity=Severity.MEDIUM, recipient=Recipient.USER_PHONE)
FIRE_ALARM = AlarmRequest(severity=Severity.CRITICAL, recipient=Recipient.FIRE_DEPT)


Rule = Callable[[Sensor, SystemState], Optional[AlarmRequest]]


def door_rule(sensor: Sensor, state: SystemState) -> Optional[AlarmRequest]:
    if sensor.reading == 1 and state.armed:
        return DOOR_ALARM
    return None


def motion_rule(sensor: Sensor, state: SystemState) -> Optional[AlarmRequest]:
    if sensor.reading == 1 and state.mode == HouseMode.AWAY:
        return MOTION_ALARM
    return None


def heat_rule(sensor: Sensor, state: SystemState) -> Optional[AlarmRequest]:
    if sensor.reading > HEAT_ALARM_THRESHOLD_C:
        return FIRE_ALARM
    return None


RULES: Dict[SensorCategory, Rule] = {
    SensorCategory.DOOR: door_rule,
    SensorCategory.MOTION: motion_rule,
    SensorCategory.HEAT: heat_rule,
}


def is_evaluable(sensor: Sensor) -> bool:
    """False for categories without a rule (Unknown)."""
    return sensor.category in RULES


def evaluate(sensor: Sensor, state: SystemState) -> Optional[AlarmRequest]:
    """Return the alarm this sensor raises under state, or None."""
    rule = RULES.get(sensor.category)
    if rule is None:
        return None
    return rule(sensor, state)
