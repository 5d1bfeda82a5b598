"""
Titan Security Poll Orchestrator

One polling cycle: walk the registry in order, evaluate each sensor against
the current state, dispatch any alarm synchronously before moving on, and
print a status line per sensor.
"""

import logging
from typing import Callable, Dict, Optional

from ..domain.enums import PollOutcome, SensorCategory
from ..domain.models import AlarmRequest, PollResult, Sensor, SensorStatus
from .alarm_dispatcher import AlarmDispatcher
from .evaluation_rules import evaluate, is_evaluable
from .output_sinks import OperatorConsole
from .sensor_registry import SensorRegistry
from .system_state import SystemState

log = logging.getLogger(__name__)


# =============================================================================
# Status line rendering
# =============================================================================

def _door_line(sensor: Sensor, fired: bool) -> tuple[PollOutcome, str]:
    if fired:
        return PollOutcome.ALARM, f"Reading {sensor.name}... ! Triggering Alarm!"
    return PollOutcome.SECURE, f"Reading {sensor.name}... Secure."


def _motion_line(sensor: Sensor, fired: bool) -> tuple[PollOutcome, str]:
    if fired:
        return PollOutcome.ALARM, f"Reading {sensor.name}... MOTION DETECTED!"
    return PollOutcome.NO_MOTION, f"Reading {sensor.name}... No Motion."


def _heat_line(sensor: Sensor, fired: bool) -> tuple[PollOutcome, str]:
    prefix = f"Reading {sensor.name}... Temp: {sensor.reading}C."
    if fired:
        return PollOutcome.ALARM, f"{prefix} DANGER! FIRE!"
    return PollOutcome.NORMAL, f"{prefix} Normal."


STATUS_LINES: Dict[SensorCategory, Callable[[Sensor, bool], tuple[PollOutcome, str]]] = {
    SensorCategory.DOOR: _door_line,
    SensorCategory.MOTION: _motion_line,
    SensorCategory.HEAT: _heat_line,
}


def unknown_sensor_line(index: int) -> str:
    return f"[Warning] Unknown sensor type found in index {index}"


# =============================================================================
# Orchestrator
# =============================================================================

class PollOrchestrator:
    """Drives evaluation and dispatch for every sensor once per poll."""

    def __init__(
        self,
        registry: SensorRegistry,
        state: SystemState,
        dispatcher: AlarmDispatcher,
        console: Optional[OperatorConsole] = None,
    ):
        self.registry = registry
        self.state = state
        self.dispatcher = dispatcher
        self.console = console or OperatorConsole()
        self.poll_count = 0

    def poll_all(self) -> PollResult:
        """Run one polling cycle and return what each sensor reported."""
        self.poll_count += 1
        result = PollResult(mode=self.state.mode, armed=self.state.armed)

        self.console.line()
        self.console.line(f"--- Polling Sensors ({self.state.mode.value} Mode) ---")

        for index, sensor in self.registry.items():
            status = self._poll_one(index, sensor)
            result.statuses.append(status)

        return result

    def _poll_one(self, index: int, sensor: Sensor) -> SensorStatus:
        if not is_evaluable(sensor):
            line = unknown_sensor_line(index)
            log.warning("Skipping sensor %r at index %d: unknown category", sensor.name, index)
            self.console.line(line)
            return SensorStatus(
                index=index,
                sensor_name=sensor.name,
                outcome=PollOutcome.WARNING,
                line=line,
            )

        request: Optional[AlarmRequest] = evaluate(sensor, self.state)
        outcome, line = STATUS_LINES[sensor.category](sensor, request is not None)
        self.console.line(line)

        if request is not None:
            self.dispatcher.dispatch(request)

        return SensorStatus(
            index=index,
            sensor_name=sensor.name,
            outcome=outcome,
            line=line,
            request=request,
        )
