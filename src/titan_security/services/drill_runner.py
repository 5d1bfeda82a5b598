"""
Titan Security Drill Runner

Executes scripted drills (mode changes, simulated sensor input, polls)
against a SecurityHub and checks the alarms that fired.
Drills in a list share the hub, so later cases start from the state the
earlier ones left behind.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..domain.enums import Recipient, Severity
from ..domain.models import AlarmRequest
from .security_hub import SecurityHub


# =============================================================================
# Drill Case Structures
# =============================================================================

class DrillAction(str, Enum):
    SET_MODE = "set_mode"
    SIMULATE = "simulate"
    POLL = "poll"


@dataclass
class DrillStep:
    """One scripted action."""
    action: DrillAction
    mode: Optional[str] = None
    index: Optional[int] = None
    value: Optional[int] = None

    @classmethod
    def set_mode(cls, mode: str) -> "DrillStep":
        return cls(action=DrillAction.SET_MODE, mode=mode)

    @classmethod
    def simulate(cls, index: int, value: int) -> "DrillStep":
        return cls(action=DrillAction.SIMULATE, index=index, value=value)

    @classmethod
    def poll(cls) -> "DrillStep":
        return cls(action=DrillAction.POLL)


@dataclass
class DrillCase:
    """A single drill: steps plus the alarms every poll should fire, in order."""
    case_id: str
    title: str
    steps: list[DrillStep]
    expected_alarms: list[AlarmRequest] = field(default_factory=list)


@dataclass
class DrillResult:
    """Result of running a single drill."""
    case_id: str
    passed: bool = False
    failures: list[str] = field(default_factory=list)
    alarms: list[AlarmRequest] = field(default_factory=list)
    duration_ms: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "case_id": self.case_id,
            "passed": self.passed,
            "failures": self.failures,
            "alarms": [a.message for a in self.alarms],
            "duration_ms": round(self.duration_ms, 2),
        }


# =============================================================================
# Standard drills (the v2.0 demo sequence)
# =============================================================================

def _alarm(severity: Severity, recipient: Recipient) -> AlarmRequest:
    return AlarmRequest(severity=severity, recipient=recipient)


STANDARD_DRILLS: list[DrillCase] = [
    DrillCase(
        case_id="A",
        title="Normal check in Away mode",
        steps=[DrillStep.set_mode("Away"), DrillStep.poll()],
        expected_alarms=[],
    ),
    DrillCase(
        case_id="B",
        title="Intruder breaks open the front door",
        steps=[DrillStep.simulate(0, 1), DrillStep.poll()],
        expected_alarms=[_alarm(Severity.HIGH, Recipient.POLICE)],
    ),
    DrillCase(
        case_id="C",
        title="Door closed, but motion detected",
        steps=[DrillStep.simulate(0, 0), DrillStep.simulate(1, 1), DrillStep.poll()],
        expected_alarms=[_alarm(Severity.MEDIUM, Recipient.USER_PHONE)],
    ),
    DrillCase(
        case_id="D",
        title="Kitchen catches fire",
        # Motion is still active from C and the hub is still Away; clear it first
        steps=[DrillStep.simulate(1, 0), DrillStep.simulate(2, 60), DrillStep.poll()],
        expected_alarms=[_alarm(Severity.CRITICAL, Recipient.FIRE_DEPT)],
    ),
    DrillCase(
        case_id="E",
        title="Day mode ignores motion",
        # Heat back to normal, otherwise the fire keeps alarming in Day mode
        steps=[
            DrillStep.simulate(2, 25),
            DrillStep.set_mode("Day"),
            DrillStep.simulate(1, 1),
            DrillStep.poll(),
        ],
        expected_alarms=[],
    ),
]


# =============================================================================
# Runner
# =============================================================================

class DrillRunner:
    """Runs drills against a hub."""

    def __init__(self, hub: SecurityHub):
        self.hub = hub

    def run(self, case: DrillCase) -> DrillResult:
        result = DrillResult(case_id=case.case_id)
        start = time.perf_counter()

        self.hub.console.line()
        self.hub.console.line(f"[DRILL {case.case_id}: {case.title}]")

        for step in case.steps:
            if step.action == DrillAction.SET_MODE:
                change = self.hub.set_mode(step.mode)
                if not change.success:
                    result.failures.append(f"set_mode({step.mode!r}) rejected: {change.reason}")
            elif step.action == DrillAction.SIMULATE:
                self.hub.simulate_sensor_input(step.index, step.value)
            elif step.action == DrillAction.POLL:
                result.alarms.extend(self.hub.poll_sensors().alarms)

        if result.alarms != case.expected_alarms:
            result.failures.append(
                f"expected alarms {[a.message for a in case.expected_alarms]}, "
                f"got {[a.message for a in result.alarms]}"
            )

        result.passed = not result.failures
        result.duration_ms = (time.perf_counter() - start) * 1000
        return result

    def run_all(self, cases: Optional[list[DrillCase]] = None) -> list[DrillResult]:
        return [self.run(case) for case in (cases if cases is not None else STANDARD_DRILLS)]
