"""Titan Security Services"""

from .sensor_registry import SensorRegistry, DEFAULT_SENSORS
from .system_state import SystemState
from .evaluation_rules import (
    evaluate,
    is_evaluable,
    HEAT_ALARM_THRESHOLD_C,
)
from .output_sinks import (
    OperatorConsole,
    Sink,
    SoundSink,
    NotifySink,
    LogSink,
    ConsoleSoundSink,
    ConsoleNotifySink,
    FileLogSink,
    MemoryLogSink,
    format_log_record,
)
from .alarm_dispatcher import AlarmDispatcher
from .poll_orchestrator import PollOrchestrator
from .security_hub import SecurityHub
from .drill_runner import (
    DrillRunner,
    DrillCase,
    DrillStep,
    DrillAction,
    DrillResult,
    STANDARD_DRILLS,
)

__all__ = [
    # Registry & State
    'SensorRegistry',
    'DEFAULT_SENSORS',
    'SystemState',
    # Rules
    'evaluate',
    'is_evaluable',
    'HEAT_ALARM_THRESHOLD_C',
    # Sinks
    'OperatorConsole',
    'Sink',
    'SoundSink',
    'NotifySink',
    'LogSink',
    'ConsoleSoundSink',
    'ConsoleNotifySink',
    'FileLogSink',
    'MemoryLogSink',
    'format_log_record',
    # Dispatch & Polling
    'AlarmDispatcher',
    'PollOrchestrator',
    'SecurityHub',
    # Drill Runner
    'DrillRunner',
    'DrillCase',
    'DrillStep',
    'DrillAction',
    'DrillResult',
    'STANDARD_DRILLS',
]
