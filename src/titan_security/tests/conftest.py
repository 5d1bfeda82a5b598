"""
Shared fixtures: a hub wired to an in-memory console and log
"""

import io
from datetime import datetime

import pytest

from titan_security.services.alarm_dispatcher import AlarmDispatcher
from titan_security.services.output_sinks import (
    ConsoleNotifySink,
    ConsoleSoundSink,
    MemoryLogSink,
    OperatorConsole,
)
from titan_security.services.security_hub import SecurityHub
from titan_security.services.sensor_registry import SensorRegistry
from titan_security.services.system_state import SystemState


FIXED_TIME = datetime(2026, 10, 19, 5, 50, 0)


@pytest.fixture
def console():
    return OperatorConsole(io.StringIO())


@pytest.fixture
def log_sink():
    return MemoryLogSink(clock=lambda: FIXED_TIME)


@pytest.fixture
def registry():
    reg = SensorRegistry()
    reg.initialize()
    return reg


@pytest.fixture
def state():
    return SystemState()


@pytest.fixture
def dispatcher(console, log_sink):
    return AlarmDispatcher(
        sound=ConsoleSoundSink(console),
        notifier=ConsoleNotifySink(console),
        log_sink=log_sink,
        console=console,
    )


@pytest.fixture
def hub(registry, state, dispatcher, console):
    return SecurityHub(registry, state, dispatcher, console)