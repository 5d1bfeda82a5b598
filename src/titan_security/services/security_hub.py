"""
Titan Security Hub

Composition root wiring registry, mode state, dispatcher and orchestrator
together, plus the operator-facing entry points (mode change, simulated
input, polling, report).
"""

import logging
from typing import Any, Dict, Optional, Union

from ..config import SecurityConfig
from ..domain.enums import HouseMode
from ..domain.models import ModeChangeResult, PollResult, SystemReport
from ..exceptions import InvalidModeError
from .alarm_dispatcher import AlarmDispatcher
from .output_sinks import (
    ConsoleNotifySink,
    ConsoleSoundSink,
    FileLogSink,
    OperatorConsole,
)
from .poll_orchestrator import PollOrchestrator
from .sensor_registry import SensorRegistry
from .system_state import SystemState

log = logging.getLogger(__name__)


class SecurityHub:
    """The home security controller."""

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
        self.orchestrator = PollOrchestrator(registry, state, dispatcher, self.console)

    @classmethod
    def from_config(
        cls,
        config: Optional[SecurityConfig] = None,
        console: Optional[OperatorConsole] = None,
    ) -> "SecurityHub":
        """Build a hub with console sound/notify sinks and a file log."""
        config = config or SecurityConfig()
        console = console or OperatorConsole()

        registry = SensorRegistry(strict=config.strict_sensor_index)
        registry.initialize()

        dispatcher = AlarmDispatcher(
            sound=ConsoleSoundSink(console),
            notifier=ConsoleNotifySink(console),
            log_sink=FileLogSink(config.log_path),
            console=console,
        )
        state = SystemState(mode=config.initial_mode, policy=config.arming_policy)

        log.info(
            "Hub ready: %d sensors, mode=%s, policy=%s, log=%s",
            len(registry), state.mode.value, state.policy.value, config.log_path,
        )
        return cls(registry, state, dispatcher, console)

    def initialize(self) -> None:
        """Reset the registry to the starter sensors."""
        self.registry.initialize()

    def set_mode(self, mode: Union[HouseMode, str]) -> ModeChangeResult:
        """Change mode; invalid requests are reported and leave state as is."""
        from_mode = self.state.mode
        try:
            to_mode = self.state.set_mode(mode)
        except InvalidModeError as e:
            self.console.line("[Error] Unknown mode.")
            log.warning("Rejected mode change: %s", e)
            return ModeChangeResult(
                success=False,
                requested=str(mode),
                from_mode=from_mode,
                to_mode=from_mode,
                armed=self.state.armed,
                reason=str(e),
            )

        self.console.line(f"[System] Mode set to: {to_mode.value}")
        return ModeChangeResult(
            success=True,
            requested=str(mode.value if isinstance(mode, HouseMode) else mode),
            from_mode=from_mode,
            to_mode=to_mode,
            armed=self.state.armed,
        )

    def simulate_sensor_input(self, index: int, value: int) -> bool:
        """Inject a reading; see SensorRegistry.set_reading for index handling."""
        return self.registry.set_reading(index, value)

    def poll_sensors(self) -> PollResult:
        return self.orchestrator.poll_all()

    def generate_report(self) -> SystemReport:
        report = SystemReport(
            sensors_online=len(self.registry),
            armed=self.state.armed,
            mode=self.state.mode,
        )
        self.console.line()
        self.console.line("Generating System Report...")
        self.console.line(f"Sensors Online: {report.sensors_online}")
        self.console.line(f"System Armed: {'YES' if report.armed else 'NO'}")
        return report

    def get_status(self) -> Dict[str, Any]:
        return {
            **self.state.get_status(),
            "poll_count": self.orchestrator.poll_count,
            "sensors": self.registry.list_sensors(),
            "dispatcher": self.dispatcher.get_status(),
        }
