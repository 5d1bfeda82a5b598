"""
Titan Security Alarm Dispatcher

Runs one AlarmRequest through the three sinks in fixed order:
sound -> notify -> log.

Every sink is called even if an earlier one fails. Failures are reported on
the error channel and counted; they never reach the polling loop.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..domain.models import AlarmRequest
from .output_sinks import LogSink, NotifySink, OperatorConsole, SoundSink

log = logging.getLogger(__name__)


class AlarmDispatcher:
    """Fire-and-forget alarm fan-out. No retry, no queue, no dedup."""

    def __init__(
        self,
        sound: SoundSink,
        notifier: NotifySink,
        log_sink: LogSink,
        console: Optional[OperatorConsole] = None,
    ):
        self.sound = sound
        self.notifier = notifier
        self.log_sink = log_sink
        self.console = console or OperatorConsole()

        self.total_alarms_dispatched = 0
        self.total_sink_failures = 0

    def dispatch(self, request: AlarmRequest) -> Dict[str, bool]:
        """
        Deliver request to every sink.

        Returns:
            Dict[sink_name, success]
        """
        self.console.line(f"!!! ALARM TRIGGERED [{request.severity.value}] !!!")

        steps: list[tuple[str, Callable[[], bool]]] = [
            (self.sound.name, lambda: self.sound.play(request.severity)),
            (self.notifier.name, lambda: self.notifier.send(request.recipient)),
            (self.log_sink.name, lambda: self.log_sink.append(request.message)),
        ]

        results: Dict[str, bool] = {}
        for name, call in steps:
            try:
                ok = bool(call())
            except Exception as e:
                log.error("Sink %s raised while dispatching %s: %s", name, request.message, e)
                ok = False
            if not ok:
                self.total_sink_failures += 1
            results[name] = ok

        self.total_alarms_dispatched += 1
        return results

    def get_status(self) -> Dict[str, Any]:
        return {
            "total_alarms_dispatched": self.total_alarms_dispatched,
            "total_sink_failures": self.total_sink_failures,
            "sinks": {
                sink.name: sink.get_status()
                for sink in (self.sound, self.notifier, self.log_sink)
            },
        }
