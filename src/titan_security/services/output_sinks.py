"""
Output Sinks - alarm side effects

Sinks invoked by the AlarmDispatcher:
- SoundSink: siren / keypad beep
- NotifySink: police, fire department or user phone
- LogSink: append-only timestamped alarm log

plus the OperatorConsole used for plain status lines.
"""

import logging
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TextIO, Union

from ..domain.enums import Recipient, Severity

log = logging.getLogger(__name__)


# =============================================================================
# Operator Console
# =============================================================================

class OperatorConsole:
    """Output-only console for status lines and reports."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    def line(self, text: str = "") -> None:
        print(text, file=self.stream)


# =============================================================================
# Sink base class
# =============================================================================

class Sink(ABC):
    """Name, enable switch and delivery counters shared by every sink."""

    def __init__(self, name: str, enabled: bool = True):
        self.name = name
        self.enabled = enabled
        self.success_count = 0
        self.failure_count = 0
        self.last_error: Optional[str] = None

    def get_status(self) -> Dict[str, Any]:
        status: Dict[str, Any] = {"name": self.name, "enabled": self.enabled}
        status.update(success_count=self.success_count, failure_count=self.failure_count)
        if self.last_error:
            status["last_error"] = self.last_error
        return status

    def _delivered(self) -> None:
        self.success_count += 1

    def _failed(self, error: str) -> None:
        self.failure_count += 1
        self.last_error = error


class SoundSink(Sink):
    @abstractmethod
    def play(self, severity: Union[Severity, str]) -> bool:
        """Sound the alarm for severity. Returns True if played."""


class NotifySink(Sink):
    @abstractmethod
    def send(self, recipient: Union[Recipient, str]) -> bool:
        """Notify recipient. Unrecognized recipients are reported, not failed."""


class LogSink(Sink):
    @abstractmethod
    def append(self, line: str) -> bool:
        """Append one timestamped record. Returns False on failure, never raises."""


# =============================================================================
# Console implementations
# =============================================================================

SIREN_TEXT = ">>> PLAYING LOUD SIREN SOUND <<<"
BEEP_TEXT = ">>> Beeping Keypad <<<"

NOTIFY_TEXT: Dict[Recipient, str] = {
    Recipient.POLICE: "Dialing 911...",
    Recipient.FIRE_DEPT: "Dialing Fire Department...",
    Recipient.USER_PHONE: "Sending Push Notification to User...",
}
INVALID_RECIPIENT_TEXT = "Invalid recipient"


def _as_severity(value) -> Optional[Severity]:
    try:
        return Severity(value)
    except ValueError:
        return None


class ConsoleSoundSink(SoundSink):
    """Simulated siren/keypad on the operator console."""

    def __init__(self, console: Optional[OperatorConsole] = None, name: str = "sound", enabled: bool = True):
        super().__init__(name, enabled)
        self.console = console or OperatorConsole()

    def play(self, severity: Union[Severity, str]) -> bool:
        if not self.enabled:
            return False

        level = _as_severity(severity)
        self.console.line(SIREN_TEXT if level is not None and level.is_loud else BEEP_TEXT)
        self._delivered()
        return True


class ConsoleNotifySink(NotifySink):
    """Simulated dialer/push notifier on the operator console."""

    def __init__(self, console: Optional[OperatorConsole] = None, name: str = "notify", enabled: bool = True):
        super().__init__(name, enabled)
        self.console = console or OperatorConsole()

    def send(self, recipient: Union[Recipient, str]) -> bool:
        if not self.enabled:
            return False

        try:
            text = NOTIFY_TEXT.get(Recipient(recipient), INVALID_RECIPIENT_TEXT)
        except ValueError:
            text = INVALID_RECIPIENT_TEXT

        if text == INVALID_RECIPIENT_TEXT:
            log.warning("Notification requested for unrecognized recipient %r", recipient)

        self.console.line(text)
        self._delivered()
        return True


# =============================================================================
# Log implementations
# =============================================================================

def format_log_record(message: str, when: datetime) -> str:
    """<local ctime> - <message>"""
    return f"{when.ctime()} - {message}\n"


class FileLogSink(LogSink):
    """
    Append-only text log.

    One record per append(), opened and closed on every call so the file
    can be rotated or inspected while the hub runs.
    """

    def __init__(
        self,
        path: Union[str, Path] = "system_log.txt",
        name: str = "log",
        enabled: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        super().__init__(name, enabled)
        self.path = Path(path)
        self.clock = clock

    def append(self, line: str) -> bool:
        if not self.enabled:
            return False

        record = format_log_record(line, self.clock())
        try:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(record)
        except OSError as e:
            self._failed(f"LogSink failed: {e}")
            log.error("Failed to write to log file. (%s: %s)", self.path, e)
            return False

        self._delivered()
        return True

    def get_status(self) -> Dict[str, Any]:
        status = super().get_status()
        status["path"] = str(self.path)
        return status


class MemoryLogSink(LogSink):
    """Keeps formatted records in memory."""

    def __init__(
        self,
        name: str = "log",
        enabled: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        super().__init__(name, enabled)
        self.clock = clock
        self.records: List[str] = []

    def append(self, line: str) -> bool:
        if not self.enabled:
            return False
        self.records.append(format_log_record(line, self.clock()))
        self._delivered()
        return True
