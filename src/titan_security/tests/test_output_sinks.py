"""
Tests for Output Sinks
"""

import logging
from datetime import datetime

import pytest

from titan_security.domain.enums import Recipient, Severity
from titan_security.services.output_sinks import (
    ConsoleNotifySink,
    ConsoleSoundSink,
    FileLogSink,
    MemoryLogSink,
    format_log_record,
)


FIXED_TIME = datetime(2026, 10, 19, 5, 50, 0)


# =============================================================================
# Sound
# =============================================================================

class TestConsoleSoundSink:

    @pytest.mark.parametrize("severity,expected", [
        (Severity.CRITICAL, ">>> PLAYING LOUD SIREN SOUND <<<"),
        (Severity.HIGH, ">>> PLAYING LOUD SIREN SOUND <<<"),
        (Severity.MEDIUM, ">>> Beeping Keypad <<<"),
        (Severity.LOW, ">>> Beeping Keypad <<<"),
        ("Whatever", ">>> Beeping Keypad <<<"),
    ])
    def test_sound_by_severity(self, console, severity, expected):
        sink = ConsoleSoundSink(console)

        assert sink.play(severity) is True
        assert console.stream.getvalue() == expected + "\n"
        assert sink.success_count == 1

    def test_disabled(self, console):
        sink = ConsoleSoundSink(console, enabled=False)
        assert sink.play(Severity.HIGH) is False
        assert console.stream.getvalue() == ""


# =============================================================================
# Notify
# =============================================================================

class TestConsoleNotifySink:

    @pytest.mark.parametrize("recipient,expected", [
        (Recipient.POLICE, "Dialing 911..."),
        (Recipient.FIRE_DEPT, "Dialing Fire Department..."),
        (Recipient.USER_PHONE, "Sending Push Notification to User..."),
        ("UserPhone", "Sending Push Notification to User..."),
        (Recipient.UNRECOGNIZED, "Invalid recipient"),
        ("Neighbor", "Invalid recipient"),
    ])
    def test_message_by_recipient(self, console, recipient, expected):
        sink = ConsoleNotifySink(console)

        assert sink.send(recipient) is True
        assert console.stream.getvalue() == expected + "\n"

    def test_invalid_recipient_is_diagnosed(self, console, caplog):
        with caplog.at_level(logging.WARNING):
            ConsoleNotifySink(console).send("Neighbor")
        assert "unrecognized recipient" in caplog.text


# =============================================================================
# Log
# =============================================================================

class TestFormat:

    def test_ctime_prefix(self):
        assert format_log_record("ALARM: High sent to Police", FIXED_TIME) == (
            "Mon Oct 19 05:50:00 2026 - ALARM: High sent to Police\n"
        )


class TestFileLogSink:

    def test_appends_one_line_per_call(self, tmp_path):
        path = tmp_path / "system_log.txt"
        path.write_text("existing\n")
        sink = FileLogSink(path, clock=lambda: FIXED_TIME)

        assert sink.append("ALARM: High sent to Police") is True
        assert sink.append("ALARM: Critical sent to FireDept") is True

        assert path.read_text().splitlines() == [
            "existing",
            "Mon Oct 19 05:50:00 2026 - ALARM: High sent to Police",
            "Mon Oct 19 05:50:00 2026 - ALARM: Critical sent to FireDept",
        ]
        assert sink.success_count == 2

    def test_unwritable_destination(self, tmp_path, caplog):
        sink = FileLogSink(tmp_path / "missing_dir" / "log.txt")

        with caplog.at_level(logging.ERROR):
            assert sink.append("ALARM: High sent to Police") is False

        assert sink.failure_count == 1
        assert sink.last_error.startswith("LogSink failed")
        assert "Failed to write to log file." in caplog.text

    def test_directory_as_destination(self, tmp_path):
        sink = FileLogSink(tmp_path)
        assert sink.append("x") is False

    def test_disabled(self, tmp_path):
        path = tmp_path / "log.txt"
        sink = FileLogSink(path, enabled=False)

        assert sink.append("x") is False
        assert not path.exists()

    def test_get_status(self, tmp_path):
        sink = FileLogSink(tmp_path / "log.txt")
        sink.append("x")
        status = sink.get_status()

        assert status == {
            "name": "log",
            "enabled": True,
            "success_count": 1,
            "failure_count": 0,
            "path": str(tmp_path / "log.txt"),
        }

    def test_get_status_reports_last_error(self, tmp_path):
        sink = FileLogSink(tmp_path)
        sink.append("x")
        status = sink.get_status()

        assert status["failure_count"] == 1
        assert status["last_error"].startswith("LogSink failed")


class TestMemoryLogSink:

    def test_records(self):
        sink = MemoryLogSink(clock=lambda: datetime(2026, 1, 1, 0, 0, 0))
        sink.append("hello")
        assert sink.records == ["Thu Jan  1 00:00:00 2026 - hello\n"]
