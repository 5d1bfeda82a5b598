"""
Tests for the Alarm Dispatcher
"""

import logging
from unittest.mock import Mock

import pytest

from titan_security.domain.enums import Recipient, Severity
from titan_security.domain.models import AlarmRequest
from titan_security.services.alarm_dispatcher import AlarmDispatcher
from titan_security.services.output_sinks import LogSink, NotifySink, SoundSink


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def calls():
    return []


@pytest.fixture
def mock_sinks(calls):
    """Mock sinks that record the order they were called in."""
    sound = Mock(spec=SoundSink)
    sound.name = "sound"
    sound.play.side_effect = lambda severity: calls.append(("sound", severity)) or True

    notifier = Mock(spec=NotifySink)
    notifier.name = "notify"
    notifier.send.side_effect = lambda recipient: calls.append(("notify", recipient)) or True

    log_sink = Mock(spec=LogSink)
    log_sink.name = "log"
    log_sink.append.side_effect = lambda line: calls.append(("log", line)) or True

    return sound, notifier, log_sink


@pytest.fixture
def police_request():
    return AlarmRequest(severity=Severity.HIGH, recipient=Recipient.POLICE)


class TestDispatchOrder:

    def test_sound_notify_log(self, mock_sinks, calls, console, police_request):
        dispatcher = AlarmDispatcher(*mock_sinks, console=console)

        results = dispatcher.dispatch(police_request)

        assert calls == [
            ("sound", Severity.HIGH),
            ("notify", Recipient.POLICE),
            ("log", "ALARM: High sent to Police"),
        ]
        assert results == {"sound": True, "notify": True, "log": True}
        assert dispatcher.total_alarms_dispatched == 1
        assert dispatcher.total_sink_failures == 0

    def test_announces_alarm(self, mock_sinks, console, police_request):
        AlarmDispatcher(*mock_sinks, console=console).dispatch(police_request)
        assert "!!! ALARM TRIGGERED [High] !!!" in console.stream.getvalue()

    def test_no_dedup_across_calls(self, mock_sinks, calls, console, police_request):
        dispatcher = AlarmDispatcher(*mock_sinks, console=console)

        dispatcher.dispatch(police_request)
        dispatcher.dispatch(police_request)

        assert len(calls) == 6
        assert dispatcher.total_alarms_dispatched == 2


class TestFailureIsolation:

    def test_raising_sound_does_not_stop_others(self, mock_sinks, calls, console, police_request, caplog):
        sound, notifier, log_sink = mock_sinks
        sound.play.side_effect = RuntimeError("speaker unplugged")
        dispatcher = AlarmDispatcher(sound, notifier, log_sink, console=console)

        with caplog.at_level(logging.ERROR):
            results = dispatcher.dispatch(police_request)

        assert results == {"sound": False, "notify": True, "log": True}
        assert [c[0] for c in calls] == ["notify", "log"]
        assert dispatcher.total_sink_failures == 1
        assert "speaker unplugged" in caplog.text

    def test_failed_log_is_counted(self, mock_sinks, console, police_request):
        sound, notifier, log_sink = mock_sinks
        log_sink.append.side_effect = None
        log_sink.append.return_value = False
        dispatcher = AlarmDispatcher(sound, notifier, log_sink, console=console)

        results = dispatcher.dispatch(police_request)

        assert results["log"] is False
        assert dispatcher.total_sink_failures == 1

    def test_all_sinks_raise(self, mock_sinks, console, police_request):
        sound, notifier, log_sink = mock_sinks
        sound.play.side_effect = OSError("boom")
        notifier.send.side_effect = OSError("boom")
        log_sink.append.side_effect = OSError("boom")
        dispatcher = AlarmDispatcher(*mock_sinks, console=console)

        results = dispatcher.dispatch(police_request)

        assert results == {"sound": False, "notify": False, "log": False}
        assert dispatcher.total_sink_failures == 3


class TestWithConsoleSinks:

    def test_fire_alarm_output(self, dispatcher, console, log_sink):
        dispatcher.dispatch(AlarmRequest(severity=Severity.CRITICAL, recipient=Recipient.FIRE_DEPT))

        assert console.stream.getvalue().splitlines() == [
            "!!! ALARM TRIGGERED [Critical] !!!",
            ">>> PLAYING LOUD SIREN SOUND <<<",
            "Dialing Fire Department...",
        ]
        assert log_sink.records == ["Mon Oct 19 05:50:00 2026 - ALARM: Critical sent to FireDept\n"]

    def test_low_severity_unrecognized_recipient(self, dispatcher, console):
        results = dispatcher.dispatch(AlarmRequest(severity=Severity.LOW, recipient=Recipient.UNRECOGNIZED))

        lines = console.stream.getvalue().splitlines()
        assert ">>> Beeping Keypad <<<" in lines
        assert "Invalid recipient" in lines
        assert all(results.values())

    def test_get_status(self, dispatcher):
        dispatcher.dispatch(AlarmRequest(severity=Severity.MEDIUM, recipient=Recipient.USER_PHONE))
        status = dispatcher.get_status()

        assert status["total_alarms_dispatched"] == 1
        assert set(status["sinks"]) == {"sound", "notify", "log"}
        assert status["sinks"]["log"]["success_count"] == 1
