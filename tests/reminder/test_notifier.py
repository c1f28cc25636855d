"""Tests for desktop notifications."""

from unittest.mock import patch

from reminder.notifier import DesktopNotifier


class TestDesktopNotifier:
    def test_linux_uses_notify_send(self):
        with (
            patch("reminder.notifier.platform.system", return_value="Linux"),
            patch("reminder.notifier.subprocess.Popen") as popen,
        ):
            assert DesktopNotifier(app_name="moodlog").notify("Check in", "How are you?")

        cmd = popen.call_args.args[0]
        assert cmd == ["notify-send", "-a", "moodlog", "Check in", "How are you?"]

    def test_macos_uses_osascript_with_escaped_quotes(self):
        with (
            patch("reminder.notifier.platform.system", return_value="Darwin"),
            patch("reminder.notifier.subprocess.Popen") as popen,
        ):
            assert DesktopNotifier().notify('Say "hi"', "now")

        cmd = popen.call_args.args[0]
        assert cmd[:2] == ["osascript", "-e"]
        assert cmd[2] == 'display notification "now" with title "Say \\"hi\\""'

    def test_unsupported_platform(self):
        with (
            patch("reminder.notifier.platform.system", return_value="Windows"),
            patch("reminder.notifier.subprocess.Popen") as popen,
        ):
            assert DesktopNotifier().notify("t", "m") is False
        popen.assert_not_called()

    def test_missing_binary_returns_false(self):
        with (
            patch("reminder.notifier.platform.system", return_value="Linux"),
            patch("reminder.notifier.subprocess.Popen", side_effect=FileNotFoundError("notify-send")),
        ):
            assert DesktopNotifier().notify("t", "m") is False
