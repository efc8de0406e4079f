import subprocess
from unittest import mock

import pytest

from macnotify import config
from macnotify.config import Config
from macnotify.notifiers import (
    AudioNotifier,
    DiagnosticResult,
    DialogNotifier,
    get_all_notifiers,
    get_enabled_notifiers,
    notify,
)


def _completed(args, stdout=""):
    return subprocess.CompletedProcess(args, 0, stdout=stdout)


def test_get_all_notifiers():
    notifiers = get_all_notifiers()
    assert len(notifiers) == 2
    assert [n.id for n in notifiers] == ["audio", "dialog"]


def test_get_enabled_notifiers():
    cfg = Config(enabled_notifiers=["audio"])
    enabled = get_enabled_notifiers(cfg)
    assert len(enabled) == 1
    assert enabled[0].id == "audio"


def test_get_enabled_notifiers_keeps_standard_order_and_ignores_unknown():
    cfg = Config(enabled_notifiers=["dialog", "pager", "audio"])
    assert [n.id for n in get_enabled_notifiers(cfg)] == ["audio", "dialog"]


def test_get_enabled_notifiers_none():
    assert get_enabled_notifiers(Config()) == []


def test_names():
    assert AudioNotifier().name == "Audio (say)"
    assert DialogNotifier().name == "Dialog (osascript)"


@mock.patch("subprocess.run")
def test_audio_notify_runs_say(run):
    result = AudioNotifier().notify("Build done", "error", "ignored")
    assert result is None
    assert run.call_args_list == [mock.call(["say", "error, Build done"], check=True)]


@pytest.mark.parametrize(
    "notification_type, icon, text",
    [
        ("success", "note", "✅ hi"),
        ("info", "note", "ℹ️ hi"),
        ("warning", "caution", "⚠️ hi"),
        ("error", "stop", "❌ hi"),
        ("other", "stop", "hi"),
    ],
)
@mock.patch("subprocess.run")
def test_dialog_notify_script(run, notification_type, icon, text):
    result = DialogNotifier().notify("hi", notification_type, "Title")
    assert result is None
    expected = (
        f'display dialog "{text}" buttons {{"OK"}} default button "OK" '
        f'with icon {icon} with title "Title"'
    )
    assert run.call_args_list == [mock.call(["osascript", "-e", expected], check=True)]


@mock.patch("shutil.which", return_value=None)
def test_audio_diagnose_missing_command(_which):
    result = AudioNotifier().diagnose()
    assert result.available is False
    assert result.message.startswith("The 'say' command is not available:")


@mock.patch("subprocess.run")
@mock.patch("shutil.which", return_value="/usr/bin/say")
def test_audio_diagnose_counts_voices(_which, run):
    run.return_value = _completed(["say"], stdout="Alex en_US\nFred en_US\n")
    result = AudioNotifier().diagnose()
    assert result == DiagnosticResult(
        True, "'say' command available at: /usr/bin/say. Available voices: 2"
    )


@mock.patch("subprocess.run", side_effect=subprocess.CalledProcessError(1, "say"))
@mock.patch("shutil.which", return_value="/usr/bin/say")
def test_audio_diagnose_test_failure(_which, _run):
    result = AudioNotifier().diagnose()
    assert result.available is False
    assert result.message.startswith("Error testing the 'say' command:")


@mock.patch("shutil.which", return_value=None)
def test_dialog_diagnose_missing_command(_which):
    result = DialogNotifier().diagnose()
    assert result.available is False
    assert result.message.startswith("The 'osascript' command is not available:")


@mock.patch("subprocess.run")
@mock.patch("shutil.which", return_value="/usr/bin/osascript")
def test_dialog_diagnose_with_version(_which, run):
    run.return_value = _completed(["sw_vers"], stdout="14.2\n")
    result = DialogNotifier().diagnose()
    assert result == DiagnosticResult(
        True, "'osascript' command available at: /usr/bin/osascript. macOS version: 14.2"
    )


@mock.patch("subprocess.run", side_effect=FileNotFoundError("sw_vers"))
@mock.patch("shutil.which", return_value="/usr/bin/osascript")
def test_dialog_diagnose_without_version(_which, _run):
    result = DialogNotifier().diagnose()
    assert result.available is True
    assert result.message == (
        "'osascript' command available at: /usr/bin/osascript. "
        "Could not determine macOS version."
    )


@mock.patch("subprocess.run")
def test_notify_uses_default_config(run, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    result = notify("hello", "info")
    assert result is None
    commands = [call.args[0][0] for call in run.call_args_list]
    assert commands == ["say", "osascript"]
    assert capsys.readouterr().out == ""
    written = config.load("")
    assert written.enabled_notifiers == ["audio", "dialog"]


@mock.patch("subprocess.run")
def test_notify_falls_back_when_none_enabled(run, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    config_dir = tmp_path / ".config" / "notify"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("enabledNotifiers: []\n")
    result = notify("hello", "info")
    assert result is None
    commands = [call.args[0][0] for call in run.call_args_list]
    assert commands == ["osascript", "say"]
    assert capsys.readouterr().out == ""
    assert get_enabled_notifiers(config.load("")) == []


@mock.patch("subprocess.run", side_effect=FileNotFoundError("no such command"))
def test_notify_reports_failures(_run, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    notify("hello", "error")
    out = capsys.readouterr().out
    assert "Error notifying with Audio (say): no such command" in out
    assert "Error notifying with Dialog (osascript): no such command" in out