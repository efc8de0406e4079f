"""Notifiers that speak or show a message, and helpers to pick them."""

from __future__ import annotations

import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

import yaml

from macnotify import config as config_module
from macnotify.config import Config
from macnotify.formatter import format_message


@dataclass(frozen=True)
class DiagnosticResult:
    """Whether a notifier can work here, with a human-readable detail."""

    available: bool
    message: str


class Notifier(ABC):
    """A way of delivering a notification."""

    name: str = ""
    id: str = ""

    @abstractmethod
    def notify(self, message: str, notification_type: str, title: str) -> None:
        """Deliver the message; raises OSError or a subprocess error on failure."""

    @abstractmethod
    def diagnose(self) -> DiagnosticResult:
        """Check whether this notifier can be used."""


def _missing_command(command: str) -> str:
    return f'exec: "{command}": executable file not found in $PATH'


class AudioNotifier(Notifier):
    """Speaks the message with the 'say' command."""

    name = "Audio (say)"
    id = "audio"

    def notify(self, message: str, notification_type: str, title: str) -> None:
        formatted = format_message(message, notification_type, False)
        subprocess.run(["say", formatted], check=True)

    def diagnose(self) -> DiagnosticResult:
        path = shutil.which("say")
        if path is None:
            return DiagnosticResult(
                False,
                f"The 'say' command is not available: {_missing_command('say')}",
            )

        try:
            completed = subprocess.run(
                ["say", "-v", "?"],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as err:
            return DiagnosticResult(False, f"Error testing the 'say' command: {err}")

        voices = (completed.stdout or "").count("\n")
        return DiagnosticResult(
            True,
            f"'say' command available at: {path}. Available voices: {voices}",
        )


_DIALOG_ICONS = {
    "success": "note",
    "info": "note",
    "warning": "caution",
}


class DialogNotifier(Notifier):
    """Shows the message in a dialog through 'osascript'."""

    name = "Dialog (osascript)"
    id = "dialog"

    def notify(self, message: str, notification_type: str, title: str) -> None:
        formatted = format_message(message, notification_type, True)
        icon = _DIALOG_ICONS.get(notification_type, "stop")
        script = (
            f'display dialog "{formatted}" buttons {{"OK"}} default button "OK" '
            f'with icon {icon} with title "{title}"'
        )
        subprocess.run(["osascript", "-e", script], check=True)

    def diagnose(self) -> DiagnosticResult:
        path = shutil.which("osascript")
        if path is None:
            return DiagnosticResult(
                False,
                "The 'osascript' command is not available: "
                f"{_missing_command('osascript')}",
            )

        try:
            completed = subprocess.run(
                ["sw_vers", "-productVersion"],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except (OSError, subprocess.SubprocessError):
            return DiagnosticResult(
                True,
                f"'osascript' command available at: {path}. "
                "Could not determine macOS version.",
            )

        version = (completed.stdout or "").strip()
        return DiagnosticResult(
            True,
            f"'osascript' command available at: {path}. macOS version: {version}",
        )


def get_all_notifiers() -> list[Notifier]:
    """Return one instance of every known notifier."""
    return [AudioNotifier(), DialogNotifier()]


def get_enabled_notifiers(cfg: Config) -> list[Notifier]:
    """Return the notifiers the configuration enables, in their standard order."""
    enabled = set(cfg.enabled_notifiers)
    return [n for n in get_all_notifiers() if n.id in enabled]


def _fallback_notifiers() -> list[Notifier]:
    return [DialogNotifier(), AudioNotifier()]


def notify(message: str, notification_type: str) -> None:
    """Send a notification with the configured notifiers.

    Falls back to dialog and audio when the configuration cannot be loaded
    or enables none. Failures of single notifiers are reported, not raised.
    """
    try:
        cfg = config_module.load("")
    except (OSError, ValueError, yaml.YAMLError):
        notifiers = _fallback_notifiers()
    else:
        notifiers = get_enabled_notifiers(cfg) or _fallback_notifiers()

    for notifier in notifiers:
        try:
            notifier.notify(message, notification_type, "")
        except (OSError, subprocess.SubprocessError) as err:
            print(f"Error notifying with {notifier.name}: {err}")