"""Report on every notifier: whether it works here and whether it is enabled."""

from __future__ import annotations

from macnotify.config import Config
from macnotify.notifiers import get_all_notifiers


def run_diagnostic(cfg: Config) -> None:
    """Diagnose every known notifier and print a report to standard output."""
    print("Running notifier diagnostics...")
    print()

    enabled_ids = set(cfg.enabled_notifiers)
    for notifier in get_all_notifiers():
        result = notifier.diagnose()
        status = "AVAILABLE" if result.available else "NOT AVAILABLE"
        enabled = "ENABLED" if notifier.id in enabled_ids else "DISABLED"

        print(f"Notifier: {notifier.name} ({notifier.id})")
        print(f"Status: {status}")
        print(f"Configuration: {enabled}")
        print(f"Details: {result.message}")
        print()