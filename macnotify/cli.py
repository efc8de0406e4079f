"""Command-line interface: send notifications and manage configuration."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from concurrent.futures import ThreadPoolExecutor

import yaml

from macnotify import config
from macnotify.diagnose import run_diagnostic
from macnotify.notifiers import Notifier, get_all_notifiers, get_enabled_notifiers

VERSION = "0.1.0"

_LOAD_ERRORS = (OSError, ValueError, yaml.YAMLError)

_COLUMN_WIDTH = 11

_COMMAND_SUMMARIES = (
    ("send", "Send a notification"),
    ("config", "Manage configuration files"),
    ("notifiers", "Manage notification providers"),
    ("diagnose", "Run system diagnostics"),
    ("version", "Display version information"),
)

_CONFIG_SUBCOMMANDS = (
    ("list", "List available configuration files"),
    ("init", "Initialize a new configuration file"),
)

_CONFIG_INIT_OPTIONS = (
    ("--config", "Specify the configuration file name (default: config.yaml)"),
    ("--force", "Overwrite existing configuration file if it exists"),
)

_NOTIFIERS_HELP = (
    "Usage: notify notifiers\n"
    "Description:\n"
    "  List all available notifiers\n"
)


def _format_table(rows: tuple[tuple[str, str], ...]) -> list[str]:
    """Lay out name/description pairs as indented, aligned lines."""
    return [f"  {name:<{_COLUMN_WIDTH}}{description}" for name, description in rows]


def _usage_text() -> str:
    lines = ["Usage:", "  notify [command] [options]", "Commands:"]
    lines.extend(_format_table(_COMMAND_SUMMARIES))
    return "\n".join(lines) + "\n"


def _config_help_text() -> str:
    lines = ["Usage: notify config [subcommand] [options]", "Subcommands:"]
    lines.extend(_format_table(_CONFIG_SUBCOMMANDS))
    lines.append("Options for 'init':")
    lines.extend(_format_table(_CONFIG_INIT_OPTIONS))
    return "\n".join(lines) + "\n"


def _parser(prog: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog=f"notify {prog}", allow_abbrev=False)


def _send(args: list[str]) -> int:
    parser = _parser("send")
    parser.add_argument(
        "-type", "--type", dest="type", default="info",
        help="Notification type: success, error, info, warning",
    )
    parser.add_argument(
        "-title", "--title", dest="title", default="",
        help="Custom title for notification",
    )
    parser.add_argument(
        "-config", "--config", dest="config", default="",
        help="Configuration file to use",
    )
    parser.add_argument("message", nargs="*")
    options = parser.parse_args(args)

    if not options.message:
        print("Error: No message specified.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        cfg = config.load(options.config)
    except _LOAD_ERRORS as err:
        print(f"Error loading configuration: {err}", file=sys.stderr)
        return 1

    message = options.message[0]
    notifiers = get_enabled_notifiers(cfg)
    if not notifiers:
        print("No enabled notifiers found in configuration.", file=sys.stderr)
        return 1

    def deliver(notifier: Notifier) -> None:
        try:
            notifier.notify(message, options.type, options.title)
        except (OSError, subprocess.SubprocessError) as err:
            print(f"Error notifying with {notifier.name}: {err}", file=sys.stderr)

    with ThreadPoolExecutor(max_workers=len(notifiers)) as pool:
        list(pool.map(deliver, notifiers))
    return 0


def _config_init(args: list[str]) -> int:
    parser = _parser("config init")
    parser.add_argument(
        "-config", "--config", dest="config", default=config.DEFAULT_CONFIG_NAME,
        help="Configuration file to create",
    )
    parser.add_argument(
        "-force", "--force", dest="force", action="store_true",
        help="Overwrite existing configuration",
    )
    options = parser.parse_args(args)

    config_path = config.get_config_path(options.config)
    if os.path.exists(config_path) and not options.force:
        print(
            f"Configuration file {config_path} already exists. "
            "Use --force to overwrite."
        )
        return 0

    try:
        config.save(config.Config.default(), config_path)
    except OSError as err:
        print(f"Error saving configuration: {err}", file=sys.stderr)
        return 1

    print(f"Created configuration file at {config_path}")
    return 0


def _config(args: list[str]) -> int:
    if not args:
        print(_config_help_text(), end="")
        return 0

    subcommand, rest = args[0], args[1:]
    if subcommand == "list":
        try:
            files = config.list_config_files()
        except OSError as err:
            print(f"Error listing configuration files: {err}", file=sys.stderr)
            return 1
        for name in files:
            print(name)
        return 0
    if subcommand == "init":
        return _config_init(rest)

    print(f"Unknown config subcommand: {subcommand}", file=sys.stderr)
    print(_config_help_text(), end="")
    return 1


def _notifiers(args: list[str]) -> int:
    if args and args[0] == "--help":
        print(_NOTIFIERS_HELP, end="")
        return 0
    for notifier in get_all_notifiers():
        print(notifier.name)
    return 0


def _diagnose(args: list[str]) -> int:
    parser = _parser("diagnose")
    parser.add_argument(
        "-config", "--config", dest="config", default="",
        help="Configuration file to use",
    )
    options = parser.parse_args(args)

    try:
        cfg = config.load(options.config)
    except _LOAD_ERRORS as err:
        print(f"Error loading configuration: {err}", file=sys.stderr)
        return 1
    run_diagnostic(cfg)
    return 0


_COMMANDS = {
    "send": _send,
    "config": _config,
    "notifiers": _notifiers,
    "diagnose": _diagnose,
}


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print("Error: No command specified.", file=sys.stderr)
        print(_usage_text(), end="")
        return 1

    name, rest = args[0], args[1:]
    if name == "version":
        print("notify version:", VERSION)
        return 0

    command = _COMMANDS.get(name)
    if command is None:
        print(f"Unknown command: {name}", file=sys.stderr)
        print(_usage_text(), end="")
        return 1
    return command(rest)


if __name__ == "__main__":
    sys.exit(main())