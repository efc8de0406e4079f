# macnotify

Send notifications on macOS from the command line or from Python. A notification
can be spoken aloud with `say`, shown in a dialog with `osascript`, or both. Your
YAML configuration decides which notifiers are used.

## Installation

```
pip install .
```

This installs the `notify` command. You can also run the command line with
`python -m macnotify.cli`.

## Command line

```
notify send [--type TYPE] [--title TITLE] [--config FILE] MESSAGE
notify config list
notify config init [--config FILE] [--force]
notify notifiers [--help]
notify diagnose [--config FILE]
notify version
```

Options can be written with one dash or two, so `-type` and `--type` both work.

- `send` delivers `MESSAGE` through every enabled notifier at the same time.
  - `--type` is one of `success`, `error`, `info` or `warning`. It defaults to `info`.
  - `--title` sets the dialog title. It defaults to an empty title.
  - Dialogs start the message with an emoji for the type.
  - Spoken messages start with "error, " for errors and "alert, " for warnings. For
    `success` and `info` they start with ", ".
  - A type outside the four leaves the message unchanged and gives the dialog a
    stop icon.
  - If a notifier fails, the failure is printed to standard error and the other
    notifiers still run.
  - The command fails when no message is given or when the configuration enables no
    notifiers.
- `config list` prints the names of the `.yaml` and `.yml` files in the
  configuration directory, sorted. It creates the directory if it is missing.
- `config init` writes the default configuration to `--config`, which defaults to
  `config.yaml`. An existing file is left alone unless `--force` is given.
- `config` with no subcommand prints its help.
- `notifiers` prints the name of every available notifier.
- `diagnose` prints a report for each notifier:
  - whether its tool is installed (`AVAILABLE` / `NOT AVAILABLE`)
  - whether the configuration enables it (`ENABLED` / `DISABLED`)
  - details, such as the tool's path, the number of voices for `say`, or the macOS
    version for `osascript`
- `version` prints the version.

The command exits with status 0 on success and 1 on errors.

Examples:

```
notify send --type success "Build finished"
notify send --type error --title "CI" "Tests failed"
notify config init --config work.yaml
notify diagnose
```

## Configuration

Configuration files live in `~/.config/notify/`. The default file is `config.yaml`.
If the requested file does not exist when `send` or `diagnose` loads it, it is
created with these contents:

```yaml
enabledNotifiers:
- audio
- dialog
dialogSettings:
  title: Notification
```

If you pass `--config` a relative name, the file is looked up in the configuration
directory. An absolute path is used as given.

The notifier identifiers are:

- `audio`, named "Audio (say)": speaks the message with `say`.
- `dialog`, named "Dialog (osascript)": shows the message with `osascript`.

Enabled notifiers always run in that order, whatever order the file lists them in.

`dialogSettings` is read and written with the configuration, but nothing uses it:
the dialog title comes only from `--title`.

## Python

```python
from macnotify.config import Config, load, save, get_config_path, list_config_files
from macnotify.formatter import format_message
from macnotify.notifiers import get_all_notifiers, get_enabled_notifiers, notify
from macnotify.diagnose import run_diagnostic

notify("Deployment complete", "success")

cfg = load("")                      # ~/.config/notify/config.yaml
for notifier in get_enabled_notifiers(cfg):
    result = notifier.diagnose()    # DiagnosticResult(available, message)
    print(notifier.name, notifier.id, result.available, result.message)

print(format_message("Disk almost full", "warning", True))    # "⚠️ Disk almost full"
print(format_message("Disk almost full", "warning", False))   # "alert, Disk almost full"

save(Config(enabled_notifiers=["audio"]), get_config_path("quiet.yaml"))
print(list_config_files())
run_diagnostic(cfg)
```

- `notify(message, notification_type)` uses the default configuration. It falls
  back to the dialog and then the audio notifier when the configuration cannot be
  loaded or enables no notifiers. Failures of single notifiers are printed, not
  raised.
- `Notifier.notify(message, notification_type, title)` raises `OSError` or
  `subprocess.CalledProcessError` when the tool is missing or fails.
- `load` raises `OSError`, `ValueError` or `yaml.YAMLError` for files it cannot
  read or understand.

## Limitations

- Only macOS is supported. Both notifiers run the macOS tools `say`, `osascript`
  and `sw_vers`. On other systems `diagnose` reports them as not available and
  sending fails.
- Message text and titles are put into the AppleScript without escaping. A double
  quote in either can break the dialog.