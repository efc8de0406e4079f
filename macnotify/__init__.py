"""Spoken and dialog notifications for macOS, driven by a YAML configuration."""

__version__ = "0.1.0"
__all__ = ["cli", "config", "diagnose", "formatter", "notifiers"]