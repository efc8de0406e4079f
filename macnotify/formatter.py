"""Message formatting for the different notification types."""

_EMOJIS = {
    "success": "✅",
    "error": "❌",
    "info": "ℹ️",
    "warning": "⚠️",
}

_SPOKEN_PREFIXES = {
    "error": "error",
    "warning": "alert",
}


def format_message(message: str, notification_type: str, is_dialog: bool) -> str:
    """Decorate a message for a dialog (emoji) or for speech (spoken prefix).

    Unknown notification types leave the message unchanged.
    """
    emoji = _EMOJIS.get(notification_type)
    if emoji is None:
        return message
    if is_dialog:
        return f"{emoji} {message}"
    prefix = _SPOKEN_PREFIXES.get(notification_type, "")
    return f"{prefix}, {message}"