"""Personal task list with natural-language reminders."""

__version__ = "0.1.0"
