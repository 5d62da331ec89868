"""
Editing context logger.

Provides logging interface for editing context with automatic [edit] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[edit]"


# Wrapper functions with automatic [edit] prefix


def _log_info(message: str) -> None:
    """Log info message with [edit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [edit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level editing-specific logging helpers


def log_field_edit(section: str, field_name: str, value: str, index: int = None) -> None:
    """Log a single field replacement. Values are truncated, not redacted."""
    location = section if index is None else f"{section}[{index}]"
    shown = value if len(value) <= 40 else value[:40] + "..."
    _log_debug(f"Set {location}.{field_name} = {shown!r}")


def log_append(section: str, new_length: int) -> None:
    """Log an appended blank entry."""
    _log_debug(f"Appended blank {section} entry (now {new_length})")


def log_session_replayed(source: str, event_count: int) -> None:
    """Log completion of a scripted edit session."""
    _log_info(f"Replayed {event_count} edit events from {source}")
