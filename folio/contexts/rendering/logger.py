"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, export_kind: str = "preview") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        export_kind: Export kind for provenance ("preview", "pdf", "image", "print")

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, export_kind="pdf")
        _log_info("Handing preview to print target...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Export kind": export_kind},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(kind: str, target_name: str, blocks) -> None:
    """Log handoff of a preview to a print target."""
    _log_info(f"Requesting {kind} export via {target_name}")
    _log_debug(f"  Blocks: {', '.join(blocks)}")


def log_export_result(kind: str, target_name: str, error: Exception = None) -> None:
    """
    Log the outcome of a handoff.

    Target failures belong to the host and are reported as warnings only.
    """
    if error is None:
        _log_success(f"{kind} export handed to {target_name}")
    else:
        _log_warning(f"{kind} export via {target_name} did not complete: {error}")
