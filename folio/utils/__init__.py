"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger configuration with provenance tracking
"""

from folio.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
