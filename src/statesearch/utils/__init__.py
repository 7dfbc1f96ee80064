"""Utility modules for statesearch."""

from statesearch.utils.logging import MultilineFormatter, setup_logging

__all__ = ["setup_logging", "MultilineFormatter"]
