"""Logging configuration for statesearch.

Expansion traces log node states, which may span several lines when a
state has a multi-line repr. The formatter keeps metadata on the first
line and indents the continuation.
"""

import logging
import sys

__all__ = ["setup_logging", "MultilineFormatter"]


class MultilineFormatter(logging.Formatter):
    """Formatter that pads the first line and indents continuation lines.

    Attributes:
        msg_width: Column at which metadata starts on the first line.
        show_metadata: Whether to append timestamp/level/name metadata.
        indent: Prefix for every continuation line.
    """

    def __init__(self, msg_width: int, show_metadata: bool = True, indent: str = "    ") -> None:
        """Initialize the formatter.

        Args:
            msg_width: Column at which metadata starts on the first line.
            show_metadata: Whether to append timestamp/level/name metadata.
            indent: Prefix for every continuation line.
        """
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.msg_width = msg_width
        self.show_metadata = show_metadata
        self.indent = indent

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        first, *rest = record.getMessage().split("\n")
        if self.show_metadata:
            first = f"{first:<{self.msg_width}}{self.formatTime(record)} - {record.levelname} - {record.name}"
        if record.exc_info:
            rest.extend(self.formatException(record.exc_info).split("\n"))
        return "\n".join([first] + [f"{self.indent}{line}" for line in rest])


def setup_logging(
    log_file: str | None = None, level: int = logging.INFO, msg_width: int = 100, show_metadata: bool = True
) -> logging.Handler:
    """Attach a ``MultilineFormatter`` handler to the root logger.

    Args:
        log_file: File to write (truncated). None logs to stderr.
        level: Root logging level.
        msg_width: Column at which metadata starts.
        show_metadata: Whether to append timestamp/level/name metadata.

    Returns:
        The installed handler.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.FileHandler(log_file, mode="w")
    handler.setFormatter(MultilineFormatter(msg_width=msg_width, show_metadata=show_metadata))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    return handler
