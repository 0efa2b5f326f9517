"""Sets up logging for an invocation"""

# Standard libraries
import logging

# Third-party libraries
from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "gcloud_ssh"

# stdout belongs to the remote command, everything of ours goes to stderr
console = Console(stderr=True)


def setup_logger(log_file: str, level: int = logging.INFO) -> logging.Handler:
    """Sends the package logs to a log file, or to stderr when the file cannot be opened

    Args:
        log_file: The path of the log file, opened in append mode
        level: The logging level

    Returns:
        The installed handler, close it when the invocation ends
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False

    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError as ex:
        handler = RichHandler(console=console, show_path=False)
        package_logger.addHandler(handler)
        package_logger.warning("Cannot open log file %s (%s), logging to stderr", log_file, ex)
        return handler

    package_logger.addHandler(handler)
    return handler


def close_logger(handler: logging.Handler):
    """Removes and closes a handler installed by setup_logger"""
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    handler.close()
