"""Centralized logging configuration for the prettyimports package."""
import logging
import sys

LOGGER_NAME = "prettyimports"
CONSOLE_HANDLER_NAME = "prettyimports-console"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up the `prettyimports` logger hierarchy for command line use."""
    root_logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING

    # Replace the console handler from an earlier call
    for handler in list(root_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    # Create console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    root_logger.propagate = False

    return root_logger
