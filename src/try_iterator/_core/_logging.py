import logging

LOGGER_NAME = "try_iterator"


def get_logger() -> logging.Logger:
    """Return the package logger.

    The library only attaches a `NullHandler`; configure `logging` in the application to see its records.
    """
    return logging.getLogger(LOGGER_NAME)


get_logger().addHandler(logging.NullHandler())
