"""The constants module define constants shared by the singleton holders
 and the demonstration driver.

Constants:
    DEFAULT_LOGGING_FORMATTER - default format for the library logger.
    DEFAULT_LOGGING_LEVEL - default level for the library logger.
    LOGGING_ENABLED - flag that indicates if the library call tracing is
     enabled.
    DEFAULT_NUMBER_WORKERS - number of concurrent callers used by the driver.
    CREATED_MESSAGE_FORMAT - line written when a payload is constructed.
    LOG_MESSAGE_FORMAT - line written when a payload logs a message.
"""

import logging
import os

DEFAULT_LOGGING_FORMATTER = logging.Formatter(
    "[%(asctime)s]:[%(levelname)s]:[%(name)s]:[%(threadName)s]:"
    "%(pathname)s:%(lineno)d: %(message)s"
)
DEFAULT_LOGGING_LEVEL = logging.DEBUG

LOGGING_ENABLED = os.environ.get(
    "SINGLETONS_LIB_LOGGING", ""
).strip().lower() in ("1", "true", "yes", "on")

DEFAULT_NUMBER_WORKERS = 5

CREATED_MESSAGE_FORMAT = "{name} instance created"
LOG_MESSAGE_FORMAT = "[{name}] {message}"
