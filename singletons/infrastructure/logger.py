import logging
from pydantic import BaseModel, PrivateAttr
from typing_extensions import Self
from singletons.infrastructure.constants import DEFAULT_LOGGING_FORMATTER, DEFAULT_LOGGING_LEVEL

class SingletonsLogger(BaseModel, validate_assignment = True):
    """Logger shared by the singleton holders and the driver"""
    __logger: logging.Logger = PrivateAttr(default=None)

    def __init__(self, **data):
        """
        Binds the library logger, named after the class, to the model.
        """
        super().__init__(**data)
        self.__logger = logging.getLogger(self.__class__.__name__)

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the library logger.

        :return: Logger named after the class.
        :rtype: logging.Logger
        """
        return self.__logger

    def add_default_handler(self) -> Self:
        """
        Writes library records to a file named after the class, using the
        default formatter and level.
        """
        file_handler = logging.FileHandler(self.__class__.__name__ + ".log", mode = "w")
        file_handler.setFormatter(DEFAULT_LOGGING_FORMATTER)
        self.__logger.addHandler(file_handler)
        self.__logger.setLevel(DEFAULT_LOGGING_LEVEL)
        return self

    def remove_handlers(self) -> Self:
        """
        Closes and detaches every handler attached to the library logger.
        """
        for handler in list(self.__logger.handlers):
            self.__logger.removeHandler(handler)
            handler.close()
        return self
