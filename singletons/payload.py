"""The payload module contains the object shared by the demonstration
 holders.

Functions:
    write_line - writes one line to the standard output.

Classes:
    Announcer - payload that announces its creation and logs messages.
"""

import sys
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, validate_call

from singletons.infrastructure.constants import (
    CREATED_MESSAGE_FORMAT,
    LOG_MESSAGE_FORMAT,
)
from singletons.infrastructure.constrained_types import KeyStr


def write_line(line: str) -> None:
    """Writes a line to the standard output with a single write call."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class Announcer(BaseModel, frozen=True):
    """Payload whose creation and messages are observable lines."""

    name: KeyStr
    writer: Callable[[str], Any] = write_line

    def model_post_init(self, context: Any) -> None:
        self.writer(CREATED_MESSAGE_FORMAT.format(name=self.name))

    @validate_call
    def log(self, message: str) -> None:
        """Writes a message tagged with the payload name.

        :param message: Message to write
        :type message: str
        """
        self.writer(LOG_MESSAGE_FORMAT.format(name=self.name, message=message))
