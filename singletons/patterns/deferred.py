"""The deferred module contains a synchronized compute-once cell.

Classes:
    DeferredValue - computes its value on first access and caches it for
     every later access, whatever the number of concurrent readers.
"""

from collections.abc import Callable
from threading import Lock
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, PrivateAttr

T = TypeVar("T")


class DeferredValue(BaseModel, Generic[T], frozen=True):
    """Synchronized lazy cell."""

    factory: Callable[[], T]

    __lock: Lock = PrivateAttr(default_factory=Lock)
    __value: Any = PrivateAttr(default=None)
    __created: bool = PrivateAttr(default=False)

    @property
    def is_value_created(self) -> bool:
        """Check if the value was already computed.

        :return: True once the factory has returned. False while no access
          has completed, including after a failed one.
        :rtype: bool
        """
        return self.__created

    @property
    def value(self) -> T:
        """Returns the cached value, computing it on first access.

        Only one thread runs the factory. A factory exception reaches the
        thread that ran it and is not cached, so the next access runs the
        factory again.

        :return: The value produced by the factory.
        """
        if not self.__created:
            with self.__lock:
                if not self.__created:
                    self.__value = self.factory()
                    self.__created = True
        return self.__value
