"""The holder module implements a construct-once primitive parameterized by
 its initialization strategy.

Classes:
    InitStrategy - how a holder guards the creation of its instance.
    SingletonHolder - hands out one shared instance created by a factory.
"""

from collections.abc import Callable
from enum import Enum
from threading import Lock
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, PrivateAttr, validate_call
from typing_extensions import Self

from singletons.decorators.logging import log
from singletons.infrastructure.constants import LOGGING_ENABLED
from singletons.infrastructure.exceptions import ConstructionError
from singletons.infrastructure.logger import SingletonsLogger
from singletons.patterns.deferred import DeferredValue

T = TypeVar("T")


class InitStrategy(str, Enum):
    """Initialization strategies supported by the holder."""

    # Check then create without a lock. Races when read concurrently.
    UNSYNCHRONIZED = "unsynchronized"
    DOUBLE_CHECKED = "double_checked"
    DEFERRED = "deferred"
    EAGER = "eager"


class SingletonHolder(BaseModel, Generic[T], frozen=True):
    """Holds at most one instance created by the factory and shares it with
    every caller.

    The instance moves the holder from uninitialized to initialized exactly
    once and is never replaced. A factory failure leaves the holder
    uninitialized, so the next call tries again.
    """

    factory: Callable[[], T]
    strategy: InitStrategy = InitStrategy.DOUBLE_CHECKED

    __lock: Lock = PrivateAttr(default_factory=Lock)
    __cell: Optional[DeferredValue] = PrivateAttr(default=None)
    __instance: Any = PrivateAttr(default=None)
    __initialized: bool = PrivateAttr(default=False)
    __read: Callable = PrivateAttr(default=None)

    def model_post_init(self, context: Any) -> None:
        """Selects the read path of the strategy. The eager strategy creates
        the instance here, before the holder is returned to anyone.

        :raises ConstructionError: If the eager factory fails.
        """
        readers = {
            InitStrategy.UNSYNCHRONIZED: self.__read_unsynchronized,
            InitStrategy.DOUBLE_CHECKED: self.__read_double_checked,
            InitStrategy.DEFERRED: self.__read_deferred,
            InitStrategy.EAGER: self.__read_eager,
        }
        self.__read = readers[self.strategy]
        if self.strategy is InitStrategy.DEFERRED:
            self.__cell = DeferredValue(factory=self.__create)
        elif self.strategy is InitStrategy.EAGER:
            self.__create()

    @classmethod
    @validate_call
    def unsynchronized(cls, factory: Callable[[], Any]) -> Self:
        """Creates a holder that checks and creates without a lock. Only safe
        when a single thread reads it."""
        return cls(factory=factory, strategy=InitStrategy.UNSYNCHRONIZED)

    @classmethod
    @validate_call
    def double_checked(cls, factory: Callable[[], Any]) -> Self:
        """Creates a holder guarded by double-checked locking."""
        return cls(factory=factory, strategy=InitStrategy.DOUBLE_CHECKED)

    @classmethod
    @validate_call
    def deferred(cls, factory: Callable[[], Any]) -> Self:
        """Creates a holder backed by a synchronized compute-once cell."""
        return cls(factory=factory, strategy=InitStrategy.DEFERRED)

    @classmethod
    @validate_call
    def eager(cls, factory: Callable[[], Any]) -> Self:
        """Creates a holder whose instance is built before this call returns.

        :raises ConstructionError: If the factory fails.
        """
        return cls(factory=factory, strategy=InitStrategy.EAGER)

    @property
    def is_initialized(self) -> bool:
        """Check if the shared instance exists. Never creates it.

        :return: True if the instance was created. Otherwise returns False.
        :rtype: bool
        """
        return self.__initialized

    @log(enabled=LOGGING_ENABLED)
    def get_instance(self) -> T:
        """Returns the shared instance, creating it on first call for the
        lazy strategies.

        :return: The shared instance. Every call returns the same object.

        :raises ConstructionError: If the factory fails. Raised in the thread
          that triggered the creation.
        """
        return self.__read()

    def __create(self) -> T:
        try:
            instance = self.factory()
        except Exception as error:
            error_message = (
                f"Factory {self.factory!r} failed to create the shared "
                f"instance with strategy {self.strategy.value}: {error}"
            )
            SingletonsLogger().logger.error(error_message)
            raise ConstructionError(error_message) from error
        # Publish the instance before raising the flag read without the lock.
        self.__instance = instance
        self.__initialized = True
        return instance

    def __read_unsynchronized(self) -> T:
        if not self.__initialized:
            self.__create()
        return self.__instance

    def __read_double_checked(self) -> T:
        if not self.__initialized:
            with self.__lock:
                if not self.__initialized:
                    self.__create()
        return self.__instance

    def __read_deferred(self) -> T:
        return self.__cell.value

    def __read_eager(self) -> T:
        return self.__instance
