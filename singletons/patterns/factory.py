from collections.abc import Callable

from pydantic import BaseModel, PrivateAttr, validate_call
from typing_extensions import Self

from singletons.decorators.logging import log
from singletons.infrastructure.constants import LOGGING_ENABLED
from singletons.infrastructure.constrained_types import KeyStr
from singletons.infrastructure.logger import SingletonsLogger
from singletons.patterns.holder import SingletonHolder


class HolderFactory(BaseModel, validate_assignment=True):
    """Factory for creating singleton holders by key."""

    __callbacks: dict[str, Callable] = PrivateAttr(default_factory=dict)

    @property
    def number_callbacks(self) -> int:
        """Returns the number of holder creation functors registered.

        :return: Number of callbacks
        :rtype: int
        """
        return len(self.__callbacks)

    @property
    def keys(self) -> list[str]:
        """Returns the registered keys in registration order.

        :return: Registered keys
        :rtype: list[str]
        """
        return list(self.__callbacks.keys())

    @validate_call
    @log(enabled=LOGGING_ENABLED)
    def register(self, key: KeyStr, functor: Callable) -> Self:
        """Registers a holder creation functor with a given key.

        :param key: Key identifying the functor
        :type key: str
        :param functor: Holder creation functor.
        :type functor: Callable

        :return: Factory object with the new functor registered.
        :rtype: HolderFactory

        :raises KeyError: If the key is already defined in factory.
        """
        if key in self.__callbacks:
            error_message = f"Holder key {key} already defined in factory"
            SingletonsLogger().logger.error(error_message)
            raise KeyError(error_message)
        self.__callbacks[key] = functor
        return self

    @validate_call
    @log(enabled=LOGGING_ENABLED)
    def unregister(self, key: KeyStr) -> Self:
        """Unregisters the functor associated with a given key.

        :param key: Key identifying the functor
        :type key: str

        :return: Factory object with the specified functor removed.
        :rtype: HolderFactory

        :raises KeyError: If the key is not present in factory.
        """
        if key not in self.__callbacks:
            error_message = f"Holder key {key} not present in factory"
            SingletonsLogger().logger.error(error_message)
            raise KeyError(error_message)
        self.__callbacks.pop(key)
        return self

    @validate_call
    @log(enabled=LOGGING_ENABLED)
    def create(self, key: KeyStr, *args, **kwargs) -> SingletonHolder:
        """Returns a new holder built by the functor registered with the
        provided key.

        :param key: Key identifying the functor
        :type key: str

        :return: Holder created by the functor.
        :rtype: SingletonHolder

        :raises KeyError: If the key is not present in factory.
        :raises TypeError: If the functor does not return a SingletonHolder.
        """
        if key not in self.__callbacks:
            error_message = f"Holder key {key} not present in factory"
            SingletonsLogger().logger.error(error_message)
            raise KeyError(error_message)
        result = self.__callbacks[key](*args, **kwargs)
        if not isinstance(result, SingletonHolder):
            error_message = f"Functor for key {key} returns an incorrect " \
                f"type: {type(result)}. Please review functor"
            SingletonsLogger().logger.error(error_message)
            raise TypeError(error_message)
        return result
