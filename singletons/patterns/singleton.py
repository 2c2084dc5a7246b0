"""The singleton module contains decorators for implementing the singleton
 pattern on top of a SingletonHolder.

Decorators:
    singleton - allows to create singleton classes.
"""

import functools
from threading import local
from typing import Optional

from pydantic import validate_call

from singletons.patterns.holder import InitStrategy, SingletonHolder


@validate_call
def singleton(
    _cls: Optional[type] = None,
    *,
    strategy: InitStrategy = InitStrategy.DOUBLE_CHECKED
):
    """Make a class a singleton class (with only one instance)."""

    def decorator_singleton(cls):
        """
        Every call of the decorated class returns the instance held by a
         SingletonHolder using the given strategy.
        """
        pending = local()

        def create():
            # Arguments of the call that triggered the creation, in its own
            # thread. The eager strategy creates before any call, with none.
            args = getattr(pending, "args", ())
            kwargs = getattr(pending, "kwargs", {})
            return cls(*args, **kwargs)

        @functools.wraps(cls)
        def wrapper(*args, **kwargs):
            """
            This wrapper returns the single instance of the decorated class.
             Arguments of later calls are ignored once the instance exists.
            """
            if wrapper.holder.is_initialized:
                return wrapper.holder.get_instance()
            pending.args = args
            pending.kwargs = kwargs
            try:
                return wrapper.holder.get_instance()
            finally:
                del pending.args
                del pending.kwargs

        wrapper.holder = SingletonHolder(factory=create, strategy=strategy)
        return wrapper

    if _cls is None:
        return decorator_singleton
    return decorator_singleton(_cls)
