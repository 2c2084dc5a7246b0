"""The logging module contains decorators for tracing holder operations.

Decorators:
    log - registers the calling thread, the call signature and the return
     value.
"""

from collections.abc import Callable
from functools import wraps
from threading import current_thread

from pydantic import validate_call

from singletons.infrastructure.logger import SingletonsLogger


@validate_call
def log(_functor: Callable = None, *, enabled: bool = True):
    """Traces the calling thread, the call signature and the return value."""

    def decorator_log(functor):
        """
        The log decorator registers the thread, the call signature and the
         return value when called.
        """
        @wraps(functor)
        def wrapper(*args, **kwargs):
            """
            Logs the name of the calling thread, the function name, its
             arguments and its return value if tracing is enabled. Holder
             operations are called from many threads, so the thread name is
             what tells the records apart.

            Args:
                functor (Callable): The function to wrap.
                enabled (bool): Whether to enable or disable tracing.
                 Default is True.

            Returns:
                The result of the wrapped function.
            """
            if not enabled:
                return functor(*args, **kwargs)

            args_repr = [repr(a) for a in args]
            kwargs_repr = [f"{k}={repr(v)}" for k, v in kwargs.items()]
            signature = ", ".join(args_repr + kwargs_repr)
            logger = SingletonsLogger().logger
            thread_name = current_thread().name
            logger.debug(
                "Thread: %s -> Call: %s(%s)",
                thread_name,
                functor.__qualname__,
                signature
            )
            result = functor(*args, **kwargs)
            logger.debug(
                "Thread: %s -> Return: %s", thread_name, repr(result)
            )
            return result
        return wrapper

    if _functor is None:
        return decorator_log
    return decorator_log(_functor)
