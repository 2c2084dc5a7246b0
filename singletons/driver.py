"""The driver module runs the singleton demonstration.

For every variant it reads the holder twice and prints whether both reads
returned the same object. The thread-safe variant is then read by several
workers at once, each logging through the shared instance. The other
variants log a greeting.

Functions:
    run_demo - runs the demonstration over a factory of variants.
    main - console entry point.
"""

import sys
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pydantic import validate_call
from pydantic.types import PositiveInt

from singletons.infrastructure.constants import DEFAULT_NUMBER_WORKERS
from singletons.infrastructure.logger import SingletonsLogger
from singletons.patterns.factory import HolderFactory
from singletons.patterns.holder import InitStrategy, SingletonHolder
from singletons.payload import write_line
from singletons.variants import build_variants


def _check_identity(holder: SingletonHolder, writer: Callable) -> None:
    first = holder.get_instance()
    second = holder.get_instance()
    writer(f"Same instance? {first is second}")


def _fan_out(holder: SingletonHolder, number_workers: int) -> None:
    def read_and_log(index: int) -> None:
        holder.get_instance().log(f"Message from thread {index}")

    with ThreadPoolExecutor(
        max_workers=number_workers, thread_name_prefix="singletons-worker"
    ) as executor:
        # Consume the results so that worker exceptions reach the caller.
        list(executor.map(read_and_log, range(number_workers)))


@validate_call
def run_demo(
    variants: HolderFactory,
    writer: Callable[[str], Any] = write_line,
    number_workers: PositiveInt = DEFAULT_NUMBER_WORKERS,
) -> None:
    """Runs the demonstration for every registered variant.

    :param variants: Factory with one holder creation functor per variant
    :type variants: HolderFactory
    :param writer: Destination of the section headers and identity checks
    :type writer: Callable[[str], Any]
    :param number_workers: Number of concurrent readers of the thread-safe
     variant
    :type number_workers: int
    """
    logger = SingletonsLogger().logger
    for position, name in enumerate(variants.keys):
        if position > 0:
            writer("")
        writer(f"=== Testing {name} ===")
        holder = variants.create(name)
        logger.info("Running variant %s with strategy %s", name,
                    holder.strategy.value)
        if holder.strategy is InitStrategy.DOUBLE_CHECKED:
            _fan_out(holder, number_workers)
            _check_identity(holder, writer)
        else:
            _check_identity(holder, writer)
            holder.get_instance().log(f"Hello from {name}")
    logger.info("Demonstration finished for %d variants",
                variants.number_callbacks)


def main() -> int:
    """Runs the demonstration on the standard output."""
    run_demo(build_variants())
    return 0


if __name__ == "__main__":
    sys.exit(main())
