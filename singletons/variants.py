"""The variants module registers the four demonstration singletons, one per
 initialization strategy.

Constants:
    VARIANT_STRATEGIES - variant name and the strategy guarding its
     instance, in demonstration order.

Functions:
    build_variants - creates a HolderFactory with one key per variant.
"""

from collections.abc import Callable
from functools import partial
from typing import Any

from pydantic import validate_call

from singletons.patterns.factory import HolderFactory
from singletons.patterns.holder import InitStrategy, SingletonHolder
from singletons.payload import Announcer, write_line

VARIANT_STRATEGIES = {
    "BasicSingleton": InitStrategy.UNSYNCHRONIZED,
    "ThreadSafeSingleton": InitStrategy.DOUBLE_CHECKED,
    "LazySingleton": InitStrategy.DEFERRED,
    "StaticConstructorSingleton": InitStrategy.EAGER,
}


def _create_holder(
    name: str, strategy: InitStrategy, writer: Callable[[str], Any]
) -> SingletonHolder:
    return SingletonHolder(
        factory=partial(Announcer, name=name, writer=writer),
        strategy=strategy,
    )


@validate_call
def build_variants(writer: Callable[[str], Any] = write_line) -> HolderFactory:
    """Creates a factory of holders for the demonstration variants.

    Each call of ``create`` on the returned factory builds a fresh holder, so
    the eager variant only announces its instance when its holder is created.

    :param writer: Destination of the lines written by the payloads
    :type writer: Callable[[str], Any]

    :return: Factory with one key per variant name.
    :rtype: HolderFactory
    """
    variants = HolderFactory()
    for name, strategy in VARIANT_STRATEGIES.items():
        variants.register(
            name,
            partial(_create_holder, name, strategy, writer),
        )
    return variants
