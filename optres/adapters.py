from collections.abc import Callable, Mapping, Sequence
from random import Random
from typing import Optional, TypeVar

from .result import Empty, OptionResult, Present, from_throwing


K = TypeVar("K")
T = TypeVar("T")


def optional(value: Optional[T]) -> OptionResult[T]:
    if value is None:
        return Empty()
    return Present(value)


def choose(items: Sequence[T], rng: Random) -> OptionResult[T]:
    """Pick an element of `items` using the given random source. An empty
    sequence is an expected absence, not an error."""
    if len(items) == 0:
        return Empty()
    return from_throwing(lambda: items[rng.randrange(len(items))])


def lookup(mapping: Mapping[K, T], key: K) -> OptionResult[T]:
    def get():
        try:
            return Present(mapping[key])
        except KeyError:
            return Empty()

    return from_throwing(get).bind(lambda r: r)


def parse(converter: Callable[[str], T], text: str) -> OptionResult[T]:
    return from_throwing(lambda: converter(text))
