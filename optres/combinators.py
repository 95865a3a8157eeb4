from collections.abc import Callable
import functools
from typing import Any, Optional, TypeVar


T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


def pipe(value: Any, *fs: Callable[[Any], Any]) -> Any:
    return functools.reduce(lambda acc, f: f(acc), fs, value)


def tap(value: T, *actions: Callable[[T], Any]) -> T:
    for action in actions:
        action(value)
    return value


def fork(
    value: T,
    left: Callable[[T], A],
    right: Callable[[T], B],
    join: Callable[[A, B], R],
) -> R:
    return join(left(value), right(value))


def alt(value: T, *fs: Callable[[T], Optional[R]]) -> Optional[R]:
    """Try each function in turn, returning the first result that is not
    `None`. Later functions are not called once one succeeds."""
    for f in fs:
        result = f(value)
        if result is not None:
            return result
    return None


def compose(*fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right composition: `compose(f, g)(x) == g(f(x))`."""
    def composed(x):
        return pipe(x, *fs)

    return composed
