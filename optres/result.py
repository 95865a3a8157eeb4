from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeGuard, TypeVar

from .errors import UnwrapError
from .logging import logger


T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

log = logger()


@dataclass(frozen=True)
class ErrorInfo:
    message: str
    cause: BaseException | None = field(default=None, compare=False)

    @staticmethod
    def from_exception(exc: BaseException) -> ErrorInfo:
        try:
            message = str(exc)
        except Exception:
            message = ""
        return ErrorInfo(message or type(exc).__name__, exc)

    def __str__(self):
        return self.message


class Variant(Generic[T]):
    """Shared combinators of `Present`, `Empty` and `Failed`.

    Dispatch is a `match` over the three variant classes; there is no
    fourth case, and subclasses outside this module are not supported.
    `OptionResult` is a typing union and cannot be used with `isinstance`;
    use `is_option_result` for runtime checks.
    """

    def map(self, f: Callable[[T], U]) -> OptionResult[U]:
        match self:
            case Present(value):
                return from_throwing(lambda: f(value))
            case _:
                return self  # type: ignore

    def bind(self, f: Callable[[T], OptionResult[U]]) -> OptionResult[U]:
        match self:
            case Present(value):
                r = from_throwing(lambda: f(value))
                match r:
                    case Present(inner) if is_option_result(inner):
                        return inner
                    case Present(other):
                        return failed(TypeError(
                            f"bind expected an OptionResult, got: {type(other).__name__}"))
                    case _:
                        return r
            case _:
                return self  # type: ignore

    flat_map = bind

    def match(
        self,
        on_present: Callable[[T], R],
        on_empty: Callable[[], R],
        on_failed: Callable[[ErrorInfo], R],
    ) -> R:
        match self:
            case Present(value):
                return on_present(value)
            case Empty():
                return on_empty()
            case Failed(error):
                return on_failed(error)
        raise TypeError(f"not an OptionResult variant: {self!r}")

    def value_or(self, default: T) -> T:
        return self.match(lambda v: v, lambda: default, lambda _: default)

    def unwrap(self) -> T:
        match self:
            case Present(value):
                return value
            case _:
                raise UnwrapError(self)

    def or_else(self, f: Callable[[], OptionResult[T]]) -> OptionResult[T]:
        match self:
            case Present():
                return self
            case _:
                return f()


@dataclass(frozen=True)
class Present(Variant[T]):
    value: T

    def __bool__(self):
        return True


@dataclass(frozen=True)
class Empty(Variant[Any]):
    def __bool__(self):
        return False


@dataclass(frozen=True)
class Failed(Variant[Any]):
    error: ErrorInfo

    def __bool__(self):
        return False

    def __str__(self):
        return f"Failed: {self.error}"


OptionResult = Present[T] | Empty | Failed


def is_option_result(x: Any) -> TypeGuard[OptionResult[Any]]:
    return isinstance(x, (Present, Empty, Failed))


def present(value: T) -> OptionResult[T]:
    return Present(value)


def empty() -> OptionResult[Any]:
    return Empty()


def failed(error: ErrorInfo | BaseException | str) -> OptionResult[Any]:
    match error:
        case ErrorInfo():
            return Failed(error)
        case BaseException():
            return Failed(ErrorInfo.from_exception(error))
        case _:
            return Failed(ErrorInfo(str(error)))


def from_throwing(f: Callable[[], T]) -> OptionResult[T]:
    """Run `f` and capture its outcome. A raised `Exception` becomes a
    `Failed` value; `KeyboardInterrupt` and friends still propagate."""
    try:
        return Present(f())
    except Exception as e:
        error = ErrorInfo.from_exception(e)
        log.debug("captured `%s`: %s", type(e).__name__, error)
        return Failed(error)
