from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .result import ErrorInfo, Failed, OptionResult, Present


L = TypeVar("L")
T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Side(Generic[L, T]):
    """Common operations of `Left` and `Right`. Unlike `OptionResult`, the
    left side holds a domain error chosen by the caller, so exceptions raised
    by `map` and `bind` functions are not captured."""

    def map(self, f: Callable[[T], U]) -> Either[L, U]:
        match self:
            case Right(value):
                return Right(f(value))
            case _:
                return self  # type: ignore

    def bind(self, f: Callable[[T], Either[L, U]]) -> Either[L, U]:
        match self:
            case Right(value):
                return f(value)
            case _:
                return self  # type: ignore

    def map_left(self, f: Callable[[L], U]) -> Either[U, T]:
        match self:
            case Left(value):
                return Left(f(value))
            case _:
                return self  # type: ignore

    def match(self, on_left: Callable[[L], R], on_right: Callable[[T], R]) -> R:
        match self:
            case Left(value):
                return on_left(value)
            case Right(value):
                return on_right(value)
        raise TypeError(f"not an Either variant: {self!r}")

    def to_option_result(self) -> OptionResult[T]:
        return self.match(
            lambda e: Failed(ErrorInfo(str(e))),
            Present,
        )


@dataclass(frozen=True)
class Left(Side[L, Any]):
    value: L

    def __bool__(self):
        return False


@dataclass(frozen=True)
class Right(Side[Any, T]):
    value: T

    def __bool__(self):
        return True


Either = Left[L] | Right[T]
