from .result import (
    OptionResult, Present, Empty, Failed, ErrorInfo,
    present, empty, failed, from_throwing, is_option_result,
)
from .either import Either, Left, Right
from .combinators import pipe, tap, fork, alt, compose
from .adapters import optional, choose, lookup, parse
from .errors import OptResError, UnwrapError
from .version import __version__

__all__ = [
    "OptionResult", "Present", "Empty", "Failed", "ErrorInfo",
    "present", "empty", "failed", "from_throwing", "is_option_result",
    "Either", "Left", "Right",
    "pipe", "tap", "fork", "alt", "compose",
    "optional", "choose", "lookup", "parse",
    "OptResError", "UnwrapError", "__version__",
]
