from dataclasses import dataclass
from typing import Any


class OptResError(Exception):
    def __str__(self):
        return "Unknown optres error."


@dataclass
class UnwrapError(OptResError):
    variant: Any

    def __str__(self):
        return f"Cannot unwrap a value from {self.variant}"
