"""Internal success / failure wrapper used by the evaluator.

Failures are returned rather than raised so that ``one_of`` can try a
branch, discard its failure and move on without unwinding the stack.
Only the boundary functions in :mod:`json_mapping.api` raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union


class ErrorMeta(Enum):
    # The failure came out of a field / optional_field step, or was already
    # annotated by an enclosing object_ / instance.
    FIELD = auto()


@dataclass(frozen=True, slots=True)
class Ok:
    value: Any


@dataclass(frozen=True, slots=True)
class Err:
    message: str
    meta: ErrorMeta | None = None

    def append(self, trace: str) -> Err:
        """Return a copy with *trace* appended, keeping the meta marker."""
        return Err(self.message + trace, self.meta)


Result = Union[Ok, Err]


def is_ok(result: Result) -> bool:
    return isinstance(result, Ok)
