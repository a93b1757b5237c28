from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Generic, List, Optional, TypeVar

from .errors import LudoError, LudoRuleError

T = TypeVar("T")


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Either a success payload or a single failure reason, never both.

    Operations without a payload succeed with ``value=None``; use ``ok`` (or
    ``error is None``) to discriminate rather than the value.
    """

    value: Optional[T] = None
    error: Optional[LudoError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("A failed Result cannot carry a value")

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LudoError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise LudoRuleError(self.error)
        return self.value


@dataclass(frozen=True, slots=True)
class Knockout:
    token_index: int
    player: int
    from_position: int
    abs_pos: int


@dataclass(slots=True)
class MoveResult:
    token_index: int
    old_position: int
    new_position: int
    knockouts: List[Knockout] = field(default_factory=list)
    exited_base: bool = False
    finished: bool = False
    won: bool = False
