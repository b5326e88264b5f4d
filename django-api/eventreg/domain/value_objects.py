"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Identifier of an Event, a positive integer assigned by the catalog."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(str(value).strip()))


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
