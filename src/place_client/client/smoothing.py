from __future__ import annotations

from dataclasses import dataclass


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass
class Smoothed:
    """A value drawn at `current` while it moves toward `target`."""

    current: float
    target: float

    @classmethod
    def at(cls, value: float) -> Smoothed:
        return cls(current=value, target=value)

    def snap(self, value: float) -> None:
        self.current = self.target = value

    @property
    def settled(self) -> bool:
        return self.current == self.target


def advance(pair: Smoothed, rate: float) -> bool:
    """Step `pair.current` toward its target. Returns False if already there."""
    if pair.settled:
        return False
    pair.current = lerp(pair.current, pair.target, rate)
    return True
