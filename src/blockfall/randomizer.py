"""Shape selectors used by the session to draw new pieces."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol

from .shapes import Shape


class ShapeSelector(Protocol):
    """Source of the next shape to spawn."""

    def next_shape(self) -> Shape: ...


class UniformSelector:
    """Pick each shape uniformly at random.

    The selector owns a private :class:`random.Random` so that a seed yields a
    reproducible piece sequence without touching the global RNG.
    """

    def __init__(
        self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._shapes = list(Shape)

    def seed(self, seed: Optional[int]) -> None:
        self._rng.seed(seed)

    def next_shape(self) -> Shape:
        return self._rng.choice(self._shapes)


class SequenceSelector:
    """Replay a fixed sequence of shapes, optionally wrapping around."""

    def __init__(self, shapes: Iterable[Shape], *, cycle: bool = True) -> None:
        self._shapes: List[Shape] = [Shape(s) for s in shapes]
        if not self._shapes:
            raise ValueError("SequenceSelector needs at least one shape")
        self._cycle = cycle
        self._index = 0

    def next_shape(self) -> Shape:
        if self._index >= len(self._shapes):
            if not self._cycle:
                raise IndexError("Shape sequence exhausted")
            self._index = 0
        shape = self._shapes[self._index]
        self._index += 1
        return shape


__all__ = ["SequenceSelector", "ShapeSelector", "UniformSelector"]
