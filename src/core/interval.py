# core/interval.py
import math

class Interval:
    """
    A closed range [min, max] of real numbers.

    Used both as the valid hit-distance window of a ray query and as one axis of a
    bounding box. An interval with min > max is empty; see Interval.EMPTY.
    """
    __slots__ = ("min", "max")

    def __init__(self, min: float = math.inf, max: float = -math.inf):
        self.min = min
        self.max = max

    @staticmethod
    def surrounding(a: "Interval", b: "Interval") -> "Interval":
        """The tightest interval enclosing both a and b."""
        return Interval(min(a.min, b.min), max(a.max, b.max))

    @staticmethod
    def positive() -> "Interval":
        return Interval(0.0, math.inf)

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def surrounds(self, value: float) -> bool:
        return self.min < value < self.max

    def clamp(self, value: float) -> float:
        if value < self.min:
            return self.min
        if value > self.max:
            return self.max
        return value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
