"""
2D point used for branch roots and endpoints.
"""

import numpy as np


class Point:
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Point':
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Point':
        return self.__mul__(scalar)

    def __repr__(self) -> str:
        return f"Point({self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.isclose(self.x, other.x) and np.isclose(self.y, other.y))

    __hash__ = None

    def distance_to(self, other: 'Point') -> float:
        return float(np.hypot(self.x - other.x, self.y - other.y))

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    @classmethod
    def from_tuple(cls, t: tuple) -> 'Point':
        return cls(t[0], t[1])
