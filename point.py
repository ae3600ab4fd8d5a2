import numbers
import numpy as np
from typing import Sequence

'''
Point types the kd-tree can index. Anything with x/y getters and setters can
be stored, the tree only ever talks to points through at/set_at and dist_sq.
'''

DIMENSION = 2

class PointTrait:
    DIMENSION = DIMENSION

    def x(self):
        raise NotImplementedError
    def y(self):
        raise NotImplementedError
    def set_x(self, x):
        raise NotImplementedError
    def set_y(self, y):
        raise NotImplementedError

    def copy(self) -> 'PointTrait':
        raise NotImplementedError

    def at(self, index: int):
        if index == 0:
            return self.x()
        if index == 1:
            return self.y()
        # Callers derive axes from DIMENSION, anything else is a bug
        raise AssertionError(f"axis {index} out of range for dimension {self.DIMENSION}")

    def set_at(self, index: int, value):
        if index == 0:
            self.set_x(value)
        elif index == 1:
            self.set_y(value)
        else:
            raise AssertionError(f"axis {index} out of range for dimension {self.DIMENSION}")

    @staticmethod
    def dist_sq(a: 'PointTrait', b: 'PointTrait'):
        """Squared euclidean distance between two points, works across point types."""
        dx = a.x() - b.x()
        dy = a.y() - b.y()
        return dx * dx + dy * dy

    def __iter__(self):
        yield self.x()
        yield self.y()

    def __eq__(self, other):
        if not isinstance(other, PointTrait):
            return NotImplemented
        return self.x() == other.x() and self.y() == other.y()

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.x()!r}, {self.y()!r})"

class Point2(PointTrait):
    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        self._x = x
        self._y = y

    def x(self):
        return self._x
    def y(self):
        return self._y
    def set_x(self, x):
        self._x = x
    def set_y(self, y):
        self._y = y

    def copy(self) -> 'Point2':
        return Point2(self._x, self._y)

class ArrayPoint(PointTrait):
    # Views a float numpy array of shape (2,), writes go through to the array.
    # Integer arrays are copied to float so split values are never truncated.
    __slots__ = ('array',)

    def __init__(self, array: np.ndarray):
        array = np.asarray(array)
        if array.shape != (DIMENSION,):
            raise ValueError(f"ArrayPoint needs an array of shape ({DIMENSION},), got {array.shape}")
        if not np.issubdtype(array.dtype, np.floating):
            array = array.astype(float)
        self.array = array

    def x(self):
        return self.array[0]
    def y(self):
        return self.array[1]
    def set_x(self, x):
        self.array[0] = x
    def set_y(self, y):
        self.array[1] = y

    def copy(self) -> 'ArrayPoint':
        return ArrayPoint(self.array.copy())

def as_point(value, point_class=Point2) -> PointTrait:
    if isinstance(value, PointTrait):
        return value
    if point_class is ArrayPoint:
        return ArrayPoint(np.array(value, dtype=float))
    coords: Sequence = list(value)
    if len(coords) != DIMENSION:
        raise ValueError(f"Expected {DIMENSION} coordinates, got {len(coords)}")
    for coord in coords:
        if isinstance(coord, bool) or not isinstance(coord, numbers.Real):
            raise ValueError(f"Coordinates must be real numbers, got {coord!r}")
    return point_class(*coords)
