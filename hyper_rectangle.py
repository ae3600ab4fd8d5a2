from point import PointTrait

class HyperRectangle:
    '''
    Axis aligned bounding box given by its min and max corner points.
    Queries narrow a working copy of this in place while descending the tree.
    '''
    def __init__(self, min: PointTrait, max: PointTrait):
        self.min = min
        self.max = max

    @classmethod
    def from_point(cls, point: PointTrait) -> 'HyperRectangle':
        # Corners must not alias the stored point, expand() writes into them
        return cls(point.copy(), point.copy())

    def copy(self) -> 'HyperRectangle':
        return HyperRectangle(self.min.copy(), self.max.copy())

    def expand(self, point: PointTrait):
        for i in range(self.min.DIMENSION):
            value = point.at(i)
            if value < self.min.at(i):
                self.min.set_at(i, value)
            elif value > self.max.at(i):
                self.max.set_at(i, value)

    def box_dist_sq(self, point: PointTrait):
        """Squared distance from point to the closest point of the box, 0 when inside."""
        result = 0
        for i in range(self.min.DIMENSION):
            value = point.at(i)
            if value < self.min.at(i):
                gap = self.min.at(i) - value
                result += gap * gap
            elif value > self.max.at(i):
                gap = value - self.max.at(i)
                result += gap * gap
        return result

    def __eq__(self, other):
        if not isinstance(other, HyperRectangle):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    __hash__ = None

    def __repr__(self):
        return f"HyperRectangle(min={self.min!r}, max={self.max!r})"

def box_dist_sq(rect: HyperRectangle, point: PointTrait):
    return rect.box_dist_sq(point)
