from typing import Callable, Iterator, List, Optional
from point import DIMENSION, PointTrait, Point2, as_point
from hyper_rectangle import HyperRectangle

'''
2D kd-tree with incremental insertion, nearest neighbour and radius queries.

Queries keep a single working copy of the tree's bounding rectangle and narrow
it on the way down / restore it on the way up, so a subtree is only visited
when its cell could still hold a better answer.

Insertion is iterative. The queries and the dump recurse once per tree level,
so a degenerate tree deeper than sys.getrecursionlimit() (sorted input of
roughly a thousand points) makes them raise RecursionError. There is no
rebalancing.
'''

class KDTreeError(Exception):
    pass

class KDTreeNode:
    def __init__(self, point: PointTrait, axis: int = 0, left: Optional['KDTreeNode'] = None, right: Optional['KDTreeNode'] = None):
        self.point = point
        self.axis = axis
        self.left = left
        self.right = right

class KDTree:
    def __init__(self, point_class = Point2, node_class = KDTreeNode):
        self.root = None
        self.rect = None
        self.dimensions = DIMENSION
        self.point_class = point_class
        self.node_class = node_class
        self.nodes = []

    def _as_point(self, point) -> PointTrait:
        try:
            return as_point(point, self.point_class)
        except (TypeError, ValueError) as e:
            raise KDTreeError(f"Cannot read {point!r} as a {self.dimensions}D point: {e}") from e

    def insert(self, point) -> KDTreeNode:
        # The tree owns its points, later edits by the caller must not move a node
        point = self._as_point(point).copy()

        if self.root is None:
            new_node = self.root = self.node_class(point, 0)
        else:
            # Walk down without recursion so sorted input can't blow the stack
            node = self.root
            while True:
                next_axis = (node.axis + 1) % self.dimensions
                # Ties go right
                if point.at(node.axis) < node.point.at(node.axis):
                    if node.left is None:
                        new_node = node.left = self.node_class(point, next_axis)
                        break
                    node = node.left
                else:
                    if node.right is None:
                        new_node = node.right = self.node_class(point, next_axis)
                        break
                    node = node.right
        self.nodes.append(new_node)

        if self.rect is None:
            self.rect = HyperRectangle.from_point(point)
        else:
            self.rect.expand(point)
        return new_node

    def nearest(self, point) -> Optional[PointTrait]:
        if self.root is None:
            return None
        query = self._as_point(point)
        rect = self.rect.copy()
        best = self.root.point
        best_dist = PointTrait.dist_sq(best, query)

        # Recursion depth is the tree depth, see the module note on sorted input
        def _nearest(node):
            nonlocal best, best_dist
            axis = node.axis
            split = node.point.at(axis)

            if query.at(axis) <= split:
                nearer, farther = node.left, node.right
                near_bound, far_bound = rect.max, rect.min
            else:
                nearer, farther = node.right, node.left
                near_bound, far_bound = rect.min, rect.max

            if nearer is not None:
                old_value = near_bound.at(axis)
                near_bound.set_at(axis, split)
                _nearest(nearer)
                near_bound.set_at(axis, old_value)

            dist = PointTrait.dist_sq(node.point, query)
            if dist < best_dist:
                best_dist = dist
                best = node.point

            if farther is not None:
                old_value = far_bound.at(axis)
                far_bound.set_at(axis, split)
                if rect.box_dist_sq(query) < best_dist:
                    _nearest(farther)
                far_bound.set_at(axis, old_value)

        _nearest(self.root)
        return best.copy()

    def range_query(self, point, radius) -> List[PointTrait]:
        results = []
        self.closure_range_query(point, radius, lambda found: results.append(found.copy()))
        return results

    def closure_range_query(self, point, radius, process: Callable[[PointTrait], None]):
        if self.root is None:
            return
        query = self._as_point(point)
        rect = self.rect.copy()
        # Signed square, a negative radius can't match anything
        radius_sq = radius * abs(radius)

        def _query(node):
            axis = node.axis
            split = node.point.at(axis)

            if query.at(axis) <= split:
                nearer, farther = node.left, node.right
                near_bound, far_bound = rect.max, rect.min
            else:
                nearer, farther = node.right, node.left
                near_bound, far_bound = rect.min, rect.max

            if nearer is not None:
                old_value = near_bound.at(axis)
                near_bound.set_at(axis, split)
                _query(nearer)
                near_bound.set_at(axis, old_value)

            if PointTrait.dist_sq(node.point, query) <= radius_sq:
                process(node.point)

            if farther is not None:
                old_value = far_bound.at(axis)
                far_bound.set_at(axis, split)
                if rect.box_dist_sq(query) <= radius_sq:
                    _query(farther)
                far_bound.set_at(axis, old_value)

        _query(self.root)

    @property
    def bounds(self) -> Optional[HyperRectangle]:
        return None if self.rect is None else self.rect.copy()

    def __len__(self):
        return len(self.nodes)

    def __iter__(self) -> Iterator[PointTrait]:
        return (node.point for node in self.nodes)

    def format_tree(self) -> str:
        if self.root is None:
            return "KDTree()\n"
        lines = ["KDTree("]

        def _format(node, depth):
            coords = "".join(f"{node.point.at(i)} " for i in range(self.dimensions))
            lines.append(" " * depth + f"d={node.axis} node at {coords}")
            if node.left is not None:
                _format(node.left, depth + 1)
            if node.right is not None:
                _format(node.right, depth + 1)

        _format(self.root, 0)
        lines.append(")")
        return "\n".join(lines) + "\n"

    def print_tree(self):
        print(self.format_tree(), end="")

    def __str__(self):
        return self.format_tree()
