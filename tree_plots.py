import matplotlib.pyplot as plt
import numpy as np
from kd_tree import KDTree
from hyper_rectangle import HyperRectangle

def plot_tree(tree: KDTree, ax=None, show=True, query=None, radius=None, plot_title="kd-tree partition"):
    if ax is None:
        plt.figure()  # Initialize a new figure
        ax = plt.gca()

    if tree.root is not None:
        points = np.array([[p.at(0), p.at(1)] for p in tree])
        ax.scatter(points[:, 0], points[:, 1], color='black', s=8, zorder=3)

        # Each node splits the cell it was inserted into, draw that segment
        def _plot_cell(node, cell: HyperRectangle):
            split = node.point.at(node.axis)
            if node.axis == 0:
                ax.plot([split, split], [cell.min.at(1), cell.max.at(1)], color='red', linewidth=1)
            else:
                ax.plot([cell.min.at(0), cell.max.at(0)], [split, split], color='blue', linewidth=1)
            if node.left is not None:
                left_cell = cell.copy()
                left_cell.max.set_at(node.axis, split)
                _plot_cell(node.left, left_cell)
            if node.right is not None:
                right_cell = cell.copy()
                right_cell.min.set_at(node.axis, split)
                _plot_cell(node.right, right_cell)

        _plot_cell(tree.root, tree.bounds)

    if query is not None:
        qx, qy = query
        ax.scatter([qx], [qy], color='green', marker='x', zorder=4)
        if radius is not None:
            ax.add_patch(plt.Circle((qx, qy), radius, color='green', fill=False))

    ax.set_title(plot_title)
    ax.set_xlabel("X-axis")
    ax.set_ylabel("Y-axis")
    ax.set_aspect('equal')
    if show:
        plt.show()
    return ax
