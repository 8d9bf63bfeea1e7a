"""
Tree descriptor - one Y-shaped segment of the fractal: a trunk and two branches.

The four points of a descriptor are derived on demand:

    p2     p3
      \   /
       p1
       |
       p0

p0 is the root, p1 the end of the trunk (the branch point), p2 and p3 the
ends of the left and right branches. The children of a descriptor start at
its p1, shrink by branch_ratio and lean by half the branch angle each way.
"""

from dataclasses import dataclass
from typing import Tuple
import math

from .point import Point


@dataclass(frozen=True)
class Tree:
    root: Point
    trunk_height: float   # pixels
    branch_ratio: float   # between 0 and 1
    branch_angle: float   # spread angle in radians
    incline: float = 0.0  # rotation from vertical in radians

    @property
    def p0(self) -> Point:
        return self.root

    @property
    def p1(self) -> Point:
        return trunk_end(self)

    @property
    def p2(self) -> Point:
        return left_child_end(self)

    @property
    def p3(self) -> Point:
        return right_child_end(self)

    @property
    def branch_length(self) -> float:
        return self.trunk_height * self.branch_ratio

    def segments(self) -> Tuple[Tuple[Point, Point], ...]:
        """Trunk, left branch and right branch as (start, end) pairs."""
        p1 = self.p1
        return ((self.p0, p1), (p1, self.p2), (p1, self.p3))


def trunk_end(tree: Tree) -> Point:
    a = tree.incline - math.pi / 2
    x = math.cos(a) * tree.trunk_height + tree.root.x
    y = math.sin(a) * tree.trunk_height + tree.root.y
    return Point(x, y)


def left_child_end(tree: Tree) -> Point:
    a = tree.branch_angle / 2 - tree.incline
    p1 = trunk_end(tree)
    return Point(p1.x - math.sin(a) * tree.branch_length,
                 p1.y - math.cos(a) * tree.branch_length)


def right_child_end(tree: Tree) -> Point:
    a = tree.branch_angle / 2 + tree.incline
    p1 = trunk_end(tree)
    return Point(p1.x + math.sin(a) * tree.branch_length,
                 p1.y - math.cos(a) * tree.branch_length)


def next_trees(tree: Tree) -> Tuple[Tree, Tree]:
    """Plan the left and right trees growing from the branch point of `tree`."""
    root = trunk_end(tree)
    trunk_height = tree.trunk_height * tree.branch_ratio
    half_angle = tree.branch_angle / 2
    left = Tree(root, trunk_height, tree.branch_ratio, tree.branch_angle, tree.incline - half_angle)
    right = Tree(root, trunk_height, tree.branch_ratio, tree.branch_angle, tree.incline + half_angle)
    return left, right
