"""Building blocks of the sweep-line Voronoi construction.

Sites, bisector edges, half-edges, the ordered list of active half-edges
(the beach line) and the priority queue of circle events.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

LE = 0
RE = 1

Point = Sequence[float]


@dataclass(eq=False)
class Site:
    """An input site or a computed Voronoi vertex."""

    x: float
    y: float
    number: int = 0


@dataclass(eq=False)
class Edge:
    """Perpendicular bisector a*x + b*y = c between two sites.

    Either a or b is 1. ep holds the end points found so far.
    """

    a: float
    b: float
    c: float
    reg: tuple[Site, Site]
    number: int = 0
    ep: list[Site | None] = field(default_factory=lambda: [None, None])


@dataclass(eq=False)
class Halfedge:
    """One side (LE or RE) of an edge, linked into the beach line."""

    edge: Edge | None
    pm: int = LE
    left: Halfedge | None = field(default=None, repr=False)
    right: Halfedge | None = field(default=None, repr=False)
    vertex: Site | None = field(default=None, repr=False)
    ystar: float = 0.0
    deleted: bool = False


def bisect(s1: Site, s2: Site, edge_number: int) -> Edge:
    """Bisector edge between s1 and s2."""
    dx = s2.x - s1.x
    dy = s2.y - s1.y
    c = s1.x * dx + s1.y * dy + (dx * dx + dy * dy) * 0.5
    if abs(dx) > abs(dy):
        a, b, c = 1.0, dy / dx, c / dx
    else:
        a, b, c = dx / dy, 1.0, c / dy
    return Edge(a, b, c, (s1, s2), edge_number)


def intersect(el1: Halfedge, el2: Halfedge) -> Site | None:
    """New vertex where the bisectors of two half-edges meet, if it lies ahead."""
    e1, e2 = el1.edge, el2.edge
    if e1 is None or e2 is None:
        return None
    if e1.reg[1] is e2.reg[1]:
        return None

    d = e1.a * e2.b - e1.b * e2.a
    if -1.0e-10 < d < 1.0e-10:
        return None

    xint = (e1.c * e2.b - e2.c * e1.b) / d
    yint = (e2.c * e1.a - e1.c * e2.a) / d

    r1, r2 = e1.reg[1], e2.reg[1]
    if r1.y < r2.y or (r1.y == r2.y and r1.x < r2.x):
        el, e = el1, e1
    else:
        el, e = el2, e2

    right_of_site = xint >= e.reg[1].x
    if (right_of_site and el.pm == LE) or (not right_of_site and el.pm == RE):
        return None
    return Site(xint, yint)


def right_of(halfedge: Halfedge, point: Point) -> bool:
    """True when point lies to the right of the half-edge."""
    e = halfedge.edge
    if e is None:
        raise ValueError("Half-edge has no edge.")
    px, py = point[0], point[1]
    topsite = e.reg[1]
    right_of_site = px > topsite.x
    if right_of_site and halfedge.pm == LE:
        return True
    if not right_of_site and halfedge.pm == RE:
        return False

    if e.a == 1.0:
        dyp = py - topsite.y
        dxp = px - topsite.x
        fast = False
        if (not right_of_site and e.b < 0.0) or (right_of_site and e.b >= 0.0):
            above = dyp >= e.b * dxp
            fast = above
        else:
            above = px + py * e.b > e.c
            if e.b < 0.0:
                above = not above
            if not above:
                fast = True
        if not fast:
            dxs = topsite.x - e.reg[0].x
            above = e.b * (dxp * dxp - dyp * dyp) < dxs * dyp * (
                1.0 + 2.0 * dxp / dxs + e.b * e.b
            )
            if e.b < 0.0:
                above = not above
    else:
        yl = e.c - e.a * px
        t1 = py - yl
        t2 = px - topsite.x
        t3 = yl - topsite.y
        above = t1 * t1 > t2 * t2 + t3 * t3

    return above if halfedge.pm == LE else not above


def distance(s: Site, t: Site) -> float:
    """Euclidean distance between two sites."""
    return math.hypot(s.x - t.x, s.y - t.y)


def _hash_bucket(value: float, origin: float, extent: float, size: int) -> int:
    bucket = 0 if extent == 0 else int((value - origin) / extent * size)
    return max(0, min(size - 1, bucket))


class EdgeList:
    """Doubly linked beach line of half-edges with a hash index on x."""

    def __init__(self, xmin: float, deltax: float, sqrt_nsites: int) -> None:
        if sqrt_nsites < 1:
            raise ValueError("sqrt_nsites must be at least one.")
        self.xmin = xmin
        self.deltax = deltax
        self.hash_size = 2 * sqrt_nsites
        self._hash: list[Halfedge | None] = [None] * self.hash_size
        self.left_end = Halfedge(None)
        self.right_end = Halfedge(None)
        self.left_end.right = self.right_end
        self.right_end.left = self.left_end
        self._hash[0] = self.left_end
        self._hash[-1] = self.right_end

    def _get_hash(self, b: int) -> Halfedge | None:
        if b < 0 or b >= self.hash_size:
            return None
        he = self._hash[b]
        if he is None or not he.deleted:
            return he
        self._hash[b] = None
        return None

    def insert(self, left: Halfedge, new: Halfedge) -> None:
        """Link new immediately to the right of left."""
        new.left = left
        new.right = left.right
        left.right.left = new
        left.right = new

    def left_bound(self, point: Point) -> Halfedge:
        """The half-edge immediately to the left of point."""
        bucket = _hash_bucket(point[0], self.xmin, self.deltax, self.hash_size)
        he = self._get_hash(bucket)
        i = 1
        while he is None:
            he = self._get_hash(bucket - i) or self._get_hash(bucket + i)
            i += 1

        if he is self.left_end or (he is not self.right_end and right_of(he, point)):
            he = he.right
            while he is not self.right_end and right_of(he, point):
                he = he.right
            he = he.left
        else:
            he = he.left
            while he is not self.left_end and not right_of(he, point):
                he = he.left

        if 0 < bucket < self.hash_size - 1:
            self._hash[bucket] = he
        return he

    def delete(self, halfedge: Halfedge) -> None:
        """Unlink the half-edge and mark it deleted for the hash index."""
        halfedge.left.right = halfedge.right
        halfedge.right.left = halfedge.left
        halfedge.deleted = True


class EventQueue:
    """Circle events keyed by (ystar, vertex x), bucketed on y."""

    def __init__(self, ymin: float, deltay: float, sqrt_nsites: int) -> None:
        if sqrt_nsites < 1:
            raise ValueError("sqrt_nsites must be at least one.")
        self.ymin = ymin
        self.deltay = deltay
        self.hash_size = 4 * sqrt_nsites
        self._buckets: list[list[Halfedge]] = [[] for _ in range(self.hash_size)]
        self._min = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _bucket(self, halfedge: Halfedge) -> int:
        bucket = _hash_bucket(halfedge.ystar, self.ymin, self.deltay, self.hash_size)
        self._min = min(self._min, bucket)
        return bucket

    def insert(self, halfedge: Halfedge, site: Site, offset: float) -> None:
        """Queue the half-edge for the event at site, keyed at site.y + offset."""
        halfedge.vertex = site
        halfedge.ystar = site.y + offset
        entries = self._buckets[self._bucket(halfedge)]
        position = next(
            (
                index
                for index, other in enumerate(entries)
                if not (
                    halfedge.ystar > other.ystar
                    or (halfedge.ystar == other.ystar and site.x > other.vertex.x)
                )
            ),
            len(entries),
        )
        entries.insert(position, halfedge)
        self._count += 1

    def delete(self, halfedge: Halfedge) -> None:
        """Remove the half-edge's pending event, if it has one."""
        if halfedge.vertex is None:
            return
        self._buckets[self._bucket(halfedge)].remove(halfedge)
        self._count -= 1
        halfedge.vertex = None

    def _advance(self) -> list[Halfedge]:
        if self._count == 0:
            raise IndexError("Event queue is empty.")
        while not self._buckets[self._min]:
            self._min += 1
        return self._buckets[self._min]

    def min_point(self) -> tuple[float, float]:
        """(x, ystar) of the earliest event."""
        first = self._advance()[0]
        return (first.vertex.x, first.ystar)

    def pop_min(self) -> Halfedge:
        """Remove and return the half-edge of the earliest event."""
        halfedge = self._advance().pop(0)
        self._count -= 1
        return halfedge