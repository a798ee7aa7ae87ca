"""Voronoi diagrams and Delaunay triangles of planar sites by Fortune's sweep line."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .sweepline import (
    LE,
    RE,
    Edge,
    EdgeList,
    EventQueue,
    Halfedge,
    Site,
    bisect,
    distance,
    intersect,
)

Point2 = tuple[float, float]


@dataclass(frozen=True)
class GraphEdge:
    """A straight segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass
class _Link:
    """Up to three vertex numbers a vertex is joined to; -1 marks an empty slot."""

    targets: list[int] = field(default_factory=lambda: [-1, -1, -1])
    count: int = 0


@dataclass
class _FinalLink:
    coord: Point2
    targets: list[Point2] = field(default_factory=list)


class VoronoiDiagramGenerator:
    """Builds the Voronoi diagram of a set of sites clipped to a box.

    After generate(), edges holds the clipped Voronoi edges, delaunay_edges
    the Delaunay edges (when enabled), triangles the Delaunay triangles as
    triples of input indices and, with vertex_info, final_vertices the
    vertices of degree one or three.
    """

    def __init__(self, generate_voronoi: bool = True, generate_delaunay: bool = False) -> None:
        self.generate_voronoi = generate_voronoi
        self.generate_delaunay = generate_delaunay
        self.edges: list[GraphEdge] = []
        self.delaunay_edges: list[GraphEdge] = []
        self.triangles: list[tuple[int, int, int]] = []
        self.final_vertices: list[Point2] = []
        self._final_links: list[_FinalLink] | None = None
        self._reset_run()

    def _reset_run(self) -> None:
        self._min_distance = 0.0
        self._vertices: list[Site] = []
        self._links: list[_Link] = []
        self._edge_count = 0
        self._bottom: Site | None = None
        self._border = (0.0, 0.0, 0.0, 0.0)

    def generate(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
        min_distance: float = 0.0,
        vertex_info: bool = False,
    ) -> list[GraphEdge]:
        """Compute the diagram of the sites (xs[i], ys[i]) inside the given box.

        Sites closer together than min_distance produce no edges.
        Returns the Voronoi edges.
        """
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length.")
        if not xs:
            raise ValueError("At least one site is needed.")

        self.edges = []
        self.delaunay_edges = []
        self.triangles = []
        self.final_vertices = []
        self._final_links = None
        self._reset_run()
        self._min_distance = min_distance

        sites = [Site(float(x), float(y), i) for i, (x, y) in enumerate(zip(xs, ys))]
        xmin, xmax = min(s.x for s in sites), max(s.x for s in sites)
        ymin, ymax = min(s.y for s in sites), max(s.y for s in sites)
        sites.sort(key=lambda s: (s.y, s.x))

        if min_x > max_x:
            min_x, max_x = max_x, min_x
        if min_y > max_y:
            min_y, max_y = max_y, min_y
        self._border = (min_x, min_y, max_x, max_y)

        sqrt_nsites = int(math.sqrt(len(sites) + 4))
        edge_list = EdgeList(xmin, xmax - xmin, sqrt_nsites)
        queue = EventQueue(ymin, ymax - ymin, sqrt_nsites)
        self._sweep(sites, edge_list, queue)

        if vertex_info:
            self.final_vertices = [
                (self._vertices[i].x, self._vertices[i].y)
                for i, link in enumerate(self._links)
                if link.count == 1 or (link.count == 3 and i < len(self._vertices))
            ]
            self._build_vertex_links()
        return list(self.edges)

    def vertex_pairs(self) -> Iterator[tuple[Point2, Point2]]:
        """Pairs (linked vertex, vertex) joining leaf and branch vertices."""
        if self._final_links is None:
            return
        for link in self._final_links:
            for target in reversed(link.targets):
                yield target, link.coord

    # Sweep

    def _left_region(self, he: Halfedge) -> Site:
        if he.edge is None:
            return self._bottom
        return he.edge.reg[LE] if he.pm == LE else he.edge.reg[RE]

    def _right_region(self, he: Halfedge) -> Site:
        if he.edge is None:
            return self._bottom
        return he.edge.reg[RE] if he.pm == LE else he.edge.reg[LE]

    def _bisect(self, s1: Site, s2: Site) -> Edge:
        edge = bisect(s1, s2, self._edge_count)
        if self.generate_delaunay:
            self._push_delaunay_edge(s1.x, s1.y, s2.x, s2.y)
        self._edge_count += 1
        return edge

    def _sweep(self, sites: list[Site], edge_list: EdgeList, queue: EventQueue) -> None:
        pending = iter(sites)
        self._bottom = next(pending)
        new_site = next(pending, None)

        while True:
            min_point = queue.min_point() if len(queue) else None
            if new_site is not None and (
                min_point is None
                or new_site.y < min_point[1]
                or (new_site.y == min_point[1] and new_site.x < min_point[0])
            ):
                lbnd = edge_list.left_bound((new_site.x, new_site.y))
                rbnd = lbnd.right
                bot = self._right_region(lbnd)
                edge = self._bisect(bot, new_site)

                bisector = Halfedge(edge, LE)
                edge_list.insert(lbnd, bisector)
                p = intersect(lbnd, bisector)
                if p is not None:
                    queue.delete(lbnd)
                    queue.insert(lbnd, p, distance(p, new_site))

                lbnd = bisector
                bisector = Halfedge(edge, RE)
                edge_list.insert(lbnd, bisector)
                p = intersect(bisector, rbnd)
                if p is not None:
                    queue.insert(bisector, p, distance(p, new_site))

                new_site = next(pending, None)
            elif min_point is not None:
                lbnd = queue.pop_min()
                llbnd = lbnd.left
                rbnd = lbnd.right
                rrbnd = rbnd.right
                bot = self._left_region(lbnd)
                top = self._right_region(rbnd)
                self.triangles.append((bot.number, top.number, self._right_region(lbnd).number))

                vertex = lbnd.vertex
                self._make_vertex(vertex)
                self._endpoint(lbnd.edge, lbnd.pm, vertex)
                self._endpoint(rbnd.edge, rbnd.pm, vertex)
                edge_list.delete(lbnd)
                queue.delete(rbnd)
                edge_list.delete(rbnd)

                pm = LE
                if bot.y > top.y:
                    bot, top = top, bot
                    pm = RE
                edge = self._bisect(bot, top)
                bisector = Halfedge(edge, pm)
                edge_list.insert(llbnd, bisector)
                self._endpoint(edge, RE - pm, vertex)

                p = intersect(llbnd, bisector)
                if p is not None:
                    queue.delete(llbnd)
                    queue.insert(llbnd, p, distance(p, bot))
                p = intersect(bisector, rrbnd)
                if p is not None:
                    queue.insert(bisector, p, distance(p, bot))
            else:
                break

        he = edge_list.left_end.right
        while he is not edge_list.right_end:
            self._clip_line(he.edge)
            he = he.right

    def _endpoint(self, edge: Edge, side: int, site: Site) -> None:
        edge.ep[side] = site
        if edge.ep[RE - side] is not None:
            self._clip_line(edge)

    def _make_vertex(self, site: Site) -> None:
        site.number = len(self._vertices)
        self._vertices.append(site)

    # Output

    def _push_graph_edge(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self.generate_voronoi:
            self.edges.append(GraphEdge(x1, y1, x2, y2))

    def _push_delaunay_edge(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if math.hypot(x2 - x1, y2 - y1) < self._min_distance:
            return
        self.delaunay_edges.append(GraphEdge(x1, y1, x2, y2))

    def _clip_line(self, e: Edge) -> None:
        r0, r1 = e.reg
        if math.hypot(r1.x - r0.x, r1.y - r0.y) < self._min_distance:
            return
        pxmin, pymin, pxmax, pymax = self._border

        if e.a == 1.0 and e.b >= 0.0:
            s1, s2 = e.ep[1], e.ep[0]
        else:
            s1, s2 = e.ep[0], e.ep[1]
        v1, v2 = s1, s2
        new1 = new2 = False

        if e.a == 1.0:
            y1 = pymin
            if s1 is not None and s1.y > pymin:
                y1 = s1.y
            else:
                new1 = True
            if y1 > pymax:
                y1 = pymax
                new1 = True
            x1 = e.c - e.b * y1
            y2 = pymax
            if s2 is not None and s2.y < pymax:
                y2 = s2.y
            else:
                new2 = True
            if y2 < pymin:
                y2 = pymin
                new2 = True
            x2 = e.c - e.b * y2
            if (x1 > pxmax and x2 > pxmax) or (x1 < pxmin and x2 < pxmin):
                return
            if x1 > pxmax:
                x1, y1, new1 = pxmax, (e.c - pxmax) / e.b, True
            if x1 < pxmin:
                x1, y1, new1 = pxmin, (e.c - pxmin) / e.b, True
            if x2 > pxmax:
                x2, y2, new2 = pxmax, (e.c - pxmax) / e.b, True
            if x2 < pxmin:
                x2, y2, new2 = pxmin, (e.c - pxmin) / e.b, True
        else:
            x1 = pxmin
            if s1 is not None and s1.x > pxmin:
                x1 = s1.x
            else:
                new1 = True
            if x1 > pxmax:
                x1 = pxmax
                new1 = True
            y1 = e.c - e.a * x1
            x2 = pxmax
            if s2 is not None and s2.x < pxmax:
                x2 = s2.x
            else:
                new2 = True
            if x2 < pxmin:
                x2 = pxmin
                new2 = True
            y2 = e.c - e.a * x2
            if (y1 > pymax and y2 > pymax) or (y1 < pymin and y2 < pymin):
                return
            if y1 > pymax:
                y1, x1, new1 = pymax, (e.c - pymax) / e.a, True
            if y1 < pymin:
                y1, x1, new1 = pymin, (e.c - pymin) / e.a, True
            if y2 > pymax:
                y2, x2, new2 = pymax, (e.c - pymax) / e.a, True
            if y2 < pymin:
                y2, x2, new2 = pymin, (e.c - pymin) / e.a, True

        degenerate = (
            (x1 == x2 and x2 == pxmin)
            or (x1 == x2 and x2 == pxmax)
            or (y1 == y2 and y2 == pymin)
            or (y1 == y2 and y2 == pymax)
        )
        if degenerate:
            return
        self._push_graph_edge(x1, y1, x2, y2)
        if new1:
            v1 = Site(x1, y1)
            self._make_vertex(v1)
        if new2:
            v2 = Site(x2, y2)
            self._make_vertex(v2)
        self._add_link(v1.number, v2.number)

    def _add_link(self, a: int, b: int) -> None:
        needed = max(a, b) + 1
        if len(self._links) < needed:
            self._links.extend(_Link() for _ in range(needed - len(self._links)))
        for vertex, other in ((a, b), (b, a)):
            link = self._links[vertex]
            for slot in range(3):
                if link.targets[slot] == -1:
                    link.targets[slot] = other
                    link.count = slot + 1
                    break

    def _build_vertex_links(self) -> None:
        if not self._vertices:
            return
        links = self._links
        size = len(links)
        final = [_FinalLink((v.x, v.y)) for v in self._vertices]
        final.extend(_FinalLink((0.0, 0.0)) for _ in range(size - len(final)))
        self._final_links = final

        leaves = [i for i, link in enumerate(links) if link.count == 1]
        branches = [i for i, link in enumerate(links) if link.count == 3]

        def clear_slot(link: _Link, value: int) -> None:
            if value in link.targets:
                link.targets[link.targets.index(value)] = -1

        for leaf in leaves:
            if links[leaf].count != 1:
                continue
            current = links[leaf].targets[0]
            previous = leaf
            links[leaf].count -= 1
            while current != -1 and current < size and links[current].count not in (1, 3):
                link = links[current]
                if link.count != 2:
                    break
                if link.targets[0] == previous:
                    link.targets[0] = link.targets[1]
                    link.targets[1] = -1
                    link.count -= 1
                elif link.targets[1] == previous:
                    link.targets[1] = -1
                    link.count -= 1
                previous = current
                current = link.targets[0]
            if current == -1 or current >= size:
                continue
            final[leaf].targets.append((self._vertices[current].x, self._vertices[current].y))
            link = links[current]
            if link.count == 1:
                link.count = 0
                link.targets[0] = -1
            elif link.count == 3:
                clear_slot(link, previous)

        for branch in branches:
            for start in list(links[branch].targets):
                if start == -1:
                    continue
                current = start
                previous = branch
                while 0 <= current < size and links[current].count != 3:
                    link = links[current]
                    if link.count != 2:
                        break
                    if link.targets[0] == previous:
                        link.targets[0] = -1
                        previous, current = current, link.targets[1]
                    elif link.targets[1] == previous:
                        link.targets[1] = -1
                        previous, current = current, link.targets[0]
                    else:
                        break
                if current < 0 or current >= size:
                    continue
                final[branch].targets.append(
                    (self._vertices[current].x, self._vertices[current].y)
                )
                if links[current].count == 3:
                    clear_slot(links[current], previous)