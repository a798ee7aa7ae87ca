import math

import pytest

from nurbsalgo.sweepline import (
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
    right_of,
)


@pytest.mark.parametrize(
    "p, q",
    [((0, 0), (2, 0)), ((1, 1), (1, 5)), ((-2, 3), (4, -1)), ((0, 0), (3, 3))],
)
def test_bisect_passes_through_midpoint_and_is_equidistant(p, q):
    s1, s2 = Site(*p), Site(*q)
    edge = bisect(s1, s2, 7)
    assert edge.number == 7
    assert edge.reg[0] is s1 and edge.reg[1] is s2
    assert edge.a == 1.0 or edge.b == 1.0
    mx, my = (s1.x + s2.x) / 2, (s1.y + s2.y) / 2
    assert math.isclose(edge.a * mx + edge.b * my, edge.c, abs_tol=1e-9)
    # Another point on the line must be equidistant from both sites.
    if edge.a == 1.0:
        y = my + 2.5
        x = edge.c - edge.b * y
    else:
        x = mx + 2.5
        y = edge.c - edge.a * x
    probe = Site(x, y)
    assert math.isclose(distance(probe, s1), distance(probe, s2), rel_tol=1e-9)


def test_distance():
    assert distance(Site(0, 0), Site(3, 4)) == 5.0


def _triangle():
    s1, s2, s3 = Site(0, 0), Site(2, 0), Site(1, 2)
    return s1, s2, s3, bisect(s1, s2, 0), bisect(s1, s3, 1)


def test_intersect_gives_circumcentre():
    s1, s2, s3, e1, e2 = _triangle()
    v = intersect(Halfedge(e1, LE), Halfedge(e2, LE))
    assert v is not None
    d1, d2, d3 = distance(v, s1), distance(v, s2), distance(v, s3)
    assert math.isclose(d1, d2, rel_tol=1e-9)
    assert math.isclose(d1, d3, rel_tol=1e-9)


def test_intersect_behind_returns_none():
    *_, e1, e2 = _triangle()
    assert intersect(Halfedge(e1, RE), Halfedge(e2, LE)) is None


def test_intersect_without_edge_or_same_site_or_parallel():
    s1, s2, s3, e1, e2 = _triangle()
    assert intersect(Halfedge(None), Halfedge(e1)) is None
    same_top = bisect(s3, s2, 2)
    assert intersect(Halfedge(e1), Halfedge(same_top)) is None
    parallel = bisect(Site(0, 2), Site(2, 2), 3)
    assert intersect(Halfedge(e1), Halfedge(parallel)) is None


def test_right_of_vertical_bisector():
    edge = bisect(Site(0, 0), Site(2, 0), 0)
    left_side = Halfedge(edge, LE)
    right_side = Halfedge(edge, RE)
    assert right_of(left_side, (3, 5)) is True
    assert right_of(left_side, (1.5, 5)) is True
    assert right_of(left_side, (0, 5)) is False
    assert right_of(right_side, (-3, 5)) is False
    assert right_of(right_side, (0, 5)) is True


def test_right_of_requires_edge():
    with pytest.raises(ValueError):
        right_of(Halfedge(None), (0, 0))


def test_edge_list_starts_with_linked_ends():
    el = EdgeList(0.0, 10.0, 3)
    assert el.left_end.right is el.right_end
    assert el.right_end.left is el.left_end
    assert el.left_bound((4, 1)) is el.left_end


def test_edge_list_insert_and_left_bound():
    el = EdgeList(0.0, 10.0, 3)
    he = Halfedge(bisect(Site(4, 0), Site(6, 0), 0), LE)
    el.insert(el.left_end, he)
    assert el.left_end.right is he and he.right is el.right_end
    assert el.right_end.left is he and he.left is el.left_end
    assert el.left_bound((8, 1)) is he
    assert el.left_bound((2, 1)) is el.left_end


def test_edge_list_delete_unlinks_and_prunes_hash():
    el = EdgeList(0.0, 10.0, 3)
    he = Halfedge(bisect(Site(4, 0), Site(6, 0), 0), LE)
    el.insert(el.left_end, he)
    assert el.left_bound((8, 1)) is he
    el.delete(he)
    assert he.deleted
    assert el.left_end.right is el.right_end
    assert el.left_bound((8, 1)) is el.left_end


def test_edge_list_rejects_bad_size():
    with pytest.raises(ValueError):
        EdgeList(0.0, 1.0, 0)


def _event(x, y, offset, queue):
    he = Halfedge(Edge(1.0, 0.0, 0.0, (Site(0, 0), Site(1, 0))))
    queue.insert(he, Site(x, y), offset)
    return he


def test_event_queue_orders_by_ystar_then_x():
    q = EventQueue(0.0, 10.0, 3)
    high = _event(1, 8, 0.5, q)
    low = _event(5, 1, 0.0, q)
    tie_right = _event(4, 3, 0.0, q)
    tie_left = _event(2, 3, 0.0, q)
    assert len(q) == 4
    assert q.min_point() == (5, 1)
    assert high.ystar == 8.5
    popped = [q.pop_min() for _ in range(4)]
    assert popped == [low, tie_left, tie_right, high]
    assert len(q) == 0


def test_event_queue_delete():
    q = EventQueue(0.0, 10.0, 3)
    a = _event(1, 2, 0.0, q)
    b = _event(1, 5, 0.0, q)
    q.delete(a)
    assert a.vertex is None
    assert len(q) == 1
    q.delete(a)
    assert len(q) == 1
    assert q.pop_min() is b


def test_event_queue_empty_raises():
    q = EventQueue(0.0, 10.0, 2)
    with pytest.raises(IndexError):
        q.min_point()
    with pytest.raises(IndexError):
        q.pop_min()


def test_event_queue_clamps_out_of_range_keys():
    q = EventQueue(0.0, 10.0, 2)
    far = _event(0, 100, 0.0, q)
    below = _event(0, -50, 0.0, q)
    assert q.pop_min() is below
    assert q.pop_min() is far