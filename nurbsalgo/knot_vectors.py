"""Knot vector analysis: multiplicities, continuity and knot refinement helpers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from .polynomials import knot_multiplicity
from .validation import DOUBLE_EPSILON, is_almost_equal, is_greater_than, is_valid_knot_vector


def continuity(degree: int, knot_vector: Sequence[float], knot: float) -> int:
    """Parametric continuity of a curve of the given degree at knot."""
    if degree <= 0:
        raise ValueError("Degree must be greater than zero.")
    return degree - knot_multiplicity(knot_vector, knot)


def rescale(knot_vector: Sequence[float], min_value: float, max_value: float) -> list[float]:
    """Map the knot vector linearly onto [min_value, max_value]."""
    origin_min = knot_vector[0]
    origin_max = knot_vector[-1]
    k = (max_value - min_value) / (origin_max - origin_min)
    return [(k * knot - origin_min) + min_value for knot in knot_vector]


def knots_to_raise_multiplicity(
    degree: int, knot_vector: Sequence[float], start: float, end: float
) -> list[float]:
    """Knots to insert so that start and end each reach multiplicity degree."""
    if degree < 0:
        raise ValueError("Degree must be greater than or equal to zero.")
    if not knot_vector:
        raise ValueError("Knot vector must not be empty.")
    if not is_valid_knot_vector(knot_vector):
        raise ValueError("Knot vector must be nondecreasing.")

    result: list[float] = []
    start_multi = knot_multiplicity(knot_vector, start)
    if start_multi < degree:
        result.extend([start] * (degree - start_multi))
    end_multi = knot_multiplicity(knot_vector, end)
    if end_multi < degree:
        result.extend([end] * (degree - end_multi))
    return result


def multiplicity_map(knot_vector: Sequence[float]) -> dict[float, int]:
    """Distinct knots, in ascending order, mapped to their multiplicities."""
    return {knot: knot_multiplicity(knot_vector, knot) for knot in sorted(set(knot_vector))}


def internal_multiplicity_map(knot_vector: Sequence[float]) -> dict[float, int]:
    """Like multiplicity_map, without the first and last distinct knots."""
    items = list(multiplicity_map(knot_vector).items())
    return dict(items[1:-1])


def knots_to_merge(
    knot_vector0: Sequence[float], knot_vector1: Sequence[float]
) -> tuple[list[float], list[float]]:
    """Knots to insert into each vector so both end up with the same knots.

    Returns (insert into knot_vector0, insert into knot_vector1), each sorted.
    """
    map0 = multiplicity_map(knot_vector0)
    map1 = multiplicity_map(knot_vector1)
    insert0: list[float] = []
    insert1: list[float] = []

    for key, count0 in map0.items():
        count1 = map1.get(key)
        if count1 is None:
            insert1.extend([key] * count0)
        elif count0 > count1:
            insert1.extend([key] * (count0 - count1))
        else:
            insert0.extend([key] * (count1 - count0))

    for key, count1 in map1.items():
        if key not in map0:
            insert0.extend([key] * count1)

    return sorted(insert0), sorted(insert1)


def knots_to_unify(knot_vectors: Sequence[Sequence[float]]) -> list[list[float]]:
    """For each knot vector, the knots to insert so all vectors become identical."""
    maps = [multiplicity_map(kv) for kv in knot_vectors]
    final: dict[float, int] = {}
    for current in maps:
        for key, count in current.items():
            if final.get(key, 0) < count:
                final[key] = count

    result: list[list[float]] = []
    for current in maps:
        inserts: list[float] = []
        for key in sorted(final):
            times = final[key] - current.get(key, 0)
            inserts.extend([key] * max(times, 0))
        result.append(inserts)
    return result


def mid_knots(count: int, knot_vector: Sequence[float]) -> list[float]:
    """Knots that repeatedly bisect the widest span, count of them, sorted."""
    if count < 0:
        raise ValueError("Count must be greater than or equal to zero.")
    unique = [key for key, _ in groupby(knot_vector)]
    inserted: list[float] = []
    while len(inserted) < count:
        standard = DOUBLE_EPSILON
        index = -1
        for i, (a, b) in enumerate(zip(unique, unique[1:])):
            delta = b - a
            if is_greater_than(delta, standard):
                standard = delta
                index = i
        if index < 0:
            raise ValueError("Knot vector has no span wide enough to split.")
        current = unique[index] + standard / 2.0
        unique.append(current)
        unique.sort()
        inserted.append(current)
    return sorted(inserted)


def is_uniform(knot_vector: Sequence[float]) -> bool:
    """True when distinct knots are equally spaced with equal interior multiplicities."""
    counts = multiplicity_map(knot_vector)
    if not counts:
        return False
    knots = list(counts)
    if counts[knots[0]] != counts[knots[-1]]:
        return False
    if len(knots) < 2:
        return False
    standard = knots[1] - knots[0]
    last = len(knots) - 1
    for i in range(1, last):
        current, following = knots[i], knots[i + 1]
        if not is_almost_equal(following - current, standard):
            return False
        if counts[current] != counts[following] and i + 1 != last:
            return False
    return True