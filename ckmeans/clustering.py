"""Optimal one-dimensional k-means clustering by dynamic programming.

Ckmeans groups numeric data into classes so that the sum of squared
deviations within each class is as small as possible.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import TypeVar

from .errors import (
    HighWindowError,
    LowWindowError,
    TooFewClassesError,
    TooManyClassesError,
)

__all__ = ["ckmeans", "ckmeans_dynamic_stop", "roundbreaks"]

N = TypeVar("N", bound=Real)


class _Arithmetic:
    """Division rules for the data: truncating for integers, true otherwise."""

    def __init__(self, values: Sequence[Real]) -> None:
        self.integral = all(isinstance(v, int) for v in values)

    def div(self, a, b):
        if not self.integral:
            return a / b
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient


def _numeric_sort(data: Sequence[N]) -> list[N]:
    """Return a sorted copy of the data, refusing NaN values."""
    for value in data:
        if value != value:
            raise ValueError("cannot sort data containing NaN")
    return sorted(data)


def _unique_count_sorted(values: Sequence[N]) -> int:
    if not values:
        return 0
    return 1 + sum(1 for a, b in zip(values, values[1:]) if a != b)


def _validate(data: Sequence[N], nclusters: int) -> None:
    if nclusters < 1:
        raise TooFewClassesError()
    if nclusters > len(data):
        raise TooManyClassesError()


def _ssq(j: int, i: int, sumx, sumxsq, arith: _Arithmetic):
    """Sum of squared deviations of the sorted values j..i (inclusive)."""
    if j > 0:
        count = i - j + 1
        mean = arith.div(sumx[i] - sumx[j - 1], count)
        sji = sumxsq[i] - sumxsq[j - 1] - count * mean * mean
    else:
        sji = sumxsq[i] - arith.div(sumx[i] * sumx[i], i + 1)
    return sji if sji >= 0 else sji * 0


def _fill_matrix_column(imin, imax, column, matrix, backtrack, sumx, sumxsq, arith):
    nvalues = len(matrix[0])
    current = matrix[column]
    previous = matrix[column - 1]
    bt_current = backtrack[column]
    bt_previous = backtrack[column - 1]
    # Depth-first over the index ranges, left halves before right halves.
    pending = [(imin, imax)]
    while pending:
        lo, hi = pending.pop()
        if lo > hi:
            continue
        i = lo + (hi - lo) // 2
        current[i] = previous[i - 1]
        bt_current[i] = i
        jlow = column
        if lo > column:
            jlow = max(jlow, bt_current[lo - 1])
        jlow = max(jlow, bt_previous[i])
        jhigh = i - 1
        if hi < nvalues - 1:
            jhigh = min(jhigh, bt_current[hi + 1])
        for j in range(jhigh, jlow - 1, -1):
            sji = _ssq(j, i, sumx, sumxsq, arith)
            if sji + previous[jlow - 1] >= current[i]:
                break
            ssq_jlow = _ssq(jlow, i, sumx, sumxsq, arith) + previous[jlow - 1]
            if ssq_jlow < current[i]:
                current[i] = ssq_jlow
                bt_current[i] = jlow
            jlow += 1
            ssq_j = sji + previous[j - 1]
            if ssq_j < current[i]:
                current[i] = ssq_j
                bt_current[i] = j
        pending.append((i + 1, hi))
        pending.append((lo, i - 1))


def _fill_matrices(data, matrix, backtrack, nclusters, min_improvement, arith) -> int:
    """Fill the cost and backtrack matrices; return the number of columns used."""
    nvalues = len(data)
    shift = data[nvalues // 2]
    sumx = []
    sumxsq = []
    running = running_sq = None
    for i, value in enumerate(data):
        delta = value - shift
        running = delta if i == 0 else running + delta
        running_sq = delta * delta if i == 0 else running_sq + delta * delta
        sumx.append(running)
        sumxsq.append(running_sq)
        matrix[0][i] = _ssq(0, i, sumx, sumxsq, arith)
        backtrack[0][i] = 0
    for k in range(1, nclusters):
        _fill_matrix_column(k, nvalues - 1, k, matrix, backtrack, sumx, sumxsq, arith)
        if matrix[k - 1][nvalues - 1] - matrix[k][nvalues - 1] < min_improvement:
            return k
    return nclusters


def _prepare(data: Sequence[N], nclusters: int):
    _validate(data, nclusters)
    ordered = _numeric_sort(data)
    unique = _unique_count_sorted(ordered)
    return ordered, unique


def ckmeans(data: Sequence[N], nclusters: int) -> list[list[N]]:
    """Cluster ``data`` into at most ``nclusters`` optimally homogeneous classes.

    Classes are returned in ascending order, each holding its sorted values.
    Fewer classes are returned when the data has fewer distinct values.
    """
    ordered, unique = _prepare(data, nclusters)
    if unique == 1:
        return [ordered]
    nclusters = min(unique, nclusters)
    nvalues = len(ordered)
    arith = _Arithmetic(ordered)
    zero = 0 if arith.integral else 0.0
    matrix = [[zero] * nvalues for _ in range(nclusters)]
    backtrack = [[0] * nvalues for _ in range(nclusters)]
    _fill_matrices(ordered, matrix, backtrack, nclusters, zero, arith)

    clusters: list[list[N]] = []
    right = nvalues - 1
    for cluster in reversed(range(nclusters)):
        left = backtrack[cluster][right]
        clusters.append(ordered[left : right + 1])
        if cluster > 0:
            right = left - 1
    clusters.reverse()
    return clusters


def ckmeans_dynamic_stop(data: Sequence[N], nclusters: int, min_improvement) -> list[list]:
    """Return the rows of the within-class cost matrix.

    Rows are computed for 1, 2, ... classes and stop as soon as adding a class
    improves the total cost by less than ``min_improvement``.
    """
    ordered, unique = _prepare(data, nclusters)
    nclusters = min(unique, nclusters)
    nvalues = len(ordered)
    arith = _Arithmetic(ordered)
    zero = 0 if arith.integral else 0.0
    matrix = [[zero] * nvalues for _ in range(nclusters)]
    backtrack = [[0] * nvalues for _ in range(nclusters)]
    used = _fill_matrices(ordered, matrix, backtrack, nclusters, min_improvement, arith)
    return matrix[:used]


def roundbreaks(data: Sequence[Real], nclusters: int) -> list[float]:
    """Return ``nclusters - 1`` rounded breaks separating the ckmeans classes.

    Each break is the roundest number lying between the highest value of a
    class and the lowest value of the class after it.
    """
    clusters = ckmeans([float(v) for v in data], nclusters)
    breaks = []
    for low, high in zip(clusters, clusters[1:]):
        if not high:
            raise HighWindowError()
        if not low:
            raise LowWindowError()
        first, last = high[0], low[-1]
        p = 10.0 ** math.floor(1.0 - math.log10(first - last))
        breaks.append(math.floor(((first + last) / 2.0) * p) / p)
    return breaks