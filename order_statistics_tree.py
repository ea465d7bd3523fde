import logging
from bisect import bisect_left
from operator import lt

import numpy as np

from minmax_heap import (is_mm_heap, make_mm_heap, push_mm_heap, remove_mm_heap,
                         update_mm_heap, min_mm_heap, max_mm_heap)

logger = logging.getLogger(__name__)

#------------------------------------------------------------------------------
# Selection primitive
#------------------------------------------------------------------------------
def _median_of_three(a, b, c, compare):
    if compare(a, b):
        if compare(b, c):
            return b
        return c if compare(a, c) else a
    if compare(a, c):
        return a
    return c if compare(b, c) else b

def nth_element(h, nth: int, first: int = 0, last: int = None, compare=lt):
    """
    Rearrange [first, last) so that h[nth] holds the element that sorted
    order would put there.  Elements before nth are not after it and
    elements past nth are not before it; nothing else is ordered.

    Iterative quickselect with a three-way split, so runs of equal keys
    finish in one pass.  Expected O(n).
    """
    if last is None:
        last = len(h)
    if not first <= nth < last:
        raise IndexError(f"nth={nth} outside [{first}, {last})")

    lo, hi = first, last
    while hi - lo > 1:
        pivot = _median_of_three(h[lo], h[lo + (hi - lo) // 2], h[hi - 1], compare)

        # [lo, lt_end) < pivot, [lt_end, i) == pivot, [gt_start, hi) > pivot
        lt_end, i, gt_start = lo, lo, hi
        while i < gt_start:
            if compare(h[i], pivot):
                h[i], h[lt_end] = h[lt_end], h[i]
                lt_end += 1
                i += 1
            elif compare(pivot, h[i]):
                gt_start -= 1
                h[i], h[gt_start] = h[gt_start], h[i]
            else:
                i += 1

        if nth < lt_end:
            hi = lt_end
        elif nth >= gt_start:
            lo = gt_start
        else:
            return


#------------------------------------------------------------------------------
# Rank helpers
#------------------------------------------------------------------------------
def _check_ranks(ranks, n: int):
    """Return ranks as a list of ints, or raise if not strictly ascending in [0, n)."""
    out = []
    for k in ranks:
        k = int(k)
        if not 0 <= k < n:
            raise ValueError(f"rank {k} outside [0, {n})")
        if out and k <= out[-1]:
            raise ValueError(f"ranks must be strictly ascending, got {k} after {out[-1]}")
        out.append(k)
    return out

def quantile_ranks(n: int, quantiles):
    """
    Map fractions in [0, 1] to rank offsets floor(q * n), clipped to n - 1.
    Duplicates collapse, so the result is always strictly ascending.
    """
    q = np.atleast_1d(np.asarray(quantiles, dtype=float))
    if q.size == 0:
        return []
    if np.any((q < 0) | (q > 1)):
        raise ValueError(f"quantiles must lie in [0, 1], got {q.tolist()}")
    if n <= 0:
        raise ValueError("an empty sequence has no order statistics")
    ranks = np.minimum(np.floor(q * n).astype(np.int64), n - 1)
    return [int(k) for k in np.unique(ranks)]


#------------------------------------------------------------------------------
# Construction and validation over [first, last)
#------------------------------------------------------------------------------
def make_order_statistics_tree(h, ranks, first: int = 0, last: int = None, compare=lt):
    """
    Partition [first, last) around the rank offsets and heapify every
    segment in between.

    Afterwards h[first + k] is the k-th smallest element for every k in
    ranks, and each of the len(ranks) + 1 segments is an independent
    min-max heap bounded by its neighbouring rank elements.
    """
    if last is None:
        last = len(h)
    ranks = _check_ranks(ranks, last - first)

    prev = first
    for k in ranks:
        pos = first + k
        # everything below prev is already placed, only the tail needs selecting
        nth_element(h, pos, prev, last, compare)
        make_mm_heap(h, prev, pos, compare)
        prev = pos + 1
    make_mm_heap(h, prev, last, compare)

    logger.debug("order-statistics tree over %d elements, %d ranks", last - first, len(ranks))

def is_order_statistics_tree(h, ranks, first: int = 0, last: int = None, compare=lt) -> bool:
    """
    True iff every segment is a min-max heap and lies between its bounding
    rank elements.  O(n log n); for validation and tests.
    """
    if last is None:
        last = len(h)
    prev, lower = first, None
    for k in list(ranks) + [None]:
        hi = last if k is None else first + k
        upper = None if k is None else h[hi]
        if lower is not None and upper is not None and compare(upper, lower):
            return False
        for j in range(prev, hi):
            if lower is not None and compare(h[j], lower):
                return False
            if upper is not None and compare(upper, h[j]):
                return False
        if not is_mm_heap(h, prev, hi, compare):
            return False
        prev, lower = hi + 1, upper
    return True


#------------------------------------------------------------------------------
# OrderStatisticsTree
#------------------------------------------------------------------------------
class OrderStatisticsTree:
    """
    Fixed rank positions over the prefix data[:size] of a caller-owned
    buffer.

    • data[ranks[i]] is always the ranks[i]-th smallest active element
    • segment i (between rank i-1 and rank i) is a min-max heap
    • push/remove keep both properties, moving every displaced element one
      segment over instead of rebuilding

    The buffer is never resized: push() fills the first free slot and
    remove() parks the removed element just past the active prefix.
    """
    def __init__(self, data, ranks, size: int = None, compare=lt):
        self.data = data
        self.size = len(data) if size is None else size
        if not 0 <= self.size <= len(data):
            raise ValueError(f"size {self.size} outside buffer of length {len(data)}")
        self.compare = compare
        self.ranks = _check_ranks(ranks, self.size)
        make_order_statistics_tree(self.data, self.ranks, 0, self.size, compare)

    def __len__(self):
        return self.size

    def __iter__(self):
        return (self.data[i] for i in range(self.size))

    def __getitem__(self, i: int):
        return self.order_statistic(i)

    @property
    def capacity(self) -> int:
        return len(self.data)

    def is_valid(self) -> bool:
        return is_order_statistics_tree(self.data, self.ranks, 0, self.size, self.compare)

    # ------------------------------------------------------------
    # queries
    # ------------------------------------------------------------
    def order_statistic(self, i: int):
        """Value held by the i-th rank slot.  O(1)."""
        return self.data[self.ranks[i]]

    def at_most(self, i: int):
        """
        Every element whose rank is <= ranks[i], the rank element included.
        Heap order inside each segment, not sorted order.
        """
        k = self.ranks[i]
        return (self.data[j] for j in range(k + 1))

    def segment(self, i: int):
        """Half-open bounds (lo, hi) of segment i, 0 <= i <= len(ranks)."""
        m = len(self.ranks)
        if not 0 <= i <= m:
            raise IndexError(f"segment {i} outside [0, {m}]")
        lo = 0 if i == 0 else self.ranks[i - 1] + 1
        hi = self.size if i == m else self.ranks[i]
        return lo, hi

    def segment_min(self, i: int):
        lo, hi = self.segment(i)
        return self.data[min_mm_heap(self.data, lo, hi, self.compare)]

    def segment_max(self, i: int):
        lo, hi = self.segment(i)
        return self.data[max_mm_heap(self.data, lo, hi, self.compare)]

    def _find_segment(self, value) -> int:
        """Index of the first rank element strictly after value (len(ranks) if none)."""
        lo, hi = 0, len(self.ranks)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.compare(value, self.data[self.ranks[mid]]):
                hi = mid
            else:
                lo = mid + 1
        return lo

    # ------------------------------------------------------------
    # maintenance
    # ------------------------------------------------------------
    def push(self, value):
        """
        Insert value.  Every rank at or after value's segment shifts down by
        one element: the segment's maximum (or the carried value) takes the
        rank slot and the old rank element is carried into the next segment.
        The last segment absorbs the final carry in the free slot.
        O(len(ranks) · log n).
        """
        if self.size >= len(self.data):
            raise IndexError("push onto a full tree")
        h, compare = self.data, self.compare
        tail = self.size
        h[tail] = value

        j = self._find_segment(value)
        for s in range(j, len(self.ranks)):
            lo, hi = self.segment(s)
            if lo < hi:
                mx = max_mm_heap(h, lo, hi, compare)
                if compare(h[tail], h[mx]):
                    h[tail], h[mx] = h[mx], h[tail]
                    update_mm_heap(h, mx, lo, hi, compare)
            k = self.ranks[s]
            h[tail], h[k] = h[k], h[tail]

        self.size += 1
        lo, hi = self.segment(len(self.ranks))
        push_mm_heap(h, lo, hi, compare)
        logger.debug("push into segment %d shifted %d ranks", j, len(self.ranks) - j)

    def remove(self, pos: int):
        """
        Remove and return the element at position pos (inside a segment or
        on a rank slot).  Each later rank takes the minimum of the segment
        after it; the vacated slot travels to the end of the active prefix.
        O(len(ranks) · log n).
        """
        if not 0 <= pos < self.size:
            raise IndexError(f"position {pos} outside [0, {self.size})")
        m = len(self.ranks)
        if m and self.ranks[-1] >= self.size - 1:
            raise IndexError(f"removing would leave no element for rank {self.ranks[-1]}")
        h, compare = self.data, self.compare

        s = bisect_left(self.ranks, pos)
        start, on_rank, hole = s, s < m and self.ranks[s] == pos, pos
        while True:
            if not on_rank:
                lo, hi = self.segment(s)
                if s == m:
                    remove_mm_heap(h, hole, lo, hi, compare)
                    break
                # the rank element becomes the largest member of segment s
                k = self.ranks[s]
                h[hole], h[k] = h[k], h[hole]
                update_mm_heap(h, hole, lo, hi, compare)
                hole = k
            # next slot is either the next rank or the minimum of segment s+1
            nxt = hole + 1
            h[hole], h[nxt] = h[nxt], h[hole]
            hole = nxt
            s += 1
            on_rank = s < m and self.ranks[s] == nxt

        self.size -= 1
        logger.debug("remove at %d shifted %d ranks", pos, m - start)
        return h[self.size]
