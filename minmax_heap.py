from operator import lt

#------------------------------------------------------------------------------
# Implicit-tree helpers
#------------------------------------------------------------------------------
# Positions are relative to `first`: node d has children 2d+1, 2d+2 and
# grandchildren 4d+3 .. 4d+6.  The root sits on a min level and the level
# parity alternates with depth.
#------------------------------------------------------------------------------

def level(i: int) -> int:
    """Depth of relative position i, i.e. floor(log2(i + 1))."""
    return (i + 1).bit_length() - 1

def is_min_level(i: int) -> bool:
    return level(i) % 2 == 0

def reverse_compare(compare):
    """
    Swap the argument order of a comparator.  Flips every min level into a
    max level and vice versa.
    """
    def reversed_compare(a, b):
        return compare(b, a)
    return reversed_compare

def _range(h, first, last):
    if last is None:
        last = len(h)
    return first, last


#------------------------------------------------------------------------------
# Sift-down / sift-up on relative positions
#------------------------------------------------------------------------------
def _sift_down(h, first, n, d, compare):
    """
    Push the element at relative position d down until its subtree is a
    min-max heap again.  Everything else in the n-element range must already
    satisfy the invariant.
    """
    before = compare if is_min_level(d) else reverse_compare(compare)
    while True:
        c = 2 * d + 1
        if c >= n:                                  # leaf
            return

        # best among children (up to 2) and grandchildren (up to 4)
        m = c
        if c + 1 < n and before(h[first + c + 1], h[first + m]):
            m = c + 1
        grandchild = False
        for g in range(4 * d + 3, min(4 * d + 7, n)):
            if before(h[first + g], h[first + m]):
                m = g
                grandchild = True

        if not before(h[first + m], h[first + d]):
            return
        h[first + m], h[first + d] = h[first + d], h[first + m]

        # a direct child has no grandchildren of d below it
        if not grandchild:
            return

        # jumped two levels: repair against the opposite-level parent
        p = (m - 1) // 2
        if before(h[first + p], h[first + m]):
            h[first + m], h[first + p] = h[first + p], h[first + m]
        d = m

def _sift_up_grandparents(h, first, d, before):
    while d > 2:
        g = (d - 3) // 4
        if not before(h[first + d], h[first + g]):
            return
        h[first + d], h[first + g] = h[first + g], h[first + d]
        d = g

def _sift_up(h, first, d, compare):
    """
    Move the element at relative position d towards the root.  If it belongs
    on the opposite level parity it first trades places with its parent and
    then climbs that parity's grandparent chain.
    """
    if d == 0:
        return
    before = compare if is_min_level(d) else reverse_compare(compare)
    p = (d - 1) // 2
    if before(h[first + p], h[first + d]):
        h[first + d], h[first + p] = h[first + p], h[first + d]
        _sift_up_grandparents(h, first, p, reverse_compare(before))
    else:
        _sift_up_grandparents(h, first, d, before)


#------------------------------------------------------------------------------
# Public algorithms over [first, last)
#------------------------------------------------------------------------------
def is_mm_heap(h, first: int = 0, last: int = None, compare=lt) -> bool:
    """
    True iff every min-level node is <= and every max-level node is >= each
    element of its whole subtree.

    Walks the full subtree of every position, so it costs O(n log n).  Meant
    for validation and tests; the mutating algorithms never call it.
    """
    first, last = _range(h, first, last)
    n = last - first
    for d in range(n):
        before = compare if is_min_level(d) else reverse_compare(compare)
        val = h[first + d]
        # breadth-first over the subtree: each level is a contiguous span
        lo, hi = 2 * d + 1, 2 * d + 3
        while lo < n:
            for j in range(lo, min(hi, n)):
                if before(h[first + j], val):
                    return False
            lo, hi = 2 * lo + 1, 2 * hi + 1
    return True

def make_mm_heap(h, first: int = 0, last: int = None, compare=lt):
    """Rearrange [first, last) into a min-max heap in O(n)."""
    first, last = _range(h, first, last)
    n = last - first
    for d in range(n // 2, -1, -1):
        _sift_down(h, first, n, d, compare)

def push_mm_heap(h, first: int = 0, last: int = None, compare=lt):
    """
    [first, last-1) is a min-max heap and h[last-1] was just written; sift
    the new element up so that [first, last) is a heap.  O(log n).
    """
    first, last = _range(h, first, last)
    if last - first > 1:
        _sift_up(h, first, last - first - 1, compare)

def pop_mm_heap(h, first: int = 0, last: int = None, compare=lt):
    """
    Move the minimum of the heap [first, last) to last-1 and restore the
    invariant on [first, last-1).  O(log n).
    """
    first, last = _range(h, first, last)
    n = last - first
    if n <= 1:
        return
    h[first], h[last - 1] = h[last - 1], h[first]
    _sift_down(h, first, n - 1, 0, compare)

def pop_mm_heap_max(h, first: int = 0, last: int = None, compare=lt):
    """Move the maximum of the heap [first, last) to last-1."""
    first, last = _range(h, first, last)
    n = last - first
    if n <= 1:
        return
    m = max_mm_heap(h, first, last, compare) - first
    h[first + m], h[last - 1] = h[last - 1], h[first + m]
    if m < n - 1:
        _sift_down(h, first, n - 1, m, compare)

def min_mm_heap(h, first: int = 0, last: int = None, compare=lt) -> int:
    """Absolute position of the minimum of a non-empty heap."""
    first, last = _range(h, first, last)
    if last <= first:
        raise IndexError("min of an empty heap")
    return first

def max_mm_heap(h, first: int = 0, last: int = None, compare=lt) -> int:
    """Absolute position of the maximum of a non-empty heap."""
    first, last = _range(h, first, last)
    n = last - first
    if n <= 0:
        raise IndexError("max of an empty heap")
    if n <= 2:
        return first + n - 1
    return first + 2 if compare(h[first + 1], h[first + 2]) else first + 1

def update_mm_heap(h, i: int, first: int = 0, last: int = None, compare=lt):
    """
    Restore the heap [first, last) after h[i] was overwritten with an
    arbitrary value.
    """
    first, last = _range(h, first, last)
    d = i - first
    _sift_up(h, first, d, compare)
    _sift_down(h, first, last - first, d, compare)

def remove_mm_heap(h, i: int, first: int = 0, last: int = None, compare=lt):
    """
    Move h[i] to last-1 and restore the invariant on [first, last-1).
    """
    first, last = _range(h, first, last)
    if not first <= i < last:
        raise IndexError(f"position {i} outside heap [{first}, {last})")
    h[i], h[last - 1] = h[last - 1], h[i]
    if i < last - 1:
        update_mm_heap(h, i, first, last - 1, compare)


#------------------------------------------------------------------------------
# Heap view over a caller-owned buffer
#------------------------------------------------------------------------------
class MinMaxHeap:
    """
    Double-ended priority queue living in the prefix data[:size] of a
    fixed-length buffer.  The buffer is never resized: push() writes into
    the next free slot and pops leave the removed value just past the active
    prefix.
    """
    def __init__(self, data, size: int = None, compare=lt):
        self.data = data
        self.size = len(data) if size is None else size
        if not 0 <= self.size <= len(data):
            raise ValueError(f"size {self.size} outside buffer of length {len(data)}")
        self.compare = compare
        make_mm_heap(self.data, 0, self.size, compare)

    def __len__(self):
        return self.size

    def __iter__(self):
        return (self.data[i] for i in range(self.size))

    @property
    def capacity(self) -> int:
        return len(self.data)

    def is_valid(self) -> bool:
        return is_mm_heap(self.data, 0, self.size, self.compare)

    def push(self, value):
        """Insert value.  Complexity: O(log(n))"""
        if self.size >= len(self.data):
            raise IndexError("push onto a full heap")
        self.data[self.size] = value
        self.size += 1
        push_mm_heap(self.data, 0, self.size, self.compare)

    def peek_min(self):
        """Get minimum element.  Complexity: O(1)"""
        return self.data[min_mm_heap(self.data, 0, self.size, self.compare)]

    def peek_max(self):
        """Get maximum element.  Complexity: O(1)"""
        return self.data[max_mm_heap(self.data, 0, self.size, self.compare)]

    def pop_min(self):
        """Remove and return minimum element.  Complexity: O(log(n))"""
        if self.size == 0:
            raise IndexError("pop from an empty heap")
        pop_mm_heap(self.data, 0, self.size, self.compare)
        self.size -= 1
        return self.data[self.size]

    def pop_max(self):
        """Remove and return maximum element.  Complexity: O(log(n))"""
        if self.size == 0:
            raise IndexError("pop from an empty heap")
        pop_mm_heap_max(self.data, 0, self.size, self.compare)
        self.size -= 1
        return self.data[self.size]
