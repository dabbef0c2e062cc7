# Binary heap with a position index, after Sedgewick and Wayne's
# IndexMinPQ.java/IndexMaxPQ.java: http://algs4.cs.princeton.edu/24pq/
# Slots are keyed by value instead of by an external integer handle, so
# duplicate values map to a set of slots.

import enum
import logging

import numpy as np


class HeapError(Exception):
    pass


class HeapProperty(enum.Enum):
    MIN = "MIN"
    MAX = "MAX"

    def ordered(self, parent, child):
        if self is HeapProperty.MIN:
            return parent <= child
        return parent >= child

    def precedes(self, a, b):
        if self is HeapProperty.MIN:
            return a < b
        return a > b


class SortOrder(enum.Enum):
    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"

    @property
    def heap_property(self):
        if self is SortOrder.ASCENDING:
            return HeapProperty.MIN
        return HeapProperty.MAX


def _coerce(kind, value):
    if isinstance(value, kind):
        return value
    try:
        return kind(str(value).upper())
    except ValueError:
        raise HeapError("unknown {}: {!r}".format(kind.__name__, value))


def _as_sequence(values):
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise HeapError("expected a 1-D array, got shape {}".format(values.shape))
        return values.tolist()
    return list(values)


class IndexedHeap:
    def __init__(self, property=HeapProperty.MIN):
        self._property = _coerce(HeapProperty, property)
        self.elements = []
        self.positions = {}

    @classmethod
    def from_array(cls, values, property=HeapProperty.MIN):
        """
        Build a heap from an arbitrary sequence in O(n)
        :param values: Any finite iterable or 1-D numpy array
        :param property: HeapProperty of the new heap
        :return: A valid IndexedHeap holding every value
        """
        heap = cls(property)
        heap.elements = _as_sequence(values)

        # Walking backwards means both subtrees of k are heaps when k sinks
        for k in reversed(range(len(heap.elements))):
            heap._register(k)
            heap._sink(k)

        logging.debug("Heapified {} elements into a {} heap".format(
            len(heap.elements), heap._property.value))
        return heap

    @property
    def property(self):
        return self._property

    # Storage primitives. Nothing else writes to self.elements.

    def _register(self, k):
        self.positions.setdefault(self.elements[k], set()).add(k)

    def _append(self, value):
        # Index first so an unhashable value never reaches the storage
        self.positions.setdefault(value, set()).add(len(self.elements))
        self.elements.append(value)

    def _pop_last(self):
        k = len(self.elements) - 1
        value = self.elements.pop()
        slots = self.positions[value]
        slots.discard(k)
        if not slots:
            del self.positions[value]
        return value

    def _exchange(self, i, j):
        if i == j:
            return
        a = self.elements[i]
        b = self.elements[j]
        self.elements[i] = b
        self.elements[j] = a

        # a and b may share one slot set when they are equal
        self.positions[a].discard(i)
        self.positions[b].discard(j)
        self.positions[a].add(j)
        self.positions[b].add(i)

    # Sift primitives

    def _less(self, i, j):
        # Slot i strictly belongs above slot j
        return self._property.precedes(self.elements[i], self.elements[j])

    def _swim(self, k):
        while k > 0:
            parent = (k - 1) // 2
            if not self._less(k, parent):
                break
            self._exchange(k, parent)
            k = parent
        return k

    def _sink(self, k):
        n = len(self.elements)
        while 2 * k + 1 < n:
            j = 2 * k + 1
            if j + 1 < n and self._less(j + 1, j):
                j += 1
            if not self._less(j, k):
                break
            self._exchange(k, j)
            k = j
        return k

    # Mutations

    def insert(self, value):
        self._append(value)
        self._swim(len(self.elements) - 1)

    def poll(self):
        """
        Remove and return the root, or None if the heap is empty
        """
        if not self.elements:
            return None

        self._exchange(0, len(self.elements) - 1)
        root = self._pop_last()
        if self.elements:
            self._sink(0)
        return root

    def remove(self, value):
        """
        Remove one occurrence of value
        :param value: The value to remove
        :return: True if an occurrence was found and removed
        """
        if not self.contains(value):
            logging.debug("Value {!r} not in heap, nothing removed".format(value))
            return False

        k = next(iter(self.positions[value]))
        self._exchange(k, len(self.elements) - 1)
        self._pop_last()

        # The old last element now sits at k and may belong above or below it
        if k < len(self.elements):
            self._sink(self._swim(k))
        return True

    # Queries

    def peek(self):
        if not self.elements:
            return None
        return self.elements[0]

    def size(self):
        return len(self.elements)

    def is_empty(self):
        return self.size() == 0

    def contains(self, value):
        try:
            return value in self.positions
        except TypeError:
            return False

    def count(self, value):
        if not self.contains(value):
            return 0
        return len(self.positions[value])

    def is_valid_heap(self, index=0):
        """
        Check the heap order of the subtree rooted at index
        :param index: Root of the subtree to check, defaults to the heap root
        :return: True if every parent is ordered against its children
        """
        if index < 0:
            raise HeapError("negative start index {}".format(index))
        n = self.size()
        if index >= n:
            return True

        for child in (2 * index + 1, 2 * index + 2):
            if child < n and not self._property.ordered(self.elements[index],
                                                        self.elements[child]):
                return False

        return self.is_valid_heap(2 * index + 1) and self.is_valid_heap(2 * index + 2)

    def is_consistent(self):
        expected = {}
        for k, value in enumerate(self.elements):
            expected.setdefault(value, set()).add(k)
        return expected == self.positions

    def to_list(self):
        return list(self.elements)

    def dump(self):
        logging.debug("{} heap: {}".format(self._property.value, self.elements))

    def copy(self):
        other = type(self)(self._property)
        other.elements = list(self.elements)
        other.positions = {value: set(slots) for value, slots in self.positions.items()}
        return other

    __copy__ = copy

    def __len__(self):
        return self.size()

    def __bool__(self):
        return not self.is_empty()

    def __contains__(self, value):
        return self.contains(value)

    def __repr__(self):
        return "IndexedHeap({}, {!r})".format(self._property.value, self.elements)

    @staticmethod
    def sort(values, order=SortOrder.ASCENDING):
        """
        Heap sort in O(n log n). The input is not modified.
        :param values: Any finite iterable or 1-D numpy array
        :param order: SortOrder.ASCENDING or SortOrder.DESCENDING
        :return: A new list, or a numpy array of the same dtype for array input
        """
        order = _coerce(SortOrder, order)
        is_array = isinstance(values, np.ndarray)

        items = _as_sequence(values)
        if len(items) <= 1:
            return values.copy() if is_array else items

        logging.debug("Sorting {} elements {}".format(len(items), order.value.lower()))
        heap = IndexedHeap.from_array(items, order.heap_property)
        result = []
        while not heap.is_empty():
            result.append(heap.poll())

        if is_array:
            return np.array(result, dtype=values.dtype)
        return result


def heapsort(values, order=SortOrder.ASCENDING):
    return IndexedHeap.sort(values, order)
