"""A fixed-capacity max-heap with heap sort and an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

DEFAULT_CAPACITY = 20

MENU = "\n1. Insert\n2. Sort\n3. Display\n4. Delete\n0. Exit"


class HeapFullError(Exception):
    """Raised when inserting into a heap that has reached its capacity."""


class HeapEmptyError(Exception):
    """Raised when removing from an empty heap."""


def _sift_down(keys: list[int], size: int) -> None:
    """Restore the max-heap property of ``keys[:size]`` from the root down."""
    i = 0
    while True:
        left = 2 * i + 1
        right = left + 1
        if right < size:
            if keys[i] >= keys[left] and keys[i] >= keys[right]:
                return
            child = left if keys[left] >= keys[right] else right
            keys[i], keys[child] = keys[child], keys[i]
            i = child
        elif left < size:
            if keys[left] > keys[i]:
                keys[i], keys[left] = keys[left], keys[i]
            return
        else:
            return


class MaxHeap:
    """A max-heap of integers held in an array of bounded size.

    ``sort`` rearranges the stored keys into ascending order in place, as a
    heap sort does; the keys no longer form a heap afterwards.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._keys: list[int] = []

    def insert(self, key: int) -> None:
        """Add ``key``, moving it up past every parent not greater than it."""
        if len(self._keys) >= self.capacity:
            raise HeapFullError("heap is full")
        keys = self._keys
        keys.append(key)
        i = len(keys) - 1
        while i > 0:
            parent = (i - 1) // 2
            if key < keys[parent]:
                break
            keys[i] = keys[parent]
            i = parent
        keys[i] = key

    def delete_max(self) -> int:
        """Remove and return the largest key."""
        if not self._keys:
            raise HeapEmptyError("heap is empty")
        top = self._keys[0]
        last = self._keys.pop()
        if self._keys:
            self._keys[0] = last
            _sift_down(self._keys, len(self._keys))
        return top

    def sort(self) -> list[int]:
        """Heap-sort the stored keys into ascending order and return them."""
        keys = self._keys
        for end in range(len(keys) - 1, 0, -1):
            keys[0], keys[end] = keys[end], keys[0]
            _sift_down(keys, end)
        return list(keys)

    def keys(self) -> list[int]:
        """Return the stored keys in array order."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._keys))


def _prompt_int(prompt: str) -> int | None:
    """Read an integer from standard input; ``None`` at end of input."""
    while True:
        try:
            text = input(prompt)
        except EOFError:
            return None
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _display(heap: MaxHeap) -> None:
    print("Heap is: " + " ".join(str(key) for key in heap))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive heap menu."""
    parser = argparse.ArgumentParser(description="Interactive max-heap.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    heap = MaxHeap(args.capacity)

    while True:
        print(MENU)
        choice = _prompt_int("Enter your choice: ")
        if choice is None or choice == 0:
            return 0
        if choice == 1:
            if len(heap) >= heap.capacity:
                print("Heap is Full")
            else:
                value = _prompt_int("Enter element to be inserted: ")
                if value is None:
                    return 0
                heap.insert(value)
            _display(heap)
        elif choice == 2:
            heap.sort()
            _display(heap)
        elif choice == 3:
            _display(heap)
        elif choice == 4:
            try:
                heap.delete_max()
            except HeapEmptyError:
                print("Heap is empty!")
        else:
            print("Invalid choice")