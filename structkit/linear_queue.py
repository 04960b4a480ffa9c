"""A linear array queue whose slots are not reused after removal."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10

MENU = "\n1 Add\n2 Delete\n3 Display\n4 Exit"


class QueueFullError(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class LinearQueue:
    """A FIFO queue of bounded size.

    Each slot is used once: a removed item's slot is not reclaimed, so the
    queue is full once ``capacity`` items have been added in total.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def remove(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._items[self._front]
        self._front += 1
        return item

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front:])


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


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue menu."""
    parser = argparse.ArgumentParser(description="Interactive linear queue.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    queue = LinearQueue(args.capacity)

    while True:
        print(MENU)
        choice = _prompt_int("")
        if choice is None or choice == 4:
            return 0
        if choice == 1:
            value = _prompt_int("Enter element to be added to Q\n")
            if value is None:
                return 0
            try:
                queue.add(value)
            except QueueFullError:
                print("Queue full")
            else:
                print(f"Added element: {value}")
        elif choice == 2:
            try:
                value = queue.remove()
            except QueueEmptyError:
                print("Queue empty")
            else:
                print(f"Deleted element: {value}")
        elif choice == 3:
            print(" ".join(str(item) for item in queue))