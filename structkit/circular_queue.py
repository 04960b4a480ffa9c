"""A fixed-capacity circular queue and its interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

from structkit.linear_queue import QueueEmptyError, QueueFullError

DEFAULT_CAPACITY = 3

MENU = "1 Add\n2 Delete\n3 Display\n4 Exit"


class CircularQueue:
    """A FIFO queue in a ring of slots that are reused as items leave."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._front + self._count) % self.capacity] = item
        self._count += 1

    def remove(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return item

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]


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
    """Run the interactive circular queue menu."""
    parser = argparse.ArgumentParser(description="Interactive circular queue.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    queue = CircularQueue(args.capacity)

    while True:
        print(MENU)
        choice = _prompt_int("")
        if choice is None or choice == 4:
            return 0
        if choice == 1:
            value = _prompt_int("Enter element to be added to cQ\n")
            if value is None:
                return 0
            try:
                queue.add(value)
            except QueueFullError:
                print("Queue full")
            else:
                print(f"Element added: {value}")
        elif choice == 2:
            try:
                value = queue.remove()
            except QueueEmptyError:
                print("Queue empty")
            else:
                print(f"Element deleted: {value}")
        elif choice == 3:
            if queue.is_empty():
                print("Queue empty")
            else:
                for item in queue:
                    print(item)
        print()