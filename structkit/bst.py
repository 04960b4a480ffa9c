"""An unbalanced binary search tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

MENU = (
    "\n1.Insert\t2.Delete\t\t3.Display\n"
    "4.Search\t5.Recursive Search\t6.Exit"
)


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Insert ``value`` as a new leaf."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value >= current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def delete(self, value: int) -> None:
        """Remove one node holding ``value``; raise ``KeyError`` if there is none.

        A node with two children takes the smallest value of its right
        subtree, and that node is removed instead.
        """
        parent: _Node | None = None
        current = self._root
        while current is not None and current.value != value:
            parent = current
            current = current.right if value > current.value else current.left
        if current is None:
            raise KeyError(value)

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = current.left if current.left is not None else current.right
        if parent is None:
            self._root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child

    def search(self, value: int) -> bool:
        """Report whether ``value`` is stored, walking down iteratively."""
        current = self._root
        while current is not None:
            if current.value == value:
                return True
            current = current.right if value > current.value else current.left
        return False

    def search_recursive(self, value: int) -> bool:
        """Report whether ``value`` is stored, searching recursively."""
        return _search_from(self._root, value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value)

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[int]:
        """Return the values in preorder."""
        return list(_preorder(self._root))

    def postorder(self) -> list[int]:
        """Return the values in postorder."""
        return list(_postorder(self._root))

    @property
    def is_empty(self) -> bool:
        return self._root is None


def _search_from(node: _Node | None, value: int) -> bool:
    if node is None:
        return False
    if node.value == value:
        return True
    return _search_from(node.right if value > node.value else node.left, value)


def _inorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


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
    """Run the interactive binary search tree menu."""
    parser = argparse.ArgumentParser(description="Interactive binary search tree.")
    parser.parse_args(argv)
    tree = BinarySearchTree()

    while True:
        print(MENU)
        choice = _prompt_int("")
        if choice is None or choice == 6:
            return 0
        if choice == 1:
            value = _prompt_int("Enter value to be inserted: ")
            if value is None:
                return 0
            tree.insert(value)
        elif choice == 2:
            value = _prompt_int("Enter value to be deleted: ")
            if value is None:
                return 0
            if tree.is_empty:
                print("Binary Search Tree Empty...")
                continue
            try:
                tree.delete(value)
            except KeyError:
                print("Element not present")
        elif choice == 3:
            print(" ".join(str(value) for value in tree.preorder()))
        elif choice == 4:
            value = _prompt_int("Enter value to be searched: ")
            if value is None:
                return 0
            if tree.is_empty:
                print("Binary Search Tree Empty...")
            elif tree.search(value):
                print("Element found")
            else:
                print("Element Not Found...")
        elif choice == 5:
            value = _prompt_int("Enter value to be searched: ")
            if value is None:
                return 0
            if tree.search_recursive(value):
                print("Recursively Found")
            else:
                print("Element Not Found Recursively")
        else:
            print("Invalid Response")