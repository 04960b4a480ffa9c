"""Binary trees: building, recursive and iterative traversals, copying and queries."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY_MARKER = -1

MENU = (
    "\n1.Build (preorder, -1 for empty)\t2.Insert by path\t3.Inorder\n"
    "4.Preorder\t5.Postorder\t6.Copy\n"
    "7.Level order\t8.Ancestors\t9.Height\t0.Exit"
)

_MISSING = object()


@dataclass
class TreeNode:
    """A node of a binary tree of integers."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class InsertionError(ValueError):
    """Raised when a node cannot be placed at the requested path."""


def build_from_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in preorder, ``-1`` marking an empty child."""
    items = iter(values)

    def build() -> TreeNode | None:
        value = next(items, _MISSING)
        if value is _MISSING:
            raise ValueError("preorder sequence ends before the tree is complete")
        if value == EMPTY_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    root = build()
    if next(items, _MISSING) is not _MISSING:
        raise ValueError("preorder sequence has values after the tree is complete")
    return root


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(node: TreeNode | None) -> list[int]:
    """Return the values in inorder."""
    return list(_inorder(node))


def preorder(node: TreeNode | None) -> list[int]:
    """Return the values in preorder."""
    return list(_preorder(node))


def postorder(node: TreeNode | None) -> list[int]:
    """Return the values in postorder."""
    return list(_postorder(node))


def copy_tree(node: TreeNode | None) -> TreeNode | None:
    """Return a deep copy of the tree."""
    if node is None:
        return None
    return TreeNode(node.value, copy_tree(node.left), copy_tree(node.right))


def insert_by_path(root: TreeNode | None, value: int, path: str) -> TreeNode:
    """Place ``value`` at the empty child reached by following ``path``.

    Each ``L`` in the path steps to the left child and any other character to
    the right child. An empty tree takes the value as its root whatever the
    path. Returns the root.
    """
    node = TreeNode(value)
    if root is None:
        return node

    parent: TreeNode | None = None
    current: TreeNode | None = root
    steps = 0
    for step in path:
        if current is None:
            break
        parent = current
        current = current.left if step == "L" else current.right
        steps += 1

    if current is not None or steps != len(path) or parent is None:
        raise InsertionError(f"insertion not possible at path {path!r}")
    if path[-1] == "L":
        parent.left = node
    else:
        parent.right = node
    return root


def level_order(root: TreeNode | None) -> list[int]:
    """Return the values level by level, left to right."""
    if root is None:
        return []
    result: list[int] = []
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def iterative_preorder(root: TreeNode | None) -> list[int]:
    """Return the values in preorder, walking with an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: TreeNode | None) -> list[int]:
    """Return the values in inorder, walking with an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            return result
        node = stack.pop()
        result.append(node.value)
        node = node.right


def ancestors(root: TreeNode | None, value: int) -> list[int]:
    """Return the ancestors of the first node holding ``value``, nearest first.

    The search tries left subtrees before right ones. An absent value and a
    value at the root both give an empty list.
    """
    found: list[int] = []

    def search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        if node.value == value:
            return True
        if search(node.left) or search(node.right):
            found.append(node.value)
            return True
        return False

    search(root)
    return found


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _prompt(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _prompt_int(prompt: str) -> int | None:
    while True:
        text = _prompt(prompt)
        if text is None:
            return None
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _show(values: list[int]) -> None:
    print(" ".join(str(value) for value in values))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary tree menu."""
    parser = argparse.ArgumentParser(description="Interactive binary tree.")
    parser.parse_args(argv)
    root: TreeNode | None = None

    while True:
        print(MENU)
        choice = _prompt_int("Enter your choice: ")
        if choice is None or choice == 0:
            return 0
        if choice == 1:
            text = _prompt("Enter values in preorder, -1 for an empty child: ")
            if text is None:
                return 0
            try:
                root = build_from_preorder(int(word) for word in text.split())
            except ValueError as exc:
                print(f"Cannot build tree: {exc}")
        elif choice == 2:
            value = _prompt_int("Enter element: ")
            if value is None:
                return 0
            path = "" if root is None else _prompt("Enter direction in uppercase: ")
            if path is None:
                return 0
            try:
                root = insert_by_path(root, value, path.strip())
            except InsertionError:
                print("Insertion not possible")
        elif choice == 3:
            _show(inorder(root))
        elif choice == 4:
            _show(preorder(root))
        elif choice == 5:
            _show(postorder(root))
        elif choice == 6:
            _show(inorder(copy_tree(root)))
        elif choice == 7:
            _show(level_order(root))
            _show(iterative_preorder(root))
            _show(iterative_inorder(root))
        elif choice == 8:
            value = _prompt_int("Enter node whose ancestors are to be found: ")
            if value is None:
                return 0
            _show(ancestors(root, value))
        elif choice == 9:
            print(f"Height of tree = {height(root)}")
        else:
            print("Invalid Response")