import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.binary_tree import (
    InsertionError,
    TreeNode,
    ancestors,
    build_from_preorder,
    copy_tree,
    height,
    inorder,
    insert_by_path,
    iterative_inorder,
    iterative_preorder,
    level_order,
    main,
    postorder,
    preorder,
)

trees = st.recursive(
    st.none(),
    lambda children: st.builds(TreeNode, st.integers(0, 100), children, children),
    max_leaves=30,
)


def _small_tree():
    return build_from_preorder([1, 2, -1, -1, 3, -1, -1])


def test_build_preorder_roundtrip():
    sequence = [7, 4, -1, 9, -1, -1, 5, 6, -1, -1, -1]
    root = build_from_preorder(sequence)
    assert preorder(root) == [v for v in sequence if v != -1]


def test_build_empty_tree():
    assert build_from_preorder([-1]) is None


def test_build_incomplete_sequence_raises():
    with pytest.raises(ValueError):
        build_from_preorder([1, 2, -1])


def test_build_trailing_values_raise():
    with pytest.raises(ValueError):
        build_from_preorder([1, -1, -1, 5])


def test_inorder_of_small_tree():
    assert inorder(_small_tree()) == [2, 1, 3]


def test_postorder_of_small_tree():
    assert postorder(_small_tree()) == [2, 3, 1]


def test_empty_traversals():
    assert inorder(None) == preorder(None) == postorder(None) == []
    assert level_order(None) == iterative_inorder(None) == iterative_preorder(None) == []


@given(trees)
def test_iterative_matches_recursive(root):
    assert iterative_preorder(root) == preorder(root)
    assert iterative_inorder(root) == inorder(root)


@given(trees)
def test_level_order_visits_every_node_root_first(root):
    order = level_order(root)
    assert sorted(order) == sorted(inorder(root))
    if root is not None:
        assert order[0] == root.value


@given(trees)
def test_copy_is_equal_and_independent(root):
    duplicate = copy_tree(root)
    assert duplicate == root
    if root is not None:
        assert duplicate is not root
        duplicate.value += 1
        assert duplicate.value != root.value


def test_insert_into_empty_tree_ignores_path():
    root = insert_by_path(None, 10, "LR")
    assert root == TreeNode(10)


def test_insert_by_path_places_nodes():
    root = insert_by_path(None, 10, "")
    root = insert_by_path(root, 20, "L")
    root = insert_by_path(root, 30, "R")
    root = insert_by_path(root, 40, "LR")
    assert root.left.value == 20
    assert root.right.value == 30
    assert root.left.right.value == 40


def test_insert_at_occupied_position_raises():
    root = insert_by_path(None, 10, "")
    root = insert_by_path(root, 20, "L")
    with pytest.raises(InsertionError):
        insert_by_path(root, 30, "L")


def test_insert_through_missing_node_raises():
    root = insert_by_path(None, 10, "")
    with pytest.raises(InsertionError):
        insert_by_path(root, 30, "LL")


def test_insert_empty_path_on_nonempty_tree_raises():
    root = insert_by_path(None, 10, "")
    with pytest.raises(InsertionError):
        insert_by_path(root, 30, "")


def test_ancestors_nearest_first():
    root = insert_by_path(None, 10, "")
    root = insert_by_path(root, 20, "L")
    root = insert_by_path(root, 30, "LR")
    root = insert_by_path(root, 40, "R")
    assert ancestors(root, 30) == [20, 10]
    assert ancestors(root, 40) == [10]
    assert ancestors(root, 10) == []
    assert ancestors(root, 99) == []


@pytest.mark.parametrize("depth", [1, 2, 5, 8])
def test_height_of_chain(depth):
    root = None
    for level in range(depth):
        root = insert_by_path(root, level, "L" * level)
    assert height(root) == depth
    assert len(level_order(root)) == depth


def test_height_of_empty_tree():
    assert height(None) == 0


@given(trees)
def test_height_bounded_by_node_count(root):
    count = len(inorder(root))
    assert height(root) <= count
    assert (height(root) == 0) == (root is None)


def test_main_builds_and_prints_preorder(monkeypatch, capsys):
    answers = iter(["1", "4 -1 -1", "4", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "4" in lines