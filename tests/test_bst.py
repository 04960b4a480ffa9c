import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.bst import BinarySearchTree, main

value_lists = st.lists(st.integers(-50, 50), max_size=40)


def _tree(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


@given(value_lists)
def test_inorder_is_sorted(values):
    assert _tree(values).inorder() == sorted(values)


@given(value_lists.filter(bool))
def test_preorder_starts_and_postorder_ends_with_first_inserted(values):
    tree = _tree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == sorted(values)


@given(value_lists, st.integers(-60, 60))
def test_searches_agree_with_membership(values, probe):
    tree = _tree(values)
    expected = probe in values
    assert tree.search(probe) is expected
    assert tree.search_recursive(probe) is expected
    assert (probe in tree) is expected


@given(st.data())
def test_delete_removes_one_occurrence(data):
    values = data.draw(value_lists.filter(bool))
    target = data.draw(st.sampled_from(values))
    tree = _tree(values)
    tree.delete(target)
    expected = sorted(values)
    expected.remove(target)
    assert tree.inorder() == expected
    assert sorted(tree.preorder()) == expected


@given(value_lists)
def test_delete_everything_empties_tree(values):
    tree = _tree(values)
    for value in values:
        tree.delete(value)
    assert tree.inorder() == []
    assert tree.is_empty


def test_delete_missing_raises():
    tree = _tree([5, 3, 8])
    with pytest.raises(KeyError):
        tree.delete(4)
    assert tree.inorder() == [3, 5, 8]


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_delete_root_with_two_children_uses_right_minimum():
    tree = _tree([5, 3, 8, 7, 9])
    tree.delete(5)
    assert tree.preorder() == [7, 3, 8, 9]


def test_delete_root_leaf():
    tree = _tree([5])
    tree.delete(5)
    assert tree.preorder() == []
    assert 5 not in tree


def test_duplicates_are_kept():
    tree = _tree([4, 4, 4])
    tree.delete(4)
    assert tree.inorder() == [4, 4]


def test_main_insert_and_display(monkeypatch, capsys):
    answers = iter(["1", "5", "1", "3", "3", "4", "9", "6"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "5 3" in lines
    assert "Element Not Found..." in lines