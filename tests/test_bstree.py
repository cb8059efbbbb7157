import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dvakit.bstree import BSTree

ints = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def test_empty_tree():
    tree = BSTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.depth() == 0
    assert tree.min_depth() == 0
    assert list(tree) == []


def test_insert_rejects_duplicates():
    tree = BSTree()
    assert tree.insert(4) is True
    assert tree.insert(4) is False
    assert len(tree) == 1
    assert not tree.is_empty()


def test_traversal_orders():
    tree = BSTree([5, 3, 8, 1, 4])
    assert list(tree.preorder()) == [5, 3, 1, 4, 8]
    assert list(tree.inorder()) == [1, 3, 4, 5, 8]
    assert list(tree.postorder()) == [1, 4, 3, 8, 5]


def test_print_functions_write_concatenated_decimals():
    tree = BSTree([5, 3, 8, -1])
    for method, order in (
        (tree.print_preorder, tree.preorder),
        (tree.print_inorder, tree.inorder),
        (tree.print_postorder, tree.postorder),
    ):
        out = io.StringIO()
        method(out)
        assert out.getvalue() == "".join(str(v) for v in order())


def test_find_and_contains():
    tree = BSTree([10, 5, 15, 12])
    assert tree.find(12)
    assert 5 in tree
    assert not tree.find(7)
    assert 99 not in tree
    assert "x" not in tree


def test_chain_depth_and_balance():
    tree = BSTree([1, 2, 3, 4, 5, 6, 7])
    assert tree.depth() == 7
    assert tree.min_depth() == 3
    tree.balance()
    assert tree.depth() == tree.min_depth()
    assert tree.to_sorted_list() == [1, 2, 3, 4, 5, 6, 7]


def test_remove_leaf_one_child_and_two_children():
    tree = BSTree([50, 30, 70, 20, 40, 60, 80, 35])
    assert tree.remove(20)
    assert tree.remove(40)
    assert tree.remove(50)
    assert tree.to_sorted_list() == [30, 35, 60, 70, 80]
    assert not tree.remove(999)
    assert len(tree) == 5


def test_remove_root_with_single_child():
    tree = BSTree([10, 5, 3, 7])
    assert tree.remove(10)
    assert tree.to_sorted_list() == [3, 5, 7]
    assert tree.find(7)


def test_min_value():
    tree = BSTree([9, 4, 12, 2])
    assert tree.min_value() == 2
    assert tree.to_sorted_list() == [2, 4, 9, 12]


def test_min_value_of_empty_raises():
    with pytest.raises(ValueError):
        BSTree().min_value()


def test_clear():
    tree = BSTree([3, 1, 2])
    tree.clear()
    assert tree.is_empty()
    assert len(tree) == 0


@given(ints)
def test_inorder_is_sorted_unique(items):
    tree = BSTree(items)
    assert list(tree) == sorted(set(items))
    assert len(tree) == len(set(items))


@given(ints)
def test_traversals_hold_same_items(items):
    tree = BSTree(items)
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == tree.to_sorted_list()


@given(ints)
def test_balance_reaches_min_depth(items):
    tree = BSTree(items)
    before = tree.to_sorted_list()
    tree.balance()
    assert tree.to_sorted_list() == before
    assert tree.depth() == tree.min_depth()


@given(ints, st.data())
def test_remove_keeps_other_items(items, data):
    tree = BSTree(items)
    victim = data.draw(st.sampled_from(items)) if items else 0
    tree.remove(victim)
    assert victim not in tree
    assert tree.to_sorted_list() == sorted(set(items) - {victim})


@given(ints)
def test_depth_bounds(items):
    tree = BSTree(items)
    assert tree.min_depth() <= tree.depth() <= len(tree)