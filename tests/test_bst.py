import random

import pytest

from dsakit.bst import BinarySearchTree

PREORDER = [30, 20, 10, 15, 25, 40, 50, 45]


def _is_bst(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.data <= low:
        return False
    if high is not None and node.data >= high:
        return False
    return _is_bst(node.left, low, node.data) and _is_bst(node.right, node.data, high)


def test_inorder_is_sorted_and_deduplicated():
    values = [30, 20, 10, 50, 40, 60, 20, 50]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(set(values))
    assert _is_bst(tree.root)


def test_insert_sequence_keeps_preorder():
    tree = BinarySearchTree([30, 20, 10, 50, 40, 60])
    assert tree.preorder() == [30, 20, 10, 50, 40, 60]


def test_contains():
    tree = BinarySearchTree([30, 20, 10, 50, 40, 60])
    assert 40 in tree
    assert 10 in tree
    assert 35 not in tree
    assert 1 not in BinarySearchTree()


def test_height_of_ascending_insertions_is_a_chain():
    values = [1, 2, 3, 4, 5]
    tree = BinarySearchTree(values)
    assert tree.height() == len(values)
    assert BinarySearchTree().height() == 0


def test_delete_inner_node():
    values = [30, 20, 10, 50, 40, 60]
    tree = BinarySearchTree(values)
    tree.delete(50)
    assert tree.inorder() == sorted(v for v in values if v != 50)
    assert 50 not in tree
    assert _is_bst(tree.root)


def test_delete_root_and_leaf():
    values = [30, 20, 10, 50, 40, 60]
    tree = BinarySearchTree(values)
    tree.delete(30)
    tree.delete(10)
    assert tree.inorder() == [20, 40, 50, 60]
    assert _is_bst(tree.root)


def test_delete_missing_key_changes_nothing():
    values = [30, 20, 10, 50]
    tree = BinarySearchTree(values)
    tree.delete(99)
    assert tree.preorder() == values


def test_delete_everything_empties_tree():
    values = [30, 20, 10, 50, 40, 60]
    tree = BinarySearchTree(values)
    for value in values:
        tree.delete(value)
    assert tree.root is None
    assert tree.inorder() == []


def test_random_deletions_keep_order():
    rng = random.Random(7)
    values = rng.sample(range(200), 60)
    tree = BinarySearchTree(values)
    remaining = set(values)
    for value in rng.sample(values, 30):
        tree.delete(value)
        remaining.discard(value)
        assert _is_bst(tree.root)
    assert tree.inorder() == sorted(remaining)


def test_from_preorder_round_trip():
    tree = BinarySearchTree.from_preorder(PREORDER)
    assert tree.preorder() == PREORDER
    assert tree.inorder() == sorted(PREORDER)
    assert _is_bst(tree.root)


def test_from_postorder_round_trip():
    original = BinarySearchTree(PREORDER)
    post = original.postorder()
    tree = BinarySearchTree.from_postorder(post)
    assert tree.postorder() == post
    assert tree.preorder() == original.preorder()


def test_from_preorder_matches_insertion():
    rng = random.Random(3)
    values = rng.sample(range(500), 40)
    built = BinarySearchTree(values)
    assert BinarySearchTree.from_preorder(built.preorder()).postorder() == built.postorder()
    assert BinarySearchTree.from_postorder(built.postorder()).preorder() == built.preorder()


def test_from_traversals_empty():
    assert BinarySearchTree.from_preorder([]).root is None
    assert BinarySearchTree.from_postorder([]).root is None


@pytest.mark.parametrize("builder", [BinarySearchTree.from_preorder, BinarySearchTree.from_postorder])
def test_from_traversals_reject_duplicates(builder):
    with pytest.raises(ValueError):
        builder([30, 20, 20])