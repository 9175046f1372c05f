import pytest

from dsakit.bst import BinarySearchTree, BSTNode, is_bst

VALUES = [15, 10, 5, 8, 25, 20, 28]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_root_is_first_inserted(tree):
    assert tree.root.value == VALUES[0]


def test_duplicates_are_ignored(tree):
    tree.insert(20)
    tree.insert(15)
    assert tree.inorder() == sorted(VALUES)


def test_contains(tree):
    assert all(value in tree for value in VALUES)
    assert 21 not in tree
    assert 0 not in tree


def test_ceil_and_floor_of_present_values(tree):
    for value in VALUES:
        assert tree.ceil(value) == value
        assert tree.floor(value) == value


@pytest.mark.parametrize("probe", range(0, 32))
def test_ceil_and_floor_match_scan(tree, probe):
    above = [value for value in VALUES if value >= probe]
    below = [value for value in VALUES if value <= probe]
    assert tree.ceil(probe) == (min(above) if above else None)
    assert tree.floor(probe) == (max(below) if below else None)


def test_ceil_and_floor_out_of_range(tree):
    assert tree.ceil(29) is None
    assert tree.floor(4) is None


def test_empty_tree():
    empty = BinarySearchTree()
    assert empty.inorder() == []
    assert empty.ceil(3) is None
    assert empty.floor(3) is None
    assert 3 not in empty
    assert empty.is_valid() is True


def test_built_tree_is_valid(tree):
    assert tree.is_valid() is True


def test_invalid_tree_detected():
    root = BSTNode(10, BSTNode(5, right=BSTNode(12)), BSTNode(15))
    assert is_bst(root) is False


def test_invalid_right_subtree_detected():
    root = BSTNode(10, BSTNode(5), BSTNode(15, left=BSTNode(8)))
    assert is_bst(root) is False


def test_hand_built_valid_tree():
    root = BSTNode(10, BSTNode(5, right=BSTNode(8)), BSTNode(15, left=BSTNode(12)))
    assert is_bst(root) is True