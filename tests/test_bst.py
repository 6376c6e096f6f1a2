import pytest

from bitree.bst import array_to_bst, bst_insert, is_bst
from bitree.metrics import size
from bitree.node import new_node
from bitree.traversal import inorder

SEQUENCE = [98, 402, 12, 46, 128, 256, 512, 1]


def _sample_tree():
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 128)
    root.left.right = new_node(root.left, 54)
    root.right.right = new_node(root, 402)
    root.left.left = new_node(root.left, 10)
    return root


def test_is_bst_on_sample():
    root = _sample_tree()
    assert is_bst(root) is True
    assert is_bst(root.left) is True


def test_is_bst_detects_violation():
    root = _sample_tree()
    root.right.left = new_node(root.right, 97)
    assert is_bst(root) is False


def test_is_bst_none_is_false():
    assert is_bst(None) is False


def test_is_bst_rejects_int_bounds():
    assert is_bst(new_node(None, 2147483647)) is False
    assert is_bst(new_node(None, -2147483648)) is False
    assert is_bst(new_node(None, 0)) is True


def test_is_bst_rejects_equal_values():
    root = new_node(None, 5)
    root.left = new_node(root, 5)
    assert is_bst(root) is False


def test_bst_insert_sequence():
    root = None
    for value in SEQUENCE:
        node = bst_insert(root, value)
        assert node.value == value
        if root is None:
            root = node
    assert root.value == SEQUENCE[0]
    assert list(inorder(root)) == sorted(SEQUENCE)
    assert is_bst(root)


def test_bst_insert_links_parent():
    root = bst_insert(None, 98)
    node = bst_insert(root, 12)
    assert node.parent is root
    assert root.left is node
    node = bst_insert(root, 402)
    assert root.right is node


def test_bst_insert_duplicate_raises():
    root = None
    for value in SEQUENCE:
        node = bst_insert(root, value)
        root = root or node
    with pytest.raises(ValueError):
        bst_insert(root, 128)
    assert size(root) == len(SEQUENCE)


def test_array_to_bst_skips_duplicates():
    values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95, 47, 68]
    root = array_to_bst(values)
    assert root.value == values[0]
    assert list(inorder(root)) == sorted(set(values))
    assert is_bst(root)


def test_array_to_bst_empty():
    assert array_to_bst([]) is None


def test_array_to_bst_accepts_iterators():
    root = array_to_bst(iter(SEQUENCE))
    assert list(inorder(root)) == sorted(SEQUENCE)