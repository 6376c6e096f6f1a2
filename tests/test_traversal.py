import pytest

from bitree.node import Node, new_node
from bitree.traversal import inorder, levelorder, postorder, preorder


def _sample():
    """98 -> (12 -> (6, 56), 402 -> (256, 512))."""
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 402)
    root.left.left = new_node(root.left, 6)
    root.left.right = new_node(root.left, 56)
    root.right.left = new_node(root.right, 256)
    root.right.right = new_node(root.right, 512)
    return root


def _lopsided():
    root = new_node(None, 5)
    root.left = new_node(root, 3)
    root.left.right = new_node(root.left, 4)
    root.left.right.left = new_node(root.left.right, 9)
    root.right = new_node(root, 8)
    return root


def _mirror(tree, parent=None):
    if tree is None:
        return None
    copy = Node(tree.value, parent)
    copy.left = _mirror(tree.right, copy)
    copy.right = _mirror(tree.left, copy)
    return copy


def _chain(count):
    root = new_node(None, 0)
    node = root
    for value in range(1, count):
        node.right = new_node(node, value)
        node = node.right
    return root


def test_preorder_example():
    assert list(preorder(_sample())) == [98, 12, 6, 56, 402, 256, 512]


def test_levelorder_example():
    assert list(levelorder(_sample())) == [98, 12, 402, 6, 56, 256, 512]


def test_inorder_of_search_tree_is_sorted():
    values = list(inorder(_sample()))
    assert values == sorted(values)
    assert len(values) == len(set(values))


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("build", [_sample, _lopsided])
def test_all_walks_visit_the_same_values(build):
    tree = build()
    expected = sorted(preorder(tree))
    for walk in (inorder, postorder, levelorder):
        assert sorted(walk(tree)) == expected


@pytest.mark.parametrize("build", [_sample, _lopsided])
def test_root_positions(build):
    tree = build()
    assert next(preorder(tree)) == tree.value
    assert next(levelorder(tree)) == tree.value
    assert list(postorder(tree))[-1] == tree.value


@pytest.mark.parametrize("build", [_sample, _lopsided])
def test_postorder_is_reversed_preorder_of_mirror(build):
    tree = build()
    assert list(postorder(tree)) == list(reversed(list(preorder(_mirror(tree)))))


@pytest.mark.parametrize("build", [_sample, _lopsided])
def test_inorder_reverses_under_mirror(build):
    tree = build()
    assert list(inorder(_mirror(tree))) == list(reversed(list(inorder(tree))))


def test_inorder_places_root_between_subtrees():
    tree = _lopsided()
    values = list(inorder(tree))
    index = values.index(tree.value)
    assert sorted(values[:index]) == sorted(preorder(tree.left))
    assert sorted(values[index + 1:]) == sorted(preorder(tree.right))


def test_single_node():
    leaf = new_node(None, 7)
    for walk in (preorder, inorder, postorder, levelorder):
        assert list(walk(leaf)) == [leaf.value]


def test_deep_chain_walks_without_recursion():
    count = 3000
    tree = _chain(count)
    assert list(preorder(tree)) == list(range(count))
    assert list(inorder(tree)) == list(range(count))
    assert list(levelorder(tree)) == list(range(count))
    assert list(postorder(tree)) == list(range(count - 1, -1, -1))