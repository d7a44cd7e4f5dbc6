import pytest

from dsalgo.nary_tree import NaryTree


@pytest.fixture
def example():
    tree = NaryTree(3)
    tree.insert_root("root")
    tree.insert("root", "child1")
    tree.insert("root", "child2")
    tree.insert("child1", "grandchild1")
    tree.insert("child1", "grandchild2")
    tree.insert("child2", "grandchild3")
    return tree


def test_pre_order(example):
    assert example.pre_order() == [
        "root", "child1", "grandchild1", "grandchild2", "child2", "grandchild3",
    ]


def test_post_order(example):
    assert example.post_order() == [
        "grandchild1", "grandchild2", "child1", "grandchild3", "child2", "root",
    ]


def test_height(example):
    assert example.height() == 3


def test_size(example):
    assert len(example) == 6


def test_children(example):
    assert example.children("root") == ["child1", "child2"]


def test_descendants(example):
    assert example.descendants("child1") == ["grandchild1", "grandchild2"]
    assert example.descendants("root") == example.pre_order()[1:]


def test_leaf_has_no_children(example):
    assert example.children("grandchild3") == []
    assert example.descendants("grandchild3") == []


def test_contains(example):
    assert "child2" in example
    assert "missing" not in example
    assert 5 not in example


def test_empty_tree():
    tree = NaryTree(2)
    assert tree.pre_order() == []
    assert tree.post_order() == []
    assert tree.height() == 0
    assert len(tree) == 0


def test_duplicate_child_rejected(example):
    with pytest.raises(ValueError):
        example.insert("root", "grandchild1")
    assert len(example) == 6


def test_duplicate_root_rejected(example):
    with pytest.raises(ValueError):
        example.insert_root("child1")


def test_missing_parent(example):
    with pytest.raises(KeyError):
        example.insert("nobody", "new")
    assert "new" not in example


def test_max_children_enforced(example):
    example.insert("root", "child3")
    with pytest.raises(ValueError):
        example.insert("root", "child4")
    assert example.children("root") == ["child1", "child2", "child3"]


def test_unknown_node_queries(example):
    with pytest.raises(KeyError):
        example.children("missing")
    with pytest.raises(KeyError):
        example.descendants("missing")


def test_insert_root_adopts_old_root():
    tree = NaryTree(2)
    tree.insert_root("a")
    tree.insert_root("b")
    assert tree.pre_order() == ["b", "a"]
    assert tree.children("b") == ["a"]
    assert tree.height() == len(tree)


def test_insert_root_without_child_room():
    tree = NaryTree(0)
    tree.insert_root("a")
    with pytest.raises(ValueError):
        tree.insert_root("b")
    assert tree.pre_order() == ["a"]


def test_long_chain_of_roots():
    tree = NaryTree(1)
    names = [f"n{i}" for i in range(3000)]
    for name in names:
        tree.insert_root(name)
    assert len(tree) == len(names)
    assert tree.height() == len(names)
    assert tree.pre_order() == names[::-1]
    assert tree.post_order() == names