import random

import pytest

from dsalgo.threaded_trees import DoubleThreadedTree, ThreadedTree

EXAMPLE = [5, 10, 15, 30, 20, 0, 100]


def build(cls, values):
    tree = cls()
    for value in values:
        tree.insert(value)
    return tree


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
def test_empty_tree_yields_nothing(cls):
    assert list(cls()) == []


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
def test_example_in_order(cls):
    assert list(build(cls, EXAMPLE)) == sorted(EXAMPLE)


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
def test_single_value(cls):
    assert list(build(cls, [42])) == [42]


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
def test_duplicates_are_kept(cls):
    values = [3, 1, 3, 2, 1, 3]
    assert list(build(cls, values)) == sorted(values)


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
@pytest.mark.parametrize("seed", range(5))
def test_random_values_come_out_sorted(cls, seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(60)]
    assert list(build(cls, values)) == sorted(values)


@pytest.mark.parametrize("cls", [ThreadedTree, DoubleThreadedTree])
def test_descending_and_ascending_inserts(cls):
    values = list(range(20, 0, -1)) + list(range(30, 40))
    assert list(build(cls, values)) == sorted(values)


def test_double_threaded_reverse_example():
    tree = DoubleThreadedTree()
    for value in EXAMPLE:
        tree.insert(value)
    assert list(reversed(tree)) == sorted(EXAMPLE, reverse=True)


def test_double_threaded_reverse_empty():
    assert list(reversed(DoubleThreadedTree())) == []


@pytest.mark.parametrize("seed", range(5))
def test_double_threaded_reverse_matches_forward(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 30) for _ in range(40)]
    tree = DoubleThreadedTree()
    for value in values:
        tree.insert(value)
    assert list(reversed(tree)) == list(tree)[::-1]
    assert list(tree) == sorted(values)


def test_iteration_can_repeat():
    tree = ThreadedTree()
    for value in EXAMPLE:
        tree.insert(value)
    first = list(tree)
    assert first == sorted(EXAMPLE)
    assert list(tree) == first