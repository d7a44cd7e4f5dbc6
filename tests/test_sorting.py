import random

import pytest

from dsalgo.sorting import counting_sort, digit_at, radix_sort


def test_counting_sort_example():
    data = [4, 2, 2, 8, 3, 3, 1]
    assert counting_sort(data, 8) == sorted(data)


def test_counting_sort_leaves_input_alone():
    data = [3, 1, 2]
    counting_sort(data, 3)
    assert data == [3, 1, 2]


def test_counting_sort_random():
    rng = random.Random(5)
    data = [rng.randint(0, 50) for _ in range(300)]
    assert counting_sort(data, 50) == sorted(data)


def test_counting_sort_empty():
    assert counting_sort([], 5) == []


@pytest.mark.parametrize("bad", [[-1], [9]])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort(bad, 8)


def test_digit_at():
    assert digit_at(802, 0) == 2
    assert digit_at(802, 1) == 0
    assert digit_at(802, 2) == 8
    assert digit_at(802, 3) == 0


def test_radix_sort_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_random():
    rng = random.Random(11)
    data = [rng.randint(0, 100_000) for _ in range(500)]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_all_zero_and_empty():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]
    assert radix_sort([]) == []


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])