import pytest

from dsakit.array_adt import ArrayADT, ArrayFullError, SortOrder

ASC = [2, 4, 6, 8, 10]
DESC = [10, 8, 6, 4, 2]
UNSORTED = [7, 3, 9, 1, 5]


def test_init_rejects_more_values_than_size():
    with pytest.raises(ValueError):
        ArrayADT(2, [1, 2, 3])


def test_append_until_full():
    arr = ArrayADT(3, [1, 2])
    arr.append(3)
    assert list(arr) == [1, 2, 3]
    with pytest.raises(ArrayFullError):
        arr.append(4)


def test_insert_places_value():
    arr = ArrayADT(10, ASC)
    arr.insert(2, 99)
    assert arr[2] == 99
    assert len(arr) == len(ASC) + 1
    assert [v for v in arr if v != 99] == ASC


def test_insert_errors():
    arr = ArrayADT(len(ASC), ASC)
    with pytest.raises(IndexError):
        arr.insert(-1, 0)
    with pytest.raises(IndexError):
        arr.insert(len(ASC) + 1, 0)
    with pytest.raises(ArrayFullError):
        arr.insert(0, 0)


@pytest.mark.parametrize("value", [1, 5, 11, 6])
def test_insert_sorted_ascending(value):
    arr = ArrayADT(10, ASC)
    position = arr.insert_sorted(value)
    assert list(arr) == sorted(ASC + [value])
    assert arr[position] == value


@pytest.mark.parametrize("value", [1, 5, 11, 6])
def test_insert_sorted_descending(value):
    arr = ArrayADT(10, DESC)
    position = arr.insert_sorted(value)
    assert list(arr) == sorted(DESC + [value], reverse=True)
    assert arr[position] == value


def test_insert_sorted_unsorted_raises():
    with pytest.raises(ValueError):
        ArrayADT(10, UNSORTED).insert_sorted(4)


def test_delete_returns_value():
    arr = ArrayADT(10, UNSORTED)
    assert arr.delete(1) == UNSORTED[1]
    assert list(arr) == UNSORTED[:1] + UNSORTED[2:]
    with pytest.raises(IndexError):
        arr.delete(len(arr))


@pytest.mark.parametrize(
    "values, order",
    [
        (ASC, SortOrder.ASCENDING),
        ([1, 2, 2, 3], SortOrder.ASCENDING),
        (DESC, SortOrder.DESCENDING),
        (UNSORTED, SortOrder.UNSORTED),
        ([], SortOrder.ASCENDING),
    ],
)
def test_sort_order(values, order):
    assert ArrayADT(10, values).sort_order() is order


def test_linear_search():
    arr = ArrayADT(10, UNSORTED)
    assert arr.linear_search(9) == UNSORTED.index(9)
    assert arr.linear_search(100) == -1


def test_search_transpose():
    arr = ArrayADT(10, UNSORTED)
    index = arr.search_transpose(9)
    assert index == UNSORTED.index(9) - 1
    assert arr[index] == 9
    assert arr[index + 1] == UNSORTED[index]
    assert arr.search_transpose(100) == -1


def test_search_move_front():
    arr = ArrayADT(10, UNSORTED)
    assert arr.search_move_front(5) == 0
    assert arr[0] == 5
    assert sorted(arr) == sorted(UNSORTED)
    assert arr.search_move_front(100) == -1


@pytest.mark.parametrize("values", [ASC, DESC])
def test_binary_searches_find_every_key(values):
    arr = ArrayADT(10, values)
    for key in values:
        assert arr[arr.binary_search(key)] == key
        assert arr[arr.binary_search_recursive(key)] == key
        assert arr[arr.search(key)] == key
    assert arr.binary_search(3) == -1
    assert arr.binary_search_recursive(3) == -1


def test_binary_search_unsorted_raises():
    arr = ArrayADT(10, UNSORTED)
    with pytest.raises(ValueError):
        arr.binary_search(3)
    assert arr.search(3) == UNSORTED.index(3)


def test_aggregates():
    arr = ArrayADT(10, UNSORTED)
    assert arr.max() == max(UNSORTED)
    assert arr.min() == min(UNSORTED)
    assert arr.sum() == sum(UNSORTED)
    assert arr.sum_recursive() == sum(UNSORTED)
    assert arr.average() == pytest.approx(sum(UNSORTED) / len(UNSORTED))


def test_aggregates_on_empty_array():
    arr = ArrayADT(5)
    with pytest.raises(ValueError):
        arr.max()
    with pytest.raises(ValueError):
        arr.average()
    assert arr.sum_recursive() == 0


def test_reverse():
    arr = ArrayADT(10, UNSORTED)
    arr.reverse()
    assert list(arr) == UNSORTED[::-1]


def test_shifts_and_rotations():
    arr = ArrayADT(10, UNSORTED)
    arr.left_shift()
    assert list(arr) == UNSORTED[1:] + [0]
    arr = ArrayADT(10, UNSORTED)
    arr.right_shift()
    assert list(arr) == [0] + UNSORTED[:-1]
    arr = ArrayADT(10, UNSORTED)
    arr.left_rotate()
    assert list(arr) == UNSORTED[1:] + UNSORTED[:1]
    arr.right_rotate()
    assert list(arr) == UNSORTED


def test_negatives_left():
    values = [-6, 3, -8, 10, 5, -7, -9, 12, -4, 2]
    arr = ArrayADT(10, values)
    arr.negatives_left()
    result = list(arr)
    negatives = sum(1 for v in values if v < 0)
    assert all(v < 0 for v in result[:negatives])
    assert all(v >= 0 for v in result[negatives:])
    assert sorted(result) == sorted(values)


def test_merge():
    a, b = [1, 4, 7, 9], [2, 3, 8, 10, 12]
    merged = ArrayADT(5, a).merge(ArrayADT(5, b))
    assert list(merged) == sorted(a + b)


def test_set_operations():
    a, b = [3, 5, 10, 12, 15], [4, 5, 10, 16, 20]
    first, second = ArrayADT(5, a), ArrayADT(5, b)
    assert list(first.union(second)) == sorted(set(a) | set(b))
    assert list(first.intersection(second)) == sorted(set(a) & set(b))
    assert list(first.difference(second)) == sorted(set(a) - set(b))


def test_difference_does_not_mutate_inputs():
    a, b = [12, 3, 10], [10, 4]
    first, second = ArrayADT(5, a), ArrayADT(5, b)
    assert list(first.difference(second)) == sorted(set(a) - set(b))
    assert list(first) == a
    assert list(second) == b


def test_item_access():
    arr = ArrayADT(10, UNSORTED)
    arr[1] = 42
    assert arr[1] == 42
    with pytest.raises(IndexError):
        arr[len(UNSORTED)]