import pytest

from dstructs.linklist import SAMPLE, LinkedList, main


def test_construction_keeps_order_and_length():
    values = LinkedList(SAMPLE)
    assert list(values) == list(SAMPLE)
    assert len(values) == len(SAMPLE)


def test_empty_list():
    values = LinkedList()
    values.selection_sort()
    values.delete_range(0, 10)
    assert list(values) == []
    assert len(values) == 0


@pytest.mark.parametrize(
    "data", [list(SAMPLE), [1], [3, 3, 1, 2, 1], [5, -2, 0, 9, -7], [2, 1]]
)
def test_selection_sort_orders_values(data):
    values = LinkedList(data)
    values.selection_sort()
    assert list(values) == sorted(data)
    assert len(values) == len(data)


def test_sample_sort_then_delete():
    values = LinkedList(SAMPLE)
    values.selection_sort()
    values.delete_range(4, 8)
    assert list(values) == [1, 2, 3, 4, 9, 10]


@pytest.mark.parametrize("mink, maxk", [(0, 3), (2, 2), (5, 20), (-5, 0), (3, 7)])
def test_delete_on_sorted_list_removes_only_the_range(mink, maxk):
    data = sorted(SAMPLE)
    values = LinkedList(data)
    values.delete_range(mink, maxk)
    remaining = list(values)
    assert all(not mink < v <= maxk for v in remaining)
    removed = sum(1 for v in data if mink < v <= maxk)
    assert len(remaining) + removed == len(data)


def test_delete_with_nothing_in_range():
    values = LinkedList([1, 2, 3])
    values.delete_range(5, 9)
    assert list(values) == [1, 2, 3]


def test_delete_on_unsorted_list_removes_contiguous_run():
    values = LinkedList([5, 1, 9])
    values.delete_range(3, 7)
    assert list(values) == [9]


def test_main_prints_three_stages(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " ".join(str(v) for v in SAMPLE)
    assert lines[1] == " ".join(str(v) for v in sorted(SAMPLE))
    assert len(lines) == 3


def test_main_with_values_and_bounds(capsys):
    assert main(["3", "1", "2", "--min", "0", "--max", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["3 1 2", "1 2 3", ""]