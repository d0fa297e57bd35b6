import pytest

from algodrills.linked_list import (
    FlatNode,
    ListNode,
    RandomNode,
    add_two_numbers,
    build_list,
    copy_random_list,
    delete_node,
    detect_cycle,
    flatten,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    merge_two_lists,
    middle_node,
    remove_nth_from_end,
    reverse_k_group,
    reverse_list,
    rotate_right,
    to_list,
)


def nodes_of(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


@pytest.mark.parametrize("values", [[], [1], [3, 1, 2], list(range(10))])
def test_build_round_trip(values):
    assert to_list(build_list(values)) == values


def test_add_two_numbers_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert to_list(result) == [7, 0, 8]


def test_add_two_numbers_carry_extends():
    result = add_two_numbers(build_list([9, 9]), build_list([1]))
    assert to_list(result) == [0, 0, 1]


def test_add_zero_is_identity():
    assert to_list(add_two_numbers(build_list([3, 5, 7]), build_list([0]))) == [3, 5, 7]


def test_delete_node_removes_value():
    head = build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert to_list(head) == [4, 1, 9]


def test_delete_tail_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], [0]), ([5], []), ([1, 1, 1], [0, 2])]
)
def test_merge_two_lists_sorted(a, b):
    assert to_list(merge_two_lists(build_list(a), build_list(b))) == sorted(a + b)


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node(values):
    assert middle_node(build_list(values)).val == values[len(values) // 2]


def test_middle_of_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_remove_nth_from_end(n):
    values = [10, 20, 30, 40, 50]
    expected = values[: len(values) - n] + values[len(values) - n + 1 :]
    assert to_list(remove_nth_from_end(build_list(values), n)) == expected


@pytest.mark.parametrize("n", [0, 4])
def test_remove_nth_invalid(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_reverse_list(values):
    assert to_list(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize("entry", [0, 2, 4])
def test_detect_cycle_finds_entry(entry):
    nodes = nodes_of(build_list([3, 2, 0, -4, 7]))
    nodes[-1].next = nodes[entry]
    assert detect_cycle(nodes[0]) is nodes[entry]
    assert has_cycle(nodes[0]) is True


def test_no_cycle():
    head = build_list([1, 2, 3])
    assert detect_cycle(head) is None
    assert has_cycle(head) is False
    assert has_cycle(None) is False


def _column(values):
    head = None
    for value in reversed(values):
        head = FlatNode(value, bottom=head)
    return head


def test_flatten_merges_columns():
    columns = [[5, 7, 8, 30], [10, 20], [19, 22, 50], [28, 35, 40, 45]]
    heads = [_column(c) for c in columns]
    for left, right in zip(heads, heads[1:]):
        left.next = right
    result = flatten(heads[0])
    values = []
    while result is not None:
        values.append(result.data)
        result = result.bottom
    assert values == sorted(v for c in columns for v in c)


def test_intersection_found():
    common = build_list([8, 4, 5])
    a = ListNode(4, ListNode(1, common))
    b = ListNode(5, ListNode(6, ListNode(1, common)))
    assert get_intersection_node(a, b) is common


def test_no_intersection():
    assert get_intersection_node(build_list([1, 2]), build_list([1, 2])) is None


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2, 1], True), ([1], True), ([1, 2], False), ([1, 2, 3, 1], False)],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(build_list(values)) is expected


def test_reverse_k_group_whole_and_single():
    values = [1, 2, 3, 4, 5]
    assert to_list(reverse_k_group(build_list(values), 5)) == values[::-1]
    assert to_list(reverse_k_group(build_list(values), 1)) == values


def test_reverse_k_group_leaves_tail():
    values = [1, 2, 3, 4, 5, 6, 7]
    result = to_list(reverse_k_group(build_list(values), 3))
    assert result[:3] == values[2::-1]
    assert result[3:6] == values[5:2:-1]
    assert result[6:] == values[6:]


def test_reverse_k_group_invalid():
    with pytest.raises(ValueError):
        reverse_k_group(build_list([1, 2]), 0)


@pytest.mark.parametrize("k", [0, 1, 2, 5, 7])
def test_rotate_right(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift :] + values[: len(values) - shift]
    assert to_list(rotate_right(build_list(values), k)) == expected


def test_rotate_negative_raises():
    with pytest.raises(ValueError):
        rotate_right(build_list([1, 2]), -1)


def test_copy_random_list():
    nodes = [RandomNode(v) for v in [7, 13, 11, 10, 1]]
    for left, right in zip(nodes, nodes[1:]):
        left.next = right
    randoms = [None, 0, 4, 2, 0]
    for node, target in zip(nodes, randoms):
        node.random = None if target is None else nodes[target]
    copy = copy_random_list(nodes[0])
    copies = nodes_of(copy)
    assert [c.val for c in copies] == [n.val for n in nodes]
    assert all(c is not n for c, n in zip(copies, nodes))
    for c, target in zip(copies, randoms):
        if target is None:
            assert c.random is None
        else:
            assert c.random is copies[target]


def test_copy_empty():
    assert copy_random_list(None) is None