import pytest

from leetsolve.linked_lists import (
    add_two_numbers,
    delete_middle,
    delete_node,
    detect_cycle,
    find_middle_previous,
    find_nth_from_end,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    kth_to_last,
    merge_two_lists,
    middle_node,
    odd_even_list,
    pair_sum,
    partition,
    remove_nth_from_end,
    reverse_list,
    swap_pairs,
)
from leetsolve.listnode import ListNode


def build(values):
    return ListNode.from_values(values)


def values_of(head):
    return head.values() if head is not None else []


def with_cycle(values, entry_index):
    head = build(values)
    nodes = list(head)
    nodes[-1].next = nodes[entry_index]
    return head, nodes[entry_index]


def test_partition():
    head = partition(build([1, 4, 3, 2, 5, 2]), 3)
    assert values_of(head) == [1, 2, 2, 4, 3, 5]


def test_partition_short_list_unchanged():
    assert values_of(partition(build([7]), 3)) == [7]
    assert partition(None, 3) is None


def test_delete_node():
    head = build([1, 4, 3, 2, 5, 2])
    delete_node(head.next)
    assert values_of(head) == [1, 3, 2, 5, 2]


def test_delete_last_node_raises():
    head = build([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


def test_middle_node():
    assert middle_node(build([1, 2, 3, 4, 5])).val == 3
    assert middle_node(build([1, 2, 3, 4, 5, 6])).val == 4
    assert middle_node(None) is None


def test_find_middle_previous():
    assert find_middle_previous(build([2, 6, 0, 7, 5, 9])).val == 0
    assert find_middle_previous(build([9, 4, 5, 2, 0])).val == 4
    assert find_middle_previous(build([4, 3, 2, 1])).val == 3
    assert find_middle_previous(build([2, 6, 0, 7, 5])).val == 6


def test_find_middle_previous_short_lists():
    assert find_middle_previous(build([1])) is None
    head = build([1, 2])
    assert find_middle_previous(head) is head


def test_pair_sum():
    assert pair_sum(build([5, 4, 2, 1])) == 6
    assert pair_sum(build([4, 2, 2, 3])) == 7
    assert pair_sum(build([1, 100000])) == 100001


def test_pair_sum_requires_two_nodes():
    with pytest.raises(ValueError):
        pair_sum(build([1]))


def test_odd_even_list():
    assert values_of(odd_even_list(build([1, 2, 3, 4, 5]))) == [1, 3, 5, 2, 4]
    assert values_of(odd_even_list(build([2, 1, 3, 5, 6, 4, 7]))) == [2, 3, 6, 7, 1, 5, 4]


def test_is_palindrome():
    assert is_palindrome(build([2, 5, 3, 3, 5, 2])) is True
    assert is_palindrome(build([1, 2, 1])) is True
    assert is_palindrome(build([1, 2])) is False
    assert is_palindrome(build([1])) is True


def test_detect_cycle():
    head, entry = with_cycle([1, 4, 3, 2, 5, 2], 2)
    assert detect_cycle(head) is entry
    assert entry.val == 3


def test_detect_cycle_without_cycle():
    assert detect_cycle(build([1, 2, 3])) is None
    assert detect_cycle(None) is None


def test_has_cycle():
    head, _ = with_cycle([3, 2, 0, -4], 1)
    assert has_cycle(head) is True
    assert has_cycle(build([1, 2, 3])) is False
    assert has_cycle(build([1])) is False


def test_merge_two_lists():
    merged = merge_two_lists(build([1, 2, 3, 4]), build([5, 6, 7]))
    assert values_of(merged) == [1, 2, 3, 4, 5, 6, 7]


def test_merge_two_lists_interleaved_and_empty():
    assert values_of(merge_two_lists(build([1, 2, 4]), build([1, 3, 4]))) == [1, 1, 2, 3, 4, 4]
    assert values_of(merge_two_lists(None, build([0]))) == [0]
    assert merge_two_lists(None, None) is None


def test_add_two_numbers():
    result = add_two_numbers(build([9, 9, 9, 9, 9, 9]), build([9, 9, 9]))
    assert values_of(result) == [8, 9, 9, 0, 0, 0, 1]


def test_add_two_numbers_with_empty():
    other = build([1, 2])
    assert add_two_numbers(None, other) is other


def test_remove_nth_from_end():
    assert values_of(remove_nth_from_end(build([1, 4, 3, 2, 5, 2]), 6)) == [4, 3, 2, 5, 2]
    assert values_of(remove_nth_from_end(build([1, 2, 3, 4, 5]), 2)) == [1, 2, 3, 5]
    assert remove_nth_from_end(build([1]), 1) is None


def test_remove_nth_from_end_out_of_range():
    with pytest.raises(IndexError):
        remove_nth_from_end(build([1, 2]), 3)
    with pytest.raises(ValueError):
        remove_nth_from_end(build([1, 2]), 0)


def test_find_nth_from_end():
    head = build([1, 2, 3, 4, 5])
    assert find_nth_from_end(head, 1).val == 5
    assert find_nth_from_end(head, 5) is head


def test_kth_to_last():
    assert kth_to_last(build([1, 2, 3, 4, 5]), 2) == 4
    with pytest.raises(IndexError):
        kth_to_last(build([1, 2]), 5)


def test_swap_pairs():
    assert values_of(swap_pairs(build([1, 4, 3, 2, 5, 2]))) == [4, 1, 2, 3, 2, 5]
    assert values_of(swap_pairs(build([1, 2, 3]))) == [2, 1, 3]
    assert swap_pairs(None) is None


def test_reverse_list():
    assert values_of(reverse_list(build([1, 2, 3, 4, 5]))) == [5, 4, 3, 2, 1]
    assert values_of(reverse_list(build([1]))) == [1]
    assert reverse_list(None) is None


def test_delete_middle():
    assert values_of(delete_middle(build([1, 3, 4, 7, 1, 2, 6]))) == [1, 3, 4, 1, 2, 6]
    assert values_of(delete_middle(build([1, 2, 3, 4]))) == [1, 2, 4]
    assert values_of(delete_middle(build([2, 1]))) == [2]
    assert delete_middle(build([1])) is None


def test_get_intersection_node():
    common = build([8, 4, 5])
    head_a = ListNode(4, ListNode(1, common))
    head_b = ListNode(5, ListNode(6, ListNode(1, common)))
    assert get_intersection_node(head_a, head_b) is common


def test_get_intersection_node_disjoint():
    assert get_intersection_node(build([2, 6, 4]), build([1, 5])) is None
    assert get_intersection_node(None, build([1])) is None