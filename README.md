# leetsolve

Small solutions to well-known algorithm problems, organised by technique.
The package depends on nothing outside the standard library. The test suite
uses pytest, available through the `test` extra.

## Modules

### `leetsolve.arrays`

- `remove_element(nums, val)`: moves the values that differ from `val` to the
  front of `nums`, in order, and returns how many there are.
- `remove_duplicates(nums, n)`: in a sorted list, keeps at most `n` copies of
  each value at the front and returns their count. Raises `ValueError` if
  `n < 1`.
- `can_construct(ransom_note, magazine)`: whether the note can be spelled with
  the characters of the magazine, each used at most once.

### `leetsolve.hashing`

- `two_sum(nums, target)`: returns `[i, j]` with `j < i` and
  `nums[i] + nums[j] == target`, or `[0, 0]` when no pair exists.
- `longest_consecutive(nums)`: length of the longest run of consecutive integers.
- `is_happy(n)`: whether repeatedly summing the squares of the digits reaches 1.
- `is_isomorphic(s, t)`: whether the characters of `s` map one-to-one onto those
  of `t`. Raises `ValueError` if `t` is shorter than `s`.
- `contains_nearby_duplicate(nums, k)`: whether two equal values sit at most `k`
  positions apart.
- `is_anagram(s, t)`: whether `t` is a rearrangement of `s`.
- `word_pattern(pattern, s)`: whether the space-separated words of `s` follow
  `pattern` one-to-one.
- `can_construct(ransom_note, magazine)`: as in `arrays`, returning `False` at
  once when the note is longer than the magazine.
- `can_construct_lowercase(ransom_note, magazine)`: the same check for text of
  the letters `a`-`z` only; other characters raise `ValueError`.
- `group_anagrams(strs)`: groups words of the letters `a`-`z` that are anagrams
  of each other; other characters raise `ValueError`.

### `leetsolve.listnode`

- `ListNode(val=0, next=None)`: a singly linked list node.
  `ListNode.from_values(values)` builds a list (or returns `None` when empty),
  iterating a node yields it and every node after it, and `values()` returns
  their values.
- `print_list(head)`: prints each value followed by a space, with no newline.

### `leetsolve.linked_lists`

Functions on `ListNode` lists: `has_cycle`, `detect_cycle`,
`get_intersection_node`, `find_nth_from_end`, `remove_nth_from_end`,
`add_two_numbers` (digits least significant first), `reverse_list`,
`find_middle_previous`, `middle_node`, `delete_middle`, `merge_two_lists`,
`pair_sum`, `is_palindrome`, `delete_node`, `swap_pairs`, `odd_even_list`,
`partition` and `kth_to_last`.

Most of them relink the nodes they are given. `pair_sum` and `is_palindrome`
split the list and reverse its second half while working. `find_nth_from_end`
and `kth_to_last` raise `IndexError` when `k` exceeds the list length and
`ValueError` when `k < 1`; `pair_sum` raises `ValueError` for lists of fewer
than two nodes, and `delete_node` for the last node of a list.

### `leetsolve.random_list`

- `RandomNode(val=0, next=None, random=None)`: a node with an extra pointer to
  any node of its list.
- `copy_random_list(head)`: a deep copy, leaving the original untouched.
- `build_random_list()`: the sample list `[[7,null],[13,0],[11,4],[10,2],[1,0]]`.
- `random_values(head)`: the value each node's random pointer refers to, or
  `None` where it is unset.

### `leetsolve.lru`

- `LRUCache(capacity)`: a fixed-capacity cache of integer keys and values.
  `get(key)` returns the value or `-1`; `put(key, value)` stores it, evicting the
  least recently used key when full; `len()` gives the number of entries.
  A capacity below 1 raises `ValueError`.

### `leetsolve.two_pointers`

- `is_palindrome(s)`: ignores case and anything that is not a letter or digit.
- `two_sum_sorted(numbers, target)`: 1-based positions `[i, j]` in a sorted
  list, or `None`.
- `remove_duplicates(nums)`: compacts the distinct values of a sorted list to
  its front and returns their count.
- `remove_element(nums, val)`, `move_zeroes(nums)`, `reverse_string(s)`: change
  the sequence they are given.
- `is_subsequence(s, t)`: whether `s` can be had by deleting characters of `t`.
- `longest_palindrome(s)`: the longest palindromic substring, the earliest one
  among equals.

## Example

```python
from leetsolve.hashing import group_anagrams, longest_consecutive
from leetsolve.listnode import ListNode
from leetsolve.linked_lists import reverse_list
from leetsolve.lru import LRUCache

longest_consecutive([100, 4, 200, 1, 3, 2])        # 4
group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])

head = ListNode.from_values([1, 2, 3])
reverse_list(head).values()                         # [3, 2, 1]

cache = LRUCache(2)
cache.put(1, 5)
cache.get(1)                                        # 5
cache.get(2)                                        # -1
```

## What it does not do

This is a library only: it has no command-line interface and keeps no state
beyond the objects you create.