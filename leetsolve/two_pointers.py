"""Problems solved by walking two indices over a sequence."""

from __future__ import annotations

from typing import List, MutableSequence, Optional

__all__ = [
    "is_palindrome",
    "two_sum_sorted",
    "remove_duplicates",
    "remove_element",
    "move_zeroes",
    "reverse_string",
    "is_subsequence",
    "longest_palindrome",
]


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways.

    Only letters and digits count, and case is ignored.
    """
    cleaned = "".join(char.lower() for char in s if char.isalpha() or char.isdigit())
    return cleaned == cleaned[::-1]


def two_sum_sorted(numbers: List[int], target: int) -> Optional[List[int]]:
    """Return the 1-based positions ``[i, j]`` of two values summing to ``target``.

    ``numbers`` must be sorted in ascending order. Returns ``None`` when no
    pair adds up to ``target``.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total > target:
            right -= 1
        else:
            left += 1
    return None


def remove_duplicates(nums: List[int]) -> int:
    """Compact the distinct values of the sorted list ``nums`` to its front.

    Returns how many distinct values there are.
    """
    if len(nums) <= 1:
        return len(nums)
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_element(nums: List[int], val: int) -> int:
    """Move the values of ``nums`` that differ from ``val`` to its front, in order.

    Returns how many such values there are; the tail of ``nums`` is left as it was.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: List[int]) -> None:
    """Move every zero to the end of ``nums``, keeping the order of the rest."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def reverse_string(s: MutableSequence) -> None:
    """Reverse the mutable sequence ``s`` in place."""
    s.reverse()


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be had by deleting characters from ``t``."""
    if len(s) > len(t):
        return False
    remaining = iter(t)
    return all(char in remaining for char in s)


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among equally long candidates the one starting earliest wins.
    """
    best = ""
    for center in range(len(s)):
        odd = _expand(s, center, center)
        even = _expand(s, center, center + 1)
        candidate = odd if len(odd) >= len(even) else even
        if len(candidate) > len(best):
            best = candidate
    return best