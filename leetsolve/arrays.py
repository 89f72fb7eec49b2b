"""In-place array routines and a character-budget check."""

from collections import Counter
from typing import List


def remove_element(nums: List[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front of ``nums``.

    Kept elements stay in their original order. Returns how many were kept.
    Elements past that count are left as they were.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def remove_duplicates(nums: List[int], n: int) -> int:
    """Keep at most ``n`` copies of each value in the sorted list ``nums``.

    The kept values are compacted to the front of ``nums`` in order and
    their count is returned.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(nums) <= n:
        return len(nums)
    write = n
    for value in nums[n:]:
        if value != nums[write - n]:
            nums[write] = value
            write += 1
    return write


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be spelled with the letters of ``magazine``.

    Each character of ``magazine`` may be used at most once.
    """
    return not Counter(ransom_note) - Counter(magazine)