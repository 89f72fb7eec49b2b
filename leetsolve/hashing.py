"""Problems solved with hash maps and sets."""

from collections import Counter
from typing import Dict, List, Tuple

_ALPHABET_SIZE = 26


def two_sum(nums: List[int], target: int) -> List[int]:
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target`` and ``j < i``.

    ``i`` is the first index at which a matching earlier value exists.
    Returns ``[0, 0]`` when there is no such pair.
    """
    seen: Dict[int, int] = {}
    for idx, val in enumerate(nums):
        if target - val in seen:
            return [idx, seen[target - val]]
        seen[val] = idx
    return [0, 0]


def longest_consecutive(nums: List[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for num in values:
        if num - 1 in values:
            continue
        length = 1
        while num + length in values:
            length += 1
        best = max(best, length)
    return best


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n)) if n > 0 else 0


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen = set()
    while n != 1:
        seen.add(n)
        n = _digit_square_sum(n)
        if n in seen:
            return False
    return True


def _is_bijection(left, right) -> bool:
    forward: Dict = {}
    backward: Dict = {}
    for a, b in zip(left, right):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``.

    ``t`` must be at least as long as ``s``; extra characters are ignored.
    """
    if len(t) < len(s):
        raise ValueError("t must be at least as long as s")
    return _is_bijection(s, t)


def contains_nearby_duplicate(nums: List[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: Dict[int, int] = {}
    for idx, val in enumerate(nums):
        if val in last_seen and abs(idx - last_seen[val]) <= k:
            return True
        last_seen[val] = idx
    return False


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the space-separated words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    return _is_bijection(pattern, words)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be spelled with the letters of ``magazine``."""
    if len(ransom_note) > len(magazine):
        return False
    return not Counter(ransom_note) - Counter(magazine)


def _letter_counts(text: str) -> List[int]:
    counts = [0] * _ALPHABET_SIZE
    for char in text:
        if not "a" <= char <= "z":
            raise ValueError(f"only lowercase letters a-z are allowed, got {char!r}")
        counts[ord(char) - ord("a")] += 1
    return counts


def can_construct_lowercase(ransom_note: str, magazine: str) -> bool:
    """Like :func:`can_construct`, for text of lowercase letters a-z only."""
    if len(ransom_note) > len(magazine):
        return False
    available = _letter_counts(magazine)
    needed = _letter_counts(ransom_note)
    return all(need <= have for need, have in zip(needed, available))


def group_anagrams(strs: List[str]) -> List[List[str]]:
    """Group words of lowercase letters a-z that are anagrams of each other."""
    groups: Dict[Tuple[int, ...], List[str]] = {}
    for word in strs:
        groups.setdefault(tuple(_letter_counts(word)), []).append(word)
    return list(groups.values())