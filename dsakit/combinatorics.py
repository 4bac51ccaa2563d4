"""Unique combinations and permutations of the characters of a string."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["combination", "permutation"]


def combination(text: str, size: int) -> list[str]:
    """Return every distinct combination of ``size`` characters of ``text``.

    Characters are sorted first, so each combination is in sorted order and
    repeated characters do not produce repeated combinations.
    """
    chars = sorted(text)
    partial: list[str] = []

    def backtrack(start: int, count: int) -> Iterator[str]:
        if count == size:
            yield "".join(partial)
            return
        for index in range(start, len(chars)):
            if index > start and chars[index] == chars[index - 1]:
                continue
            partial.append(chars[index])
            yield from backtrack(index + 1, count + 1)
            partial.pop()

    return list(backtrack(0, 0))


def permutation(text: str) -> list[str]:
    """Return the permutations of ``text``, built by swapping after sorting.

    A character equal to the one at the current position is not swapped in,
    which removes repeated permutations caused by duplicate characters.
    """
    chars = sorted(text)

    def backtrack(start: int) -> Iterator[str]:
        if start == len(chars):
            yield "".join(chars)
            return
        for index in range(start, len(chars)):
            if index != start and chars[index] == chars[start]:
                continue
            chars[start], chars[index] = chars[index], chars[start]
            yield from backtrack(start + 1)
            chars[start], chars[index] = chars[index], chars[start]

    return list(backtrack(0))