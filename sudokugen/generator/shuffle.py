"""Random permutation helper shared by the generator and the reducer."""

from __future__ import annotations

import random
from typing import Iterable, TypeVar

_T = TypeVar("_T")


def shuffle(items: Iterable[_T], rng: random.Random) -> list[_T]:
    """
    Return the items in a uniformly random order.

    Forward Fisher-Yates pass: every index from 1 to the last swaps with a
    uniformly chosen index at or before it, so the last element takes part.

    Args:
        items: Values to permute; consumed once
        rng: Random source providing ``randint``

    Returns:
        A new list holding the permuted items
    """
    values = list(items)

    for i in range(1, len(values)):
        j = rng.randint(0, i)
        values[i], values[j] = values[j], values[i]

    return values
