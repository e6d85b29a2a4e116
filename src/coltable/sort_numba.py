"""Numba kernel deriving the row permutation for single-key sorts.

`claim_permutation` maps each position of an already sorted copy of the
key column back to a row of the original column: the first row with an
equal key that no earlier position has claimed. Every row is claimed
exactly once, so the result is a permutation of range(n).

The scan is O(n^2) in the worst case (many equal keys), which is fine for
the small tables this package targets.
"""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def keys_equal(a, b) -> bool:
    """Exact equality, except that NaN equals NaN so NaN rows are not lost."""
    if a == b:
        return True
    return a != a and b != b


@njit(cache=True)
def claim_permutation(original: np.ndarray, sorted_keys: np.ndarray) -> np.ndarray:
    """Return perm with original[perm[i]] == sorted_keys[i], claiming rows first-unclaimed.

    Args:
        original: key column in table order
        sorted_keys: the same values in ascending order

    Returns:
        int64 array of row indices; -1 marks a position no row could claim,
        which only happens when sorted_keys is not a reordering of original
    """
    n = len(original)
    perm = np.full(n, -1, dtype=np.int64)
    claimed = np.zeros(n, dtype=np.bool_)

    for i in range(n):
        key = sorted_keys[i]
        for j in range(n):
            if claimed[j]:
                continue
            if keys_equal(original[j], key):
                claimed[j] = True
                perm[i] = j
                break

    return perm
