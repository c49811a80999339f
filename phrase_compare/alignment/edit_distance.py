"""Longest-common-subsequence alignment for word sequences."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


def lcs_table(sub: Sequence[str], ref: Sequence[str]) -> List[List[int]]:
    """Build the (m+1) x (n+1) LCS length table using exact, case-sensitive equality.

    table[i][j] is the LCS length of sub[:i] and ref[:j].
    """
    m, n = len(sub), len(ref)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if sub[i - 1] == ref[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def align_sequences(
    sub: Sequence[str], ref: Sequence[str]
) -> List[Tuple[str, Optional[int], Optional[int]]]:
    """LCS alignment returning a path of operations.

    Returns list of tuples: (op, sub_index, ref_index)
      op in {"match","missing","extra"}.

      match -> word present on both sides
      missing -> reference word absent from the submission
      extra -> submitted word absent from the reference

    When both directions keep the same LCS length the backtrack takes
    "missing" first.

    Args:
        sub: Submitted sequence (list of tokens)
        ref: Reference sequence (list of tokens)

    Returns:
        List of tuples in forward order: (operation, sub_index, ref_index)
    """
    table = lcs_table(sub, ref)

    # backtrack
    ops: List[Tuple[str, Optional[int], Optional[int]]] = []
    i, j = len(sub), len(ref)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and sub[i - 1] == ref[j - 1]:
            ops.append(("match", i - 1, j - 1))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(("missing", None, j - 1))
            j -= 1
        else:
            ops.append(("extra", i - 1, None))
            i -= 1
    ops.reverse()
    return ops
