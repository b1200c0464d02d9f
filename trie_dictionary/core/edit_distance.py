# edit_distance.py
# Levenshtein distance over a full DP table (insert/delete/substitute, cost 1 each).
# No transposition operator and no cutoff: every pair gets its exact distance,
# callers filter by threshold afterwards.

from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between `a` and `b`.
    dp[i][j] is the cost of turning a[:i] into b[:j].
    """
    la, lb = len(a), len(b)
    dp: List[List[int]] = [[0] * (lb + 1) for _ in range(la + 1)]
    for i in range(la + 1):
        dp[i][0] = i
    dp[0] = list(range(lb + 1))

    for i in range(1, la + 1):
        ca = a[i - 1]
        prev = dp[i - 1]
        curr = dp[i]
        for j in range(1, lb + 1):
            if ca == b[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = 1 + min(prev[j - 1], prev[j], curr[j - 1])

    return dp[la][lb]
