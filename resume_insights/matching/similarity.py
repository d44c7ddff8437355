"""
String Similarity

Edit-distance based similarity used to line up free-text course names
with catalog titles. Deterministic, no external services.
"""

import logging
from typing import List

from .config import SIMILARITY

logger = logging.getLogger(__name__)


def levenshtein_distance(str1: str, str2: str) -> int:
    """
    Calculate Levenshtein edit distance between two strings.

    Insertion, deletion and substitution each cost 1.
    """
    m = len(str1)
    n = len(str2)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if str1[i - 1] == str2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1]) + 1

    return dp[m][n]


def word_overlap_bonus(str1: str, str2: str) -> float:
    """
    Bonus (0-20) for words of str1 that also appear in str2.

    Membership is a plain list check, so repeated words in str1 each count.
    """
    words1 = str1.split()
    words2 = str2.split()
    if not words1 or not words2:
        return 0.0

    common_words = [w for w in words1 if w in words2]
    return (len(common_words) / max(len(words1), len(words2))) * SIMILARITY["word_bonus"]


def calculate_similarity(str1: str, str2: str) -> float:
    """
    Calculate similarity score (0-100) between two strings.

    Formula:
    - Identical after lowercase/trim: 100
    - One contains the other: 90
    - Otherwise: (max_len - distance) / max_len * 100 + word overlap bonus, capped at 100

    Empty input (after trimming) scores 0.

    Args:
        str1: First string (e.g. a course name from a resume)
        str2: Second string (e.g. a catalog course title)

    Returns:
        Score from 0-100
    """
    s1 = (str1 or "").lower().strip()
    s2 = (str2 or "").lower().strip()

    if not s1 or not s2:
        return 0.0

    if s1 == s2:
        return float(SIMILARITY["exact"])

    if s1 in s2 or s2 in s1:
        return float(SIMILARITY["contains"])

    max_len = max(len(s1), len(s2))
    distance = levenshtein_distance(s1, s2)
    similarity = ((max_len - distance) / max_len) * 100

    return min(float(SIMILARITY["max"]), similarity + word_overlap_bonus(s1, s2))
