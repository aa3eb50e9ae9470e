# backend/medisafe/services/similarity.py
from rapidfuzz.distance import Levenshtein


def distance(a: str, b: str) -> int:
    """
    Levenshtein edit distance (insert/delete/substitute, unit cost).
    Case-sensitive: callers lower-case before comparing.
    """
    return Levenshtein.distance(a or "", b or "")


def similarity_percent(a: str, b: str) -> float:
    """((maxLen - distance) / maxLen) * 100, 100.0 for two empty strings."""
    max_len = max(len(a or ""), len(b or ""))
    if max_len == 0:
        return 100.0
    return ((max_len - distance(a, b)) / max_len) * 100
