"""Jaro-Winkler string similarity for fuzzy command matching."""

from __future__ import annotations

# Winkler prefix boost
PREFIX_WEIGHT = 0.1
MAX_PREFIX = 4


def jaro(a: str, b: str) -> float:
    """Compute the Jaro similarity of two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity in [0, 1]. Two empty strings score 1.0, one empty string
        scores 0.0.
    """
    a_len = len(a)
    b_len = len(b)

    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    window = max(0, max(a_len, b_len) // 2 - 1)

    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0

    for i, ch in enumerate(a):
        lo = max(0, i - window)
        hi = min(b_len, i + window + 1)
        for j in range(lo, hi):
            if not b_flags[j] and b[j] == ch:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # Matched characters of b, in order
    b_matched = [b[j] for j in range(b_len) if b_flags[j]]
    a_matched = [a[i] for i in range(a_len) if a_flags[i]]
    transpositions = sum(1 for x, y in zip(a_matched, b_matched) if x != y) // 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def common_prefix_length(a: str, b: str, limit: int = MAX_PREFIX) -> int:
    """Length of the shared prefix of ``a`` and ``b``, capped at ``limit``."""
    length = 0
    for x, y in zip(a[:limit], b[:limit]):
        if x != y:
            break
        length += 1
    return length


def jaro_winkler(a: str, b: str) -> float:
    """Compute the Jaro-Winkler similarity of two strings.

    The boost is applied unconditionally:
    ``jaro + L * 0.1 * (1 - jaro)`` with ``L`` the common prefix length (max 4).
    """
    sim = jaro(a, b)
    if sim == 0.0:
        return 0.0
    prefix = common_prefix_length(a, b)
    return sim + prefix * PREFIX_WEIGHT * (1.0 - sim)
