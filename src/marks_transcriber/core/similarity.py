"""
Module: core.similarity

Purpose:
    A naive fuzzy matching algorithm for correcting mis-spelled names.
    Computes case-insensitive cosine similarity between two strings using
    byte-based unigram and bigram features.

Key Functions:
    - score(a, b): Similarity in [0.0, 1.0]
    - features(text): L2-normalized n-gram feature mapping

Dependencies:
    - collections (std)
    - math (std)

Used By:
    - core.models.records.MarksRecords.sort_with

Example:
    >>> target = "abcd"
    >>> round(score(target, "abcd"), 5)   # perfect match
    1.0
    >>> score(target, "efg")         # nothing shared
    0.0
    >>> score(target, "a") == score(target, "c")
    True
    >>> score(target, "a") > score(target, "ce")   # "ce" pays for the extra 'e'
    True
    >>> score(target, "cb") < score(target, "bc")  # "bc" is in the right order
    True
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict

# Window lengths used as features: unigrams and bigrams.
NGRAM_LENGTHS = (1, 2)


def features(text: str) -> Dict[bytes, float]:
    """
    Build the normalized n-gram feature mapping for a string.

    The string is lower-cased and encoded to UTF-8 (surrogates passed
    through, so any str is accepted); every contiguous byte
    window of each length in NGRAM_LENGTHS is counted, then the counts are
    scaled so the vector has unit Euclidean norm.

    Args:
        text: Input string

    Returns:
        Mapping of byte window to weight. Empty for an empty string.
    """
    # Lone surrogates (e.g. from a JSON "\ud800" escape) still get bytes
    data = text.lower().encode("utf-8", errors="surrogatepass")
    counts: Counter[bytes] = Counter()
    for k in NGRAM_LENGTHS:
        if k > len(data):
            break
        counts.update(data[i:i + k] for i in range(len(data) - k + 1))

    norm = math.sqrt(sum(v * v for v in counts.values()))
    if norm == 0.0:
        return {}
    return {gram: count / norm for gram, count in counts.items()}


def score(a: str, b: str) -> float:
    """
    Cosine similarity between two strings.

    An empty string always scores 0.0, even against itself.

    Args:
        a: First string
        b: Second string

    Returns:
        Dot product of the two normalized feature vectors, in [0.0, 1.0]
    """
    fa = features(a)
    fb = features(b)
    if not fa or not fb:
        return 0.0

    # Sorted shared keys keep the summation order independent of argument order
    shared = sorted(fa.keys() & fb.keys())
    total = sum(fa[gram] * fb[gram] for gram in shared)
    # Rounding can push an identical pair a hair above 1.0
    return min(total, 1.0)
