# cc_import_tool/application/processing/similarity.py

"""Similarity metrics for comparing creator names

All metrics return a score in [0, 1]. The default is normalized
Levenshtein distance over lower-cased names; the fuzzywuzzy ratios are
available as alternates for registries with noisier naming. They round to
whole percent, so scores move in steps of 0.01 and a non-exact pair can
score 1.0; reconciliation caps such candidates just below 1.0.
"""

# Third party imports
from fuzzywuzzy import fuzz
from Levenshtein import distance

# Local imports
from cc_import_tool.core.types.protocols import SimilarityMetric


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions"""
    return distance(a, b)


def normalized_similarity(a: str, b: str) -> float:
    """Case-insensitive normalized edit-distance similarity

    ``(max_len - distance) / max_len`` over the lower-cased strings, 1.0
    when both are empty.

    Args:
        a: First name
        b: Second name

    Returns:
        Similarity between 0.0 and 1.0
    """
    a_lower = a.lower()
    b_lower = b.lower()
    # Lengths taken after lower-casing, which can change length for some characters
    max_len = max(len(a_lower), len(b_lower))
    if max_len == 0:
        return 1.0
    return (max_len - levenshtein_distance(a_lower, b_lower)) / max_len


def ratio_similarity(a: str, b: str) -> float:
    """fuzzywuzzy simple ratio, scaled to [0, 1]"""
    return fuzz.ratio(a.lower(), b.lower()) / 100.0


def token_sort_similarity(a: str, b: str) -> float:
    """fuzzywuzzy token sort ratio (word-order insensitive), scaled to [0, 1]"""
    return fuzz.token_sort_ratio(a, b) / 100.0


_METRICS: dict[str, SimilarityMetric] = {
    "levenshtein": normalized_similarity,
    "ratio": ratio_similarity,
    "token_sort_ratio": token_sort_similarity,
}


def get_metric(name: str) -> SimilarityMetric:
    """Resolve a metric by its configuration name

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return _METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown similarity metric {name!r}; expected one of {sorted(_METRICS)}")
