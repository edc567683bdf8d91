"""
Gaussian spatial scoring of a gesture against a word's ideal path.
"""
import math
from typing import Sequence

from .geometry import Point, nearest_distance


def spatial_score(
    user_path: Sequence[Point],
    ideal_path: Sequence[Point],
    sigma: float,
) -> float:
    """
    Mean Gaussian log-probability of the user path under an ideal path.

    Each user point is compared with its nearest ideal-path point, so paths
    of different lengths and uneven sampling can be compared. The sum is
    divided by the number of user points, not by the word length.

    Args:
        user_path: Filtered gesture points.
        ideal_path: Key centers of the candidate word.
        sigma: Gaussian standard deviation; smaller is stricter.

    Returns:
        A non-positive log-probability, or -inf when `ideal_path` is empty.
    """
    if not ideal_path:
        return -math.inf
    if not user_path:
        return 0.0

    two_sigma_sq = 2.0 * sigma * sigma
    total_log_prob = 0.0
    for point in user_path:
        d = nearest_distance(point, ideal_path)
        total_log_prob -= (d * d) / two_sigma_sq

    return total_log_prob / len(user_path)
