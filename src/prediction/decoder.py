"""
Swipe decoder.
Turns a finished gesture path into the most likely word.
"""
import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Union

from .candidates import filter_candidates
from .config import DecoderConfig
from .dictionary import Dictionary, DictionaryCache
from .frequency import FrequencyLookup
from .geometry import Point
from .keys import KeyLayout, ideal_path, key_for_point
from .path_filter import filter_path
from .scoring import spatial_score

logger = logging.getLogger(__name__)


class ScoredCandidate(NamedTuple):
    word: str
    score: float
    frequency: float


class SwipeDecoder:
    """
    Predicts a word from a series of (x, y) points.
    Uses the SHARK2-style template matching approach:
    1. Filter the path by distance to reduce noise.
    2. Resolve the start and end keys (the most reliable information).
    3. Keep dictionary words matching start/end key and rough length.
    4. Score each candidate by Gaussian distance to its ideal key path.
    5. Add a log-frequency prior and keep the best word if confident.

    The decoder holds no per-gesture state; `decode` may be called from any
    thread as long as the layout passed in is not mutated meanwhile.
    """

    def __init__(
        self,
        dictionary: Union[Dictionary, DictionaryCache],
        config: Optional[DecoderConfig] = None,
        frequency: Optional[FrequencyLookup] = None,
    ):
        """
        Args:
            dictionary: A fixed snapshot, or a cache read once per decode.
            config: Tunable thresholds; defaults when None.
            frequency: Word frequency lookup; defaults to the dictionary's own.
        """
        self._dictionary = dictionary
        self._config = config or DecoderConfig()
        self._frequency = frequency

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def _snapshot(self) -> Dictionary:
        if isinstance(self._dictionary, DictionaryCache):
            return self._dictionary.snapshot()
        return self._dictionary

    def decode(self, raw_path: Sequence[Point], layout: KeyLayout) -> Optional[str]:
        """
        Decode a gesture into a word.

        Returns:
            The best word, or None when the gesture is too short, its ends are
            not on character keys, no word fits, or confidence is too low.
        """
        ranked = self.rank(raw_path, layout)
        if not ranked:
            return None

        best = ranked[0]
        if best.score > self._config.confidence_threshold:
            return best.word

        logger.debug("Rejected %r: score %.1f below threshold", best.word, best.score)
        return None

    def predict(self, raw_path: Sequence[Point], layout: KeyLayout, top_n: int = 3) -> List[str]:
        """Top N words above the confidence threshold, best first."""
        threshold = self._config.confidence_threshold
        return [c.word for c in self.rank(raw_path, layout)[:top_n] if c.score > threshold]

    def rank(self, raw_path: Sequence[Point], layout: KeyLayout) -> List[ScoredCandidate]:
        """
        Score every candidate word for a gesture, best first.

        Ties are broken by higher frequency, then alphabetically. Returns an
        empty list whenever the gesture is rejected before scoring.
        """
        config = self._config

        if len(raw_path) <= config.min_raw_points:
            logger.debug("Path too short: %d raw points", len(raw_path))
            return []

        # 1. Filter path by distance to reduce noise
        path = filter_path(raw_path, config.min_path_distance)
        if len(path) < config.min_path_points:
            logger.debug("Path too short after filtering: %d points", len(path))
            return []

        # 2. Start and end keys
        start_key = key_for_point(path[0], layout)
        end_key = key_for_point(path[-1], layout)
        if start_key is None or end_key is None or len(start_key) != 1 or len(end_key) != 1:
            logger.debug("Endpoints not on character keys: %r -> %r", start_key, end_key)
            return []

        # 3. Candidate words
        dictionary = self._snapshot()
        frequency = self._frequency or dictionary.frequency
        candidates = filter_candidates(
            dictionary,
            start_key.lower(),
            end_key.lower(),
            len(path) // config.points_per_letter,
        )
        if not candidates:
            logger.debug("No candidates for %s...%s", start_key, end_key)
            return []

        # 4. Spatial score plus frequency prior
        scored = []
        for word in candidates:
            ideal = ideal_path(word, layout)
            if not ideal:
                continue
            word_frequency = frequency(word)
            if not word_frequency > 0:
                continue
            total = spatial_score(path, ideal, config.sigma) + math.log(word_frequency + 1.0)
            scored.append(ScoredCandidate(word, total, word_frequency))

        scored.sort(key=lambda c: c.word)
        scored.sort(key=lambda c: (c.score, c.frequency), reverse=True)

        if scored:
            logger.debug("Best of %d candidates: %s (%.2f)", len(scored), scored[0].word, scored[0].score)
        return scored
