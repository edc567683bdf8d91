"""
SwipeType Prediction Module

Swipe-to-word decoding with a Gaussian spatial model and a frequency prior.
"""
from .config import Config, DecoderConfig, load_config
from .decoder import ScoredCandidate, SwipeDecoder
from .dictionary import (
    Dictionary,
    DictionaryCache,
    DuplicateWordError,
    FrequencyFileProvider,
    LexiconProvider,
    WordListProvider,
    build_dictionary_cache,
)
from .frequency import heuristic_frequency
from .geometry import Point, Rect
from .keys import ideal_path, key_for_point, sample_path

__all__ = [
    'Config',
    'DecoderConfig',
    'load_config',
    'ScoredCandidate',
    'SwipeDecoder',
    'Dictionary',
    'DictionaryCache',
    'DuplicateWordError',
    'FrequencyFileProvider',
    'LexiconProvider',
    'WordListProvider',
    'build_dictionary_cache',
    'heuristic_frequency',
    'Point',
    'Rect',
    'ideal_path',
    'key_for_point',
    'sample_path',
]
