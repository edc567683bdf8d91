"""
Dictionary snapshots, word sources and the shared dictionary cache.

The decoder reads an immutable `Dictionary` snapshot. Word sources
(providers) only need an `entries()` method yielding (word, frequency)
pairs; `DictionaryCache` merges them, loads lazily and swaps in a new
snapshot when the host supplies a richer lexicon.
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

from .frequency import FrequencyLookup, heuristic_frequency
from .wordlist import builtin_words, unique_words

logger = logging.getLogger(__name__)

Entry = Tuple[str, float]


class DuplicateWordError(ValueError):
    """Raised when the same word appears twice in one set of entries."""


class DictionaryProvider(Protocol):
    """A source of dictionary entries."""

    def entries(self) -> Iterable[Entry]:
        ...


def is_valid_word(word: str) -> bool:
    """Lowercase letters only."""
    return bool(word) and word.isalpha() and word == word.lower()


class Dictionary:
    """
    Immutable word -> frequency snapshot.

    Entries with an invalid word or a non-positive frequency are dropped
    with a warning. A word repeated within the entries, valid or not, is a
    programming error and raises `DuplicateWordError`.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        frequencies: Dict[str, float] = {}
        seen = set()
        dropped = 0
        for word, frequency in entries:
            if word in seen:
                raise DuplicateWordError(f"Duplicate dictionary word: {word!r}")
            seen.add(word)
            if not is_valid_word(word) or not frequency > 0:
                dropped += 1
                continue
            frequencies[word] = float(frequency)

        if dropped:
            logger.warning("Dropped %d invalid dictionary entries", dropped)
        self._frequencies = frequencies

    @classmethod
    def merge(cls, *providers: DictionaryProvider) -> "Dictionary":
        """
        Combine several sources into one snapshot.

        A word offered by more than one source keeps its highest frequency.
        Each source must still be free of duplicates on its own.
        """
        merged: Dict[str, float] = {}
        for provider in providers:
            source = cls(provider.entries())
            for word, frequency in source.items():
                if frequency > merged.get(word, 0.0):
                    merged[word] = frequency
        return cls(merged.items())

    def __len__(self) -> int:
        return len(self._frequencies)

    def __contains__(self, word: object) -> bool:
        return word in self._frequencies

    def __iter__(self) -> Iterator[str]:
        return iter(self._frequencies)

    def items(self) -> Iterable[Entry]:
        return self._frequencies.items()

    def frequency(self, word: str) -> float:
        """Frequency of `word`, or 0.0 when it is not in the dictionary."""
        return self._frequencies.get(word.lower(), 0.0)


class WordListProvider:
    """
    Plain newline-delimited word list.

    Falls back to the built-in common word list when `path` is None or does
    not exist. Lists carry no counts, so frequencies come from `frequency`.
    """

    def __init__(self, path: Optional[Path] = None, frequency: FrequencyLookup = heuristic_frequency):
        self._path = Path(path) if path is not None else None
        self._frequency = frequency

    def words(self) -> List[str]:
        if self._path is not None and self._path.exists():
            with open(self._path, 'r', encoding='utf-8') as f:
                lines = [line.strip().lower() for line in f]
            words = [w for w in lines if is_valid_word(w)]
            logger.debug("Loaded %d words from %s", len(words), self._path)
            return unique_words(words)

        if self._path is not None:
            logger.info("Word list %s not found, using built-in list", self._path)
        return builtin_words()

    def entries(self) -> Iterable[Entry]:
        return [(word, self._frequency(word)) for word in self.words()]


class FrequencyFileProvider:
    """
    JSON object mapping word -> frequency, e.g. counts from a corpus.

    An unreadable file yields no entries and values that are not numbers
    are skipped, both with a warning.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    def entries(self) -> Iterable[Entry]:
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read frequency file %s: %s", self._path, e)
            return []
        if not isinstance(data, dict):
            logger.warning("%s: expected a JSON object of word frequencies", self._path)
            return []

        frequencies: Dict[str, float] = {}
        skipped = 0
        for word, frequency in data.items():
            word = word.strip().lower()
            try:
                frequency = float(frequency)
            except (TypeError, ValueError):
                skipped += 1
                continue
            if is_valid_word(word):
                frequencies[word] = max(frequency, frequencies.get(word, 0.0))

        if skipped:
            logger.warning("Skipped %d non-numeric frequencies in %s", skipped, self._path)
        return frequencies.items()


class LexiconProvider:
    """
    Words from the host platform's lexicon (contacts, learned words, ...).

    Entries are case-folded and kept only when they are alphabetic and
    between `min_length` and `max_length` letters long.
    """

    def __init__(
        self,
        words: Iterable[str],
        frequency: FrequencyLookup = heuristic_frequency,
        min_length: int = 2,
        max_length: int = 15,
    ):
        self._words = list(words)
        self._frequency = frequency
        self._min_length = min_length
        self._max_length = max_length

    def entries(self) -> Iterable[Entry]:
        words = [w.strip().lower() for w in self._words]
        words = [w for w in words
                 if self._min_length <= len(w) <= self._max_length and is_valid_word(w)]
        return [(word, self._frequency(word)) for word in unique_words(words)]


class DictionaryCache:
    """
    Lazily loaded, lock-guarded dictionary shared by decoders.

    The snapshot starts empty and is built from the providers on first read.
    `refresh` builds a complete new snapshot before swapping it in, so a
    concurrent reader sees either the old or the new dictionary. When
    refreshes overlap, the most recently requested one wins.

    A provider that fails while loading is logged; the first load then falls
    back to an empty dictionary and a refresh keeps the previous snapshot.
    """

    def __init__(self, *providers: DictionaryProvider):
        self._providers: Tuple[DictionaryProvider, ...] = providers or (WordListProvider(),)
        self._snapshot: Optional[Dictionary] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._snapshot is not None

    @staticmethod
    def _load(providers: Tuple[DictionaryProvider, ...]) -> Optional[Dictionary]:
        try:
            return Dictionary.merge(*providers)
        except DuplicateWordError:
            raise
        except (OSError, ValueError, TypeError) as e:
            logger.error("Dictionary provider failed: %s", e)
            return None

    def snapshot(self) -> Dictionary:
        """Current dictionary, loading it on first use."""
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._load(self._providers) or Dictionary()
                logger.debug("Dictionary loaded with %d words", len(self._snapshot))
            return self._snapshot

    def invalidate(self) -> None:
        """Drop the snapshot; the next read reloads from the providers."""
        with self._lock:
            self._generation += 1
            self._snapshot = None

    def refresh(self, *providers: DictionaryProvider) -> Dictionary:
        """
        Rebuild the snapshot, optionally from a new set of providers.

        Loading happens outside the lock; only the swap is guarded. A refresh
        overtaken by a later one is discarded.
        """
        with self._lock:
            if providers:
                self._providers = providers
            self._generation += 1
            generation = self._generation
            sources = self._providers

        dictionary = self._load(sources)

        with self._lock:
            if dictionary is not None and generation == self._generation:
                self._snapshot = dictionary
                logger.info("Dictionary refreshed with %d words", len(dictionary))
            elif dictionary is not None:
                logger.debug("Discarding refresh overtaken by a newer one")
            if self._snapshot is None:
                # Invalidated meanwhile; leave the next read to reload
                return dictionary or Dictionary()
            return self._snapshot


def build_dictionary_cache(config) -> DictionaryCache:
    """Create a cache over the sources named in a `DictionaryConfig`."""
    providers: List[DictionaryProvider] = [WordListProvider(config.word_list)]
    if config.frequency_file:
        providers.append(FrequencyFileProvider(Path(config.frequency_file)))
    return DictionaryCache(*providers)
