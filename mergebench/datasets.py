"""Synthetic data generation for merge benchmarks.

This module provides:
1. A pluggable random token source (seedable for tests)
2. Mapping and sequence generators of configurable size
3. Dataset records pairing a large "base" with a small "update"

Tokens are word-like strings built from syllables. Nothing guarantees that
two draws differ, so generated mappings may hold fewer keys than requested.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .config import BenchConfig
from .persistent import PersistentMap, persistent_map


class DatasetSizeError(ValueError):
    """Raised when a requested dataset size cannot be produced."""


# Consonant-vowel syllables; 2-3 of them make one token
DEFAULT_SYLLABLES = (
    "ba", "be", "bi", "bo", "bu", "da", "de", "di", "do", "du",
    "fa", "fe", "fi", "fo", "fu", "ga", "ge", "gi", "go", "gu",
    "ka", "ke", "ki", "ko", "ku", "la", "le", "li", "lo", "lu",
    "ma", "me", "mi", "mo", "mu", "na", "ne", "ni", "no", "nu",
    "pa", "pe", "pi", "po", "pu", "ra", "re", "ri", "ro", "ru",
    "sa", "se", "si", "so", "su", "ta", "te", "ti", "to", "tu",
)


class TokenSource:
    """Random source of short word-like tokens.

    Args:
        seed: Random seed (None = nondeterministic)
        syllables: Syllables tokens are assembled from
        min_syllables: Fewest syllables per token
        max_syllables: Most syllables per token

    Example:
        >>> source = TokenSource(seed=42)
        >>> word = source.token()  # e.g. "kabe"
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        syllables: Sequence[str] = DEFAULT_SYLLABLES,
        min_syllables: int = 2,
        max_syllables: int = 3,
    ):
        if not syllables:
            raise ValueError("syllables must not be empty")
        if not 1 <= min_syllables <= max_syllables:
            raise ValueError(
                f"need 1 <= min_syllables <= max_syllables, got {min_syllables}, {max_syllables}"
            )
        self.rng = random.Random(seed)
        self.syllables = tuple(syllables)
        self.min_syllables = min_syllables
        self.max_syllables = max_syllables

    @property
    def capacity(self) -> int:
        """Upper bound on the number of distinct tokens."""
        n = len(set(self.syllables))
        return sum(n ** k for k in range(self.min_syllables, self.max_syllables + 1))

    def token(self) -> str:
        """Draw one token."""
        count = self.rng.randint(self.min_syllables, self.max_syllables)
        return "".join(self.rng.choice(self.syllables) for _ in range(count))


_default_source = TokenSource()


def _source(source: Optional[TokenSource]) -> TokenSource:
    return _default_source if source is None else source


def make_range(n: int) -> List[int]:
    """Return ``[0, 1, ..., n - 1]``."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return list(range(n))


def make_token(source: Optional[TokenSource] = None) -> str:
    """Draw a single random token."""
    return _source(source).token()


def create_mapping(
    size: int,
    source: Optional[TokenSource] = None,
    unique: bool = False,
) -> Dict[str, str]:
    """Create a mapping of ``size`` random keys to random values.

    Keys that collide overwrite each other, so the result can hold fewer
    than ``size`` entries. Pass ``unique=True`` to redraw colliding keys
    until exactly ``size`` entries exist.

    Args:
        size: Number of key/value draws
        source: Token source (default: module source)
        unique: Redraw colliding keys

    Returns:
        Dictionary with at most ``size`` entries

    Raises:
        DatasetSizeError: If ``size`` is negative, or ``unique`` is set and
            the source cannot produce enough distinct keys
    """
    if size < 0:
        raise DatasetSizeError(f"size must be >= 0, got {size}")

    source = _source(source)
    result: Dict[str, str] = {}

    if not unique:
        for _ in range(size):
            result[source.token()] = source.token()
        return result

    if size > source.capacity:
        raise DatasetSizeError(
            f"cannot draw {size} distinct keys from a source of {source.capacity} tokens"
        )

    attempts = 0
    max_attempts = max(size * 100, 1000)
    while len(result) < size:
        attempts += 1
        if attempts > max_attempts:
            raise DatasetSizeError(
                f"gave up after {max_attempts} draws with {len(result)}/{size} distinct keys"
            )
        key = source.token()
        if key not in result:
            result[key] = source.token()
    return result


def create_sequence(size: int, source: Optional[TokenSource] = None) -> List[str]:
    """Create a list of ``size`` random tokens."""
    if size < 0:
        raise DatasetSizeError(f"size must be >= 0, got {size}")
    source = _source(source)
    return [source.token() for _ in make_range(size)]


@dataclass
class MappingDataset:
    """A large base mapping and a small update to merge into it."""

    base: Dict[str, str]
    update: Dict[str, str]


@dataclass
class SequenceDataset:
    """A large base sequence and a small update to append to it."""

    base: List[str]
    update: List[str]


@dataclass
class PersistentMappingDataset:
    """Mapping dataset held as persistent (immutable) maps."""

    base: PersistentMap
    update: PersistentMap


def create_mapping_dataset(
    config: Optional[BenchConfig] = None,
    source: Optional[TokenSource] = None,
) -> MappingDataset:
    """Create a base mapping of ``config.base_size`` and an update of ``config.update_size``."""
    config = config or BenchConfig()
    return MappingDataset(
        base=create_mapping(config.base_size, source),
        update=create_mapping(config.update_size, source),
    )


def create_sequence_dataset(
    config: Optional[BenchConfig] = None,
    source: Optional[TokenSource] = None,
) -> SequenceDataset:
    """Create a base sequence of ``config.base_size`` and an update of ``config.update_size``."""
    config = config or BenchConfig()
    return SequenceDataset(
        base=create_sequence(config.base_size, source),
        update=create_sequence(config.update_size, source),
    )


def create_persistent_mapping_dataset(
    config: Optional[BenchConfig] = None,
    source: Optional[TokenSource] = None,
) -> PersistentMappingDataset:
    """Create a mapping dataset and wrap both sides as persistent maps."""
    data = create_mapping_dataset(config, source)
    return PersistentMappingDataset(
        base=persistent_map(data.base),
        update=persistent_map(data.update),
    )
