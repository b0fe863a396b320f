"""Merge strategies under benchmark.

Each strategy takes one dataset (a ``base`` and an ``update``) and returns
the merged result. Mutating strategies write into ``base`` and return it;
this is what they measure, not a bug. Every strategy is checked against a
fixed input before anything is timed.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .datasets import (
    MappingDataset,
    PersistentMappingDataset,
    SequenceDataset,
    TokenSource,
    create_mapping,
    make_range,
)
from .persistent import PersistentMap, persistent_map


class StrategyKind(Enum):
    """Whether a strategy writes into its input."""

    PURE = "pure"
    MUTATING = "mutating"


class DataKind(Enum):
    """Which dataset a strategy consumes."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    PERSISTENT = "persistent"


class SanityCheckError(AssertionError):
    """A strategy produced the wrong output for a fixed input."""

    def __init__(self, name: str, expected: Any, actual: Any, detail: str = "output"):
        self.name = name
        self.expected = expected
        self.actual = actual
        self.detail = detail
        super().__init__(f"{name} ({detail}): expected {expected!r}, got {actual!r}")


@dataclass(frozen=True)
class Strategy:
    """A named merge technique tagged with its mutation policy."""

    name: str
    kind: StrategyKind
    data: DataKind
    run: Callable[[Any], Any]
    description: str = ""
    # False for the no-op control, which has no output to check
    checked: bool = True
    # True for strategies that must drop repeated values
    deduplicates: bool = False

    @property
    def is_mutating(self) -> bool:
        return self.kind == StrategyKind.MUTATING

    def __call__(self, dataset: Any) -> Any:
        return self.run(dataset)


# =============================================================================
# Mapping strategies
# =============================================================================


def nothing(data: Any) -> None:
    """Do nothing. Sets the timing floor."""


def loop_mutation(data: MappingDataset) -> Dict:
    """Assign each update key into base, one at a time."""
    base, update = data.base, data.update
    for key in update:
        base[key] = update[key]
    return base


def update_mutation(data: MappingDataset) -> Dict:
    """Bulk-assign update into base with ``dict.update``."""
    data.base.update(data.update)
    return data.base


def unpack_copy(data: MappingDataset) -> Dict:
    """Build a new dict by unpacking base then update."""
    return {**data.base, **data.update}


def dict_update_copy(data: MappingDataset) -> Dict:
    """Update a fresh empty dict from base, then from update."""
    result: Dict = {}
    result.update(data.base)
    result.update(data.update)
    return result


def dict_union_copy(data: MappingDataset) -> Dict:
    """Merge with the ``|`` operator."""
    return data.base | data.update


def persistent_merge(data: PersistentMappingDataset) -> PersistentMap:
    """Merge two persistent maps into a new one."""
    return data.base.merge(data.update)


# =============================================================================
# Sequence strategies
# =============================================================================


def list_concat(data: SequenceDataset) -> List:
    return data.base + data.update


def list_unpack(data: SequenceDataset) -> List:
    return [*data.base, *data.update]


def list_concat_unique(data: SequenceDataset) -> List:
    """Concatenate, keeping only the first occurrence of each value."""
    return list(dict.fromkeys(data.base + data.update))


_ALL = [
    Strategy("nothing", StrategyKind.PURE, DataKind.MAPPING, nothing,
             "no-op control", checked=False),
    Strategy("loop_mutation", StrategyKind.MUTATING, DataKind.MAPPING, loop_mutation,
             "for-loop assignment into base"),
    Strategy("update_mutation", StrategyKind.MUTATING, DataKind.MAPPING, update_mutation,
             "base.update(update)"),
    Strategy("unpack_copy", StrategyKind.PURE, DataKind.MAPPING, unpack_copy,
             "{**base, **update}"),
    Strategy("dict_update_copy", StrategyKind.PURE, DataKind.MAPPING, dict_update_copy,
             "fresh dict updated from base and update"),
    Strategy("dict_union_copy", StrategyKind.PURE, DataKind.MAPPING, dict_union_copy,
             "base | update"),
    Strategy("persistent_merge", StrategyKind.PURE, DataKind.PERSISTENT, persistent_merge,
             "persistent map merge"),
    Strategy("list_concat", StrategyKind.PURE, DataKind.SEQUENCE, list_concat,
             "base + update"),
    Strategy("list_unpack", StrategyKind.PURE, DataKind.SEQUENCE, list_unpack,
             "[*base, *update]"),
    Strategy("list_concat_unique", StrategyKind.PURE, DataKind.SEQUENCE, list_concat_unique,
             "base + update, first occurrences only", deduplicates=True),
]

STRATEGIES: Dict[str, Strategy] = {s.name: s for s in _ALL}


def get_strategy(name: str) -> Strategy:
    """Look up a strategy by name."""
    if name not in STRATEGIES:
        raise KeyError(f"Unknown strategy: {name}. Available: {list(STRATEGIES.keys())}")
    return STRATEGIES[name]


def list_strategies() -> List[str]:
    """List registered strategy names."""
    return list(STRATEGIES.keys())


# =============================================================================
# Sanity checks
# =============================================================================


def _fixed_dataset(data: DataKind) -> Any:
    if data == DataKind.MAPPING:
        return MappingDataset(base={"a": 1}, update={"b": 2})
    if data == DataKind.PERSISTENT:
        return PersistentMappingDataset(
            base=persistent_map({"a": 1}), update=persistent_map({"b": 2})
        )
    return SequenceDataset(base=[1], update=[2])


def _expected_output(data: DataKind) -> Any:
    if data == DataKind.SEQUENCE:
        return [1, 2]
    return {"a": 1, "b": 2}


def _plain(value: Any) -> Any:
    """Reduce a result to a dict or list for comparison."""
    if isinstance(value, PersistentMap):
        return value.to_dict()
    return value


def check_strategy(strategy: Strategy) -> None:
    """Run one strategy against its fixed input.

    Checks the output (unless the strategy opts out) and that inputs the
    strategy must not touch are unchanged afterwards.

    Raises:
        SanityCheckError: On the first mismatch
    """
    dataset = _fixed_dataset(strategy.data)
    base_before = copy.deepcopy(_plain(dataset.base))
    update_before = copy.deepcopy(_plain(dataset.update))

    result = strategy(dataset)

    if strategy.checked:
        expected = _expected_output(strategy.data)
        actual = _plain(result)
        if actual != expected:
            raise SanityCheckError(strategy.name, expected, actual)

    if _plain(dataset.update) != update_before:
        raise SanityCheckError(
            strategy.name, update_before, _plain(dataset.update), detail="update modified"
        )
    if not strategy.is_mutating and _plain(dataset.base) != base_before:
        raise SanityCheckError(
            strategy.name, base_before, _plain(dataset.base), detail="base modified"
        )

    if strategy.deduplicates:
        actual = strategy(SequenceDataset(base=[1], update=[1]))
        if actual != [1]:
            raise SanityCheckError(strategy.name, [1], actual, detail="duplicate removal")


def check_generators(source: Optional[TokenSource] = None) -> None:
    """Check the range and mapping generators."""
    expected = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    actual = make_range(10)
    if actual != expected:
        raise SanityCheckError("make_range", expected, actual)

    # Colliding keys may shrink the mapping, never grow it
    size = len(create_mapping(10, source))
    if size > 10:
        raise SanityCheckError("create_mapping", "<= 10 entries", size)


def run_sanity_checks(
    strategies: Optional[List[Strategy]] = None,
    source: Optional[TokenSource] = None,
) -> List[str]:
    """Check generators and every strategy.

    Args:
        strategies: Strategies to check (default: all registered)
        source: Token source for the generator checks

    Returns:
        Names of the checks that passed, in order

    Raises:
        SanityCheckError: On the first failing check
    """
    check_generators(source)
    passed = ["make_range", "create_mapping"]
    for strategy in strategies if strategies is not None else _ALL:
        check_strategy(strategy)
        passed.append(strategy.name)
    return passed
