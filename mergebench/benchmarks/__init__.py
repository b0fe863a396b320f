"""Benchmark groups, run in this order by the runner."""

from .baseline import (
    bench_nothing,
    bench_list_concat,
    bench_list_unpack,
    BaselineBenchmark,
)
from .mutative import (
    bench_loop_mutation,
    bench_update_mutation,
    MutativeBenchmark,
)
from .non_mutative import (
    bench_unpack_copy,
    bench_dict_update_copy,
    bench_dict_union_copy,
    bench_list_concat_unique,
    bench_persistent_merge,
    NonMutativeBenchmark,
)

__all__ = [
    # Baseline
    "bench_nothing",
    "bench_list_concat",
    "bench_list_unpack",
    "BaselineBenchmark",
    # Mutative
    "bench_loop_mutation",
    "bench_update_mutation",
    "MutativeBenchmark",
    # Non-mutative
    "bench_unpack_copy",
    "bench_dict_update_copy",
    "bench_dict_union_copy",
    "bench_list_concat_unique",
    "bench_persistent_merge",
    "NonMutativeBenchmark",
]
