"""Merge strategy micro-benchmarks.

This package times several ways of merging two collections so that the
cost of mutation can be weighed against copy-on-write approaches:

1. Baseline (no-op control and plain list concatenation)
2. Mutative merges (dict updated in place)
3. Non-mutative merges (copies, unique concatenation, persistent maps)

Results are wall-clock totals for a single developer's ad hoc comparison,
not rigorous measurements.
"""

__version__ = "0.1.0"
