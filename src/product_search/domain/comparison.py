"""Aggregation over search results: speedup ratios and worst-case projections.

Nothing here is stateful; each call works only on the results it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Literal, Sequence, Union

from product_search.domain.errors import ValidationError
from product_search.domain.search import SearchAlgorithm, SearchResult

UNDEFINED_RATIO: Literal["N/A"] = "N/A"

Ratio = Union[float, Literal["N/A"]]

DEFAULT_SCALABILITY_SIZES: tuple[int, ...] = (100, 1000, 10000, 100000)


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    baseline: SearchResult
    candidate: SearchResult
    comparison_ratio: Ratio
    time_ratio: Ratio


@dataclass(frozen=True, slots=True)
class ScalabilityRow:
    n: int
    linear_worst: int
    binary_worst: int
    factor: float


def ratio(numerator: float, denominator: float) -> Ratio:
    """numerator / denominator, or UNDEFINED_RATIO when the denominator is zero."""
    if denominator == 0:
        return UNDEFINED_RATIO
    return numerator / denominator


def compare_results(
    results: Iterable[SearchResult],
    baseline: SearchAlgorithm = SearchAlgorithm.LINEAR,
    candidate: SearchAlgorithm = SearchAlgorithm.BINARY,
) -> ComparisonReport:
    """
    Compare two algorithms' results for the same target.

    comparison_ratio = baseline.comparisons / candidate.comparisons
    time_ratio       = baseline.elapsed / candidate.elapsed

    Raises:
        ValueError: If results has no entry for baseline or candidate
    """
    by_algorithm = {result.algorithm: result for result in results}

    missing = [algo.value for algo in (baseline, candidate) if algo not in by_algorithm]
    if missing:
        raise ValueError(f"No result for {', '.join(missing)}")

    base = by_algorithm[baseline]
    cand = by_algorithm[candidate]

    return ComparisonReport(
        baseline=base,
        candidate=cand,
        comparison_ratio=ratio(base.comparisons, cand.comparisons),
        time_ratio=ratio(
            base.elapsed / timedelta(microseconds=1),
            cand.elapsed / timedelta(microseconds=1),
        ),
    )


def linear_worst_case(n: int) -> int:
    return n


def binary_worst_case(n: int) -> int:
    """max(1, ceil(log2(n))), computed exactly on integers."""
    if n <= 1:
        return 1
    # (n - 1).bit_length() == ceil(log2(n)) for n >= 2
    return (n - 1).bit_length()


def project_scalability(sizes: Sequence[int] = DEFAULT_SCALABILITY_SIZES) -> list[ScalabilityRow]:
    """
    Theoretical worst-case comparisons for each synthetic size.

    Raises:
        ValidationError: If any size is not a positive integer
    """
    invalid = [
        size for size in sizes if isinstance(size, bool) or not isinstance(size, int) or size < 1
    ]
    if invalid:
        raise ValidationError(
            errors=[
                {"field": "sizes", "message": f"Must be a positive integer, got {size!r}"}
                for size in invalid
            ]
        )

    rows = []
    for n in sizes:
        linear_worst = linear_worst_case(n)
        binary_worst = binary_worst_case(n)
        rows.append(
            ScalabilityRow(
                n=n,
                linear_worst=linear_worst,
                binary_worst=binary_worst,
                factor=linear_worst / binary_worst,
            )
        )
    return rows
