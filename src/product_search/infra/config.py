from __future__ import annotations

import os

from product_search.domain.comparison import DEFAULT_SCALABILITY_SIZES

CATALOG_SOURCES = ("reference", "synthetic")


def catalog_source() -> str:
    source = os.getenv("CATALOG_SOURCE", "reference").strip().lower()

    if source not in CATALOG_SOURCES:
        raise RuntimeError(
            f"CATALOG_SOURCE must be one of {', '.join(CATALOG_SOURCES)}, got {source!r}"
        )

    return source


def catalog_size() -> int:
    return _positive_int("CATALOG_SIZE", default=1000)


def catalog_seed() -> int:
    raw = os.getenv("CATALOG_SEED")

    if raw is None:
        return 42

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_SEED must be an integer, got {raw!r}") from None


def scalability_sizes() -> tuple[int, ...]:
    raw = os.getenv("SCALABILITY_SIZES")

    if not raw:
        return DEFAULT_SCALABILITY_SIZES

    try:
        sizes = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        raise RuntimeError(
            f"SCALABILITY_SIZES must be comma-separated integers, got {raw!r}"
        ) from None

    if not sizes or any(size < 1 for size in sizes):
        raise RuntimeError(f"SCALABILITY_SIZES must contain positive integers, got {raw!r}")

    return sizes


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None

    if value < 1:
        raise RuntimeError(f"{name} must be >= 1, got {value}")

    return value
