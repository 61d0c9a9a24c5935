"""Test helpers: matrices, seeded randomness and field conversions."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

BABY_BEAR_MODULUS = 2013265921


@dataclass
class RowMajorMatrix:
    """A dense matrix stored as a flat row-major list."""

    values: list[int]
    width: int

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("width must be non-negative")
        if self.width == 0:
            if self.values:
                raise ValueError("a zero-width matrix holds no values")
        elif len(self.values) % self.width:
            raise ValueError(
                f"{len(self.values)} values do not fill rows of width {self.width}"
            )

    def height(self) -> int:
        """Number of rows."""
        return len(self.values) // self.width if self.width else 0

    def row(self, index: int) -> list[int]:
        """The row at ``index``."""
        if not 0 <= index < self.height():
            raise IndexError(f"row {index} out of range")
        start = index * self.width
        return self.values[start : start + self.width]

    def get(self, row: int, col: int) -> int:
        """The entry at ``(row, col)``."""
        if not 0 <= col < self.width:
            raise IndexError(f"column {col} out of range")
        return self.row(row)[col]

    def rows(self) -> Iterator[list[int]]:
        """Iterate over the rows."""
        for start in range(0, len(self.values), self.width or 1):
            yield self.values[start : start + self.width]


def _main_height(proof_input: Any) -> int:
    raw = getattr(proof_input, "raw", proof_input)
    main = getattr(raw, "common_main", None)
    return main.height() if main is not None else 0


@dataclass
class ProofInputForTest:
    """AIRs with their proof inputs, without AIR ids."""

    airs: list[Any] = field(default_factory=list)
    per_air: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.airs) != len(self.per_air):
            raise ValueError("airs and per_air must have the same length")

    def sort_chips(self) -> None:
        """Sort AIRs by common main trace height, tallest first; ties keep their order."""
        pairs = sorted(
            zip(self.airs, self.per_air), key=lambda pair: -_main_height(pair[1])
        )
        self.airs = [air for air, _ in pairs]
        self.per_air = [proof_input for _, proof_input in pairs]


def create_seeded_rng() -> random.Random:
    """Deterministic generator for tests."""
    return random.Random(bytes([42] * 32))


def create_seeded_rng_with_seed(seed: int) -> random.Random:
    """Deterministic generator whose 32-byte seed ends in the big-endian ``seed``."""
    if not 0 <= seed < 1 << 64:
        raise ValueError("seed must fit in 64 unsigned bits")
    return random.Random(bytes(24) + seed.to_bytes(8, "big"))


def generate_random_matrix(rng: random.Random, height: int, width: int) -> list[list[int]]:
    """Random rows of field elements from wrapped 32-bit values."""
    return [
        [rng.getrandbits(32) % BABY_BEAR_MODULUS for _ in range(width)]
        for _ in range(height)
    ]


def to_field_vec(values: Iterable[int]) -> list[int]:
    """Convert canonical integers to field elements, rejecting out-of-range ones."""
    result = []
    for value in values:
        if not 0 <= value < BABY_BEAR_MODULUS:
            raise ValueError(f"{value} is not a canonical field element")
        result.append(value)
    return result