"""Fibonacci AIR: a two-column trace where each row advances the sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .utils import BABY_BEAR_MODULUS, RowMajorMatrix, to_field_vec

NUM_FIBONACCI_COLS = 2
NUM_FIBONACCI_PUBLIC_VALUES = 3


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _field_eq(left: int, right: int) -> bool:
    return (left - right) % BABY_BEAR_MODULUS == 0


@dataclass
class AirProofInput:
    """Traces and public values that one AIR contributes to a proof."""

    common_main: RowMajorMatrix | None = None
    cached_mains: list[RowMajorMatrix] = field(default_factory=list)
    public_values: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class FibonacciCols:
    """One row of the Fibonacci trace."""

    left: int
    right: int

    @staticmethod
    def from_row(row: Sequence[int]) -> FibonacciCols:
        """View a trace row as its named columns."""
        if len(row) != NUM_FIBONACCI_COLS:
            raise ValueError(f"expected {NUM_FIBONACCI_COLS} columns, got {len(row)}")
        left, right = row
        return FibonacciCols(left, right)


@dataclass(frozen=True)
class FibonacciAir:
    """Constrains the trace to start at (a, b), follow Fibonacci and end at x.

    The public values are ``[a, b, x]``.
    """

    def width(self) -> int:
        return NUM_FIBONACCI_COLS

    def num_public_values(self) -> int:
        return NUM_FIBONACCI_PUBLIC_VALUES

    def check_constraints(
        self, trace: RowMajorMatrix, public_values: Sequence[int]
    ) -> list[str]:
        """Evaluate every constraint on ``trace``; return descriptions of those violated."""
        if trace.width != self.width():
            raise ValueError(f"trace width {trace.width} != {self.width()}")
        if len(public_values) != self.num_public_values():
            raise ValueError(
                f"expected {self.num_public_values()} public values, got {len(public_values)}"
            )
        rows = [FibonacciCols.from_row(row) for row in trace.rows()]
        if not rows:
            raise ValueError("trace has no rows")
        a, b, x = public_values
        violations: list[str] = []

        first = rows[0]
        if not _field_eq(first.left, a):
            violations.append("first row: left != a")
        if not _field_eq(first.right, b):
            violations.append("first row: right != b")

        for index, (local, nxt) in enumerate(zip(rows, rows[1:])):
            if not _field_eq(local.right, nxt.left):
                violations.append(f"transition {index}: next.left != right")
            if not _field_eq(local.left + local.right, nxt.right):
                violations.append(f"transition {index}: next.right != left + right")

        if not _field_eq(rows[-1].right, x):
            violations.append("last row: right != x")
        return violations


def generate_trace_rows(a: int, b: int, n: int) -> RowMajorMatrix:
    """Trace of ``n`` rows starting at ``(a, b)``; ``n`` must be a power of two."""
    if not _is_power_of_two(n):
        raise ValueError(f"trace height {n} is not a power of two")
    left, right = to_field_vec([a, b])
    values = [left, right]
    for _ in range(n - 1):
        left, right = right, (left + right) % BABY_BEAR_MODULUS
        values.extend((left, right))
    return RowMajorMatrix(values, NUM_FIBONACCI_COLS)


@dataclass(frozen=True)
class FibonacciChip:
    """Produces a Fibonacci trace from ``a``, ``b`` to the ``n``-th row."""

    a: int
    b: int
    n: int

    def __post_init__(self) -> None:
        if not _is_power_of_two(self.n):
            raise ValueError(f"trace height {self.n} is not a power of two")

    def air(self) -> FibonacciAir:
        return FibonacciAir()

    def generate_air_proof_input(self) -> AirProofInput:
        trace = generate_trace_rows(self.a, self.b, self.n)
        public_values = [trace.get(0, 0), trace.get(0, 1), trace.get(self.n - 1, 1)]
        return AirProofInput(common_main=trace, public_values=public_values)

    def air_name(self) -> str:
        return "FibonacciAir"

    def current_trace_height(self) -> int:
        return self.n

    def trace_width(self) -> int:
        return NUM_FIBONACCI_COLS