"""AIR with columns ``| count | fields[..] |`` that sends or receives its fields.

The AIR has no constraints of its own; it only contributes bus interactions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .fib_air import AirProofInput
from .utils import RowMajorMatrix, to_field_vec


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class DummyInteractionCols:
    """Column layout of the unpartitioned trace."""

    @staticmethod
    def count_col() -> int:
        return 0

    @staticmethod
    def field_col(field_idx: int) -> int:
        return field_idx + 1


class InteractionType(Enum):
    SEND = "send"
    RECEIVE = "receive"


@dataclass(frozen=True)
class Interaction:
    """One row's message on a bus with its multiplicity."""

    bus_index: int
    fields: tuple[int, ...]
    count: int
    interaction_type: InteractionType


@dataclass(frozen=True)
class DummyInteractionAir:
    """Sends (or receives) ``fields`` with multiplicity ``count`` on ``bus_index``.

    When partitioned, the count and the fields live in separate trace partitions.
    """

    field_width: int
    is_send: bool
    bus_index: int
    is_partitioned: bool = field(default=False, init=False)

    def __init__(self, field_width: int, is_send: bool, bus_index: int) -> None:
        object.__setattr__(self, "field_width", field_width)
        object.__setattr__(self, "is_send", is_send)
        object.__setattr__(self, "bus_index", bus_index)
        object.__setattr__(self, "is_partitioned", False)

    def partition(self) -> DummyInteractionAir:
        """A copy with the fields moved into a cached partition."""
        air = DummyInteractionAir(self.field_width, self.is_send, self.bus_index)
        object.__setattr__(air, "is_partitioned", True)
        return air

    def cached_main_widths(self) -> list[int]:
        return [self.field_width] if self.is_partitioned else []

    def common_main_width(self) -> int:
        return 1 if self.is_partitioned else 1 + self.field_width

    def width(self) -> int:
        return 1 + self.field_width

    @property
    def interaction_type(self) -> InteractionType:
        return InteractionType.SEND if self.is_send else InteractionType.RECEIVE

    def interactions(
        self,
        common_main: RowMajorMatrix,
        cached_mains: list[RowMajorMatrix] | tuple[RowMajorMatrix, ...] = (),
    ) -> list[Interaction]:
        """The interaction contributed by every row of the trace."""
        if common_main.width != self.common_main_width():
            raise ValueError(
                f"common main width {common_main.width} != {self.common_main_width()}"
            )
        widths = [m.width for m in cached_mains]
        if widths != self.cached_main_widths():
            raise ValueError(f"cached main widths {widths} != {self.cached_main_widths()}")

        if self.is_partitioned:
            (cached,) = cached_mains
            if cached.height() != common_main.height():
                raise ValueError("partitions have different heights")
            pairs = (
                (row[0], tuple(fields))
                for row, fields in zip(common_main.rows(), cached.rows())
            )
        else:
            count_col = DummyInteractionCols.count_col()
            start = DummyInteractionCols.field_col(0)
            pairs = (
                (row[count_col], tuple(row[start : start + self.field_width]))
                for row in common_main.rows()
            )
        return [
            Interaction(self.bus_index, fields, count, self.interaction_type)
            for count, fields in pairs
        ]


@dataclass
class DummyInteractionData:
    count: list[int]
    fields: list[list[int]]


@dataclass
class DummyInteractionChip:
    """Holds data for a :class:`DummyInteractionAir` and produces its traces."""

    air: DummyInteractionAir
    data: DummyInteractionData | None = None

    @classmethod
    def new_without_partition(
        cls, field_width: int, is_send: bool, bus_index: int
    ) -> DummyInteractionChip:
        return cls(DummyInteractionAir(field_width, is_send, bus_index))

    @classmethod
    def new_with_partition(
        cls, field_width: int, is_send: bool, bus_index: int
    ) -> DummyInteractionChip:
        return cls(DummyInteractionAir(field_width, is_send, bus_index).partition())

    def _validate(self, data: DummyInteractionData) -> None:
        if len(data.fields) != len(data.count):
            raise ValueError("count and fields have different lengths")
        if not data.fields:
            raise ValueError("data has no rows")
        width = len(data.fields[0])
        if width != self.air.field_width:
            raise ValueError(f"field width {width} != {self.air.field_width}")
        if any(len(row) != width for row in data.fields):
            raise ValueError("rows of fields have different widths")

    def load_data(self, data: DummyInteractionData) -> None:
        self._validate(data)
        self.data = data

    def air_name(self) -> str:
        return "DummyInteractionAir"

    def current_trace_height(self) -> int:
        return len(self.data.count) if self.data is not None else 0

    def trace_width(self) -> int:
        return self.air.field_width + 1

    def generate_air_proof_input(self) -> AirProofInput:
        """Traces padded with zero rows to a power-of-two height."""
        if self.data is None:
            raise ValueError("no data loaded")
        data = self.data
        self._validate(data)
        width = self.air.field_width
        height = _next_power_of_two(len(data.count))
        padding = height - len(data.count)
        counts = to_field_vec(data.count) + [0] * padding
        rows = [to_field_vec(row) for row in data.fields] + [[0] * width] * padding

        if self.air.is_partitioned:
            return AirProofInput(
                common_main=RowMajorMatrix(counts, 1),
                cached_mains=[RowMajorMatrix([v for row in rows for v in row], width)],
            )
        values = [v for count, row in zip(counts, rows) for v in (count, *row)]
        return AirProofInput(common_main=RowMajorMatrix(values, width + 1))