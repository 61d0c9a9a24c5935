"""Call counting wrappers for hashes, compressions and permutations."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .fri_params import FriParameters

T = TypeVar("T")


def _type_name(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        inner = _type_name(value[0]) if value else "?"
        return f"[{inner}; {len(value)}]"
    return type(value).__name__


class Instrumented:
    """Wraps a hash, compression function or permutation and records input lengths per type.

    Copies share the same counter.
    """

    def __init__(self, inner: Any) -> None:
        self.is_on = True
        self.inner = inner
        self.input_lens_by_type: dict[str, list[int]] = {}
        self._lock = threading.Lock()

    def _add_len_for_type(self, type_name: str, length: int) -> None:
        if not self.is_on:
            return
        with self._lock:
            self.input_lens_by_type.setdefault(type_name, []).append(length)

    def permute(self, state: Any) -> Any:
        """Apply the wrapped permutation, counting one call."""
        self._add_len_for_type(_type_name(state), 1)
        return self.inner.permute(state)

    def compress(self, inputs: Any) -> Any:
        """Apply the wrapped compression function, counting its arity."""
        item_type = _type_name(inputs[0]) if len(inputs) else "?"
        self._add_len_for_type(item_type, len(inputs))
        return self.inner.compress(inputs)

    def hash_iter(self, items: Iterable[Any]) -> Any:
        """Hash the items with the wrapped hasher, counting how many were hashed."""
        if not self.is_on:
            return self.inner.hash_iter(items)
        collected = list(items)
        out = self.inner.hash_iter(collected)
        item_type = _type_name(collected[0]) if collected else "?"
        self._add_len_for_type(f"({item_type}, {_type_name(out)})", len(collected))
        return out


@dataclass
class HashStatistics:
    """Number of permutation calls."""

    permutations: int


@dataclass
class StarkHashStatistics(Generic[T]):
    """Hash statistics of one run together with the parameters used."""

    name: str
    stats: HashStatistics
    fri_params: FriParameters
    custom: T = field(default=None)  # type: ignore[assignment]