"""Metric collection and JSON serialization of metric snapshots."""

from __future__ import annotations

import json
import math
import os
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Union

from .config import setup_tracing

R = TypeVar("R")
Labels = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


class MetricKind(Enum):
    GAUGE = "gauge"
    COUNTER = "counter"
    HISTOGRAM = "histogram"


@dataclass(frozen=True)
class Metric:
    """A recorded metric value with its name and labels."""

    kind: MetricKind
    name: str
    labels: tuple[tuple[str, str], ...]
    value: float | int


def _normalize_labels(labels: Labels) -> tuple[tuple[str, str], ...]:
    if labels is None:
        return ()
    items = labels.items() if isinstance(labels, Mapping) else labels
    return tuple((str(k), str(v)) for k, v in items)


class MetricsRecorder:
    """Thread-safe in-memory store of gauges and counters."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[tuple[MetricKind, str, tuple[tuple[str, str], ...]], float | int] = {}

    def gauge(self, name: str, value: float, labels: Labels = None) -> None:
        """Set a gauge to ``value``."""
        key = (MetricKind.GAUGE, name, _normalize_labels(labels))
        with self._lock:
            self._values[key] = float(value)

    def counter(self, name: str, value: int, labels: Labels = None) -> None:
        """Increase a counter by ``value``."""
        if value < 0:
            raise ValueError("counters can only increase")
        key = (MetricKind.COUNTER, name, _normalize_labels(labels))
        with self._lock:
            self._values[key] = self._values.get(key, 0) + int(value)

    def snapshot(self) -> list[Metric]:
        """All recorded metrics, in the order they were first recorded."""
        with self._lock:
            return [
                Metric(kind, name, labels, value)
                for (kind, name, labels), value in self._values.items()
            ]


def _format_gauge(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _serialize_metric(metric: Metric) -> dict:
    if metric.kind is MetricKind.GAUGE:
        value = _format_gauge(float(metric.value))
    else:
        value = str(int(metric.value))
    return {
        "metric": metric.name,
        "labels": [[k, v] for k, v in metric.labels],
        "value": value,
    }


def serialize_metric_snapshot(snapshot: Iterable[Metric]) -> dict[str, list[dict]]:
    """Group metrics by kind into ``{"counter": [...], "gauge": [...]}``.

    Each entry holds ``metric``, ``labels`` as key/value pairs and ``value`` as a string.
    """
    grouped: dict[str, list[dict]] = {}
    for metric in snapshot:
        if metric.kind is MetricKind.HISTOGRAM:
            raise ValueError("histogram metrics are not supported")
        grouped.setdefault(metric.kind.value, []).append(_serialize_metric(metric))
    return dict(sorted(grouped.items()))


def run_with_metric_collection(
    output_path_envar: str, f: Callable[[MetricsRecorder], R]
) -> R:
    """Call ``f`` with a fresh recorder and return its result.

    If the environment variable ``output_path_envar`` names a file, the
    serialized snapshot is written there as pretty JSON afterwards.
    """
    path = os.environ.get(output_path_envar)
    out = open(path, "w", encoding="utf-8") if path else None
    try:
        setup_tracing()
        recorder = MetricsRecorder()
        result = f(recorder)
        if out is not None:
            json.dump(serialize_metric_snapshot(recorder.snapshot()), out, indent=2)
        return result
    finally:
        if out is not None:
            out.close()