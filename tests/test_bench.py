import json

import pytest

from stark_sdk.bench import (
    Metric,
    MetricKind,
    MetricsRecorder,
    run_with_metric_collection,
    serialize_metric_snapshot,
)

ENV_VAR = "STARK_SDK_TEST_METRICS_OUT"


def test_gauge_serialization():
    recorder = MetricsRecorder()
    recorder.gauge("cells", 1.5, {"group": "fib"})
    result = serialize_metric_snapshot(recorder.snapshot())
    assert result == {
        "gauge": [{"metric": "cells", "labels": [["group", "fib"]], "value": "1.5"}]
    }


def test_counter_accumulates():
    recorder = MetricsRecorder()
    recorder.counter("rows", 2)
    recorder.counter("rows", 3)
    (metric,) = recorder.snapshot()
    assert metric.kind is MetricKind.COUNTER
    assert metric.value == 5
    assert serialize_metric_snapshot([metric])["counter"][0]["value"] == "5"


def test_gauge_overwrites_and_labels_distinguish():
    recorder = MetricsRecorder()
    recorder.gauge("time", 1.0, [("step", "a")])
    recorder.gauge("time", 2.5, [("step", "a")])
    recorder.gauge("time", 4.0, [("step", "b")])
    values = {m.labels: m.value for m in recorder.snapshot()}
    assert values == {(("step", "a"),): 2.5, (("step", "b"),): 4.0}


def test_kinds_grouped_and_sorted():
    recorder = MetricsRecorder()
    recorder.gauge("g", 1.0)
    recorder.counter("c", 1)
    result = serialize_metric_snapshot(recorder.snapshot())
    assert list(result) == ["counter", "gauge"]
    assert result["gauge"][0]["labels"] == []


def test_histogram_rejected():
    with pytest.raises(ValueError):
        serialize_metric_snapshot([Metric(MetricKind.HISTOGRAM, "h", (), 1.0)])


def test_negative_counter_rejected():
    with pytest.raises(ValueError):
        MetricsRecorder().counter("c", -1)


def test_run_writes_snapshot(tmp_path, monkeypatch):
    path = tmp_path / "metrics.json"
    monkeypatch.setenv(ENV_VAR, str(path))

    def work(recorder):
        recorder.gauge("cells", 1.5, {"group": "fib"})
        recorder.counter("rows", 8)
        return "done"

    assert run_with_metric_collection(ENV_VAR, work) == "done"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["gauge"] == [{"metric": "cells", "labels": [["group", "fib"]], "value": "1.5"}]
    assert data["counter"][0]["metric"] == "rows"


def test_run_without_env_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert run_with_metric_collection(ENV_VAR, lambda recorder: 42) == 42
    assert list(tmp_path.iterdir()) == []