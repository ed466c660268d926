import threading

import pytest

from rate_charts.telemetry import MetricsBuffer, Sample, SampleOrderError, SeriesBuffer


def test_series_buffer_rolling_window():
    buffer = SeriesBuffer(max_samples=3)
    buffer.extend(Sample(timestamp=t, sample=t * 10) for t in range(5))

    assert [s.timestamp for s in buffer.samples] == [2, 3, 4]
    assert buffer.latest().sample == 40
    assert len(buffer) == 3


def test_series_buffer_rejects_older_sample():
    buffer = SeriesBuffer()
    buffer.append(Sample(timestamp=1000, sample=1))
    buffer.append(Sample(timestamp=1000, sample=2))

    with pytest.raises(SampleOrderError):
        buffer.append(Sample(timestamp=999, sample=3))
    assert len(buffer) == 2


def test_series_buffer_dict_payload():
    payload = {"samples": [{"timestamp": 0, "sample": 10}, {"timestamp": 1000, "sample": 7}], "rate": 3}

    buffer = SeriesBuffer.from_dict(payload)

    assert buffer.rate == 3
    assert buffer.samples == [Sample(0, 10), Sample(1000, 7)]
    assert buffer.to_dict() == payload


def test_metrics_buffer_append_and_drain():
    metrics = MetricsBuffer()
    metrics.append("queue", "ready", Sample(0, 5))
    metrics.append("queue", "unacked", Sample(0, 1))
    metrics.append("queue", "ready", Sample(1000, 6))
    metrics.set_rate("queue", "ready", 1.0)

    assert metrics.chart_ids() == ["queue"]
    assert metrics.series_names("queue") == ["ready", "unacked"]

    drained = metrics.drain("queue")
    assert list(drained) == ["ready", "unacked"]
    assert len(drained["ready"]) == 2
    assert drained["ready"].rate == 1.0
    assert metrics.series_names("queue") == []
    assert metrics.drain("queue") == {}


def test_metrics_buffer_load_replaces_named_series():
    metrics = MetricsBuffer(max_samples=2)
    metrics.append("rates", "deliver", Sample(0, 1))
    metrics.load("rates", {"publish": {"samples": [{"timestamp": 0, "sample": 1}], "rate": 0}})
    metrics.load(
        "rates",
        {
            "publish": {
                "samples": [
                    {"timestamp": 0, "sample": 1},
                    {"timestamp": 1000, "sample": 3},
                    {"timestamp": 2000, "sample": 6},
                ],
                "rate": 3,
            }
        },
    )

    drained = metrics.drain("rates")
    assert list(drained) == ["deliver", "publish"]
    assert [s.timestamp for s in drained["publish"]] == [1000, 2000]
    assert drained["publish"].rate == 3
    assert len(drained["deliver"]) == 1


def test_metrics_buffer_concurrent_appends_are_not_lost():
    metrics = MetricsBuffer()

    def writer(name):
        for t in range(200):
            metrics.append("chart", name, Sample(t, t))

    threads = [threading.Thread(target=writer, args=(f"s{i}",)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    drained = metrics.drain("chart")
    assert sorted(drained) == ["s0", "s1", "s2", "s3"]
    assert all(len(buffer) == 200 for buffer in drained.values())


def test_drain_of_unknown_chart_does_not_register_it():
    metrics = MetricsBuffer()
    for i in range(3):
        assert metrics.drain(f"missing-{i}") == {}

    assert metrics.chart_ids() == []


def test_sample_payload_rejects_fractional_timestamp():
    assert Sample.from_dict({"timestamp": 1000.0, "sample": 2}) == Sample(1000, 2)
    with pytest.raises(ValueError):
        Sample.from_dict({"timestamp": 1000.5, "sample": 2})
