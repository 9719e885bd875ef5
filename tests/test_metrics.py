import io
import time

from ninjacore.metrics import Metric, Metrics, ScopedMetric, Stopwatch, get_time_millis


def test_new_metric_starts_empty():
    metrics = Metrics()
    metric = metrics.new_metric("depfile load")
    assert (metric.name, metric.count, metric.sum) == ("depfile load", 0, 0)
    assert list(metrics) == [metric]


def test_scoped_metric_counts_and_times():
    metric = Metric("work")
    for _ in range(3):
        with ScopedMetric(metric):
            time.sleep(0.001)
    assert metric.count == 3
    assert metric.sum >= 3000


def test_scoped_metric_without_metric_is_noop():
    with ScopedMetric(None) as scoped:
        pass
    assert isinstance(scoped, ScopedMetric) and scoped._metric is None


def test_scoped_metric_records_on_exception():
    metric = Metric("failing")
    try:
        with ScopedMetric(metric):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert metric.count == 1


def test_record_reuses_metric_by_name():
    metrics = Metrics()
    with metrics.record("lookup node"):
        pass
    with metrics.record("lookup node"):
        pass
    recorded = list(metrics)
    assert len(recorded) == 1
    assert recorded[0].count == 2


def test_report_header_and_rows():
    metrics = Metrics()
    metric = metrics.new_metric("canonicalize path")
    metric.count = 2
    metric.sum = 3000
    out = io.StringIO()
    metrics.report(out)
    lines = out.getvalue().splitlines()
    assert lines[0].split("\t") == [
        "metric".ljust(len("canonicalize path")),
        "count ",
        "avg (us) ",
        "total (ms)",
    ]
    fields = lines[1].split("\t")
    assert fields[0] == "canonicalize path"
    assert fields[1].strip() == "2"
    assert fields[2].strip() == "1500.0"
    assert fields[3] == "3.0"


def test_report_pads_names_to_widest():
    metrics = Metrics()
    metrics.new_metric("a")
    metrics.new_metric("longer name")
    out = io.StringIO()
    metrics.report(out)
    names = [line.split("\t")[0] for line in out.getvalue().splitlines()]
    assert {len(name) for name in names} == {len("longer name")}


def test_stopwatch_measures_elapsed_time():
    watch = Stopwatch()
    watch.restart()
    time.sleep(0.01)
    first = watch.elapsed()
    assert first >= 0.005
    watch.restart()
    assert watch.elapsed() < first


def test_get_time_millis_does_not_go_backwards():
    start = get_time_millis()
    time.sleep(0.005)
    assert get_time_millis() >= start + 1