"""Prometheus metrics for upload request tracking."""

from prometheus_client import Counter, Histogram

# Upload outcomes: success, validation_error, internal_error
upload_requests_total = Counter(
    "upload_requests_total",
    "Total number of upload requests by outcome",
    ["outcome"],
)

# File size histogram (in bytes)
upload_file_size_bytes = Histogram(
    "upload_file_size_bytes",
    "Size of accepted uploads",
    buckets=[1024, 10240, 102400, 1048576, 2097152, 10485760, 104857600],  # 1KB to 100MB
)

# Time spent waiting on the storage backend
upload_storage_duration_seconds = Histogram(
    "upload_storage_duration_seconds",
    "Time taken by the storage backend to store an upload",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],
)


# Helper accessors to avoid private attribute usage in tests
def metric_name(metric: Counter | Histogram) -> str:
    return str(getattr(metric, "_name", ""))


def metric_labels(metric: Counter | Histogram) -> list[str]:
    labels = getattr(metric, "_labelnames", [])
    return list(labels)


def metric_buckets(hist: Histogram) -> list[float]:
    buckets = getattr(hist, "_upper_bounds", [])
    return list(buckets)


def metric_value(metric: Counter) -> float:
    value_obj = getattr(metric, "_value", None)
    if value_obj is None:
        return 0.0
    return float(value_obj.get())
