"""Monitoring helpers and Prometheus metrics exporters."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

_HTTP_REQUEST_TOTAL: Final = Counter(
    "emvqr_http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status"),
)
_HTTP_REQUEST_LATENCY: Final = Histogram(
    "emvqr_http_request_duration_seconds",
    "Latency of HTTP requests",
    labelnames=("method", "route"),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2),
)
_CODEC_ERRORS_TOTAL: Final = Counter(
    "emvqr_codec_errors_total",
    "Codec errors by code",
    labelnames=("code", "route"),
)
_PAYLOADS_ENCODED_TOTAL: Final = Counter(
    "emvqr_payloads_encoded_total",
    "Payment payloads encoded",
    labelnames=("initiation_method",),
)
_PAYLOADS_SCANNED_TOTAL: Final = Counter(
    "emvqr_payloads_scanned_total",
    "Payment payloads decoded, by integrity outcome",
    labelnames=("outcome",),
)


def observe_request(method: str, route: str, status_code: int, duration_ms: float) -> None:
    _HTTP_REQUEST_TOTAL.labels(method=method, route=route, status=str(status_code)).inc()
    _HTTP_REQUEST_LATENCY.labels(method=method, route=route).observe(duration_ms / 1000)


def record_codec_error(code: str, route: str) -> None:
    _CODEC_ERRORS_TOTAL.labels(code=code, route=route).inc()


def record_encoded(initiation_method: str) -> None:
    _PAYLOADS_ENCODED_TOTAL.labels(initiation_method=initiation_method).inc()


def record_scanned(outcome: str) -> None:
    _PAYLOADS_SCANNED_TOTAL.labels(outcome=outcome).inc()


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
