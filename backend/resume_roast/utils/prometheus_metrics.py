"""
Prometheus Metrics for the Resume Roast API

Metrics Categories:
- Request metrics: critique requests by endpoint and outcome, latency
- LLM metrics: provider calls, latency, token usage
- Roast metrics: roast level distribution and scores, split by live/demo mode
- Error metrics: errors by type, validation failures
"""

from prometheus_client import (
    Counter,
    Histogram,
    Gauge,
    Info,
    generate_latest,
    CONTENT_TYPE_LATEST
)
from functools import wraps
from time import time
from typing import Callable, Any
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST METRICS
# =============================================================================

critique_requests_total = Counter(
    'critique_requests_total',
    'Total number of critique requests',
    ['endpoint', 'status']  # status: success/failure
)

critique_latency_seconds = Histogram(
    'critique_latency_seconds',
    'Critique request duration in seconds',
    ['endpoint'],
    buckets=[0.01, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0]
)

critique_requests_in_progress = Gauge(
    'critique_requests_in_progress',
    'Number of critique requests currently being processed',
    ['endpoint']
)


# =============================================================================
# LLM-SPECIFIC METRICS
# =============================================================================

llm_api_calls_total = Counter(
    'llm_api_calls_total',
    'Total number of LLM API calls',
    ['operation', 'model', 'status']
)

llm_latency_seconds = Histogram(
    'llm_latency_seconds',
    'LLM API call duration in seconds',
    ['operation', 'model'],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 60.0]
)

llm_tokens_total = Counter(
    'llm_tokens_total',
    'Total number of tokens consumed',
    ['operation', 'token_type']  # token_type: input, output
)


# =============================================================================
# ROAST METRICS
# =============================================================================

roast_level_total = Counter(
    'roast_level_total',
    'Critiques returned per roast level',
    ['level', 'mode']  # mode: live, demo
)

roast_score = Histogram(
    'roast_score',
    'Score assigned per critique',
    ['mode'],
    buckets=[0, 20, 40, 60, 65, 75, 85, 90, 100]
)


# =============================================================================
# ERROR METRICS
# =============================================================================

application_errors_total = Counter(
    'application_errors_total',
    'Total number of errors',
    ['error_type', 'component']
)

validation_failures_total = Counter(
    'validation_failures_total',
    'Total number of validation failures',
    ['validation_type']  # request, upload
)


application_info = Info(
    'application',
    'Application version and metadata'
)

application_info.info({
    'version': '0.1.0',
    'component': 'resume_roast'
})


# =============================================================================
# UTILITY DECORATORS
# =============================================================================

def track_request_metrics(endpoint: str):
    """
    Decorator to track request metrics automatically.

    Usage:
        @track_request_metrics("critique")
        def submit(self, request):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            critique_requests_in_progress.labels(endpoint=endpoint).inc()
            start_time = time()

            try:
                result = func(*args, **kwargs)
                critique_requests_total.labels(
                    endpoint=endpoint,
                    status='success'
                ).inc()
                return result

            except Exception as e:
                critique_requests_total.labels(
                    endpoint=endpoint,
                    status='failure'
                ).inc()
                application_errors_total.labels(
                    error_type=type(e).__name__,
                    component=endpoint
                ).inc()
                raise

            finally:
                duration = time() - start_time
                critique_latency_seconds.labels(
                    endpoint=endpoint
                ).observe(duration)
                critique_requests_in_progress.labels(endpoint=endpoint).dec()

        return wrapper
    return decorator


# =============================================================================
# METRIC RECORDING FUNCTIONS
# =============================================================================

def record_llm_call(operation: str, model: str, status: str, duration: float):
    """Record one provider call and its latency."""
    llm_api_calls_total.labels(
        operation=operation,
        model=model,
        status=status
    ).inc()
    llm_latency_seconds.labels(
        operation=operation,
        model=model
    ).observe(duration)


def record_llm_usage(operation: str, input_tokens: int, output_tokens: int):
    llm_tokens_total.labels(
        operation=operation,
        token_type='input'
    ).inc(input_tokens)

    llm_tokens_total.labels(
        operation=operation,
        token_type='output'
    ).inc(output_tokens)


def record_roast(level: str, score: int, mode: str):
    """
    Record the outcome of one critique.

    Args:
        level: Roast level value (mild, medium, spicy, nuclear)
        score: Score returned to the caller
        mode: "live" or "demo"
    """
    roast_level_total.labels(level=level, mode=mode).inc()
    roast_score.labels(mode=mode).observe(score)


def record_validation_failure(validation_type: str):
    validation_failures_total.labels(
        validation_type=validation_type
    ).inc()


def record_error(error_type: str, component: str):
    application_errors_total.labels(
        error_type=error_type,
        component=component
    ).inc()


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

def get_metrics() -> tuple[bytes, str]:
    """
    Get Prometheus metrics in text format.

    Returns:
        Tuple of (metrics_bytes, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
