"""Prometheus metrics instrumentation for IBAN validation.

Provides counters for validation volume and failure kinds, plus the structure
pattern compilation counter that makes the matcher cache observable.
"""

from prometheus_client import Counter, Histogram, start_http_server

from openiban.utils.logging import get_logger

logger = get_logger(__name__)

# ============================================================================
# Metric Definitions
# ============================================================================

# Counter: Validations performed
validations_total = Counter(
    "openiban_validations_total",
    "Total number of IBAN validations performed",
    ["method", "result"],  # labels: fast/strict, valid/invalid
)

# Counter: Validation failures by diagnostic kind
validation_failures_total = Counter(
    "openiban_validation_failures_total",
    "Total number of IBAN validation failures by error kind",
    ["kind"],  # labels: empty/unknown_country/invalid_length/...
)

# Counter: Structure pattern compilations (at most one per distinct pattern)
structure_patterns_compiled_total = Counter(
    "openiban_structure_patterns_compiled_total",
    "Total number of BBAN structure patterns compiled",
)

# Histogram: Batch validation duration (CLI --file)
batch_validation_duration_seconds = Histogram(
    "openiban_batch_validation_duration_seconds",
    "Time taken to validate a batch of IBANs",
    ["method"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)


# ============================================================================
# Metrics Server
# ============================================================================


def start_metrics_server(port: int = 8000) -> bool:
    """Start Prometheus metrics HTTP server.

    Args:
        port: Port to expose metrics on (default: 8000)

    Returns:
        True if the server was started, False if the port was unavailable
    """
    try:
        start_http_server(port)
    except OSError as e:
        logger.warning("metrics_server_unavailable", port=port, error=str(e))
        return False
    logger.info("metrics_server_started", port=port)
    return True


# ============================================================================
# Convenience Functions
# ============================================================================


def record_validation(method: str, is_valid: bool, failure_kinds: list[str] | None = None) -> None:
    """Record one validation outcome.

    Args:
        method: Validation method (fast, strict)
        is_valid: Whether the value passed every rule
        failure_kinds: Error kinds of the diagnostics produced, if any
    """
    validations_total.labels(method=method, result="valid" if is_valid else "invalid").inc()
    for kind in failure_kinds or ():
        validation_failures_total.labels(kind=kind).inc()


def record_pattern_compiled() -> None:
    """Record a structure pattern compilation."""
    structure_patterns_compiled_total.inc()
