"""FRI parameters, verifier cost estimates, hash instrumentation, metrics and test AIRs for STARKs."""

__version__ = "0.1.0"

__all__ = [
    "bench",
    "config",
    "cost_estimate",
    "dummy_interaction",
    "fib_air",
    "fri_params",
    "instrument",
    "utils",
]