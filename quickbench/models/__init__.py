"""Pydantic models for benchmark configuration and structured output."""

from quickbench.models.benchmark_models import BenchmarkConfig, BenchmarkSummary
from quickbench.models.constants import DEFAULT_COUNT, WARMUP_ITERATIONS

__all__ = [
    "DEFAULT_COUNT",
    "WARMUP_ITERATIONS",
    "BenchmarkConfig",
    "BenchmarkSummary",
]
