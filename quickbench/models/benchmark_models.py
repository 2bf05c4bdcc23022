"""Models for benchmark configuration and exported results."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from quickbench.models.constants import DEFAULT_COUNT


class BenchmarkConfig(BaseModel):
    """Configuration for a single benchmark run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the benchmark, also its logger name")
    count: StrictInt = Field(
        DEFAULT_COUNT, gt=0, description="Number of timed execute() calls"
    )
    warmup: bool = Field(
        True, description="Run execute() a few untimed times before measuring"
    )


class BenchmarkSummary(BaseModel):
    """Serializable record of one completed benchmark run.

    All durations are in microseconds.
    """

    name: str = Field(..., description="Benchmark name")
    count: int = Field(..., description="Number of timed executions")
    warmup: bool = Field(..., description="Whether warmup iterations ran")
    peak: int = Field(..., description="Longest execution")
    bottom: int = Field(..., description="Shortest execution")
    average: float = Field(..., description="Arithmetic mean of all executions")
    measurements: list[int] = Field(
        ..., description="Every execution time, ascending"
    )
    timestamp: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(),
        description="When the summary was produced (ISO 8601, UTC)",
    )
