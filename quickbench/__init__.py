"""quickbench - time a unit of work and report peak, bottom and average."""

from quickbench.errors import BenchmarkError, EmptyResultSet, InvalidConfiguration
from quickbench.models.benchmark_models import BenchmarkConfig, BenchmarkSummary
from quickbench.results import OutputFormat, ResultSet, format_duration
from quickbench.runner import ProgressSink, Runner, WorkItem
from quickbench.version.quickbench_version import QUICKBENCH_VERSION, Version

__version__ = str(QUICKBENCH_VERSION)
__version_info__ = QUICKBENCH_VERSION

__all__ = [
    "QUICKBENCH_VERSION",
    "BenchmarkConfig",
    "BenchmarkError",
    "BenchmarkSummary",
    "EmptyResultSet",
    "InvalidConfiguration",
    "OutputFormat",
    "ProgressSink",
    "ResultSet",
    "Runner",
    "Version",
    "WorkItem",
    "__version__",
    "__version_info__",
    "format_duration",
]
