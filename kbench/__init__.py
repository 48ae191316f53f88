"""
kbench Core Package

Benchmark configuration for Kubernetes services and containers: the
concurrency, request count, HTTP target and service resolution mode a
benchmark runner uses for each target.
"""

__version__ = "0.1.0"

from .errors import BenchConfigError, BenchParseError, BenchReadError, InvalidResolutionModeError
from .models import (
    HTTP, Auth, BenchConfig, BenchFile, Benchmark, BenchmarkSet,
    ServiceResolution, ServiceResolutionMode
)
from .store import BenchConfigStore, default_bench_spec, load_bench
