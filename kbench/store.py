"""
Bench configuration store.

Holds the benchmark settings read from a bench file: a default benchmark
plus per-service and per-container overrides consumed by the benchmark
runner and the service resolver.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .errors import BenchConfigError, BenchParseError, BenchReadError
from .logging_utils import get_logger
from .models import BenchConfig, BenchFile, BenchmarkSet, default_bench_spec

logger = get_logger("kbench.store")

PathLike = Union[str, Path]

# Implicit tags still resolved while loading; every other plain scalar stays
# as its source text ("0123", "yes", "1:30") and pydantic converts the int
# and bool fields.
_RESOLVED_TAGS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}


class BenchLoader(yaml.SafeLoader):
    """SafeLoader that keeps scalar text instead of applying YAML 1.1 typing."""


BenchLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _RESOLVED_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class BenchConfigStore:
    """
    Benchmark configuration loaded from a YAML bench file.

    The store is not synchronized. Callers that reload while other threads
    read must serialize the two themselves.
    """

    def __init__(self, path: Optional[PathLike] = None):
        """
        Initialize the store with default settings and load path if given.

        Args:
            path: Bench file to load

        Raises:
            BenchReadError: If the file cannot be read
            BenchParseError: If the file is not valid YAML or does not fit the schema
        """
        self.benchmarks = BenchmarkSet()
        self.path: Optional[Path] = None
        if path is not None:
            self.reload(path)

    def reload(self, path: PathLike) -> None:
        """
        Re-read the bench file, replacing the whole configuration tree.

        The current tree is kept when the load fails.

        Raises:
            BenchReadError: If the file cannot be read
            BenchParseError: If the file is not valid YAML or does not fit the schema
        """
        path = Path(path)
        bench = _read_bench_file(path)
        self.benchmarks = bench.benchmarks
        self.path = path
        logger.debug(
            "Loaded bench file",
            extra={
                "bench_file": path,
                "services": len(self.benchmarks.services),
                "containers": len(self.benchmarks.containers),
            }
        )

    def service_spec(self, name: str) -> BenchConfig:
        """Bench spec for a service, or the default spec when none is configured."""
        return _lookup(self.benchmarks.services, name)

    def container_spec(self, name: str) -> BenchConfig:
        """Bench spec for a container, or the default spec when none is configured."""
        return _lookup(self.benchmarks.containers, name)


def _lookup(overrides, name: str) -> BenchConfig:
    if name not in overrides:
        spec = default_bench_spec()
    else:
        spec = overrides[name].model_copy(deep=True)
    if not spec.name:
        spec.name = name
    return spec


def _read_bench_file(path: Path) -> BenchFile:
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise BenchReadError(f"Cannot read bench file {path}: {e}", path=str(path)) from e

    try:
        data = yaml.load(raw, Loader=BenchLoader)
    except yaml.YAMLError as e:
        raise BenchParseError(f"Invalid YAML in bench file {path}: {e}", path=str(path)) from e

    # An empty document leaves everything at its defaults
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise BenchParseError(
            f"Bench file {path} must contain a mapping, got {type(data).__name__}",
            path=str(path)
        )

    try:
        return BenchFile.model_validate(data)
    except ValidationError as e:
        raise BenchParseError(f"Bench file {path} does not match the schema: {e}", path=str(path)) from e


def load_bench(path: PathLike) -> Tuple[BenchConfigStore, Optional[BenchConfigError]]:
    """
    Build a store from path without raising.

    Returns:
        Tuple of (store, error). The store always carries the default
        settings; error is None when the load succeeded.
    """
    store = BenchConfigStore()
    try:
        store.reload(path)
    except BenchConfigError as e:
        logger.warning("Bench file load failed, using defaults: %s", e, extra={"bench_file": path})
        return store, e
    return store, None


__all__ = [
    'BenchConfigStore',
    'load_bench',
    'default_bench_spec',
]
