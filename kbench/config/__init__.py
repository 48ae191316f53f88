"""
kbench Configuration Module

Process-wide defaults for benchmark specs and environment-driven settings
(bench file location, log level).
"""

import os
from pathlib import Path
from typing import Optional, Union

# Default concurrency for a benchmark
DEFAULT_CONCURRENCY = 1

# Default number of requests for a benchmark
DEFAULT_REQUESTS = 200

# Default HTTP verb
DEFAULT_METHOD = "GET"

# Default request path
DEFAULT_PATH = "/"

# Bench files are named <prefix>-<context>.yaml
BENCH_FILE_PREFIX = "bench"

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "kbench"


def get_config_dir() -> Path:
    """
    Directory holding the bench files.

    Returns:
        $KBENCH_CONFIG_DIR when set, otherwise ~/.config/kbench
    """
    env_dir = os.getenv("KBENCH_CONFIG_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_CONFIG_DIR


def get_log_level() -> str:
    """Log level name from $KBENCH_LOG_LEVEL (default WARNING)."""
    return os.getenv("KBENCH_LOG_LEVEL", "WARNING").upper()


def bench_file_path(context: str, config_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Location of the bench file for a cluster context.

    Args:
        context: Kubernetes context name
        config_dir: Override for the config directory

    Returns:
        Path to <config_dir>/bench-<context>.yaml
    """
    base = Path(config_dir) if config_dir is not None else get_config_dir()
    return base / f"{BENCH_FILE_PREFIX}-{context}.yaml"


__all__ = [
    'DEFAULT_CONCURRENCY',
    'DEFAULT_REQUESTS',
    'DEFAULT_METHOD',
    'DEFAULT_PATH',
    'BENCH_FILE_PREFIX',
    'get_config_dir',
    'get_log_level',
    'bench_file_path',
]
