"""
Shared fixtures for kbench tests.
"""

import textwrap

import pytest


FULL_BENCH = """
benchmarks:
  defaults:
    concurrency: 2
    requests: 1000
  services:
    default/nginx:
      concurrency: 5
      requests: 500
      auth:
        user: admin
        password: s3cret
      http:
        method: POST
        host: nginx.example.com
        path: /api/v1/ping
        https: true
        http2: true
        body: '{"ping": true}'
        headers:
          Accept:
            - application/json
            - text/plain
          X-Trace: ["abc"]
      serviceResolution:
        mode: LoadBalancerIngress
  containers:
    nginx:
      concurrency: 1
      requests: 10
      http:
        path: /healthz
"""


@pytest.fixture
def write_bench(tmp_path):
    """Write YAML content to a bench file and return its path."""
    def _write(content, name="bench.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def full_bench_path(write_bench):
    """Bench file exercising every supported field."""
    return write_bench(FULL_BENCH)
