"""
Schema of a bench file.

Missing keys take zero values. Only BenchmarkSet.defaults starts from the
process defaults (DEFAULT_CONCURRENCY / DEFAULT_REQUESTS); a partial
defaults block overrides just the fields it names.
"""

from enum import Enum
from typing import Any, Dict, List

from multidict import CIMultiDict
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .config import DEFAULT_CONCURRENCY, DEFAULT_METHOD, DEFAULT_PATH, DEFAULT_REQUESTS
from .errors import InvalidResolutionModeError


class ServiceResolutionMode(str, Enum):
    """How a Kubernetes service reference becomes a reachable address."""
    # Use HTTP.host verbatim
    CONFIGURED_HOST = "ConfiguredHost"
    # Use the service ClusterIP; needs in-cluster or VPN access
    CLUSTER_IP = "ClusterIP"
    # Use status.loadBalancer.ingress; an error when the service has none
    LOAD_BALANCER_INGRESS = "LoadBalancerIngress"


class _BenchSchema(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        arbitrary_types_allowed=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null reads as an absent key
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Benchmark(_BenchSchema):
    """Load intensity: concurrency (C) and number of requests (N)."""
    concurrency: int = 0
    requests: int = 0

    def empty(self) -> bool:
        """Checks if the benchmark is unset."""
        return self.concurrency == 0 and self.requests == 0


class Auth(_BenchSchema):
    """Basic auth credentials."""
    user: str = ""
    password: str = ""


def _header_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"header value must be a scalar, got {type(value).__name__}")


def to_header_multidict(value: Any) -> CIMultiDict:
    """
    Build a case-insensitive multi-map from a {key: [values]} mapping.

    Values keep their order; keys differing only in case share one entry
    for lookups.
    """
    if isinstance(value, CIMultiDict):
        return value
    if not isinstance(value, dict):
        raise ValueError("headers must be a mapping of name to a list of values")

    headers = CIMultiDict()
    for key, values in value.items():
        if values is None:
            continue
        if not isinstance(values, (list, tuple)):
            raise ValueError(f"header {key!r} must be a list of values")
        for item in values:
            headers.add(str(key), _header_value(item))
    return headers


class HTTP(_BenchSchema):
    """Shape of the benchmarked HTTP request."""
    method: str = ""
    host: str = ""
    path: str = ""
    https: bool = False
    http2: bool = False
    body: str = ""
    headers: CIMultiDict = Field(default_factory=CIMultiDict)

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> CIMultiDict:
        return to_header_multidict(value)

    @field_serializer("headers")
    def dump_headers(self, headers: CIMultiDict) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        first_seen: Dict[str, str] = {}
        for key, value in headers.items():
            # keys come back as multidict.istr; dump plain str
            name = first_seen.setdefault(key.lower(), str(key))
            grouped.setdefault(name, []).append(value)
        return grouped


class ServiceResolution(_BenchSchema):
    """Settings for resolving a k8s Service to an accessible IP or hostname."""
    mode: str = ""

    def effective_mode(self) -> ServiceResolutionMode:
        """
        Interpret the configured mode.

        Returns:
            The matching mode; an empty mode means CONFIGURED_HOST

        Raises:
            InvalidResolutionModeError: If the mode is not recognised
        """
        if not self.mode:
            return ServiceResolutionMode.CONFIGURED_HOST
        try:
            return ServiceResolutionMode(self.mode)
        except ValueError:
            valid = [m.value for m in ServiceResolutionMode]
            raise InvalidResolutionModeError(
                f"unknown service resolution mode {self.mode!r}, expected one of {valid}"
            ) from None


class BenchConfig(_BenchSchema):
    """Benchmark override for one service or container."""
    name: str = ""
    concurrency: int = 0
    requests: int = 0
    auth: Auth = Field(default_factory=Auth)
    http: HTTP = Field(default_factory=HTTP)
    service_resolution: ServiceResolution = Field(
        default_factory=ServiceResolution, alias="serviceResolution"
    )


def default_benchmark() -> Benchmark:
    return Benchmark(concurrency=DEFAULT_CONCURRENCY, requests=DEFAULT_REQUESTS)


def default_bench_spec() -> BenchConfig:
    """Bench spec used when no override exists for a service or container."""
    return BenchConfig(
        concurrency=DEFAULT_CONCURRENCY,
        requests=DEFAULT_REQUESTS,
        http=HTTP(method=DEFAULT_METHOD, path=DEFAULT_PATH),
    )


class BenchmarkSet(_BenchSchema):
    """Default benchmark plus per-service and per-container overrides."""
    defaults: Benchmark = Field(default_factory=default_benchmark)
    services: Dict[str, BenchConfig] = Field(default_factory=dict)
    containers: Dict[str, BenchConfig] = Field(default_factory=dict)

    @field_validator("defaults", mode="before")
    @classmethod
    def merge_defaults(cls, value: Any) -> Any:
        if isinstance(value, dict):
            base = default_benchmark().model_dump()
            base.update({k: v for k, v in value.items() if v is not None})
            return base
        return value

    @field_validator("services", "containers", mode="before")
    @classmethod
    def null_entries(cls, value: Any) -> Any:
        # "svc:" with no body is a zero-valued entry
        if isinstance(value, dict):
            return {k: ({} if v is None else v) for k, v in value.items()}
        return value


class BenchFile(_BenchSchema):
    """Root of a bench file."""
    benchmarks: BenchmarkSet = Field(default_factory=BenchmarkSet)
