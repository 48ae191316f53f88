#!/usr/bin/env python3
"""
kbench CLI

Inspect bench files without running a benchmark.

Usage:
    # Validate a bench file
    kbench check ~/.config/kbench/bench-minikube.yaml

    # Print the whole configuration as YAML
    kbench show bench.yaml

    # Print the spec a service would be benchmarked with
    kbench show bench.yaml --service default/nginx
"""

import argparse
import sys

import yaml

from kbench.errors import BenchConfigError
from kbench.store import BenchConfigStore


def _dump(data) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def cmd_check(args) -> int:
    try:
        store = BenchConfigStore(args.file)
    except BenchConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    defaults = store.benchmarks.defaults
    print(
        f"OK: defaults c={defaults.concurrency} n={defaults.requests}, "
        f"{len(store.benchmarks.services)} services, "
        f"{len(store.benchmarks.containers)} containers"
    )
    return 0


def cmd_show(args) -> int:
    try:
        store = BenchConfigStore(args.file)
    except BenchConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.service:
        spec = store.service_spec(args.service)
        print(_dump(spec.model_dump(by_alias=True)), end="")
    elif args.container:
        spec = store.container_spec(args.container)
        print(_dump(spec.model_dump(by_alias=True)), end="")
    else:
        print(_dump({"benchmarks": store.benchmarks.model_dump(by_alias=True)}), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kbench",
        description="kbench - inspect benchmark configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate a bench file")
    check.add_argument("file", help="Path to the bench file")
    check.set_defaults(func=cmd_check)

    show = subparsers.add_parser("show", help="Print a bench file or a resolved spec")
    show.add_argument("file", help="Path to the bench file")
    target = show.add_mutually_exclusive_group()
    target.add_argument("--service", help="Service name to resolve")
    target.add_argument("--container", help="Container name to resolve")
    show.set_defaults(func=cmd_show)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
