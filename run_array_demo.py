#!/usr/bin/env python3
"""
run_array_demo.py - build an Array from the command line and print what the
main operations do with it.

Usage:
    python -u run_array_demo.py ant bison camel
    python -u run_array_demo.py --config ./jsarray.ini --sort --verbose 3 1 2
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional

from jsarray import Array, config


def _coerce(token: str):
    # numeric-looking arguments become numbers so sort/reduce behave like numbers
    try:
        return int(token)
    except ValueError:
        try:
            return float(token)
        except ValueError:
            return token


def main(argv: Optional[list[str]] = None, out=None) -> int:
    out = out or sys.stdout
    p = argparse.ArgumentParser(prog="run_array_demo.py", description="Exercise jsarray.Array on the given values")
    p.add_argument("values", nargs="*", help="Elements of the demo Array")
    p.add_argument("--config", default=None, help="Path to a jsarray INI file")
    p.add_argument("--sort", action="store_true", help="Sort numerically before printing")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging for jsarray")
    args = p.parse_args(argv)

    cfg = config.load_config(args.config)
    if args.verbose:
        cfg.set(config.SECTION, "log_level", "DEBUG")
        logging.basicConfig(stream=sys.stderr)
    config.configure_logging(cfg)
    try:
        Array.configure(config=cfg)
    except Exception as e:
        print(f"ERROR: unable to configure iterator factory: {e}", file=sys.stderr)
        return 2

    arr = Array.of(*(_coerce(v) for v in args.values))
    if args.sort:
        arr.sort(lambda a, b: a < b)

    print("array:", repr(arr), file=out)
    print("length:", arr.length, file=out)
    print("join:", arr.join(","), file=out)
    print("reversed:", repr(arr.toReversed()), file=out)
    if arr.every(lambda v: isinstance(v, (int, float))):
        print("sum:", arr.reduce(lambda acc, v: acc + v), file=out)

    it = arr.entries()
    for _ in range(arr.length):
        print(" entry", it.cursor, "->", repr(it.value), file=out)
        before = it.cursor
        if it.next().cursor == before:
            break
    it.dispose()
    arr.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
