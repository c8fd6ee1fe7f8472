#!/usr/bin/env python3
"""Throughput micro-benchmarks for each digest engine."""
from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from hashpp.algorithms import Algorithm
from hashpp.digests import new
from hashpp.hmac import HMAC
from hashpp.md5 import MD5


def bench_engine(alg: Algorithm, data: bytes, chunk: int) -> None:
    e = new(alg)
    start = time.perf_counter()
    for off in range(0, len(data), chunk):
        e.update(data[off : off + chunk])
    e.finalize()
    elapsed = time.perf_counter() - start
    rate = len(data) / elapsed / 1024 if elapsed else 0.0
    print(f"{alg.display_name:<14} bytes={len(data)} chunk={chunk} time={elapsed:.3f}s rate={rate:.1f} KiB/s")


def bench_md5_jit(data: bytes) -> None:
    e = MD5(use_jit=True)
    if not e.jit_enabled:
        print("md5-jit: numba not available")
        return
    MD5(b"warm-up" * 10, use_jit=True).digest()
    start = time.perf_counter()
    e.update(data)
    e.finalize()
    elapsed = time.perf_counter() - start
    rate = len(data) / elapsed / 1024 if elapsed else 0.0
    print(f"{'MD5 (numba)':<14} bytes={len(data)} time={elapsed:.3f}s rate={rate:.1f} KiB/s")


def bench_hmac_many(alg: Algorithm, count: int) -> None:
    keyed = HMAC(alg, b"benchmark-key")
    start = time.perf_counter()
    for i in range(count):
        h = keyed.copy()
        h.update(i.to_bytes(8, "big"))
        h.digest()
    elapsed = time.perf_counter() - start
    rate = count / elapsed if elapsed else 0.0
    print(f"HMAC-{alg.display_name:<9} count={count} time={elapsed:.3f}s rate={rate:.1f}/s")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=1 << 16, help="bytes hashed per engine")
    ap.add_argument("--chunk", type=int, default=4096)
    ap.add_argument("--macs", type=int, default=200)
    ap.add_argument("--seed", type=int, default=2024)
    ap.add_argument("--algorithm", "-a", action="append", default=None)
    args = ap.parse_args()

    rng = random.Random(args.seed)
    data = bytes(rng.getrandbits(8) for _ in range(args.size))
    algs = [Algorithm.parse(a) for a in args.algorithm] if args.algorithm else list(Algorithm)

    for alg in algs:
        bench_engine(alg, data, args.chunk)
    if Algorithm.MD5 in algs:
        bench_md5_jit(data)
    bench_hmac_many(algs[0], args.macs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
