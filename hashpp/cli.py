from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .algorithms import Algorithm, UnsupportedAlgorithmError
from .api import get_file_hash, get_hashes, get_hmacs
from .containers import DataContainer, HMACDataContainer
from .files import iter_files
from .verify import check_known_answers


def _algorithms(ns: argparse.Namespace) -> List[Algorithm]:
    return [Algorithm.parse(a) for a in (ns.algorithm or ["SHA2-256"])]


def cmd_hash(ns: argparse.Namespace) -> int:
    algs = _algorithms(ns)
    hashes = get_hashes([DataContainer(alg, ns.data) for alg in algs])
    for alg in algs:
        prefix = f"{alg} " if len(algs) > 1 else ""
        for item, hx in zip(ns.data, hashes[alg]):
            print(f"{prefix}{hx}  {item}")
    return 0


def cmd_file(ns: argparse.Namespace) -> int:
    algs = _algorithms(ns)
    rc = 0
    for raw in ns.paths:
        if not Path(raw).exists():
            print(f"file: {raw}: no such file or directory", file=sys.stderr)
            rc = 1
    files = list(iter_files(ns.paths))
    for alg in algs:
        prefix = f"{alg} " if len(algs) > 1 else ""
        for f in files:
            h = get_file_hash(alg, f)
            if not h.valid():
                print(f"file: {f}: unreadable", file=sys.stderr)
                rc = 1
                continue
            print(f"{prefix}{h}  {f}")
    return rc


def cmd_hmac(ns: argparse.Namespace) -> int:
    algs = _algorithms(ns)
    macs = get_hmacs([HMACDataContainer(alg, ns.data, ns.key) for alg in algs])
    for alg in algs:
        prefix = f"HMAC-{alg} " if len(algs) > 1 else ""
        for item, hx in zip(ns.data, macs[alg]):
            print(f"{prefix}{hx}  {item}")
    return 0


def cmd_verify_core(_: argparse.Namespace) -> int:
    ok, bad = check_known_answers()
    for label, (ours, ref) in bad.items():
        print(f"{label} -> FAIL")
        print(f"  ours={ours}\n  ref ={ref}")
    print("verify-core:", "PASS" if ok else "FAIL")
    return 0 if ok else 1


def cmd_list(_: argparse.Namespace) -> int:
    for alg in Algorithm:
        print(f"{alg.display_name:<14} block={alg.block_size:<4} digest={alg.digest_size}")
    return 0


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="hashpp")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("hash", help="hex digest of each DATA argument (UTF-8)")
    s1.add_argument("--algorithm", "-a", action="append", default=None, help="repeatable; default SHA2-256")
    s1.add_argument("data", nargs="+")
    s1.set_defaults(func=cmd_hash)

    s2 = sub.add_parser("file", help="hex digest of files, recursing into directories")
    s2.add_argument("--algorithm", "-a", action="append", default=None, help="repeatable; default SHA2-256")
    s2.add_argument("paths", nargs="+")
    s2.set_defaults(func=cmd_file)

    s3 = sub.add_parser("hmac", help="hex HMAC of each DATA argument")
    s3.add_argument("--algorithm", "-a", action="append", default=None, help="repeatable; default SHA2-256")
    s3.add_argument("--key", "-k", required=True)
    s3.add_argument("data", nargs="+")
    s3.set_defaults(func=cmd_hmac)

    s4 = sub.add_parser("verify-core", help="check every algorithm against known answers and hashlib")
    s4.set_defaults(func=cmd_verify_core)

    s5 = sub.add_parser("list", help="supported algorithms")
    s5.set_defaults(func=cmd_list)

    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        return int(args.func(args))
    except UnsupportedAlgorithmError as exc:
        print(f"{args.cmd}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
