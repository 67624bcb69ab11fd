from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import List, Optional

from .config import DEFAULT_FORMATTER, DEFAULT_OUTPUT, DEFAULT_PKGNAME, GeneratorConfig
from .generator import OutputError, generate


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="assetc", description="Embed directory trees into generated Python modules with a WSGI runtime.")
    p.add_argument("roots", nargs="+", metavar="ROOT", help="Directory (or file) to embed; repeatable")
    p.add_argument("-pkgname", "--pkgname", default=DEFAULT_PKGNAME, help="Package named in the generated modules (default: main)")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Output base; writes <o>data.py and <o>.py (default: assets)")
    p.add_argument("-nc", "--no-compress", dest="no_compress", action="store_true", help="Do not store gzip-compressed copies")
    p.add_argument("--formatter", default=" ".join(DEFAULT_FORMATTER), help="Command run on each generated file; empty disables (default: %(default)s)")
    p.add_argument("-w", "--warn", action="store_true", help="Report unreadable files and other diagnostics on stderr")
    p.add_argument("--report", default=None, help="Write a JSON build report to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = GeneratorConfig(
        roots=args.roots,
        pkgname=args.pkgname,
        output=args.output,
        no_compress=args.no_compress,
        formatter=shlex.split(args.formatter),
        report=args.report,
    )
    try:
        result = generate(cfg)
    except OutputError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.warn:
        for d in result.diagnostics:
            print(f"warning: {d}", file=sys.stderr)
    print(f"OK. assets={len(result.registry)} data={result.data_path} runtime={result.runtime_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
