"""Command-line driver: read a program, evaluate it, print the result.

    python -m forklisp [-p] [--max-workers N] [--no-echo] [--log-level L] [FILE]
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Optional, Sequence

from forklisp.config import RunConfig
from forklisp.errors import ForkLispError
from forklisp.interpreter import Interpreter
from forklisp.logging_config import setup_logging

logger = logging.getLogger("forklisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forklisp",
        description="Evaluate one S-expression program and print its value.",
    )
    parser.add_argument("file", nargs="?", help="program file (default: stdin)")
    parser.add_argument(
        "-p", "--parallel", action="store_true", default=None,
        help="evaluate call arguments concurrently (fork-join)",
    )
    parser.add_argument("--max-workers", type=int, default=None, help="fan-out cap for -p")
    parser.add_argument(
        "--no-echo", dest="echo", action="store_false",
        help="do not echo the program text before the result",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_env().override(
        parallel=args.parallel, max_workers=args.max_workers, log_level=args.log_level
    )
    setup_logging(config.log_level)

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
        else:
            source = sys.stdin.read()
    except OSError as e:
        print(f"error: cannot read program: {e}", file=sys.stderr)
        return 1

    if args.echo:
        print(source)

    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.recursion_limit))
    if config.parallel:
        threading.stack_size(config.thread_stack_size)

    try:
        with Interpreter.from_config(config) as interp:
            result = interp.run(source)
    except ForkLispError as e:
        logger.debug("Evaluation aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: recursion too deep", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
