from __future__ import annotations

import logging
from typing import Optional

from forklisp import LispValue
from forklisp.builtin.primitives import global_environment
from forklisp.config import RunConfig
from forklisp.evaluation.arguments import ArgumentStrategy, ParallelArguments, SequentialArguments
from forklisp.evaluation.evaluator import evaluate
from forklisp.printer import to_string
from forklisp.reader.parser import read
from forklisp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates one forklisp program at a time.

    The argument evaluation mode (sequential or fork-join parallel) is fixed
    when the interpreter is created and used for every call it evaluates.
    Each program runs against a fresh global environment.
    """

    DefaultMaxWorkers: int = RunConfig.max_workers

    def __init__(self, parallel: bool = False, max_workers: Optional[int] = None):
        self.parallel = parallel
        self.arguments: ArgumentStrategy
        if parallel:
            self.arguments = ParallelArguments(
                self.DefaultMaxWorkers if max_workers is None else max_workers
            )
        else:
            self.arguments = SequentialArguments()
        logger.debug("Interpreter created (parallel=%s)", parallel)

    @classmethod
    def from_config(cls, config: RunConfig) -> Interpreter:
        return cls(parallel=config.parallel, max_workers=config.max_workers)

    @staticmethod
    def global_env() -> Environment:
        return global_environment()

    def eval(self, code: str) -> LispValue:
        """Read one program from `code` and return its value."""
        return evaluate(read(code), self.global_env(), self.arguments)

    def run(self, code: str) -> str:
        """Evaluate `code` and return the printed form of the result."""
        return to_string(self.eval(code))

    def close(self) -> None:
        self.arguments.close()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def run(code: str, parallel: bool = False, max_workers: Optional[int] = None) -> str:
    """Evaluate one program in a fresh interpreter and return its printed result."""
    with Interpreter(parallel=parallel, max_workers=max_workers) as interp:
        return interp.run(code)
