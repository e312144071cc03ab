"""Argument evaluation strategies.

A strategy turns a list of unevaluated expressions into the list of their
values, in the same order. `SequentialArguments` evaluates left to right on
the calling thread. `ParallelArguments` forks one task per operand onto a
bounded thread pool and joins the results in list order.

The strategy is chosen once per interpreter and passed down through every
evaluation, so nested calls inherit it.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Protocol

from forklisp import EvaluatorFn, SExpression
from forklisp.types.environment import Environment
from forklisp.types.pair import Pair, from_iterable, iter_list, to_list

logger = logging.getLogger(__name__)


class ArgumentStrategy(Protocol):
    parallel: bool

    def evaluate_all(
        self, exprs: SExpression, env: Environment, evaluate_fn: EvaluatorFn
    ) -> SExpression: ...

    def close(self) -> None: ...


class SequentialArguments:
    parallel = False

    def evaluate_all(
        self, exprs: SExpression, env: Environment, evaluate_fn: EvaluatorFn
    ) -> SExpression:
        return from_iterable([evaluate_fn(e, env, self) for e in iter_list(exprs)])

    def close(self) -> None:
        pass


class ParallelArguments:
    """
    Fork-join evaluation of argument lists.

    The first element is evaluated on the calling thread; every remaining
    element gets its own task. At most `max_workers` tasks are in flight
    across the whole interpreter. When the cap is reached the operand is
    evaluated inline by the calling thread instead, so a task blocked on
    its own children can never starve the pool.

    Evaluation order across tasks is unspecified; the result list is always
    in declaration order. A failure in any task is re-raised when that task
    is joined.
    """

    parallel = True

    def __init__(self, max_workers: int):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="forklisp-evlis"
        )
        self._slots = threading.BoundedSemaphore(max_workers)

    def evaluate_all(
        self, exprs: SExpression, env: Environment, evaluate_fn: EvaluatorFn
    ) -> SExpression:
        if not isinstance(exprs, Pair):
            return from_iterable(iter_list(exprs))
        head = evaluate_fn(exprs.car, env, self)
        pending = [self._fork(e, env, evaluate_fn) for e in to_list(exprs.cdr)]
        return Pair(head, from_iterable([future.result() for future in pending]))

    def _fork(self, expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> Future:
        if self._slots.acquire(blocking=False):
            try:
                return self._executor.submit(self._run, expr, env, evaluate_fn)
            except BaseException:
                self._slots.release()
                raise
        logger.debug("Fan-out cap of %d reached; evaluating %s inline", self.max_workers, expr)
        future: Future = Future()
        future.set_result(evaluate_fn(expr, env, self))
        return future

    def _run(self, expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn):
        try:
            return evaluate_fn(expr, env, self)
        finally:
            self._slots.release()

    def close(self) -> None:
        logger.debug("Shutting down argument worker pool")
        self._executor.shutdown(wait=True, cancel_futures=True)
