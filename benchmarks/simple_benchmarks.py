from timeit import timeit

from forklisp.interpreter import Interpreter
from forklisp.reader.parser import read
from forklisp.evaluation.evaluator import evaluate
from forklisp.types.atom import Atom
from forklisp.types.environment import Environment, Frame
from forklisp.types.pair import from_iterable


def time_mode(code: str, rounds: int, parallel: bool) -> float:
    """Time evaluation only: parse once, then evaluate the same tree repeatedly."""
    with Interpreter(parallel=parallel) as itp:
        expr = read(code)
        # Warmup
        evaluate(expr, itp.global_env(), itp.arguments)
        # Timed
        return timeit(lambda: evaluate(expr, itp.global_env(), itp.arguments), number=rounds)


# Environment lookup through a long chain of frames (no evaluation involved)

def bench_lookup_chain(n_frames: int = 1000, n_lookups: int = 10000) -> float:
    key = Atom("answer")
    env = Environment(Frame(from_iterable([key]), from_iterable([Atom("42")])))
    filler = from_iterable([Atom("x")])
    for _ in range(n_frames):
        env = env.extend(Frame(filler, filler))
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

TAIL_RECURSION_CODE = r"""
(letrec ((fact (lambda (n acc)
                 (if (< n 2)
                     acc
                     (fact (- n 1) (* n acc))))))
  (fact 100 1))
"""

# Tree recursion: each call has two independent recursive arguments
FIB_CODE = r"""
(letrec ((fib (lambda (n)
                (if (< n 2)
                    n
                    (+ (fib (- n 1)) (fib (- n 2)))))))
  (fib 15))
"""


def _print_pair(name: str, code: str, rounds: int) -> None:
    tseq = time_mode(code, rounds, parallel=False)
    tpar = time_mode(code, rounds, parallel=True)
    print(f"Benchmark: {name}")
    print(f"  sequential: {tseq:.6f}s  |  parallel: {tpar:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_pair("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_pair("tail recursion (factorial)", TAIL_RECURSION_CODE, rounds=500)
    _print_pair("tree recursion (fib 15)", FIB_CODE, rounds=5)
