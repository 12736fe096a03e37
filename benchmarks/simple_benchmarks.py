from timeit import timeit

from tenet.interpreter import Interpreter
from tenet.types.environment import Environment


def time_compiled(code: str, rounds: int) -> float:
    """Time repeated calls of one compiled rule (lex/parse happens once)."""
    itp = Interpreter(max_ops=None)
    rule = itp.compile(code)
    # Warmup
    rule({"a": 5})
    # Timed
    return timeit(lambda: rule({"a": 5}), number=rounds)


def time_run(code: str, rounds: int) -> float:
    """Time `run`, which lexes and parses the rule on every call."""
    itp = Interpreter(max_ops=None)
    itp.run(code, {"a": 5})
    return timeit(lambda: itp.run(code, {"a": 5}), number=rounds)


def bench_lookup_stack(n_frames: int = 1000, n_lookups: int = 10000) -> float:
    # Binding lives in the oldest frame, so every lookup walks the whole stack
    env = Environment([{"answer": 42}])
    for i in range(n_frames):
        env.push({f"v{i}": i})
    # Warmup
    for _ in range(1000):
        env.resolve("answer")
    # Timed
    return timeit(lambda: env.resolve("answer"), number=n_lookups)


ARITH_CODE = "(+ (* a 2) (- a 1) (/ a 2) (% a 3))"

COND_CODE = r"""
(cond (= a 1) "one"
      (= a 2) "two"
      (and (> a 3) (< a 10)) (str "mid-" a)
      "other")
"""

NESTED_IF_CODE = r"""
(if (> a 2)
    (if (< a 4) "three" (upcase (str "big" (length (array 1 2 a)))))
    "small")
"""


def _print_pair(name: str, code: str, rounds: int) -> None:
    tcompiled = time_compiled(code, rounds)
    trun = time_run(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  compiled: {tcompiled:.6f}s  |  run (re-parse): {trun:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup through a deep frame stack")
    print(f"  time: {bench_lookup_stack():.6f}s")

    _print_pair("arithmetic", ARITH_CODE, rounds=20000)
    _print_pair("cond dispatch", COND_CODE, rounds=20000)
    _print_pair("nested if", NESTED_IF_CODE, rounds=20000)
