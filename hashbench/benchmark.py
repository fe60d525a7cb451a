"""Benchmark of hash-table collision strategies, written as a semicolon-separated CSV."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, TextIO

from hashbench.hashing import (
    hash_modular,
    hash_multiplicative,
    hash_universal,
    hash_xor_shift,
)
from hashbench.tables import (
    HashTableLinear,
    HashTableQuadratic,
    HashTableRobinHood,
    HashTableSeparateChaining,
    TwoChoiceHashing,
)

HashFunc = Callable[[int, int], int]
KeyGenerator = Callable[[int, int], list[int]]
ProgressCallback = Callable[[int, int, str], None]

CSV_HEADER = (
    "Przypadek;Rozmiar;Wypełnienie;Funkcja;Strategia;"
    "CzasInsert[ms];AvgInsertProbes;CzasRemove[ms];AvgRemoveProbes\n"
)

DEFAULT_TABLE_SIZES: tuple[int, ...] = tuple(range(10_000, 100_001, 10_000))
DEFAULT_FILL_FACTORS: tuple[float, ...] = (0.25, 0.50, 0.75, 0.90, 0.99)
DEFAULT_OUTPUT = "testy.csv"


class ProbingTable(Protocol):
    insert_probes: int
    remove_probes: int

    def insert(self, key: int) -> bool: ...

    def remove(self, key: int) -> bool: ...


@dataclass(frozen=True)
class Measurement:
    """Timings in milliseconds and average probe counts per key."""

    insert_ms: float
    avg_insert_probes: float
    remove_ms: float
    avg_remove_probes: float


def gen_optimistic(n: int, m: int) -> list[int]:
    """Keys spaced by a thousand: 0, 1000, 2000, ..."""
    return [i * 1_000 for i in range(n)]


def gen_average(n: int, m: int) -> list[int]:
    """Consecutive keys: 0, 1, 2, ..."""
    return list(range(n))


def gen_pessimistic(n: int, m: int) -> list[int]:
    """Multiples of the table size, which collide under the division method."""
    return [i * m for i in range(n)]


HASH_FUNCTIONS: tuple[tuple[str, HashFunc], ...] = (
    ("Modular", hash_modular),
    ("Multiplicative", hash_multiplicative),
    ("XOR+Shift", hash_xor_shift),
    ("Universal", hash_universal),
)

DATA_CASES: tuple[tuple[str, KeyGenerator], ...] = (
    ("Optymistyczny", gen_optimistic),
    ("Średni", gen_average),
    ("Pesymistyczny", gen_pessimistic),
)

STRATEGIES: tuple[tuple[str, Callable[[int, HashFunc], ProbingTable]], ...] = (
    ("Linear", HashTableLinear),
    ("Quadratic", HashTableQuadratic),
    ("RobinHood", HashTableRobinHood),
    ("SeparateChain", HashTableSeparateChaining),
    ("TwoChoice", lambda m, h: TwoChoiceHashing(m, h, hash_xor_shift)),
)


def _elapsed_ms(start_ns: int, end_ns: int) -> float:
    # Whole microseconds, expressed in milliseconds.
    return ((end_ns - start_ns) // 1_000) / 1000.0


def measure(table: ProbingTable, keys: Iterable[int], n: int) -> Measurement:
    """Insert then remove every key, timing both passes and averaging probes over ``n``."""
    if n <= 0:
        raise ValueError(f"key count must be positive, got {n}")
    keys = list(keys)

    t0 = time.perf_counter_ns()
    for key in keys:
        table.insert(key)
    t1 = time.perf_counter_ns()

    t2 = time.perf_counter_ns()
    for key in keys:
        table.remove(key)
    t3 = time.perf_counter_ns()

    return Measurement(
        insert_ms=_elapsed_ms(t0, t1),
        avg_insert_probes=table.insert_probes / n,
        remove_ms=_elapsed_ms(t2, t3),
        avg_remove_probes=table.remove_probes / n,
    )


def _format_row(
    case_name: str, m: int, fill: float, hash_name: str, strategy: str, result: Measurement
) -> str:
    return (
        f"{case_name};{m};{int(fill * 100)};{hash_name};{strategy};"
        f"{result.insert_ms:.3f};{result.avg_insert_probes:.3f};"
        f"{result.remove_ms:.3f};{result.avg_remove_probes:.3f}\n"
    )


def run_benchmark(
    output: TextIO,
    table_sizes: Sequence[int] | None = None,
    fill_factors: Sequence[float] | None = None,
    progress: ProgressCallback | None = None,
) -> int:
    """Run every case, size, fill, hash function and strategy; write CSV rows to ``output``.

    Returns the number of data rows written. ``progress`` receives
    ``(step, total, strategy)`` after each row.
    """
    sizes = list(DEFAULT_TABLE_SIZES if table_sizes is None else table_sizes)
    fills = list(DEFAULT_FILL_FACTORS if fill_factors is None else fill_factors)
    total = len(sizes) * len(fills) * len(HASH_FUNCTIONS) * len(DATA_CASES) * len(STRATEGIES)

    output.write(CSV_HEADER)
    step = 0
    for case_name, generate in DATA_CASES:
        for m in sizes:
            for fill in fills:
                n = int(m * fill)
                keys = generate(n, m)
                for hash_name, hash_func in HASH_FUNCTIONS:
                    for strategy, make_table in STRATEGIES:
                        result = measure(make_table(m, hash_func), keys, n)
                        output.write(_format_row(case_name, m, fill, hash_name, strategy, result))
                        step += 1
                        if progress is not None:
                            progress(step, total, strategy)
    return step


def _print_progress(step: int, total: int, strategy: str) -> None:
    print(f"[{step}/{total}] {strategy:<16}", end="\r", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: run the benchmark and save the CSV file."""
    parser = argparse.ArgumentParser(
        prog="hashbench", description="Benchmark hash-table collision strategies."
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="CSV file to write")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=list(DEFAULT_TABLE_SIZES), help="table sizes"
    )
    parser.add_argument(
        "--fills", type=float, nargs="+", default=list(DEFAULT_FILL_FACTORS), help="fill factors"
    )
    args = parser.parse_args(argv)

    with open(args.output, "w", encoding="utf-8", newline="") as csv_file:
        run_benchmark(csv_file, args.sizes, args.fills, _print_progress)

    print(f"\n Testy zakończone. Wyniki zapisano do pliku {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())