# hashbench

Measures how different hash-table collision strategies behave with different
integer hash functions, and writes the timings and probe counts to a
semicolon-separated CSV file.

## What it compares

Strategies, in `hashbench.tables`:

- `HashTableLinear`: open addressing with linear probing and tombstones;
  also has `reset_probes()` to zero its counters
- `HashTableQuadratic`: open addressing with quadratic probing
  (offsets 0, 1, 4, 9, ...)
- `HashTableRobinHood`: linear probing where a key that is farther from its
  home slot displaces a key that is nearer to its own
- `HashTableSeparateChaining`: one chain per bucket, new keys at the front
- `TwoChoiceHashing`: tries the slots given by two hash functions, then falls
  back to linear probing from the first

Hash functions, in `hashbench.hashing`:

- `hash_modular(key, m)`: the key modulo `m`
- `hash_multiplicative(key, m)`: multiplicative method with the fractional
  golden ratio (negative keys give a value in `(-m, 0]`)
- `hash_xor_shift(key, m)`: `key ^ (key >> 16)` modulo `m`
- `hash_universal(key, m)`: `((a*key + b) mod 2147483647) mod m`, with `a`
  and `b` drawn once per process
- `hash_djb2(text, m)`: djb2 over the UTF-8 bytes of a string (or over bytes)
- `wrap(h, m)`: folds any integer into `[0, m)` for a positive `m`

Key sets, in `hashbench.benchmark`:

- `gen_optimistic(n, m)`: `0, 1000, 2000, ...`
- `gen_average(n, m)`: `0, 1, 2, ...`
- `gen_pessimistic(n, m)`: multiples of `m`, which all collide under
  `hash_modular`

## Running the benchmark

```
pip install .
hashbench
```

By default every combination of key set, table size (10 000 to 100 000 in
steps of 10 000), fill factor (0.25, 0.50, 0.75, 0.90, 0.99), hash function and
strategy is run. Each run builds a fresh table, inserts every key, then removes
every key. One line per run is written to `testy.csv`, with the columns

```
Przypadek;Rozmiar;Wypełnienie;Funkcja;Strategia;CzasInsert[ms];AvgInsertProbes;CzasRemove[ms];AvgRemoveProbes
```

that is: key set, table size, fill percentage, hash function, strategy, insert
time in milliseconds, average insert probes per key, remove time in
milliseconds and average remove probes per key. Progress is shown on the
terminal as the runs go.

Options:

- `-o`, `--output FILE`: CSV file to write (default `testy.csv`)
- `--sizes N [N ...]`: table sizes to run
- `--fills F [F ...]`: fill factors to run

For example, a quick run:

```
hashbench --sizes 1000 2000 --fills 0.5 0.9 -o quick.csv
```

## Using it from Python

```python
from hashbench.hashing import hash_modular, hash_xor_shift
from hashbench.tables import HashTableRobinHood, TwoChoiceHashing

table = HashTableRobinHood(101, hash_modular)
table.insert(42)      # True
table.insert(42)      # False, already present
table.remove(42)      # True
print(table.insert_probes, table.remove_probes)

two = TwoChoiceHashing(101, hash_modular, hash_xor_shift)
two.insert(7)
```

Every table is built from a size and a hash function (`TwoChoiceHashing` takes
a second one); a size below 1 raises `ValueError`. `insert` and `remove`
return `True` on success and `False` otherwise. Each table counts its probes in
`insert_probes` and `remove_probes`.

`hashbench.benchmark.measure(table, keys, n)` inserts and removes the keys on
one table and returns a `Measurement` with `insert_ms`, `avg_insert_probes`,
`remove_ms` and `avg_remove_probes`; `n` must be positive.
`run_benchmark(output, table_sizes, fill_factors, progress)` writes the CSV
header and rows to an open text stream and returns the number of rows;
`progress`, if given, is called with `(step, total, strategy)` after each row.

## What the tables do not do

They are instruments for counting probes, not general containers:

- keys are integers only, and there is no lookup or iteration; only `insert`
  and `remove`
- tables never grow; once full, `insert` returns `False`
- duplicate detection is limited by each strategy's probing: the open-addressing
  tables stop at the first empty or deleted slot, and `TwoChoiceHashing` only
  checks for the key during its fallback probing, so a key may be stored twice

## Tests

```
pip install .[test]
pytest
```