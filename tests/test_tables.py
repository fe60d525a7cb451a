import pytest

from hashbench.hashing import hash_modular, hash_xor_shift
from hashbench.tables import (
    HashTableLinear,
    HashTableQuadratic,
    HashTableRobinHood,
    HashTableSeparateChaining,
    TwoChoiceHashing,
)

FACTORIES = {
    "linear": lambda m, h: HashTableLinear(m, h),
    "quadratic": lambda m, h: HashTableQuadratic(m, h),
    "robinhood": lambda m, h: HashTableRobinHood(m, h),
    "chaining": lambda m, h: HashTableSeparateChaining(m, h),
    "twochoice": lambda m, h: TwoChoiceHashing(m, h, hash_xor_shift),
}

ALL = list(FACTORIES)
REJECTS_DUPLICATES = ["linear", "quadratic", "robinhood", "chaining"]


@pytest.mark.parametrize("kind", ALL)
def test_remove_missing_key(kind):
    table = FACTORIES[kind](20, hash_modular)
    table.insert(3)
    assert table.remove(4) is False


@pytest.mark.parametrize("kind", REJECTS_DUPLICATES)
def test_duplicate_insert_rejected(kind):
    table = FACTORIES[kind](20, hash_modular)
    assert table.insert(5) is True
    assert table.insert(5) is False


@pytest.mark.parametrize("kind", ALL)
def test_invalid_size(kind):
    with pytest.raises(ValueError):
        FACTORIES[kind](0, hash_modular)


@pytest.mark.parametrize("kind", ALL)
def test_negative_hash_values_are_wrapped(kind):
    table = FACTORIES[kind](11, lambda k, m: -k - 1)
    keys = [1, 2, 30, 41]
    assert all(table.insert(k) for k in keys)
    assert all(table.remove(k) for k in keys)


@pytest.mark.parametrize("kind", ["linear", "robinhood", "twochoice"])
def test_full_table_rejects_new_key(kind):
    size = 5
    table = FACTORIES[kind](size, hash_modular)
    assert all(table.insert(k) for k in range(size))
    assert table.insert(size) is False


@pytest.mark.parametrize("kind", ALL)
def test_probe_counters_never_decrease(kind):
    table = FACTORIES[kind](30, hash_modular)
    previous = (0, 0)
    for k in range(0, 300, 10):
        table.insert(k)
        table.remove(k + 1)
        current = (table.insert_probes, table.remove_probes)
        assert current[0] >= previous[0] and current[1] >= previous[1]
        previous = current


def test_linear_one_probe_per_insert_without_collisions():
    table = HashTableLinear(100, hash_modular)
    keys = list(range(40))
    for k in keys:
        table.insert(k)
    assert table.insert_probes == len(keys)


def test_linear_full_table_scans_every_slot():
    size = 8
    table = HashTableLinear(size, hash_modular)
    for k in range(size):
        table.insert(k)
    before = table.insert_probes
    table.insert(size)
    assert table.insert_probes - before == size


def test_linear_tombstone_does_not_stop_search():
    table = HashTableLinear(10, hash_modular)
    table.insert(0)
    table.insert(10)
    assert table.remove(0) is True
    assert table.remove(10) is True


def test_linear_tombstone_is_reused():
    table = HashTableLinear(10, hash_modular)
    table.insert(0)
    table.insert(10)
    table.remove(0)
    # The freed slot is taken before the later copy of 10 is seen.
    assert table.insert(10) is True
    assert table.remove(10) is True
    assert table.remove(10) is True
    assert table.remove(10) is False


def test_linear_reset_probes():
    table = HashTableLinear(10, hash_modular)
    for k in (1, 11, 21):
        table.insert(k)
    table.remove(21)
    table.reset_probes()
    assert (table.insert_probes, table.remove_probes) == (0, 0)


def test_quadratic_collisions_all_found():
    table = HashTableQuadratic(10, hash_modular)
    for k in (0, 10, 20):
        assert table.insert(k) is True
    assert table.remove(20) is True
    assert table.remove(30) is False
    assert table.remove(10) is True


def test_robinhood_displacement_keeps_keys_reachable():
    table = HashTableRobinHood(10, hash_modular)
    for k in (0, 1, 10):
        assert table.insert(k) is True
    assert table.insert(10) is False
    for k in (1, 10, 0):
        assert table.remove(k) is True


def test_robinhood_deleted_slot_reused():
    table = HashTableRobinHood(4, hash_modular)
    for k in range(4):
        table.insert(k)
    table.remove(2)
    assert table.insert(6) is True
    assert table.remove(6) is True


def test_chaining_never_fills():
    table = HashTableSeparateChaining(3, hash_modular)
    keys = list(range(100))
    assert all(table.insert(k) for k in keys)
    assert all(table.remove(k) for k in keys)


def test_chaining_first_insert_costs_no_probe():
    table = HashTableSeparateChaining(10, hash_modular)
    table.insert(4)
    assert table.insert_probes == 0


def test_chaining_duplicate_check_probes():
    table = HashTableSeparateChaining(10, hash_modular)
    table.insert(4)
    table.insert(4)
    assert table.insert_probes == 1


def test_two_choice_uses_second_slot_without_probing():
    table = TwoChoiceHashing(10, lambda k, m: 0, hash_modular)
    for k in range(1, 6):
        assert table.insert(k) is True
    assert table.insert_probes == 0
    assert all(table.remove(k) for k in range(1, 6))


def test_two_choice_fallback_probing():
    table = TwoChoiceHashing(10, lambda k, m: 0, lambda k, m: 0)
    for k in (1, 2, 3):
        assert table.insert(k) is True
    assert table.insert_probes > 0
    assert table.remove(3) is True
    assert table.remove(3) is False


def test_two_choice_remove_counts_candidate_checks():
    table = TwoChoiceHashing(10, hash_modular, hash_xor_shift)
    table.insert(7)
    table.remove(7)
    assert table.remove_probes >= 1