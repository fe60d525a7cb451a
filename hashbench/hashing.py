"""Integer and string hash functions used by the hash tables."""

from __future__ import annotations

import math
import random

_GOLDEN_RATIO_FRACTION = 0.618033988749894848
_MERSENNE_PRIME = 2_147_483_647
_DJB2_SEED = 5381
_UINT64_MASK = (1 << 64) - 1

_rng = random.SystemRandom()
_UNIVERSAL_A = _rng.randint(1, _MERSENNE_PRIME - 1)
_UNIVERSAL_B = _rng.randint(0, _MERSENNE_PRIME - 1)


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def wrap(h: int, m: int) -> int:
    """Fold any hash value ``h`` into the index range of a table of size ``m``."""
    return _trunc_mod(_trunc_mod(h, m) + m, m)


def hash_modular(key: int, m: int) -> int:
    """Division method: the key modulo the table size."""
    return wrap(key, m)


def hash_multiplicative(key: int, m: int) -> int:
    """Knuth's multiplicative method using the fractional golden ratio.

    Negative keys give a result in ``(-m, 0]``; tables fold it with :func:`wrap`.
    """
    frac = math.fmod(key * _GOLDEN_RATIO_FRACTION, 1.0)
    return int(m * frac)


def hash_xor_shift(key: int, m: int) -> int:
    """Mix the high half of the key into the low half, then reduce modulo ``m``."""
    key ^= key >> 16
    return wrap(key, m)


def hash_universal(key: int, m: int) -> int:
    """Universal hash ``((a*key + b) mod p) mod m`` with ``a`` and ``b`` drawn once per process."""
    h = _trunc_mod(_UNIVERSAL_A * key + _UNIVERSAL_B, _MERSENNE_PRIME)
    return _trunc_mod(h, m)


def hash_djb2(text: str | bytes, m: int) -> int:
    """Bernstein's djb2 string hash over the UTF-8 bytes of ``text``, modulo ``m``."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    h = _DJB2_SEED
    for byte in data:
        h = ((h << 5) + h + byte) & _UINT64_MASK
    return h % m