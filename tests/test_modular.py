from rlwe_wallet.utils.modular import (
    normalize, add_mod, sub_mod, mul_mod, mod_mul_vec, is_prime
)
import numpy as np


def test_normalize_folds_negatives():
    assert normalize(-1, 17) == 16
    assert normalize(-17, 17) == 0
    assert normalize(-35, 17) == 16
    assert normalize(40, 17) == 6


def test_helpers_closed_over_field():
    q = 17
    for a in range(q):
        for b in range(q):
            for op in (add_mod, sub_mod, mul_mod):
                assert 0 <= op(a, b, q) < q


def test_helpers_values():
    assert add_mod(16, 5, 17) == 4
    assert sub_mod(3, 5, 17) == 15
    assert mul_mod(16, 16, 17) == 1


def test_mul_mod_large_modulus_exact():
    q = 2**61 - 1
    a, b = q - 2, q - 3
    assert mul_mod(a, b, q) == (a * b) % q


def test_mod_mul_vec_pointwise():
    a = np.array([5, 6, 7, 8], dtype=np.int64)
    b = np.array([10, 15, 7, 6], dtype=np.int64)
    out = mod_mul_vec(a, b, 17)
    assert out.tolist() == [16, 5, 15, 14]
    assert out.dtype == np.int64


def test_is_prime():
    assert [p for p in range(30) if is_prime(p)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert is_prime(40961)
    assert not is_prime(9)
    assert not is_prime(-7)
