import hashlib
import pytest

from rlwe_wallet.errors import EntropyLengthInvalid
from rlwe_wallet.utils.entropy import derive_entropy, check_entropy


def test_entropy_is_sha256_of_decimal_text():
    shared = [16, 5, 15, 14]
    assert derive_entropy(shared) == hashlib.sha256(b"1651514").digest()


def test_entropy_deterministic_and_32_bytes():
    shared = list(range(1024))
    first = derive_entropy(shared)
    assert len(first) == 32
    assert derive_entropy(shared) == first


def test_entropy_changes_with_coefficients():
    assert derive_entropy([16, 5, 15, 14]) != derive_entropy([16, 5, 15, 13])
    assert derive_entropy([16, 5, 15, 14]) != derive_entropy([5, 16, 15, 14])


def test_entropy_has_no_coefficient_separator():
    assert derive_entropy([1, 23]) == derive_entropy([12, 3])


def test_check_entropy():
    assert check_entropy(b"\x01" * 32) == b"\x01" * 32
    for size in (0, 31, 33):
        with pytest.raises(EntropyLengthInvalid):
            check_entropy(b"\x01" * size)
