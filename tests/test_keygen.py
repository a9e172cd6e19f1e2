import numpy as np

from rlwe_wallet.models import ExchangeParams
from rlwe_wallet.utils.keygen import (
    sample_poly, generate_keypair, encapsulate, decapsulate
)
from rlwe_wallet.utils.transform import forward


def test_sample_poly_range(vp16: ExchangeParams):
    r = sample_poly(vp16)
    assert r.shape == (16,)
    assert r.dtype == np.int64
    assert np.all((r >= 0) & (r < vp16.q))


def test_public_key_is_forward_of_private_key(vp16: ExchangeParams):
    for _ in range(20):
        kp = generate_keypair(vp16)
        assert np.array_equal(kp.public_key, forward(kp.private_key, vp16))


def test_scenario_fixed_inputs(vp: ExchangeParams):
    private_key = [1, 2, 3, 4]
    public_key = forward(private_key, vp)
    assert public_key.tolist() == [10, 15, 7, 6]

    enc = encapsulate(public_key, vp, r=[5, 6, 7, 8])
    assert enc.ciphertext.tolist() == [9, 15, 7, 6]
    assert enc.shared_secret.tolist() == [16, 5, 15, 14]

    receiver = decapsulate(enc.ciphertext, private_key, vp)
    assert receiver.tolist() == enc.shared_secret.tolist()


def test_agreement_small_params(vp: ExchangeParams):
    for _ in range(200):
        kp = generate_keypair(vp)
        enc = encapsulate(kp.public_key, vp)
        assert np.array_equal(decapsulate(enc.ciphertext, kp.private_key, vp), enc.shared_secret)


def test_agreement_default_params(vp_default: ExchangeParams):
    kp = generate_keypair(vp_default)
    enc = encapsulate(kp.public_key, vp_default)
    receiver = decapsulate(enc.ciphertext, kp.private_key, vp_default)
    assert np.array_equal(receiver, enc.shared_secret)


def test_decapsulate_leaves_inputs_untouched(vp16: ExchangeParams):
    kp = generate_keypair(vp16)
    enc = encapsulate(kp.public_key, vp16)
    ct_before = enc.ciphertext.copy()
    sk_before = kp.private_key.copy()
    decapsulate(enc.ciphertext, kp.private_key, vp16)
    assert np.array_equal(enc.ciphertext, ct_before)
    assert np.array_equal(kp.private_key, sk_before)


def test_encapsulate_leaves_public_key_untouched(vp: ExchangeParams):
    pk = np.array([10, 15, 7, 6], dtype=np.int64)
    encapsulate(pk, vp, r=[5, 6, 7, 8])
    assert pk.tolist() == [10, 15, 7, 6]


def test_fresh_randomness_per_encapsulation(vp_default: ExchangeParams):
    kp = generate_keypair(vp_default)
    a = encapsulate(kp.public_key, vp_default)
    b = encapsulate(kp.public_key, vp_default)
    assert not np.array_equal(a.ciphertext, b.ciphertext)
