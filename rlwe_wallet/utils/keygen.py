import secrets
import numpy as np
from typing import Optional

from rlwe_wallet.models import ExchangeParams, KeyPair, Encapsulation
from rlwe_wallet.utils.modular import mod_mul_vec
from rlwe_wallet.utils.transform import to_poly, forward, backward

# -----------------------------
# Sampling
# -----------------------------
def sample_poly(params: ExchangeParams) -> np.ndarray:
    """
    Samples n independent coefficients uniformly from [0, q).

    Draws from the operating system CSPRNG; each call is fresh and no
    sample is ever shared between polynomials.
    """
    return np.array([secrets.randbelow(params.q) for _ in range(params.n)], dtype=np.int64)

# -----------------------------
# Key Exchange
# -----------------------------
def generate_keypair(params: ExchangeParams) -> KeyPair:
    """
    Generates a key pair for the transform-based exchange.

    The private key is a uniform polynomial s; the public key is forward(s).

    Args:
        params: Validated exchange parameters

    Returns:
        KeyPair with private_key and public_key
    """
    private_key = sample_poly(params)
    public_key = forward(private_key, params)
    return KeyPair(private_key=private_key, public_key=public_key)

def encapsulate(public_key, params: ExchangeParams, r: Optional[np.ndarray] = None) -> Encapsulation:
    """
    Sender side of the exchange.

    Samples fresh randomness r (unless one is supplied) and publishes
    forward(r) as the ciphertext. The sender's shared value multiplies the
    untransformed r against the transformed public key:

        ciphertext    = forward(r)
        shared_secret = r * public_key      (pointwise mod q)

    Args:
        public_key: Receiver's public key, forward(s)
        params: Validated exchange parameters
        r: Encapsulation randomness; sampled when omitted

    Returns:
        Encapsulation with ciphertext and shared_secret
    """
    r = sample_poly(params) if r is None else to_poly(r, params)
    pk = to_poly(public_key, params)
    ciphertext = forward(r, params)
    shared_secret = mod_mul_vec(r, pk, params.q)
    return Encapsulation(ciphertext=ciphertext, shared_secret=shared_secret)

def decapsulate(ciphertext, private_key, params: ExchangeParams) -> np.ndarray:
    """
    Receiver side of the exchange.

    backward inverts forward exactly, so backward(ciphertext) recovers r
    and forward(private_key) rebuilds the public key:

        shared_secret = backward(ciphertext) * forward(private_key)

    which equals the sender's r * public_key coefficient for coefficient.
    Both inputs are copied; the caller's arrays are left untouched.

    Args:
        ciphertext: forward(r) from encapsulate
        private_key: Receiver's private polynomial s
        params: Validated exchange parameters

    Returns:
        Receiver's shared secret (new array)
    """
    r = backward(ciphertext, params)
    pk = forward(private_key, params)
    return mod_mul_vec(r, pk, params.q)
