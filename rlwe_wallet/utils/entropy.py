from cryptography.hazmat.primitives import hashes

from rlwe_wallet.errors import EntropyLengthInvalid

ENTROPY_BYTES = 32

# -----------------------------
# Entropy Derivation
# -----------------------------
def derive_entropy(shared_secret) -> bytes:
    """
    Reduces a shared secret polynomial to 32 bytes of key material.

    Each coefficient is fed, in order, as its decimal ASCII text into a
    streaming SHA-256. There is no separator between coefficients, so the
    digest is a function of the concatenated decimal string: [1, 23] and
    [12, 3] hash identically. Keep this encoding; changing it changes every
    derived wallet.

    Args:
        shared_secret: Sequence of non-negative integers

    Returns:
        32-byte SHA-256 digest
    """
    digest = hashes.Hash(hashes.SHA256())
    for coeff in shared_secret:
        digest.update(str(int(coeff)).encode("ascii"))
    return digest.finalize()

def check_entropy(entropy: bytes) -> bytes:
    """
    Guards the hand-off to key derivation.

    Raises:
        EntropyLengthInvalid: If entropy is not exactly 32 bytes
    """
    if len(entropy) != ENTROPY_BYTES:
        raise EntropyLengthInvalid(f"Invalid private key length: expected {ENTROPY_BYTES} bytes, got {len(entropy)}.")
    return entropy
