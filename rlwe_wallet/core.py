import logging
import numpy as np

from rlwe_wallet.errors import ParameterInvalid, EntropyLengthInvalid
from rlwe_wallet.models import (
    ExchangeParams, ExchangeOutcome, Status, validate_parameters
)
from rlwe_wallet.utils.keygen import generate_keypair, encapsulate, decapsulate
from rlwe_wallet.utils.entropy import derive_entropy, check_entropy
from rlwe_wallet.utils.wallets import btc_keys, eth_keys

_logger = logging.getLogger(__name__)

# -----------------------------
# Exchange Run
# -----------------------------
def exchange(params: ExchangeParams) -> bytes:
    """
    Runs one complete exchange and returns the derived entropy.

    Key generation, encapsulation, decapsulation and entropy derivation,
    in that order, with the two shared secrets compared before anything is
    derived from them.

    Args:
        params: Validated exchange parameters

    Returns:
        32 bytes of entropy from the receiver's shared secret

    Raises:
        RuntimeError: If sender and receiver disagree (transform defect)
        EntropyLengthInvalid: If the digest is not 32 bytes
    """
    keypair = generate_keypair(params)
    _logger.debug("generated key pair: n=%d q=%d", params.n, params.q)

    enc = encapsulate(keypair.public_key, params)
    _logger.debug("encapsulated: ciphertext has %d coefficients", len(enc.ciphertext))

    receiver_secret = decapsulate(enc.ciphertext, keypair.private_key, params)
    if not np.array_equal(enc.shared_secret, receiver_secret):
        raise RuntimeError("Shared secret mismatch between sender and receiver")
    _logger.debug("decapsulated: shared secrets agree")

    entropy = check_entropy(derive_entropy(receiver_secret))
    _logger.debug("derived %d bytes of entropy", len(entropy))
    return entropy

def run_exchange(n: int = ExchangeParams.n, q: int = ExchangeParams.q, compressed: bool = True) -> ExchangeOutcome:
    """
    Validates parameters, runs the exchange and derives both wallets.

    Parameters are checked before any randomness is drawn. A categorised
    failure comes back as a non-OK outcome with a message and no entropy,
    keys or addresses; any other exception propagates.

    Args:
        n: Ring dimension
        q: Prime modulus
        compressed: Use a compressed public key for the Bitcoin address

    Returns:
        ExchangeOutcome
    """
    try:
        params = ExchangeParams(n=n, q=q)
    except ParameterInvalid as e:
        _logger.debug("rejected parameters n=%s q=%s", n, q)
        return ExchangeOutcome(status=Status.PARAMETER_INVALID, message=str(e))

    try:
        entropy = exchange(params)
        btc = btc_keys(entropy, compressed=compressed)
        eth = eth_keys(entropy)
    except EntropyLengthInvalid as e:
        return ExchangeOutcome(status=Status.ENTROPY_LENGTH_INVALID, message=str(e), params=params)

    _logger.info("exchange complete: n=%d q=%d", params.n, params.q)
    return ExchangeOutcome(status=Status.OK, params=params, entropy=entropy, btc=btc, eth=eth)

__all__ = ["exchange", "run_exchange", "validate_parameters"]
