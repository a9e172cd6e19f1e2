"""
RLWE Wallet - transform-based key exchange feeding BTC/ETH key derivation

Components:

Modular Arithmetic:

normalize / add / sub / mul over a fixed prime q, negative inputs folded
into [0, q)

Butterfly Transform:

Forward network with twiddles w[i] = i + 1, backward network built from the
reverse table w_rev[i] = q - i - 1, exact inverse of forward

Key Exchange:

Private key s uniform over [0, q)^n, public key forward(s)
Encapsulation samples r, publishes forward(r), keeps r * forward(s)
Decapsulation computes backward(ciphertext) * forward(s), the same value

Entropy and Wallets:

SHA-256 over the decimal text of the shared coefficients gives 32 bytes,
used as a secp256k1 private key for a Bitcoin P2PKH address and an
Ethereum address

The shared value carries no noise term and is computable from the public
key and ciphertext alone. The twiddle tables are not powers of a root of
unity. This implementation is for educational purposes and is not
cryptographically secure.
"""
from rlwe_wallet.errors import (
    ExchangeError, ParameterInvalid, EntropyLengthInvalid
)

from rlwe_wallet.models import (
    ExchangeParams, KeyPair, Encapsulation, BtcKeys, EthKeys, ExchangeOutcome, Status
)

from rlwe_wallet.utils.transform import (forward, backward)

from rlwe_wallet.utils.keygen import (
    generate_keypair, encapsulate, decapsulate
)

from rlwe_wallet.utils.entropy import (derive_entropy, check_entropy)

from rlwe_wallet.utils.wallets import (btc_keys, eth_keys)

from rlwe_wallet.core import (exchange, run_exchange, validate_parameters)
