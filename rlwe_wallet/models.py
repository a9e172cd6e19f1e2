from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import numpy as np

from rlwe_wallet.errors import ParameterInvalid
from rlwe_wallet.utils.modular import is_prime

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

# -----------------------------
# Parameter Validation
# -----------------------------
def validate_parameters(n: int, q: int) -> None:
    """
    Checks the ring dimension and modulus before anything is derived from them.

    Raises:
        ParameterInvalid: n is not a positive power of two, q is not prime,
            or q does not exceed n
    """
    if n <= 0 or (n & (n - 1)) != 0:
        raise ParameterInvalid(f"Parameter 'n' must be a power of 2 for FFT compatibility (got n={n}).")
    if not is_prime(q):
        raise ParameterInvalid(f"Parameter 'q' must be a prime number (got q={q}).")
    if q <= n:
        raise ParameterInvalid(f"Parameter 'q' must be larger than 'n' to prevent overflow (got q={q}, n={n}).")

def _frozen_table(values) -> np.ndarray:
    table = np.array(values, dtype=np.int64)
    table.setflags(write=False)
    return table

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class ExchangeParams:
    """
    Ring dimension, modulus and the twiddle tables derived from them.

    Built once per run and handed to every transform and protocol call.
    Construction validates (n, q) before any table is computed:
    - w[i]      = (i + 1) mod q         forward twiddles
    - w_rev[i]  = (q - i - 1) mod q     reverse twiddles
    - w_rev_inv = w_rev^-1 mod q        backward butterfly factors
    - n_inv     = n^-1 mod q            backward scaling
    """
    n: int = 1024   # Ring dimension (power of two)
    q: int = 40961  # Prime modulus, q > n
    w: np.ndarray = field(init=False, repr=False, compare=False)
    w_rev: np.ndarray = field(init=False, repr=False, compare=False)
    w_rev_inv: np.ndarray = field(init=False, repr=False, compare=False)
    n_inv: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        validate_parameters(self.n, self.q)
        n, q = self.n, self.q
        w_rev = [(q - i - 1) % q for i in range(n)]
        object.__setattr__(self, "w", _frozen_table([(i + 1) % q for i in range(n)]))
        object.__setattr__(self, "w_rev", _frozen_table(w_rev))
        # Every w_rev entry lies in [q - n, q - 1], so none is zero
        object.__setattr__(self, "w_rev_inv", _frozen_table([pow(v, q - 2, q) for v in w_rev]))
        object.__setattr__(self, "n_inv", pow(n, q - 2, q))

# -----------------------------
# Exchange Artifacts
# -----------------------------
@dataclass
class KeyPair:
    private_key: np.ndarray  # Uniform sample over [0, q)^n
    public_key: np.ndarray   # forward(private_key)

@dataclass
class Encapsulation:
    ciphertext: np.ndarray     # forward(r)
    shared_secret: np.ndarray  # r * public_key, pointwise

@dataclass
class BtcKeys:
    private_key: str  # hex
    public_key: str   # hex, SEC1 encoded
    address: str      # Base58Check P2PKH

@dataclass
class EthKeys:
    private_key: str  # hex
    address: str      # 0x-prefixed, last 20 bytes of Keccak-256

# -----------------------------
# Run Outcome
# -----------------------------
class Status(Enum):
    OK = "ok"
    PARAMETER_INVALID = "parameter_invalid"
    ENTROPY_LENGTH_INVALID = "entropy_length_invalid"

@dataclass
class ExchangeOutcome:
    """
    Tagged result of one exchange run.

    Only an OK outcome carries entropy and wallet keys; a failed outcome
    carries the status and a message and nothing else.
    """
    status: Status
    message: str = ""
    params: Optional[ExchangeParams] = None
    entropy: Optional[bytes] = None
    btc: Optional[BtcKeys] = None
    eth: Optional[EthKeys] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK
