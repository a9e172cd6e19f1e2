import numpy as np

from rlwe_wallet.models import ExchangeParams
from rlwe_wallet.utils.modular import normalize, add_mod, sub_mod, mul_mod

# -----------------------------
# Polynomial Helpers
# -----------------------------
def to_poly(values, params: ExchangeParams) -> np.ndarray:
    """
    Copies a coefficient sequence into an owned length-n array over [0, q).

    Args:
        values: Any sequence of integers (list, tuple, ndarray)
        params: Exchange parameters

    Returns:
        Fresh int64 array, every element reduced mod q

    Raises:
        ValueError: If the sequence length is not n
    """
    x = np.array([normalize(v, params.q) for v in values], dtype=np.int64)
    if x.shape != (params.n,):
        raise ValueError(f"Polynomial must have exactly {params.n} coefficients, got {len(x)}")
    return x

# -----------------------------
# Butterfly Transform
# -----------------------------
def forward(x, params: ExchangeParams) -> np.ndarray:
    """
    Forward butterfly transform.

    Decimation-in-frequency network: the butterfly width m runs n/2, n/4, ..., 1
    while the twiddle step doubles. Each column j of a pass combines the pairs
    (i, i + m) for i = j, j + 2m, ... :

        x[i], x[i + m] = x[i] + x[i + m], (x[i] - x[i + m]) * w[index]

    After a column the twiddle index advances by (n - step) modulo n, so
    column j of width m always reads w[(-j * step) mod n].

    Args:
        x: Polynomial of length n over [0, q); copied, never mutated
        params: Exchange parameters carrying n, q and the w table

    Returns:
        Transformed polynomial (new array)
    """
    n, q, w = params.n, params.q, params.w
    x = to_poly(x, params)
    step = 1
    m = n >> 1
    while m >= 1:
        index = 0
        for j in range(m):
            for i in range(j, n, m << 1):
                t0 = add_mod(x[i], x[i + m], q)
                t1 = mul_mod(sub_mod(x[i], x[i + m], q), w[index], q)
                x[i] = t0
                x[i + m] = t1
            index = normalize(index + (n - step), n)
        step <<= 1
        m >>= 1
    return x

def backward(x, params: ExchangeParams) -> np.ndarray:
    """
    Backward butterfly transform, the exact inverse of forward.

    Mirrors forward's schedule: the width m runs 1, 2, ..., n/2 while the
    step halves from n/2, so every (m, column) pair reads the same twiddle
    index forward used. Since w_rev[k] = -w[k] mod q, multiplying by
    w_rev^-1 turns (a + b, (a - b) * w) into (a + b, b - a):

        t0, t1 = x[i], x[i + m] * w_rev_inv[index]
        x[i], x[i + m] = t0 - t1, t0 + t1      # = 2a, 2b

    Each level doubles the coefficients, so the result is scaled by n^-1.

    Args:
        x: Polynomial of length n over [0, q); copied, never mutated
        params: Exchange parameters carrying n, q, w_rev_inv and n_inv

    Returns:
        Polynomial p with forward(p) == x (new array)
    """
    n, q, w_rev_inv = params.n, params.q, params.w_rev_inv
    x = to_poly(x, params)
    step = n >> 1
    m = 1
    while m < n:
        index = 0
        for j in range(m):
            for i in range(j, n, m << 1):
                t0 = x[i]
                t1 = mul_mod(x[i + m], w_rev_inv[index], q)
                x[i] = sub_mod(t0, t1, q)
                x[i + m] = add_mod(t0, t1, q)
            index = normalize(index + (n - step), n)
        step >>= 1
        m <<= 1
    for i in range(n):
        x[i] = mul_mod(x[i], params.n_inv, q)
    return x
