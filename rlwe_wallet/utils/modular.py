import numpy as np

# -----------------------------
# Modular Arithmetic Helpers
# -----------------------------
def normalize(x, m: int) -> int:
    """
    Reduces any integer, negative ones included, into [0, m).
    """
    return int(x) % m

def add_mod(a, b, m: int) -> int:
    return normalize(int(a) + int(b), m)

def sub_mod(a, b, m: int) -> int:
    return normalize(int(a) - int(b), m)

def mul_mod(a, b, m: int) -> int:
    # Python ints, so the product cannot overflow for any modulus
    return normalize(int(a) * int(b), m)

def mod_mul_vec(a: np.ndarray, b: np.ndarray, q: int) -> np.ndarray:
    """
    Element-wise modular multiplication of two polynomials.

    Computes (a[i] * b[i]) mod q for all i, through object dtype so large
    moduli stay exact. Always returns a fresh array.

    Args:
        a, b: Input vectors of equal length
        q: Modulus

    Returns:
        Element-wise product modulo q
    """
    return ((a.astype(object) * b.astype(object)) % q).astype(np.int64)

def is_prime(num: int) -> bool:
    """Trial division primality test. Values below 2 are not prime."""
    if num < 2:
        return False
    i = 2
    while i * i <= num:
        if num % i == 0:
            return False
        i += 1
    return True
