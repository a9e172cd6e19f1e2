# -----------------------------
# Exchange Errors
# -----------------------------
class ExchangeError(ValueError):
    """Base class for the categorised failures of an exchange run."""

class ParameterInvalid(ExchangeError):
    """n is not a positive power of two, q is not prime, or q <= n."""

class EntropyLengthInvalid(ExchangeError):
    """Derived entropy is not exactly 32 bytes."""
