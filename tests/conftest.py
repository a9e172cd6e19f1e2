import pytest

from rlwe_wallet.models import ExchangeParams

@pytest.fixture
def vp() -> ExchangeParams:
    """Smallest useful parameter set: n=4, q=17."""
    return ExchangeParams(n=4, q=17)

@pytest.fixture
def vp16() -> ExchangeParams:
    return ExchangeParams(n=16, q=97)

@pytest.fixture(scope="session")
def vp_default() -> ExchangeParams:
    return ExchangeParams()
