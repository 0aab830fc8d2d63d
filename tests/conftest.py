import pytest
from eth_account import Account

from starchain.core.blockchain import Blockchain


class FakeClock:
    """Controllable replacement for the ledger wall clock"""

    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ledger(clock):
    return Blockchain(verifier=lambda message, address, signature: True, clock=clock)


@pytest.fixture
def star():
    return {
        "dec": "68° 52' 56.9",
        "ra": "16h 29m 1.0s",
        "story": "Testing the story 4"
    }


@pytest.fixture
def account():
    return Account.from_key("0x" + "4c" * 32)


@pytest.fixture
def other_account():
    return Account.from_key("0x" + "7d" * 32)
