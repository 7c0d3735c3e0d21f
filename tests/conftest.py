import pytest

from presentcipher.config import PresentConfig, load_config
from presentcipher.cipher_core import PresentCipher


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default configuration, not the host environment."""
    monkeypatch.delenv("PRESENT_KEY_SIZE", raising=False)
    monkeypatch.delenv("PRESENT_ROUND_COUNT", raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def cipher80():
    return PresentCipher(PresentConfig(key_size=80, rounds=31))


@pytest.fixture
def cipher128():
    return PresentCipher(PresentConfig(key_size=128, rounds=31))

