import pytest
from pydantic import ValidationError

from presentcipher.config import PresentConfig, load_config


def test_defaults():
    config = PresentConfig()
    assert config.key_size == 80
    assert config.rounds == 31
    assert config.key_bytes == 10


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("PRESENT_KEY_SIZE", "128")
    monkeypatch.setenv("PRESENT_ROUND_COUNT", "12")
    config = load_config()
    assert config.key_size == 128
    assert config.rounds == 12
    assert config.key_bytes == 16


def test_load_config_is_cached(monkeypatch):
    first = load_config()
    monkeypatch.setenv("PRESENT_ROUND_COUNT", "5")
    assert load_config() is first


@pytest.mark.parametrize("key_size", [64, 96, 256])
def test_unsupported_key_size(key_size):
    with pytest.raises(ValidationError):
        PresentConfig(key_size=key_size)


@pytest.mark.parametrize("rounds", [0, 32, -3])
def test_round_count_bounds(rounds):
    with pytest.raises(ValidationError):
        PresentConfig(rounds=rounds)


def test_config_is_frozen():
    config = PresentConfig()
    with pytest.raises(ValidationError):
        config.rounds = 10


@pytest.mark.parametrize("name,value", [
    ("PRESENT_KEY_SIZE", "eighty"),
    ("PRESENT_KEY_SIZE", "96"),
    ("PRESENT_ROUND_COUNT", "many"),
    ("PRESENT_ROUND_COUNT", "0"),
])
def test_bad_environment_values_fail_validation(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_config()


def test_key_size_accepts_numeric_string():
    assert PresentConfig(key_size="128").key_bytes == 16
