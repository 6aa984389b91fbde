import pytest
from cryptography.fernet import Fernet

from llm_registry.utils.encryption import decrypt, encrypt


def test_encrypt_round_trip_and_empty_passthrough() -> None:
    token = encrypt("sk-abc")
    assert token != "sk-abc"
    assert decrypt(token) == "sk-abc"
    assert encrypt("") == ""
    assert encrypt(None) is None
    assert decrypt(None) is None


def test_decrypt_with_rotated_key_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    token = encrypt("sk-abc")
    monkeypatch.setenv("ENCRYPTION_KEY", Fernet.generate_key().decode())
    with pytest.raises(ValueError, match="encryption key may have changed"):
        decrypt(token)
