"""
Encryption utilities for provider credentials.

Provider API keys are stored as Fernet (AES-128) ciphertext and only decrypted
for the admin settings listing.
"""

import os
import logging
from cryptography.fernet import Fernet, InvalidToken
from pathlib import Path

logger = logging.getLogger(__name__)

ENCRYPTION_KEY_FILE = Path.home() / ".llm-registry" / "encryption.key"


def _get_or_create_encryption_key() -> bytes:
    """
    Get encryption key from the environment or the key file.
    Generates and saves one if neither is usable.

    Returns:
        bytes: Fernet encryption key
    """
    env_key = os.getenv("ENCRYPTION_KEY")
    if env_key:
        try:
            Fernet(env_key.encode())
            return env_key.encode()
        except ValueError as e:
            logger.warning(f"Invalid ENCRYPTION_KEY in environment: {e}")

    if ENCRYPTION_KEY_FILE.exists():
        try:
            key = ENCRYPTION_KEY_FILE.read_bytes()
            Fernet(key)
            return key
        except (OSError, ValueError) as e:
            logger.warning(f"Invalid encryption key in file: {e}")

    logger.info("Generating new encryption key")
    key = Fernet.generate_key()

    try:
        ENCRYPTION_KEY_FILE.parent.mkdir(parents=True, exist_ok=True)
        ENCRYPTION_KEY_FILE.write_bytes(key)
        # owner read/write only
        ENCRYPTION_KEY_FILE.chmod(0o600)
        logger.info(f"Saved encryption key to {ENCRYPTION_KEY_FILE}")
    except OSError as e:
        logger.error(f"Failed to save encryption key: {e}")

    return key


def encrypt(plaintext: str | None) -> str | None:
    """
    Encrypt an API key for storage.

    Args:
        plaintext: Key to encrypt; None and "" pass through unchanged

    Returns:
        str | None: Fernet token (base64 encoded)
    """
    if not plaintext:
        return plaintext

    fernet = Fernet(_get_or_create_encryption_key())
    return fernet.encrypt(plaintext.encode()).decode()


def decrypt(ciphertext: str | None) -> str | None:
    """
    Decrypt a stored API key.

    Args:
        ciphertext: Fernet token; None and "" pass through unchanged

    Returns:
        str | None: Plaintext key
    """
    if not ciphertext:
        return ciphertext

    fernet = Fernet(_get_or_create_encryption_key())
    try:
        return fernet.decrypt(ciphertext.encode()).decode()
    except InvalidToken:
        logger.error("Failed to decrypt stored API key")
        raise ValueError("Failed to decrypt data - encryption key may have changed")
