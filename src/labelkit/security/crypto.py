"""Symmetric encryption of project secrets.

Uses libsodium secret boxes (via pynacl): XSalsa20-Poly1305 with a random
nonce prepended to the ciphertext. Keys and ciphertexts travel as base64
text so they fit in JSON documents.
"""

import base64
import binascii
import json
from typing import Any

from nacl import secret, utils
from nacl.exceptions import CryptoError

from labelkit.errors import DecryptionError


def generate_key() -> str:
    """Generate a new random key, base64 encoded."""
    return base64.b64encode(utils.random(secret.SecretBox.KEY_SIZE)).decode("ascii")


def _box(key: str) -> secret.SecretBox:
    try:
        key_bytes = base64.b64decode(key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecryptionError("Security token key is not valid base64") from e
    if len(key_bytes) != secret.SecretBox.KEY_SIZE:
        raise DecryptionError(
            f"Security token key must be {secret.SecretBox.KEY_SIZE} bytes, got {len(key_bytes)}"
        )
    return secret.SecretBox(key_bytes)


def encrypt(message: str, key: str) -> str:
    """Encrypt a text message, returning base64 ciphertext."""
    encrypted = _box(key).encrypt(message.encode("utf-8"))
    return base64.b64encode(bytes(encrypted)).decode("ascii")


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt base64 ciphertext produced by :func:`encrypt`.

    Raises:
        DecryptionError: If the ciphertext is malformed or the key is wrong.
    """
    box = _box(key)
    try:
        raw = base64.b64decode(ciphertext, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecryptionError("Ciphertext is not valid base64") from e
    try:
        plaintext = box.decrypt(raw)
    except (CryptoError, ValueError) as e:
        raise DecryptionError("Unable to decrypt: wrong key or corrupted data") from e
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecryptionError("Decrypted payload is not UTF-8 text") from e


def encrypt_object(value: dict[str, Any], key: str) -> str:
    return encrypt(json.dumps(value, sort_keys=True), key)


def decrypt_object(ciphertext: str, key: str) -> dict[str, Any]:
    """Decrypt a JSON object produced by :func:`encrypt_object`."""
    text = decrypt(ciphertext, key)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecryptionError("Decrypted payload is not valid JSON") from e
    if not isinstance(value, dict):
        raise DecryptionError("Decrypted payload is not a JSON object")
    return value
