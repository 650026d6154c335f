"""Security tokens and project secret encryption."""

from .decryptor import ProjectDecryptor
from .token_store import SecurityTokenStore

__all__ = ["ProjectDecryptor", "SecurityTokenStore"]
