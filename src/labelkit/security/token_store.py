from collections.abc import Iterable, Mapping
from types import MappingProxyType

from labelkit.errors import SecurityTokenNotFoundError
from labelkit.models import AppSettings, SecurityToken


class SecurityTokenStore:
    """Read-only lookup of security tokens by name."""

    def __init__(self, tokens: Iterable[SecurityToken]):
        by_name: dict[str, SecurityToken] = {}
        for token in tokens:
            if token.name in by_name:
                raise ValueError(f"Duplicate security token name: {token.name!r}")
            by_name[token.name] = token
        self._tokens: Mapping[str, SecurityToken] = MappingProxyType(by_name)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "SecurityTokenStore":
        return cls(settings.security_tokens)

    def resolve(self, name: str) -> SecurityToken:
        """Return the token called ``name``.

        Raises:
            SecurityTokenNotFoundError: If no such token exists.
        """
        if not name:
            raise ValueError("Security token name must not be empty")
        token = self._tokens.get(name)
        if token is None:
            raise SecurityTokenNotFoundError(name)
        return token

    def names(self) -> list[str]:
        return sorted(self._tokens)

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)
