"""Labelkit error taxonomy.

Every error raised by the resolution pipeline is an ``AppError`` carrying an
``ErrorCode``. Callers branch on the code, never on the concrete class, so a
storage provider may raise any ``StorageError`` subclass as long as the code
is right.
"""

from enum import Enum


class ErrorCode(str, Enum):
    SECURITY_TOKEN_NOT_FOUND = "securityTokenNotFound"
    DECRYPTION_FAILED = "decryptionFailed"
    RESOURCE_NOT_FOUND = "resourceNotFound"
    STORAGE_AUTH_FAILED = "storageAuthFailed"
    STORAGE_IO_ERROR = "storageIOError"
    STORAGE_CONFIG_INVALID = "storageConfigInvalid"
    UNSUPPORTED_STORAGE_PROVIDER = "unsupportedStorageProvider"
    PROJECT_PARSE_FAILED = "projectParseFailed"
    SETTINGS_INVALID = "settingsInvalid"


class ResolutionKind(str, Enum):
    """Terminal states of a single project resolution attempt."""

    SUCCESS = "success"
    TOKEN_MISSING = "tokenMissing"
    NOT_FOUND = "notFound"
    OTHER_ERROR = "otherError"


class AppError(Exception):
    """Base for all labelkit errors."""

    error_code: ErrorCode = ErrorCode.STORAGE_IO_ERROR

    def __init__(self, message: str, error_code: ErrorCode | None = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code

    @property
    def kind(self) -> ResolutionKind:
        if self.error_code is ErrorCode.SECURITY_TOKEN_NOT_FOUND:
            return ResolutionKind.TOKEN_MISSING
        if self.error_code is ErrorCode.RESOURCE_NOT_FOUND:
            return ResolutionKind.NOT_FOUND
        return ResolutionKind.OTHER_ERROR

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, error_code={self.error_code.value!r})"


class SecurityTokenNotFoundError(AppError):
    """Raised when a project names a token missing from the settings."""

    error_code = ErrorCode.SECURITY_TOKEN_NOT_FOUND

    def __init__(self, token_name: str):
        super().__init__(f"Security token {token_name!r} not found")
        self.token_name = token_name


class DecryptionError(AppError):
    """Raised when ciphertext is malformed or the key does not match."""

    error_code = ErrorCode.DECRYPTION_FAILED


class StorageError(AppError):
    """Base for failures reported by a storage provider."""

    error_code = ErrorCode.STORAGE_IO_ERROR

    def __init__(self, message: str, path: str | None = None, error_code: ErrorCode | None = None):
        super().__init__(message, error_code)
        self.path = path


class ResourceNotFoundError(StorageError):
    error_code = ErrorCode.RESOURCE_NOT_FOUND


class StorageAuthError(StorageError):
    error_code = ErrorCode.STORAGE_AUTH_FAILED


class StorageIOError(StorageError):
    error_code = ErrorCode.STORAGE_IO_ERROR


class StorageConfigError(StorageError):
    """Raised when a connection cannot be turned into a provider."""

    error_code = ErrorCode.STORAGE_CONFIG_INVALID


class UnsupportedStorageProviderError(StorageConfigError):
    error_code = ErrorCode.UNSUPPORTED_STORAGE_PROVIDER


class ProjectParseError(AppError):
    """Raised when fetched project text is not a valid project document."""

    error_code = ErrorCode.PROJECT_PARSE_FAILED


class SettingsError(AppError):
    """Raised when the application settings file cannot be loaded."""

    error_code = ErrorCode.SETTINGS_INVALID
