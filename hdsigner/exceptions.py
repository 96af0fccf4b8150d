"""HD signer exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "HDSignerError",
    "ConfigError",
    "ValidationError",
    "InvalidDigestLengthError",
    "CryptoError",
    "ParseError",
    "InvalidMnemonicError",
    "DerivationError",
    "SigningError",
]


class HDSignerError(Exception):
    """Base exception for all HD signer errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(HDSignerError):
    """Raised when signer configuration is malformed."""
    pass


class ValidationError(HDSignerError):
    """Raised when validation fails."""
    pass


class InvalidDigestLengthError(ValidationError):
    """Raised when a digest to sign is not exactly 32 bytes."""

    def __init__(self, length: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Digest must be 32 bytes, got {length}"
        super().__init__(message, data=length)
        self.length = length


class CryptoError(HDSignerError):
    """Raised when cryptographic operation fails."""
    pass


class ParseError(CryptoError):
    """Raised when a derivation path string is malformed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid derivation path {path!r}: {reason}", data=path)
        self.path = path
        self.reason = reason


class InvalidMnemonicError(CryptoError):
    """Raised when a mnemonic fails word list or checksum validation."""
    pass


class DerivationError(CryptoError):
    """Raised when a BIP32 step yields an unusable scalar."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message, data=index)
        self.index = index


class SigningError(CryptoError):
    """Raised when the curve library fails to sign or recover."""
    pass
