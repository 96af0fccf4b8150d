"""Signer configuration consumed by a relaying host."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .crypto.hd import derive_from_mnemonic_and_path
from .exceptions import ConfigError, HDSignerError
from .signer import Signer
from .types.common import DerivationPath, Mnemonic

__all__ = ["SignerConfig", "signer_factory"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignerConfig:
    """
    Mnemonic and derivation path for one signer.

    The host calls validate() when it loads its configuration and build()
    when it needs the signer.
    """

    mnemonic: Mnemonic = field(repr=False)
    path: DerivationPath

    def __post_init__(self) -> None:
        for name in ("mnemonic", "path"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"Signer config field '{name}' must be a string")
            if not value.strip():
                raise ConfigError(f"Signer config field '{name}' is empty")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignerConfig":
        """
        Build config from a mapping.

        Only the ``mnemonic`` and ``path`` keys are read; anything else the
        host stores alongside them (such as a type tag) is ignored.

        Raises:
            ConfigError: If a field is missing or empty
        """
        missing = [name for name in ("mnemonic", "path") if name not in data]
        if missing:
            raise ConfigError(f"Signer config is missing: {', '.join(missing)}")
        return cls(mnemonic=data["mnemonic"], path=data["path"])

    def validate(self) -> None:
        """
        Check that mnemonic and path derive a key, discarding the key.

        Raises:
            HDSignerError: The first derivation failure, unchanged
        """
        try:
            derive_from_mnemonic_and_path(self.mnemonic, self.path)
        except HDSignerError as e:
            logger.error(f"Invalid mnemonic and/or path for HD wallet ({self.path}): {e}")
            raise

    def build(self) -> Signer:
        """Derive the key and return the ready signer."""
        return Signer.from_mnemonic(self.mnemonic, self.path)


def signer_factory(mnemonic: Mnemonic, path: DerivationPath) -> Signer:
    """
    Create a signer from raw config values.

    This is the callable a relaying host registers for this signer type.
    """
    return SignerConfig(mnemonic=mnemonic, path=path).build()
