"""BIP44 derivation path parsing and validation."""

from dataclasses import dataclass
from typing import Tuple

from ..constants import BIP44_PURPOSE, HARDENED_OFFSET
from ..exceptions import ParseError, ValidationError

__all__ = ["PathLevel"]

# m / purpose' / coin_type' / account' / change / address_index
PATH_SEGMENTS = 6
HARDENED_SEGMENTS = 3
HARDENED_MARKER = "'"


def _parse_index(path: str, token: str, position: int) -> int:
    """Parse one numeric path token as a non-negative 31-bit integer."""
    # int() would also take "+1", " 1" or "1_0"
    if not token.isascii() or not token.isdigit():
        raise ParseError(path, f"segment {position} is not a decimal integer: {token!r}")

    value = int(token)
    if value >= HARDENED_OFFSET:
        raise ParseError(path, f"segment {position} exceeds 2^31 - 1: {value}")
    return value


@dataclass(frozen=True)
class PathLevel:
    """
    Five levels of a BIP44 path.

    Parsed once from text such as ``m/44'/60'/0'/0/0``. The first three levels
    use hardened derivation, the last two normal derivation.
    """

    purpose: int
    coin_type: int
    account: int
    change: int
    address_index: int

    @classmethod
    def parse(cls, text: str) -> "PathLevel":
        """
        Parse a path of the form m/<purpose>'/<coin>'/<account>'/<change>/<index>.

        Args:
            text: Derivation path text

        Returns:
            Parsed PathLevel (not yet validated)

        Raises:
            ParseError: If the text does not follow the grammar
        """
        if not isinstance(text, str):
            raise ParseError(repr(text), "path must be a string")

        tokens = text.split("/")
        if len(tokens) != PATH_SEGMENTS:
            raise ParseError(text, f"expected {PATH_SEGMENTS} segments, got {len(tokens)}")

        if tokens[0] != "m":
            raise ParseError(text, f"path must start with 'm', got {tokens[0]!r}")

        values = []
        for position, token in enumerate(tokens[1:], start=1):
            if position <= HARDENED_SEGMENTS:
                if not token.endswith(HARDENED_MARKER):
                    raise ParseError(text, f"segment {position} must be hardened: {token!r}")
                token = token[:-1]
            values.append(_parse_index(text, token, position))

        return cls(*values)

    def validate(self) -> None:
        """
        Check BIP44 constraints on an already parsed path.

        Only purpose and change are constrained; coin type, account and
        address index are accepted as given.

        Raises:
            ValidationError: If purpose is not 44 or change is not 0 or 1
        """
        if self.purpose != BIP44_PURPOSE:
            raise ValidationError(
                f"Path purpose must be {BIP44_PURPOSE}, got {self.purpose}",
                data=str(self)
            )
        if self.change not in (0, 1):
            raise ValidationError(
                f"Path change must be 0 or 1, got {self.change}",
                data=str(self)
            )

    def indices(self) -> Tuple[int, ...]:
        """BIP32 child indices with the hardened bit applied to the first three."""
        return (
            self.purpose | HARDENED_OFFSET,
            self.coin_type | HARDENED_OFFSET,
            self.account | HARDENED_OFFSET,
            self.change,
            self.address_index,
        )

    def __str__(self) -> str:
        return (
            f"m/{self.purpose}'/{self.coin_type}'/{self.account}'"
            f"/{self.change}/{self.address_index}"
        )
