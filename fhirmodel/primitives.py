"""FHIR primitive types that travel as strings in JSON."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _parse_int(text: str, minimum: int, maximum: int) -> int:
    """Read a decimal integer strictly: optional sign, ASCII digits, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text
    negative = False
    if text[0] in "+-":
        if len(text) == 1:
            raise ValueError("invalid digit found in string")
        if text[0] == "+":
            digits = text[1:]
        elif minimum < 0:
            digits = text[1:]
            negative = True
    if not all(char in _DIGITS for char in digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > maximum:
        raise ValueError("number too large to fit in target type")
    if value < minimum:
        raise ValueError("number too small to fit in target type")
    return value


@dataclass(frozen=True, order=True)
class Integer64:
    """FHIR ``integer64``: a signed 64-bit integer written as a JSON string."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Integer64 wraps an int")
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError("number does not fit in 64 bits")

    @classmethod
    def parse(cls, text: str) -> Integer64:
        """Read the value from its string form."""
        return cls(_parse_int(text, I64_MIN, I64_MAX))

    def serialize(self) -> str:
        """Return the string form used in JSON."""
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Base64Binary:
    """FHIR ``base64Binary``: raw bytes written as standard base64."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def parse(cls, text: str) -> Base64Binary:
        """Decode base64 text; whitespace anywhere in it is ignored."""
        cleaned = "".join(char for char in text if not char.isspace())
        try:
            data = base64.b64decode(cleaned, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid base64: {exc}") from exc
        if base64.b64encode(data).decode("ascii") != cleaned:
            raise ValueError("invalid base64: non-canonical encoding")
        return cls(data)

    def serialize(self) -> str:
        """Return the padded standard base64 text."""
        return base64.b64encode(self.data).decode("ascii")

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)