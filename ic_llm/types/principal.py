from __future__ import annotations

import base64
import binascii
import zlib
from dataclasses import dataclass

_MAX_LEN = 29


@dataclass(frozen=True)
class Principal:
    """Internet Computer principal (canister or user id)."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) > _MAX_LEN:
            raise ValueError(f"principal too long: {len(self.raw)} bytes (max {_MAX_LEN})")

    @classmethod
    def from_text(cls, text: str) -> Principal:
        """
        Parse the textual form, e.g. "ryjl3-tyaaa-aaaaa-aaaba-cai".

        Textual form = base32(crc32(raw) || raw), lowercase, no padding, split into
        groups of 5 characters joined by "-". Only the canonical form is accepted.
        """
        compact = text.replace("-", "").upper()
        padded = compact + "=" * (-len(compact) % 8)
        try:
            data = base64.b32decode(padded)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"invalid principal {text!r}: {e}") from e
        if len(data) < 4:
            raise ValueError(f"invalid principal {text!r}: too short")

        checksum, raw = data[:4], data[4:]
        if int.from_bytes(checksum, "big") != zlib.crc32(raw):
            raise ValueError(f"invalid principal {text!r}: checksum mismatch")
        principal = cls(raw)
        if principal.to_text() != text:
            raise ValueError(f"invalid principal {text!r}: not in canonical form")
        return principal

    def to_text(self) -> str:
        checksum = zlib.crc32(self.raw).to_bytes(4, "big")
        encoded = base64.b32encode(checksum + self.raw).decode("ascii").rstrip("=").lower()
        return "-".join(encoded[i : i + 5] for i in range(0, len(encoded), 5))

    def __str__(self) -> str:
        return self.to_text()
