from __future__ import annotations

import hashlib
import re
import zlib
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from ic_llm.types import Principal

E8S_PER_TOKEN = 100_000_000

_HEX = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class AccountIdentifier:
    """32-byte ledger account id: big-endian CRC32 of the hash, then the 28-byte hash."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != 32:
            raise ValueError(f"account identifier must be 32 bytes, got {len(self.raw)}")

    @classmethod
    def from_hex(cls, text: str) -> AccountIdentifier:
        if len(text) != 64:
            raise ValueError(f"account identifier must be 64 hex characters, got {len(text)}")
        # bytes.fromhex() tolerates whitespace; require the strict character class.
        if not _HEX.fullmatch(text):
            raise ValueError("account identifier contains non-hexadecimal characters")
        return cls(bytes.fromhex(text))

    @classmethod
    def new(cls, owner: Principal, subaccount: bytes | None = None) -> AccountIdentifier:
        sub = subaccount if subaccount is not None else bytes(32)
        if len(sub) != 32:
            raise ValueError(f"subaccount must be 32 bytes, got {len(sub)}")
        h = hashlib.sha224()
        h.update(b"\x0aaccount-id")
        h.update(owner.raw)
        h.update(sub)
        digest = h.digest()
        return cls(zlib.crc32(digest).to_bytes(4, "big") + digest)

    def has_valid_checksum(self) -> bool:
        return int.from_bytes(self.raw[:4], "big") == zlib.crc32(self.raw[4:])

    def to_hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.to_hex()


class Tokens(BaseModel):
    """An ICP amount in e8s (10^-8 ICP)."""

    model_config = ConfigDict(frozen=True)

    e8s: int = Field(ge=0)

    def __str__(self) -> str:
        whole, frac = divmod(self.e8s, E8S_PER_TOKEN)
        return f"{whole}.{frac:08d}"
