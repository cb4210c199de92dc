from __future__ import annotations

import pytest
from pydantic import ValidationError

from ic_llm.ledger import AccountIdentifier, Tokens
from ic_llm.types import Principal


@pytest.mark.parametrize(
    ("e8s", "text"),
    [(0, "0.00000000"), (1, "0.00000001"), (100_000_000, "1.00000000"), (123_456_789, "1.23456789")],
)
def test_tokens_render_with_eight_decimals(e8s: int, text: str) -> None:
    assert str(Tokens(e8s=e8s)) == text


def test_tokens_reject_negative_amounts() -> None:
    with pytest.raises(ValidationError):
        Tokens(e8s=-1)


def test_from_hex_renders_canonical_lowercase() -> None:
    account = AccountIdentifier.from_hex("ABCDEF" + "0" * 58)
    assert str(account) == "abcdef" + "0" * 58
    assert len(account.raw) == 32


@pytest.mark.parametrize("text", ["a" * 63, "a" * 65, "z" * 64, " " + "a" * 63])
def test_from_hex_rejects_bad_input(text: str) -> None:
    with pytest.raises(ValueError):
        AccountIdentifier.from_hex(text)


def test_from_hex_does_not_enforce_checksum() -> None:
    account = AccountIdentifier.from_hex("0" * 64)
    assert not account.has_valid_checksum()


def test_account_derived_from_principal_has_valid_checksum() -> None:
    owner = Principal.from_text("ryjl3-tyaaa-aaaaa-aaaba-cai")
    account = AccountIdentifier.new(owner)

    assert account.has_valid_checksum()
    assert AccountIdentifier.from_hex(str(account)) == account
    assert AccountIdentifier.new(owner, bytes(32)) == account
    assert AccountIdentifier.new(owner, b"\x01" * 32) != account


def test_subaccount_must_be_32_bytes() -> None:
    with pytest.raises(ValueError):
        AccountIdentifier.new(Principal(b"\x04"), b"\x01")
