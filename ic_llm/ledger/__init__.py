from .client import LEDGER_CANISTER_ID, LedgerCanister
from .types import AccountIdentifier, Tokens

__all__ = ["AccountIdentifier", "LEDGER_CANISTER_ID", "LedgerCanister", "Tokens"]
