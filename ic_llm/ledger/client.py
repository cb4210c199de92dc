from __future__ import annotations

from pydantic import ValidationError

from ic_llm.errors import CanisterCallError
from ic_llm.llm.base import CanisterCaller

from .types import AccountIdentifier, Tokens

# The ICP ledger on mainnet.
LEDGER_CANISTER_ID = "ryjl3-tyaaa-aaaaa-aaaba-cai"
BALANCE_METHOD = "account_balance"


class LedgerCanister:
    def __init__(self, caller: CanisterCaller, *, canister_id: str = LEDGER_CANISTER_ID) -> None:
        self.caller = caller
        self.canister_id = canister_id

    async def account_balance(self, account: AccountIdentifier) -> Tokens:
        reply = await self.caller.call(self.canister_id, BALANCE_METHOD, {"account": account.to_hex()})
        try:
            return Tokens.model_validate(reply)
        except ValidationError as e:
            raise CanisterCallError(self.canister_id, BALANCE_METHOD, f"malformed balance: {e}") from e
